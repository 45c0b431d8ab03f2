"""FastAPI application entry point."""
import logging

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from bookmark_api import __version__
from bookmark_api.api.routers import bookmarks, health
from bookmark_api.core.config import get_settings
from bookmark_api.schemas.errors import ErrorResponse
from bookmark_api.services.exceptions import BookmarkValidationError, StoreError

logger = logging.getLogger(__name__)

SERVER_ERROR_MESSAGE = "server error"


def error_response(
    status_code: int,
    message: str,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Render the standard `{"error": {"message": ...}}` envelope."""
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse.from_message(message).model_dump(),
        headers=headers,
    )


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Add security headers to all responses."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint,
    ) -> Response:
        """Process request and add security headers to response."""
        response = await call_next(request)
        # HSTS: enforce HTTPS for 1 year, including subdomains
        response.headers["Strict-Transport-Security"] = (
            "max-age=31536000; includeSubDomains"
        )
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        return response


app_settings = get_settings()

app = FastAPI(
    title="Bookmarks API",
    description="Create, read, update and delete rated bookmarks.",
    version=__version__,
)


@app.exception_handler(BookmarkValidationError)
async def bookmark_validation_exception_handler(
    request: Request, exc: BookmarkValidationError,
) -> JSONResponse:
    """Client-input errors are terminal 400s."""
    logger.warning(
        "bookmark_validation_failed",
        extra={
            "method": request.method,
            "path": request.url.path,
            "reason": exc.message,
        },
    )
    return error_response(400, exc.message)


@app.exception_handler(RequestValidationError)
async def request_validation_exception_handler(
    request: Request, exc: RequestValidationError,
) -> JSONResponse:
    """Malformed JSON, non-object bodies and bad path parameters become 400s."""
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()))
        message = f"Invalid request {location}: {first.get('msg', 'invalid value')}"
    else:
        message = "Invalid request"
    logger.warning(
        "request_validation_failed",
        extra={"method": request.method, "path": request.url.path, "reason": message},
    )
    return error_response(400, message)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(
    _request: Request, exc: StarletteHTTPException,
) -> JSONResponse:
    """Wrap 401/404/405 and friends in the standard error envelope."""
    return error_response(exc.status_code, str(exc.detail), headers=exc.headers)


@app.exception_handler(StoreError)
async def store_exception_handler(
    request: Request, exc: StoreError,
) -> JSONResponse:
    """Database failures surface as a generic 500 without internal detail."""
    logger.error(
        "store_error",
        extra={"method": request.method, "path": request.url.path, "operation": exc.operation},
        exc_info=exc,
    )
    return error_response(500, SERVER_ERROR_MESSAGE)


@app.exception_handler(Exception)
async def unhandled_exception_handler(
    request: Request, exc: Exception,
) -> JSONResponse:
    """Last-resort boundary for anything not handled above."""
    logger.error(
        "unhandled_error",
        extra={"method": request.method, "path": request.url.path},
        exc_info=exc,
    )
    return error_response(500, SERVER_ERROR_MESSAGE)


# Security headers middleware (runs after CORS, adds headers to responses)
app.add_middleware(SecurityHeadersMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=app_settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["Location"],
)

app.include_router(health.router)
app.include_router(bookmarks.router)
