"""Bearer token gate in front of the bookmark endpoints."""
import hmac
import logging

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from bookmark_api.core.config import Settings, get_settings

logger = logging.getLogger(__name__)

# HTTP Bearer token scheme
security = HTTPBearer(auto_error=False)

UNAUTHORIZED_MESSAGE = "Unauthorized request"


def _unauthorized() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=UNAUTHORIZED_MESSAGE,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def require_api_token(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    settings: Settings = Depends(get_settings),
) -> None:
    """
    Dependency that rejects requests without the configured API token.

    In DEV_MODE the check is bypassed. An empty API_TOKEN never matches, so a
    server started without a token refuses every request.
    """
    if settings.dev_mode:
        return

    if credentials is None:
        logger.warning("auth_missing_token")
        raise _unauthorized()

    if not settings.api_token:
        logger.error("auth_token_not_configured")
        raise _unauthorized()

    if not hmac.compare_digest(credentials.credentials, settings.api_token):
        logger.warning("auth_invalid_token")
        raise _unauthorized()
