"""FastAPI dependencies shared by the routers."""
from bookmark_api.core.auth import require_api_token
from bookmark_api.db.session import get_async_session

__all__ = [
    "get_async_session",
    "require_api_token",
]
