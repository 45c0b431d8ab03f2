"""SQLAlchemy models."""
from bookmark_api.models.base import Base
from bookmark_api.models.bookmark import Bookmark

__all__ = ["Base", "Bookmark"]
