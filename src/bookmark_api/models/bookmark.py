"""Bookmark model."""
from sqlalchemy import CheckConstraint, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from bookmark_api.models.base import Base


class Bookmark(Base):
    """
    Bookmark model - a titled, rated URL with a free-text description.

    Text columns hold the raw client input. Markup is neutralized on the way
    out (see services.sanitizer), never on the way in.
    """

    __tablename__ = "bookmarks"
    __table_args__ = (
        CheckConstraint("rating >= 1 AND rating <= 5", name="ck_bookmarks_rating_range"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    url: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    rating: Mapped[int] = mapped_column(Integer, nullable=False)
