"""Bookmark model for storing bookmarks."""
from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from models.base import Base

# Bounds of the 32-bit INTEGER primary key column
MIN_ID = -(2**31)
MAX_ID = 2**31 - 1


class Bookmark(Base):
    """Bookmark model - a titled, rated URL with an optional description."""

    __tablename__ = "bookmarks"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    url: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    rating: Mapped[int] = mapped_column(Integer, nullable=False)

    def __repr__(self) -> str:
        return f"<Bookmark id={self.id} title={self.title!r}>"
