"""Shared fixtures for API tests."""
from typing import Any

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from models.bookmark import Bookmark


def make_bookmarks_array() -> list[dict[str, Any]]:
    """Sample bookmarks, without ids, in insertion order."""
    return [
        {
            "title": "Thinkful",
            "url": "https://www.thinkful.com",
            "description": "Think outside the classroom",
            "rating": 5,
        },
        {
            "title": "Google",
            "url": "https://www.google.com",
            "description": "Where we find everything else",
            "rating": 4,
        },
        {
            "title": "MDN",
            "url": "https://developer.mozilla.org",
            "description": "The only place to find web documentation",
            "rating": 5,
        },
        {
            "title": "Python Package Index",
            "url": "https://pypi.org",
            "description": None,
            "rating": 3,
        },
    ]


async def insert_bookmarks(
    session_factory: async_sessionmaker[AsyncSession],
    rows: list[dict[str, Any]],
) -> list[dict[str, Any]]:
    """Insert rows directly into the table and return them with their assigned ids."""
    async with session_factory() as session:
        bookmarks = [Bookmark(**row) for row in rows]
        session.add_all(bookmarks)
        await session.commit()
        return [{"id": b.id, **row} for b, row in zip(bookmarks, rows, strict=True)]


@pytest.fixture
async def seeded_bookmarks(
    session_factory: async_sessionmaker[AsyncSession],
) -> list[dict[str, Any]]:
    """The sample bookmarks, inserted and serialized as the API returns them."""
    return await insert_bookmarks(session_factory, make_bookmarks_array())
