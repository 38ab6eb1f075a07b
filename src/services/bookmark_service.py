"""Service layer for bookmark CRUD operations."""
import logging

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from models.bookmark import MAX_ID, MIN_ID, Bookmark
from schemas.bookmark import BookmarkCreate, BookmarkUpdate

logger = logging.getLogger(__name__)


async def create_bookmark(db: AsyncSession, data: BookmarkCreate) -> Bookmark:
    """
    Create a new bookmark. The store assigns its id.

    Note: Does not commit. Caller (session generator) handles commit at request end.
    """
    bookmark = Bookmark(**data.model_dump())
    db.add(bookmark)
    await db.flush()
    await db.refresh(bookmark)
    logger.info("Created bookmark %d", bookmark.id)
    return bookmark


async def get_bookmark(db: AsyncSession, bookmark_id: int) -> Bookmark | None:
    """
    Get a bookmark by ID. Returns None if not found.

    Ids outside the column's integer range can't exist, so they are
    reported as not found without querying the database.
    """
    if not MIN_ID <= bookmark_id <= MAX_ID:
        logger.debug("Bookmark id %d out of range", bookmark_id)
        return None
    bookmark = await db.get(Bookmark, bookmark_id)
    if bookmark is None:
        logger.debug("Bookmark %d not found", bookmark_id)
    return bookmark


async def get_bookmarks(db: AsyncSession) -> list[Bookmark]:
    """Get all bookmarks, ordered by id."""
    result = await db.execute(select(Bookmark).order_by(Bookmark.id))
    return list(result.scalars().all())


async def update_bookmark(
    db: AsyncSession,
    bookmark_id: int,
    data: BookmarkUpdate,
) -> Bookmark | None:
    """
    Apply the fields present in `data` to a bookmark. Returns None if not found.

    Fields absent from the request body keep their stored values.

    Note: Does not commit. Caller (session generator) handles commit at request end.
    """
    bookmark = await get_bookmark(db, bookmark_id)
    if bookmark is None:
        return None

    update_data = data.model_dump(exclude_unset=True)
    for field, value in update_data.items():
        setattr(bookmark, field, value)

    await db.flush()
    await db.refresh(bookmark)
    logger.info("Updated bookmark %d fields=%s", bookmark_id, sorted(update_data))
    return bookmark


async def delete_bookmark(db: AsyncSession, bookmark_id: int) -> bool:
    """
    Permanently delete a bookmark. Returns True if deleted, False if not found.

    Note: Does not commit. Caller (session generator) handles commit at request end.
    """
    bookmark = await get_bookmark(db, bookmark_id)
    if bookmark is None:
        return False

    await db.delete(bookmark)
    await db.flush()
    logger.info("Deleted bookmark %d", bookmark_id)
    return True


async def truncate_bookmarks(db: AsyncSession) -> int:
    """Remove every bookmark. Returns the number of rows deleted."""
    result = await db.execute(delete(Bookmark))
    await db.flush()
    return result.rowcount
