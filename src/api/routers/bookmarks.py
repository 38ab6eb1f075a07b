"""Bookmark CRUD endpoints."""
from fastapi import APIRouter, Body, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import get_async_session
from api.errors import NotFoundError, ValidationError
from schemas.bookmark import BookmarkCreate, BookmarkResponse, BookmarkUpdate
from services import bookmark_service

# Kept verbatim for compatibility with existing clients, even though it names
# fields ('id', 'content') that are not updatable.
EMPTY_UPDATE_MESSAGE = (
    "Request body must contain either 'id', 'rating' or 'content', 'description', 'url'"
)

router = APIRouter(prefix="/api/bookmarks", tags=["bookmarks"])


@router.get("", response_model=list[BookmarkResponse])
async def list_bookmarks(
    db: AsyncSession = Depends(get_async_session),
) -> list[BookmarkResponse]:
    """List all bookmarks, ordered by id."""
    bookmarks = await bookmark_service.get_bookmarks(db)
    return [BookmarkResponse.model_validate(b) for b in bookmarks]


@router.post("", response_model=BookmarkResponse, status_code=201)
async def create_bookmark(
    data: BookmarkCreate,
    response: Response,
    db: AsyncSession = Depends(get_async_session),
) -> BookmarkResponse:
    """Create a new bookmark."""
    bookmark = await bookmark_service.create_bookmark(db, data)
    response.headers["Location"] = f"{router.prefix}/{bookmark.id}"
    return BookmarkResponse.model_validate(bookmark)


@router.get("/{bookmark_id}", response_model=BookmarkResponse)
async def get_bookmark(
    bookmark_id: int,
    db: AsyncSession = Depends(get_async_session),
) -> BookmarkResponse:
    """Get a single bookmark by ID."""
    bookmark = await bookmark_service.get_bookmark(db, bookmark_id)
    if bookmark is None:
        raise NotFoundError()
    return BookmarkResponse.model_validate(bookmark)


@router.patch("/{bookmark_id}", status_code=204)
async def update_bookmark(
    bookmark_id: int,
    data: BookmarkUpdate | None = Body(default=None),
    db: AsyncSession = Depends(get_async_session),
) -> Response:
    """
    Partially update a bookmark.

    Existence is checked before the body, so an unknown id is a 404 even
    when the body is empty. Bodies that fail schema validation (wrong type,
    null title, url or rating) are rejected with a 400 before this handler
    runs, whether or not the id exists.
    """
    if await bookmark_service.get_bookmark(db, bookmark_id) is None:
        raise NotFoundError()
    if data is None or not data.has_updates():
        raise ValidationError(EMPTY_UPDATE_MESSAGE)

    await bookmark_service.update_bookmark(db, bookmark_id, data)
    return Response(status_code=204)


@router.delete("/{bookmark_id}", status_code=204)
async def delete_bookmark(
    bookmark_id: int,
    db: AsyncSession = Depends(get_async_session),
) -> Response:
    """Permanently delete a bookmark."""
    deleted = await bookmark_service.delete_bookmark(db, bookmark_id)
    if not deleted:
        raise NotFoundError()
    return Response(status_code=204)
