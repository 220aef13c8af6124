"""Bookmark CRUD endpoints."""
from fastapi import APIRouter, Body, Depends, HTTPException, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from api.dependencies import get_store
from db.store import BookmarkStore
from schemas.bookmark import Bookmark, BookmarkCreate
from services import bookmark_service
from services.bookmark_service import InvalidBookmarkError

# Mounted under both /bookmark (canonical) and /bookmarks in api.main
router = APIRouter(tags=["bookmarks"])


@router.get("", response_model=list[Bookmark])
async def list_bookmarks(
    store: BookmarkStore = Depends(get_store),
) -> list[Bookmark]:
    """List all bookmarks."""
    return bookmark_service.get_bookmarks(store)


@router.get("/{bookmark_id}", response_model=Bookmark)
async def get_bookmark(
    bookmark_id: str,
    store: BookmarkStore = Depends(get_store),
) -> Bookmark:
    """Get a single bookmark by ID."""
    bookmark = bookmark_service.get_bookmark(store, bookmark_id)
    if bookmark is None:
        raise HTTPException(status_code=404, detail="Not Found")
    return bookmark


@router.post("", response_model=Bookmark, status_code=201)
async def create_bookmark(
    request: Request,
    data: BookmarkCreate | None = Body(default=None),
    store: BookmarkStore = Depends(get_store),
) -> JSONResponse:
    """Create a new bookmark and point Location at it."""
    try:
        bookmark = bookmark_service.create_bookmark(store, data or BookmarkCreate())
    except InvalidBookmarkError as e:
        raise HTTPException(status_code=400, detail="Invalid data") from e

    location = request.url_for("get_bookmark", bookmark_id=bookmark.id)
    return JSONResponse(
        status_code=201,
        content=bookmark.model_dump(mode="json"),
        headers={"Location": str(location)},
    )


@router.delete("/{bookmark_id}", response_class=PlainTextResponse)
async def delete_bookmark(
    bookmark_id: str,
    store: BookmarkStore = Depends(get_store),
) -> str:
    """Delete a bookmark."""
    deleted = bookmark_service.delete_bookmark(store, bookmark_id)
    if not deleted:
        raise HTTPException(status_code=404, detail="Not Found")
    return f"Bookmark with id {bookmark_id} deleted."
