"""Service layer for bookmark operations."""
import logging
import uuid

from db.store import BookmarkStore
from schemas.bookmark import Bookmark, BookmarkCreate

logger = logging.getLogger(__name__)


class InvalidBookmarkError(Exception):
    """Raised when a bookmark is missing a required field."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"{field} is required")


def get_bookmarks(store: BookmarkStore) -> list[Bookmark]:
    """Return every bookmark in insertion order."""
    return store.list()


def get_bookmark(store: BookmarkStore, bookmark_id: str) -> Bookmark | None:
    """Return a bookmark by id, logging when it does not exist."""
    bookmark = store.find_by_id(bookmark_id)
    if bookmark is None:
        logger.error("Bookmark with id %s not found.", bookmark_id)
    return bookmark


def create_bookmark(store: BookmarkStore, data: BookmarkCreate) -> Bookmark:
    """
    Validate and store a new bookmark with a generated id.

    Title is checked before url; the first missing one is reported.

    Raises:
        InvalidBookmarkError: If title or url is missing or empty.
    """
    for field in ("title", "url"):
        if not getattr(data, field):
            logger.error("%s is required", field)
            raise InvalidBookmarkError(field)

    bookmark = Bookmark(id=str(uuid.uuid4()), **data.model_dump())
    store.append(bookmark)
    logger.info("Bookmark with id %s created", bookmark.id)
    return bookmark


def delete_bookmark(store: BookmarkStore, bookmark_id: str) -> bool:
    """Remove a bookmark by id. Returns False, without mutating, if not found."""
    if not store.remove_by_id(bookmark_id):
        logger.error("Bookmark with id %s not found.", bookmark_id)
        return False
    logger.info("Bookmark with id %s deleted.", bookmark_id)
    return True
