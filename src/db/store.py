"""In-memory bookmark store."""
from collections.abc import Iterable

from fastapi import Request

from schemas.bookmark import Bookmark

SEED_BOOKMARKS: tuple[Bookmark, ...] = (
    Bookmark(
        id="1",
        title="Bookmark One",
        url="https://bookmarks-app-snowy.vercel.app/add-bookmark",
        description="This is bookmark one",
        rating="5",
    ),
)


class BookmarkStore:
    """
    Ordered, process-local list of bookmarks.

    Not shared between processes: each worker holds its own copy and the data
    is lost on restart. Operations are synchronous, so requests handled on one
    event loop never observe a partial mutation.
    """

    def __init__(self, bookmarks: Iterable[Bookmark] = ()) -> None:
        self._bookmarks: list[Bookmark] = list(bookmarks)

    def __len__(self) -> int:
        return len(self._bookmarks)

    def list(self) -> list[Bookmark]:
        """Return the live list in insertion order. Callers must not mutate it."""
        return self._bookmarks

    def find_by_id(self, bookmark_id: str) -> Bookmark | None:
        """Return the first bookmark whose id equals `bookmark_id`, or None."""
        for bookmark in self._bookmarks:
            if bookmark.id == bookmark_id:
                return bookmark
        return None

    def append(self, bookmark: Bookmark) -> None:
        """Add a bookmark at the end."""
        self._bookmarks.append(bookmark)

    def remove_by_id(self, bookmark_id: str) -> bool:
        """Remove the first matching bookmark. Returns False if none matched."""
        for index, bookmark in enumerate(self._bookmarks):
            if bookmark.id == bookmark_id:
                del self._bookmarks[index]
                return True
        return False


def create_seeded_store() -> BookmarkStore:
    """Create a store holding copies of the seed bookmarks."""
    return BookmarkStore(bookmark.model_copy() for bookmark in SEED_BOOKMARKS)


def get_store(request: Request) -> BookmarkStore:
    """Dependency returning the store attached to the running app."""
    return request.app.state.store
