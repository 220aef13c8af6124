"""Tests for the in-memory bookmark store."""
from db.store import SEED_BOOKMARKS, BookmarkStore, create_seeded_store
from schemas.bookmark import Bookmark


def _bookmark(bookmark_id: str, title: str = "T") -> Bookmark:
    return Bookmark(id=bookmark_id, title=title, url="http://x")


class TestBookmarkStore:
    """Tests for BookmarkStore class."""

    def test__list__insertion_order(self) -> None:
        store = BookmarkStore()
        for bookmark_id in ["b", "a", "c"]:
            store.append(_bookmark(bookmark_id))
        assert [b.id for b in store.list()] == ["b", "a", "c"]

    def test__list__is_live(self) -> None:
        """The list reflects later mutations."""
        store = BookmarkStore()
        listed = store.list()
        store.append(_bookmark("a"))
        assert len(listed) == 1

    def test__find_by_id__found(self) -> None:
        store = BookmarkStore([_bookmark("a"), _bookmark("b")])
        assert store.find_by_id("b") == _bookmark("b")

    def test__find_by_id__missing(self) -> None:
        store = BookmarkStore([_bookmark("a")])
        assert store.find_by_id("z") is None

    def test__find_by_id__string_equality_only(self) -> None:
        store = BookmarkStore([_bookmark("1")])
        assert store.find_by_id("01") is None
        assert store.find_by_id("1 ") is None

    def test__find_by_id__returns_first_match(self) -> None:
        store = BookmarkStore([_bookmark("a", "first"), _bookmark("a", "second")])
        assert store.find_by_id("a").title == "first"

    def test__remove_by_id__removes_one(self) -> None:
        store = BookmarkStore([_bookmark("a"), _bookmark("b"), _bookmark("c")])
        assert store.remove_by_id("b") is True
        assert [b.id for b in store.list()] == ["a", "c"]

    def test__remove_by_id__only_first_match(self) -> None:
        store = BookmarkStore([_bookmark("a", "first"), _bookmark("a", "second")])
        assert store.remove_by_id("a") is True
        assert [b.title for b in store.list()] == ["second"]

    def test__remove_by_id__missing_leaves_store_unchanged(self) -> None:
        store = BookmarkStore([_bookmark("a")])
        assert store.remove_by_id("z") is False
        assert len(store) == 1

    def test__len(self) -> None:
        assert len(BookmarkStore()) == 0
        assert len(BookmarkStore([_bookmark("a"), _bookmark("b")])) == 2


class TestSeededStore:
    """Tests for create_seeded_store function."""

    def test__create_seeded_store__contains_seed(self) -> None:
        store = create_seeded_store()
        assert store.list() == list(SEED_BOOKMARKS)
        assert store.find_by_id("1").title == "Bookmark One"

    def test__create_seeded_store__independent_copies(self) -> None:
        first = create_seeded_store()
        second = create_seeded_store()
        first.remove_by_id("1")
        assert len(second) == 1
        assert len(SEED_BOOKMARKS) == 1
