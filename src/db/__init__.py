"""Bookmark storage."""
from db.store import BookmarkStore, create_seeded_store, get_store

__all__ = ["BookmarkStore", "create_seeded_store", "get_store"]
