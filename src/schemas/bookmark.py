"""Pydantic schemas for bookmark endpoints."""
from typing import Any

from pydantic import BaseModel


class BookmarkCreate(BaseModel):
    """
    Schema for creating a new bookmark.

    Every field is optional here; required-field checks (title, then url) live
    in the service layer so a missing field produces the plain 400 response
    rather than a schema error.
    """

    title: str | None = None
    url: str | None = None
    description: str | None = None
    rating: Any = None  # Stored and echoed back as-is


class Bookmark(BaseModel):
    """A stored bookmark."""

    id: str
    title: str
    url: str
    description: str | None = None
    rating: Any = None
