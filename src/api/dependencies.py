"""FastAPI dependencies for injection."""
from core.config import get_settings
from db.store import get_store

__all__ = [
    "get_settings",
    "get_store",
]
