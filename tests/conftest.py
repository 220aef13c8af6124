"""Shared fixtures for API and unit tests."""
from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from api.main import create_app
from core.config import Settings
from db.store import BookmarkStore

API_TOKEN = "test-api-token"
AUTH_HEADERS = {"Authorization": f"Bearer {API_TOKEN}"}


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Development settings writing logs under the test's temp dir."""
    return Settings(
        _env_file=None,  # Don't load from .env file
        api_token=API_TOKEN,
        node_env="development",
        log_file=str(tmp_path / "info.log"),
    )


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    """A fresh app (and seeded store) per test."""
    return create_app(settings)


@pytest.fixture
def store(app: FastAPI) -> BookmarkStore:
    """The store backing `app`."""
    return app.state.store


def _transport(app: FastAPI) -> ASGITransport:
    # Unhandled errors are returned as 500 responses instead of re-raised
    return ASGITransport(app=app, raise_app_exceptions=False)


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Client sending a valid bearer token on every request."""
    async with AsyncClient(
        transport=_transport(app), base_url="http://test", headers=AUTH_HEADERS,
    ) as cli:
        yield cli


@pytest.fixture
async def anon_client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Client sending no Authorization header."""
    async with AsyncClient(transport=_transport(app), base_url="http://test") as cli:
        yield cli
