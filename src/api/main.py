"""FastAPI application entry point."""
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.exceptions import (
    http_exception_handler,
    make_unhandled_exception_handler,
    validation_exception_handler,
)
from api.routers import bookmarks, health
from core.auth import BearerTokenMiddleware
from core.config import Settings, get_settings
from core.logging_config import configure_logging
from core.middleware import (
    AccessLogMiddleware,
    SecurityHeadersMiddleware,
    UnhandledErrorMiddleware,
)
from db.store import create_seeded_store


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build a new app with its own seeded bookmark store.

    Serve with `uvicorn api.main:create_app --factory`.
    """
    if settings is None:
        settings = get_settings()

    configure_logging(settings)

    app = FastAPI(
        title="Bookmarks API",
        description="In-memory bookmark store protected by a static bearer token.",
        version="0.1.0",
        debug=False,
    )
    app.state.settings = settings
    app.state.store = create_seeded_store()

    unhandled_exception_handler = make_unhandled_exception_handler(settings.is_production)

    # add_middleware wraps the current stack, so the last one added runs first
    app.add_middleware(UnhandledErrorMiddleware, handler=unhandled_exception_handler)
    app.add_middleware(BearerTokenMiddleware, api_token=settings.api_token)
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(AccessLogMiddleware, short=settings.is_production)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(bookmarks.router, prefix="/bookmark")
    app.include_router(bookmarks.router, prefix="/bookmarks", include_in_schema=False)

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    # Errors raised by the middleware themselves end up here
    app.add_exception_handler(Exception, unhandled_exception_handler)

    return app
