"""Exception handlers mapping errors to HTTP responses."""
import logging
from collections.abc import Awaitable, Callable
from typing import cast

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

ExceptionHandler = Callable[[Request, Exception], Awaitable[Response]]


async def http_exception_handler(_: Request, exc: Exception) -> Response:
    """Render HTTP errors (404, 400, 405, ...) as plain text bodies."""
    exc = cast(StarletteHTTPException, exc)
    return PlainTextResponse(
        str(exc.detail),
        status_code=exc.status_code,
        headers=exc.headers,
    )


async def validation_exception_handler(request: Request, exc: Exception) -> Response:
    """Treat an unparseable or wrong-typed request body as invalid data."""
    exc = cast(RequestValidationError, exc)
    logger.error(
        "Invalid request data for path: %s",
        request.url.path,
        extra={"errors": exc.errors()},
    )
    return PlainTextResponse("Invalid data", status_code=400)


def make_unhandled_exception_handler(production: bool) -> ExceptionHandler:
    """
    Build the catch-all handler for exceptions no other handler claimed.

    In production the body is a generic message; otherwise the error message
    and type are returned for debugging.
    """

    async def unhandled_exception_handler(request: Request, exc: Exception) -> Response:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        if production:
            content = {"error": {"message": "server error"}}
        else:
            content = {"message": str(exc), "error": {"type": type(exc).__name__}}
        return JSONResponse(content, status_code=500)

    return unhandled_exception_handler
