"""HTTP middleware for access logging, security response headers and unhandled errors."""
import logging
import time
from collections.abc import Awaitable, Callable
from datetime import datetime

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

logger = logging.getLogger(__name__)

SECURITY_HEADERS: dict[str, str] = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "Referrer-Policy": "no-referrer",
    "X-DNS-Prefetch-Control": "off",
    "Cross-Origin-Opener-Policy": "same-origin",
    "X-XSS-Protection": "0",
}


def format_access_line(
    request: Request,
    status_code: int,
    elapsed_ms: float,
    short: bool,
) -> str:
    """
    Build an access log line.

    `short` gives `METHOD path status - N ms`; otherwise a common log format
    line `client - - [time] "METHOD path HTTP/x" status`.
    """
    path = request.url.path
    if request.url.query:
        path = f"{path}?{request.url.query}"
    if short:
        return f"{request.method} {path} {status_code} - {elapsed_ms:.3f} ms"

    client = request.client.host if request.client else "-"
    timestamp = datetime.now().astimezone().strftime("%d/%b/%Y:%H:%M:%S %z")
    http_version = request.scope.get("http_version", "1.1")
    return (
        f'{client} - - [{timestamp}] "{request.method} {path} HTTP/{http_version}" '
        f"{status_code}"
    )


class AccessLogMiddleware(BaseHTTPMiddleware):
    """Log one line per request once the response is ready."""

    def __init__(self, app: ASGIApp, short: bool = False) -> None:
        super().__init__(app)
        self.short = short

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        """Time the request and log it."""
        start = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(
            format_access_line(request, response.status_code, elapsed_ms, self.short),
            extra={"status_code": response.status_code},
        )
        return response


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Add defensive headers to every response."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        """Set any security header the handler did not set itself."""
        response = await call_next(request)
        for name, value in SECURITY_HEADERS.items():
            response.headers.setdefault(name, value)
        return response


class UnhandledErrorMiddleware(BaseHTTPMiddleware):
    """
    Turn exceptions escaping the routes into a response from `handler`.

    Installed innermost so the outer middleware (CORS, access log, security
    headers) still applies to the error response.
    """

    def __init__(
        self,
        app: ASGIApp,
        handler: Callable[[Request, Exception], Awaitable[Response]],
    ) -> None:
        super().__init__(app)
        self.handler = handler

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        """Delegate to `handler` when the downstream app raises."""
        try:
            return await call_next(request)
        except Exception as exc:  # noqa: BLE001
            return await self.handler(request, exc)
