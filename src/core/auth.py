"""Static bearer token authentication."""
import logging
import secrets

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.types import ASGIApp

logger = logging.getLogger(__name__)

# Paths reachable without a token
PUBLIC_PATHS: frozenset[str] = frozenset({"/"})


def extract_token(authorization: str | None) -> str | None:
    """
    Return the token part of an `Authorization: <scheme> <token>` header.

    The scheme is not checked. Returns None when the header is missing or has
    no second space-separated part.
    """
    if not authorization:
        return None
    parts = authorization.split(" ")
    if len(parts) < 2:  # noqa: PLR2004
        return None
    return parts[1]


def is_valid_token(token: str | None, api_token: str) -> bool:
    """Compare a presented token with the configured secret in constant time."""
    if token is None:
        return False
    return secrets.compare_digest(token.encode(), api_token.encode())


class BearerTokenMiddleware(BaseHTTPMiddleware):
    """Reject requests to protected paths that lack the configured bearer token."""

    def __init__(
        self,
        app: ASGIApp,
        api_token: str,
        public_paths: frozenset[str] = PUBLIC_PATHS,
    ) -> None:
        super().__init__(app)
        self.api_token = api_token
        self.public_paths = public_paths

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        """Short-circuit with 401 on a missing or mismatched token."""
        if request.url.path in self.public_paths:
            return await call_next(request)

        token = extract_token(request.headers.get("Authorization"))
        if not is_valid_token(token, self.api_token):
            logger.error(
                "Unauthorized request to path: %s",
                request.url.path,
                extra={"method": request.method},
            )
            return JSONResponse({"error": "Unauthorized request"}, status_code=401)

        return await call_next(request)
