"""
Bearer-token authentication middleware.

Every request must carry an ``Authorization`` header whose value, with the
literal ``"Bearer "`` removed, equals the configured shared token.  There
are no bypass paths.  Rejected requests receive ``401`` with the plain-text
body ``Unauthorized`` and never reach a router.

The check is a literal string replace followed by exact equality: the
scheme is case-sensitive and the ``"Bearer "`` text is removed wherever it
appears, not only as a prefix.

Manifesto:
    A single shared secret is a placeholder, not real authentication.
    The middleware keeps the accept/reject contract exact and nothing more.

Tags:
    user-registry, api, middleware, authentication, bearer-token
"""

from __future__ import annotations

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import PlainTextResponse, Response

from user_registry.core.logging import get_logger

logger = get_logger(__name__)

_BEARER = "Bearer "


def token_matches(header_value: str, expected: str) -> bool:
    """Return True if *header_value* carries *expected* as its bearer token."""
    return header_value.replace(_BEARER, "") == expected


def unauthorized_response() -> PlainTextResponse:
    """The fixed 401 response written on every rejection."""
    return PlainTextResponse("Unauthorized", status_code=401)


class BearerTokenMiddleware(BaseHTTPMiddleware):
    """Reject requests that lack the shared bearer token.

    Parameters
    ----------
    app:
        The ASGI application to wrap.
    token:
        The expected token value.
    """

    def __init__(self, app: object, token: str) -> None:
        super().__init__(app)  # type: ignore[arg-type]
        self._token = token

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        header = request.headers.get("Authorization")
        if header is None:
            logger.warning("auth_rejected", path=request.url.path, reason="missing_header")
            return unauthorized_response()

        if not token_matches(header, self._token):
            logger.warning("auth_rejected", path=request.url.path, reason="invalid_token")
            return unauthorized_response()

        return await call_next(request)
