"""Request logging middleware.

Logs ``http_request`` (method, path) on the way in and ``http_response``
(status code) on the way out.  Error responses produced by inner stages
are logged like any other; an exception passing through is not, since the
outer exception stage logs it.  The response is never modified.

Tags:
    user-registry, api, middleware, logging, observability
"""

from __future__ import annotations

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from user_registry.core.logging import get_logger

logger = get_logger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Record method/path before and status code after each request."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        logger.info("http_request", method=request.method, path=request.url.path)
        response = await call_next(request)
        logger.info("http_response", status_code=response.status_code)
        return response
