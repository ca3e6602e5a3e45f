"""API middleware package.

The request pipeline, outermost first:

1. :class:`~user_registry.api.middleware.errors.ExceptionNormalizationMiddleware`
2. :class:`~user_registry.api.middleware.logging.RequestLoggingMiddleware`
3. :class:`~user_registry.api.middleware.auth.BearerTokenMiddleware`

Manifesto:
    Cross-cutting concerns (auth, logging, errors) belong in middleware
    so routers stay focused on business logic.

Tags:
    user-registry, api, middleware, cross-cutting, pipeline
"""

from user_registry.api.middleware.auth import BearerTokenMiddleware
from user_registry.api.middleware.errors import ExceptionNormalizationMiddleware
from user_registry.api.middleware.logging import RequestLoggingMiddleware

__all__ = [
    "BearerTokenMiddleware",
    "ExceptionNormalizationMiddleware",
    "RequestLoggingMiddleware",
]
