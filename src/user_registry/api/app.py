"""
FastAPI application factory.

``create_app()`` wires the middleware pipeline, routers, error handlers and
lifespan events into a single ``FastAPI`` instance.

Pipeline (outermost → innermost)::

    ExceptionNormalizationMiddleware
      └── RequestLoggingMiddleware
            └── BearerTokenMiddleware
                  └── route dispatch

Manifesto:
    The app factory is the single composition root.  The stage order is
    fixed in :data:`PIPELINE` and the route table is fixed at startup.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from user_registry.api.deps import get_settings
from user_registry.api.middleware.auth import BearerTokenMiddleware
from user_registry.api.middleware.errors import (
    ExceptionNormalizationMiddleware,
    request_validation_handler,
)
from user_registry.api.middleware.logging import RequestLoggingMiddleware
from user_registry.api.routers import diagnostics, users
from user_registry.api.settings import UserRegistryAPISettings
from user_registry.core.logging import get_logger
from user_registry.core.store import UserStore

# Outermost first.  Starlette wraps the *last* added middleware around the
# others, so create_app adds these in reverse.
PIPELINE: tuple[type, ...] = (
    ExceptionNormalizationMiddleware,
    RequestLoggingMiddleware,
    BearerTokenMiddleware,
)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan: startup / shutdown hooks."""
    log = get_logger("user_registry.api")
    log.info("user-registry API starting", version=app.version)
    yield
    log.info("user-registry API shutting down", users=len(app.state.store))


def _stage_options(stage: type, settings: UserRegistryAPISettings) -> dict[str, Any]:
    if stage is BearerTokenMiddleware:
        return {"token": settings.auth_token}
    return {}


def create_app(
    *,
    settings: UserRegistryAPISettings | None = None,
    store: UserStore | None = None,
) -> FastAPI:
    """Build and return a fully-configured FastAPI application.

    Parameters
    ----------
    settings : UserRegistryAPISettings | None
        Override settings (useful for testing).  When ``None`` the cached
        singleton from :func:`get_settings` is used.
    store : UserStore | None
        Pre-populated store (useful for testing).  When ``None`` a fresh,
        empty store is created for this application.
    """

    settings = settings or get_settings()

    app = FastAPI(
        title=settings.api_title,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    app.state.settings = settings
    app.state.store = store if store is not None else UserStore()

    # ── Middleware pipeline ──────────────────────────────────────────
    for stage in reversed(PIPELINE):
        app.add_middleware(stage, **_stage_options(stage, settings))

    # ── Exception handlers ───────────────────────────────────────────
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    # ── Routers ──────────────────────────────────────────────────────
    app.include_router(users.router, tags=["users"])
    app.include_router(diagnostics.router, tags=["diagnostics"])

    return app
