"""
FastAPI dependency injection: shared singletons and per-request factories.

Usage in routers::

    from user_registry.api.deps import OpContext

    @router.get("/things")
    def list_things(ctx: OpContext):
        ...
"""

from __future__ import annotations

import uuid
from functools import lru_cache
from typing import Annotated

from fastapi import Depends, Request

from user_registry.api.settings import UserRegistryAPISettings
from user_registry.core.store import UserStore
from user_registry.ops.context import OperationContext

# ── Settings (singleton) ─────────────────────────────────────────────────


@lru_cache(maxsize=1)
def get_settings() -> UserRegistryAPISettings:
    """Cached settings, loaded once per process."""
    return UserRegistryAPISettings()


# ── Store (one per application) ──────────────────────────────────────────


def get_store(request: Request) -> UserStore:
    """The store created by ``create_app`` for this application."""
    return request.app.state.store


# ── Operation context (per-request) ──────────────────────────────────────


def get_operation_context(
    request: Request,
    store: Annotated[UserStore, Depends(get_store)],
) -> OperationContext:
    """Build an :class:`OperationContext` from the current request."""
    return OperationContext(
        store=store,
        request_id=request.headers.get("X-Request-ID", str(uuid.uuid4())),
    )


# ── Convenience type aliases ─────────────────────────────────────────────

OpContext = Annotated[OperationContext, Depends(get_operation_context)]
