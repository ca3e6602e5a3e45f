"""
User CRUD operations.

Each function runs exactly one store transaction and converts the expected
:class:`~user_registry.core.errors.RegistryError` failures (validation,
unknown id) into a failed :class:`OperationResult`.  Nothing else is caught:
an unexpected exception is a fault for the API's exception normalization
stage, not an operation outcome.

Every outcome is logged with ``request_id`` and ``elapsed_ms``; failures
also carry the error ``code`` and its ``details``.
"""

from __future__ import annotations

from typing import Any

from user_registry.core.errors import RegistryError
from user_registry.core.logging import get_logger
from user_registry.core.models import User
from user_registry.ops.context import OperationContext
from user_registry.ops.requests import (
    CreateUserRequest,
    DeleteUserRequest,
    GetUserRequest,
    UpdateUserRequest,
)
from user_registry.ops.result import OperationResult, start_timer

logger = get_logger(__name__)


def _failed(
    event: str,
    ctx: OperationContext,
    exc: RegistryError,
    elapsed_ms: float,
) -> OperationResult[Any]:
    result: OperationResult[Any] = OperationResult.from_error(exc, elapsed_ms=elapsed_ms)
    logger.info(
        event,
        code=exc.code,
        details=result.error.details,
        request_id=ctx.request_id,
        elapsed_ms=elapsed_ms,
    )
    return result


def create_user(ctx: OperationContext, request: CreateUserRequest) -> OperationResult[User]:
    """Validate and add a new user; the store assigns the id."""
    timer = start_timer()

    try:
        user = ctx.store.add(request.user_name, request.user_age)
    except RegistryError as exc:
        return _failed("user_rejected", ctx, exc, timer.elapsed_ms)

    elapsed = timer.elapsed_ms
    logger.info("user_created", user_id=user.id, request_id=ctx.request_id, elapsed_ms=elapsed)
    return OperationResult.ok(user, elapsed_ms=elapsed)


def list_users(ctx: OperationContext) -> OperationResult[list[User]]:
    """Return every user in insertion order."""
    timer = start_timer()
    users = ctx.store.list()
    elapsed = timer.elapsed_ms
    logger.debug("users_listed", count=len(users), request_id=ctx.request_id, elapsed_ms=elapsed)
    return OperationResult.ok(users, elapsed_ms=elapsed)


def get_user(ctx: OperationContext, request: GetUserRequest) -> OperationResult[User]:
    """Look up a single user by id."""
    timer = start_timer()

    try:
        user = ctx.store.get(request.user_id)
    except RegistryError as exc:
        return _failed("user_lookup_failed", ctx, exc, timer.elapsed_ms)

    return OperationResult.ok(user, elapsed_ms=timer.elapsed_ms)


def update_user(ctx: OperationContext, request: UpdateUserRequest) -> OperationResult[User]:
    """Overwrite name and age of an existing user.

    Invalid input is reported before the id is looked up, and in either
    failure case the stored record is left as it was.
    """
    timer = start_timer()

    try:
        user = ctx.store.update(request.user_id, request.user_name, request.user_age)
    except RegistryError as exc:
        return _failed("user_update_rejected", ctx, exc, timer.elapsed_ms)

    elapsed = timer.elapsed_ms
    logger.info("user_updated", user_id=user.id, request_id=ctx.request_id, elapsed_ms=elapsed)
    return OperationResult.ok(user, elapsed_ms=elapsed)


def delete_user(ctx: OperationContext, request: DeleteUserRequest) -> OperationResult[None]:
    """Permanently remove a user."""
    timer = start_timer()

    try:
        ctx.store.remove(request.user_id)
    except RegistryError as exc:
        return _failed("user_delete_failed", ctx, exc, timer.elapsed_ms)

    elapsed = timer.elapsed_ms
    logger.info("user_deleted", user_id=request.user_id, request_id=ctx.request_id, elapsed_ms=elapsed)
    return OperationResult.ok(None, elapsed_ms=elapsed)
