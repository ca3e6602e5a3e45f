"""
Typed request objects for operations.

Each dataclass represents the *input* contract for a single operation
function.  Requests carry only transport-agnostic data; field values are
whatever the client sent and are validated by the store, not here.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

# ------------------------------------------------------------------ #
# User operations
# ------------------------------------------------------------------ #


@dataclass(frozen=True, slots=True)
class CreateUserRequest:
    """Request for :func:`user_registry.ops.users.create_user`."""

    user_name: Any = None
    user_age: Any = 0


@dataclass(frozen=True, slots=True)
class GetUserRequest:
    """Request for :func:`user_registry.ops.users.get_user`."""

    user_id: int


@dataclass(frozen=True, slots=True)
class UpdateUserRequest:
    """Request for :func:`user_registry.ops.users.update_user`.

    Attributes:
        user_id: Target user; never changed by the update.
        user_name: Replacement name.
        user_age: Replacement age.
    """

    user_id: int
    user_name: Any = None
    user_age: Any = 0


@dataclass(frozen=True, slots=True)
class DeleteUserRequest:
    """Request for :func:`user_registry.ops.users.delete_user`."""

    user_id: int
