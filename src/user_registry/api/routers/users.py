"""
Users router: CRUD over the in-memory store.

Endpoints:
    POST   /users       Create a user (201 + Location)
    GET    /users       List all users
    GET    /users/{id}  Fetch one user
    PUT    /users/{id}  Replace name/age (204)
    DELETE /users/{id}  Remove a user (204)

Failures: 400 with the JSON string ``"Invalid user data."`` for bad input,
404 with an empty body for an unknown id.
"""

from __future__ import annotations

from fastapi import APIRouter, Path, Response

from user_registry.api.deps import OpContext
from user_registry.api.schemas.users import UserInput, UserSchema
from user_registry.api.utils import handle_error
from user_registry.ops.requests import (
    CreateUserRequest,
    DeleteUserRequest,
    GetUserRequest,
    UpdateUserRequest,
)
from user_registry.ops.users import create_user as _create
from user_registry.ops.users import delete_user as _delete
from user_registry.ops.users import get_user as _get
from user_registry.ops.users import list_users as _list
from user_registry.ops.users import update_user as _update

router = APIRouter(prefix="/users")


@router.post("", status_code=201, response_model=UserSchema)
def create_user(ctx: OpContext, payload: UserInput, response: Response):
    """Create a user.  The id is assigned by the store.

    Example:
        POST /users  {"userName": "Alice", "userAge": 30}

        201 Created, Location: /users/1
        {"id": 1, "userName": "Alice", "userAge": 30}
    """
    result = _create(ctx, CreateUserRequest(user_name=payload.user_name, user_age=payload.user_age))
    if not result.success:
        return handle_error(result)
    response.headers["Location"] = f"/users/{result.data.id}"
    return UserSchema.from_user(result.data)


@router.get("", response_model=list[UserSchema])
def list_users(ctx: OpContext):
    """List every user in creation order."""
    result = _list(ctx)
    return [UserSchema.from_user(u) for u in (result.data or [])]


@router.get("/{user_id}", response_model=UserSchema)
def get_user(ctx: OpContext, user_id: int = Path(..., description="User id")):
    """Fetch a single user; 404 when the id is unknown."""
    result = _get(ctx, GetUserRequest(user_id=user_id))
    if not result.success:
        return handle_error(result)
    return UserSchema.from_user(result.data)


@router.put("/{user_id}", status_code=204, response_class=Response)
def update_user(ctx: OpContext, payload: UserInput, user_id: int = Path(..., description="User id")):
    """Replace name and age of an existing user; the id never changes."""
    result = _update(
        ctx,
        UpdateUserRequest(user_id=user_id, user_name=payload.user_name, user_age=payload.user_age),
    )
    if not result.success:
        return handle_error(result)
    return Response(status_code=204)


@router.delete("/{user_id}", status_code=204, response_class=Response)
def delete_user(ctx: OpContext, user_id: int = Path(..., description="User id")):
    """Remove a user permanently; a second delete returns 404."""
    result = _delete(ctx, DeleteUserRequest(user_id=user_id))
    if not result.success:
        return handle_error(result)
    return Response(status_code=204)
