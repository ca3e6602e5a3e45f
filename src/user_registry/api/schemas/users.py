"""
User wire schemas.

JSON uses camelCase (``userName``, ``userAge``); Python code uses snake_case
through field aliases.  The input schema is permissive about *presence*:
a missing field falls back to ``None`` / ``0`` and is then rejected by the
store's validation with the usual 400.  It is strict about *type*: a
string, float or boolean age (or a non-string name) is never coerced and
fails request validation instead.

Example:
    {"id": 1, "userName": "Alice", "userAge": 30}
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from user_registry.core.models import User


class UserInput(BaseModel):
    """Body of ``POST /users`` and ``PUT /users/{id}``.

    A client-supplied ``id`` is ignored.
    """

    model_config = ConfigDict(populate_by_name=True, strict=True)

    user_name: str | None = Field(default=None, alias="userName", description="Display name")
    user_age: int = Field(default=0, alias="userAge", description="Age in years, must be > 0")


class UserSchema(BaseModel):
    """A stored user as returned to clients."""

    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(description="Store-assigned identifier")
    user_name: str = Field(alias="userName", description="Display name")
    user_age: int = Field(alias="userAge", description="Age in years")

    @classmethod
    def from_user(cls, user: User) -> UserSchema:
        return cls(id=user.id, user_name=user.user_name, user_age=user.user_age)
