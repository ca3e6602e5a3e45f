"""
User record and its validation rules.

The store owns every :class:`User`; callers only ever see copies.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from user_registry.core.errors import ValidationError

INVALID_USER_MESSAGE = "Invalid user data."


@dataclass(slots=True)
class User:
    """A single registered user.

    Attributes:
        id: Store-assigned identifier, immutable once issued.
        user_name: Display name, non-empty after trimming.
        user_age: Age in years, strictly positive.
    """

    id: int
    user_name: str
    user_age: int


def validate_user_fields(user_name: Any, user_age: Any) -> None:
    """Raise :class:`ValidationError` unless *user_name* and *user_age* are acceptable.

    A name must be a string that is not empty or whitespace-only; an age must
    be an integer greater than zero.  ``bool`` is rejected as an age.
    """
    if not isinstance(user_name, str) or not user_name.strip():
        raise ValidationError(INVALID_USER_MESSAGE, field="userName", value=user_name)
    if isinstance(user_age, bool) or not isinstance(user_age, int) or user_age <= 0:
        raise ValidationError(INVALID_USER_MESSAGE, field="userAge", value=user_age)
