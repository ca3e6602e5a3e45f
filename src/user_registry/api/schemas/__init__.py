"""API schemas package.

Manifesto:
    Pydantic schemas define the API contract.  Centralising them
    here keeps routers and ops decoupled from serialisation details.
"""

from user_registry.api.schemas.users import UserInput, UserSchema

__all__ = [
    "UserInput",
    "UserSchema",
]
