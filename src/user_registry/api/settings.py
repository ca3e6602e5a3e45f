"""
API-specific settings.

Extends :class:`~user_registry.core.settings.RegistryBaseSettings` with the
parameters that govern the REST transport: OpenAPI metadata, the shared
bearer token and the log renderer.

All values can be overridden via environment variables prefixed with
``USER_REGISTRY_`` (``USER_REGISTRY_AUTH_TOKEN``, ``USER_REGISTRY_PORT``...).
"""

from __future__ import annotations

from pydantic import Field

from user_registry import __version__
from user_registry.core.settings import RegistryBaseSettings


class UserRegistryAPISettings(RegistryBaseSettings):
    """Settings for the user-registry REST API.

    Order of precedence (highest → lowest):
        1. Explicit keyword arguments
        2. Environment variables (``USER_REGISTRY_AUTH_TOKEN``, etc.)
        3. ``.env`` file
        4. Defaults below
    """

    # ── API ──────────────────────────────────────────────────────────────
    api_title: str = Field(default="user-registry API", description="Application title")
    api_version: str = Field(default=__version__, description="Application version string")

    # ── Auth ─────────────────────────────────────────────────────────────
    auth_token: str = Field(
        default="TestToken",
        description="Shared bearer token every request must present",
    )

    # ── Logging ──────────────────────────────────────────────────────────
    json_logs: bool | None = Field(
        default=None,
        description="JSON log output; None picks JSON when stdout is not a TTY",
    )
