"""Shared base settings for user-registry.

``RegistryBaseSettings`` holds the knobs every entry point needs (bind
address, debug flag, log level).  Transport-specific settings subclass it.

Manifesto:
    Configuration should be explicit, validated, and environment-driven.

    - **Pydantic validation:** Type-checked at startup, not runtime
    - **Environment-driven:** Reads ``USER_REGISTRY_*`` env vars and ``.env``
    - **Extra ignore:** Unknown env vars don't cause startup failures

Examples:
    >>> RegistryBaseSettings(port=8080).port
    8080
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class RegistryBaseSettings(BaseSettings):
    """Common settings shared across user-registry entry points.

    Fields
    ──────
    host         : Bind address for the HTTP server
    port         : Bind port for the HTTP server
    debug        : Enable debug mode (verbose logging)
    log_level    : Structlog log level
    """

    model_config = SettingsConfigDict(
        env_prefix="USER_REGISTRY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Network ──────────────────────────────────────────────────
    host: str = "0.0.0.0"
    port: int = 5000

    # ── Observability ────────────────────────────────────────────
    debug: bool = False
    log_level: str = "INFO"
