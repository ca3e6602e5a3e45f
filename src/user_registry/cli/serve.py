"""
CLI: ``user-registry serve`` starts the API server.

uvicorn builds the app through :func:`app_factory`.  With ``--reload`` that
happens in a child process, so the resolved log options travel to it as
``USER_REGISTRY_*`` environment variables and the factory configures
structlog from settings again.
"""

from __future__ import annotations

import os

import typer
import uvicorn
from fastapi import FastAPI

from user_registry.api.app import create_app
from user_registry.api.settings import UserRegistryAPISettings
from user_registry.cli.utils import console
from user_registry.core.logging import configure_logging

SERVICE_NAME = "user-registry"


def _configure_from_settings(settings: UserRegistryAPISettings) -> None:
    configure_logging(
        level=settings.log_level.upper(),
        json_format=settings.json_logs,
        service=SERVICE_NAME,
    )


def app_factory() -> FastAPI:
    """uvicorn factory: configure logging in the serving process, then build the app."""
    settings = UserRegistryAPISettings()
    _configure_from_settings(settings)
    return create_app(settings=settings)


def serve(
    host: str | None = typer.Option(None, "--host", "-h", help="Bind address"),
    port: int | None = typer.Option(None, "--port", "-p", help="Bind port"),
    reload: bool = typer.Option(False, "--reload", help="Auto-reload on changes"),
    log_level: str | None = typer.Option(None, "--log-level", help="DEBUG, INFO, WARNING, ERROR"),
    json_logs: bool | None = typer.Option(
        None,
        "--json-logs/--console-logs",
        help="Log renderer; defaults to JSON when stdout is not a TTY",
    ),
) -> None:
    """Start the user-registry REST API server.

    Unset options fall back to ``USER_REGISTRY_*`` settings.
    """
    if log_level is not None:
        os.environ["USER_REGISTRY_LOG_LEVEL"] = log_level.upper()
    if json_logs is not None:
        os.environ["USER_REGISTRY_JSON_LOGS"] = "true" if json_logs else "false"

    settings = UserRegistryAPISettings()
    host = host or settings.host
    port = port or settings.port

    _configure_from_settings(settings)

    console.print(f"[bold green]Starting user-registry API[/bold green] on {host}:{port}")
    uvicorn.run(
        "user_registry.cli.serve:app_factory",
        factory=True,
        host=host,
        port=port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )
