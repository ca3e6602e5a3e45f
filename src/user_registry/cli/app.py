"""
Root Typer application for the user-registry CLI.
"""

from __future__ import annotations

import typer
from typer import Typer

from user_registry import __version__
from user_registry.cli.serve import serve

app = Typer(
    name="user-registry",
    help="user-registry: in-memory User CRUD service.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


# ── Version callback ─────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"user-registry {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool | None = typer.Option(  # noqa: UP007
        None,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """user-registry CLI: run the API server."""


app.command("serve")(serve)
