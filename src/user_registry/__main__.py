"""``python -m user_registry`` runs the CLI."""

from user_registry.cli.app import app

if __name__ == "__main__":
    app()
