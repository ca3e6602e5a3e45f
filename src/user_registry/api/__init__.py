"""
REST API layer for user-registry.

Provides a FastAPI application factory whose endpoints delegate to the
operations layer (``user_registry.ops``).  This package handles only HTTP
transport concerns: serialisation, authentication, logging and error
mapping.

Quick start::

    from user_registry.api import create_app

    app = create_app()  # ready for uvicorn
"""

from user_registry.api.app import create_app

__all__ = ["create_app"]
