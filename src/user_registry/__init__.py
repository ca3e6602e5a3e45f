"""
user-registry - in-memory User CRUD service behind a fixed middleware pipeline.

Layers:
- ``user_registry.core``: models, store, errors, settings, logging
- ``user_registry.ops``: typed operations returning ``OperationResult``
- ``user_registry.api``: FastAPI transport (middleware, routers, schemas)
- ``user_registry.cli``: Typer command line (``user-registry serve``)
"""

__version__ = "0.1.0"
