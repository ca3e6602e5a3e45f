"""Command line interface for user-registry (``user-registry``)."""
