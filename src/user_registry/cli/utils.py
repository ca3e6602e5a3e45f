"""
CLI utility helpers: shared rich console.
"""

from __future__ import annotations

from rich.console import Console

console = Console()
