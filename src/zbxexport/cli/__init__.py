"""CLI commands."""

from . import export, main

__all__ = ["export", "main"]
