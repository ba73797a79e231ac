"""Command-line entry points."""

from .app import app

__all__ = ["app"]
