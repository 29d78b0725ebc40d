"""Command-line interface for chipsite."""

from .app import app

__all__ = ["app"]
