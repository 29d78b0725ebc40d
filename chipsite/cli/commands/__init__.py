"""CLI commands for chipsite."""

from . import (
    chips,
    collections,
    config_cmd,
    validate,
)

__all__ = [
    "chips",
    "collections",
    "config_cmd",
    "validate",
]
