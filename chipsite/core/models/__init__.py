"""Pydantic models for chipsite."""

from .specs import (
    GroupedField,
    GroupedSpecGroup,
    SpecField,
    SpecGroup,
    SpecGroupDefinition,
)

__all__ = [
    "GroupedField",
    "GroupedSpecGroup",
    "SpecField",
    "SpecGroup",
    "SpecGroupDefinition",
]
