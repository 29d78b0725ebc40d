"""Spec group models and YAML I/O for chipsite.

A SpecGroupDefinition describes how a chip's flat ``specs`` mapping is laid
out for display: an ordered list of named groups, each with an ordered list
of fields. It is loaded once per build from ``specs.yml``.

This module contains:
- Definition: SpecField, SpecGroup, SpecGroupDefinition
- Output: GroupedField, GroupedSpecGroup
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


# =============================================================================
# Group Definition
# =============================================================================


class SpecField(BaseModel):
    """A single spec field: the key in a chip's specs and its display label."""

    key: str | int
    label: Any  # Rendered as written in specs.yml


class SpecGroup(BaseModel):
    """A named, ordered bucket of related spec fields."""

    name: Any
    fields: list[SpecField] = Field(default_factory=list)


class SpecGroupDefinition(BaseModel):
    """Ordered group layout shared by every chip in a build."""

    groups: list[SpecGroup] = Field(default_factory=list)

    @classmethod
    def from_data(cls, data: Any) -> "SpecGroupDefinition":
        """Build a definition from decoded YAML.

        Anything other than a mapping with a ``groups`` sequence yields an
        empty definition.
        """
        if not isinstance(data, dict) or not isinstance(data.get("groups"), list):
            return cls()
        return cls.model_validate({"groups": data["groups"]})

    @classmethod
    def from_yaml(cls, path: Path | str) -> "SpecGroupDefinition":
        """Load a definition from a YAML file."""
        path = Path(path)

        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)

        return cls.from_data(data)


# =============================================================================
# Grouped Output
# =============================================================================


class GroupedField(BaseModel):
    """A populated field of a chip's grouped specs."""

    key: str | int
    label: Any
    value: Any


class GroupedSpecGroup(BaseModel):
    """A group of a chip's grouped specs with at least one populated field."""

    name: Any
    fields: list[GroupedField]
