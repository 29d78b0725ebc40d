"""Data loading and transforms for site collections."""

from .chips import (
    ChipSource,
    enrich_all,
    enrich_chip,
    gather_chips,
    get_chips,
    map_field,
)
from .grouping import group_specs
from .loader import load_sequence, load_yaml

__all__ = [
    "ChipSource",
    "enrich_all",
    "enrich_chip",
    "gather_chips",
    "get_chips",
    "group_specs",
    "load_sequence",
    "load_yaml",
    "map_field",
]
