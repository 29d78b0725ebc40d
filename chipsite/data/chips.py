"""Chip records: gathering, enrichment and lookup.

Chip records are plain dicts decoded from YAML. They are pooled from an
ordered list of sources, enriched in place with a ``groupedSpecs`` entry, and
looked up by id while templates render.
"""

import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ..core.models import SpecGroup
from .grouping import group_specs
from .loader import load_sequence

logger = logging.getLogger(__name__)

GROUPED_SPECS_KEY = "groupedSpecs"


# =============================================================================
# Sources
# =============================================================================


@dataclass
class ChipSource:
    """A YAML file in the data directory holding a list of chip records."""

    filename: str
    data_dir: Path

    @property
    def name(self) -> str:
        return self.filename

    def load(self) -> list[dict[str, Any]]:
        records = load_sequence(self.filename, self.data_dir)
        chips = []
        for index, record in enumerate(records):
            if not isinstance(record, dict):
                logger.warning(
                    "Skipping non-mapping entry %d in %s", index, self.filename
                )
                continue
            chips.append(record)
        return chips


def gather_chips(sources: Iterable[ChipSource]) -> list[dict[str, Any]]:
    """Concatenate chips from every source, in source then record order.

    Ids are not deduplicated: the same id in two sources gives two entries.
    """
    pool: list[dict[str, Any]] = []
    for source in sources:
        chips = source.load()
        logger.debug("Loaded %d chip(s) from %s", len(chips), source.name)
        pool.extend(chips)
    return pool


# =============================================================================
# Enrichment
# =============================================================================


def enrich_chip(chip: dict[str, Any], groups: Sequence[SpecGroup]) -> dict[str, Any]:
    """Attach grouped specs to ``chip`` in place and return the same object."""
    specs = chip.get("specs")
    if specs is not None and not isinstance(specs, Mapping):
        logger.warning(
            "Chip %s has non-mapping specs (%s); showing no spec groups",
            chip.get("id"),
            type(specs).__name__,
        )
    chip[GROUPED_SPECS_KEY] = [
        group.model_dump() for group in group_specs(specs, groups)
    ]
    return chip


def enrich_all(
    chips: Iterable[dict[str, Any]], groups: Sequence[SpecGroup]
) -> list[dict[str, Any]]:
    return [enrich_chip(chip, groups) for chip in chips]


# =============================================================================
# Template Helpers
# =============================================================================


def _as_id_list(ids: Any) -> list:
    if ids is None:
        return []
    if isinstance(ids, (str, bytes)) or not isinstance(ids, Iterable):
        return [ids]
    return list(ids)


def get_chips(
    ids: Any,
    chips: Sequence[Mapping[str, Any]] | None,
    *,
    trace: logging.Logger | None = logger,
) -> list[Mapping[str, Any]]:
    """Return the chips matching ``ids``, grouped in request order.

    Every pool entry whose ``id`` equals a requested id is returned, in pool
    order, once per occurrence of that id in ``ids``. Unknown ids are skipped.
    Two debug records are written to ``trace``; pass None to disable them.
    """
    requested = _as_id_list(ids)
    pool = chips or []

    if trace is not None:
        try:
            trace.debug(
                "[getChips] called with ids=[%s] (chips available=%d)",
                ",".join(str(i) for i in requested),
                len(pool),
            )
        except Exception:
            pass  # Tracing must never break rendering

    found = [
        chip for chip_id in requested for chip in pool if chip.get("id") == chip_id
    ]

    if trace is not None:
        try:
            trace.debug(
                "[getChips] returning %d chip(s): [%s]",
                len(found),
                ",".join(str(chip.get("id")) for chip in found),
            )
        except Exception:
            pass

    return found


def map_field(items: Iterable[Any] | None, key: str) -> list[Any]:
    """Project ``key`` out of each item; missing keys map to None."""
    result = []
    for item in items or []:
        if isinstance(item, Mapping):
            result.append(item.get(key))
        else:
            result.append(getattr(item, key, None))
    return result
