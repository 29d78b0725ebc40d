"""The chip catalogue's collections and template helpers."""

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from ..config import SiteConfig, get_config
from ..core.models import SpecGroupDefinition
from ..data.chips import ChipSource, enrich_all, gather_chips, get_chips, map_field
from ..data.chips import logger as lookup_logger
from ..data.loader import load_sequence, load_yaml
from .registry import SiteRegistry

logger = logging.getLogger(__name__)

CHIPS_COLLECTION = "chipsCollection"


def load_spec_groups(config: SiteConfig) -> SpecGroupDefinition:
    """Load the spec group layout; a bad specs file gives an empty layout."""
    data = load_yaml(config.chips.specs_file, config.data_dir)
    try:
        definition = SpecGroupDefinition.from_data(data)
    except ValidationError as exc:
        logger.error("Invalid spec groups in %s: %s", config.chips.specs_file, exc)
        return SpecGroupDefinition()

    if not definition.groups:
        logger.warning("No spec groups defined in %s", config.chips.specs_file)
    return definition


def chip_sources(config: SiteConfig) -> list[ChipSource]:
    return [ChipSource(filename, config.data_dir) for filename in config.chips.sources]


def configure_site(
    registry: SiteRegistry | None = None, config: SiteConfig | None = None
) -> SiteRegistry:
    """Register the site's collections, globals and filters on ``registry``."""
    registry = registry or SiteRegistry()
    config = config or get_config()
    trace = lookup_logger if config.debug.trace_lookups else None

    registry.add_passthrough_copy("assets")

    def series_collection() -> list:
        return load_sequence(config.data.series_file, config.data_dir)

    def chips_collection() -> list:
        definition = load_spec_groups(config)
        chips = gather_chips(chip_sources(config))
        return enrich_all(chips, definition.groups)

    def devices_collection() -> list:
        return load_sequence(config.data.devices_file, config.data_dir)

    registry.add_collection("seriesCollection", series_collection)
    registry.add_collection(CHIPS_COLLECTION, chips_collection)
    registry.add_collection("devicesCollection", devices_collection)

    # Return chip records for a list of ids, in the order of ids
    def chips_for_ids(ids: Any, collections: Mapping[str, list] | None) -> list:
        chips = (collections or {}).get(CHIPS_COLLECTION) or []
        return get_chips(ids, chips, trace=trace)

    registry.add_global("getChips", chips_for_ids)
    registry.add_filter("map", map_field)

    return registry
