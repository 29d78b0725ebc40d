"""YAML data file loading.

Data files live in the site's data directory. A file that is missing or
cannot be parsed is logged and replaced with an empty list so a single bad
file never aborts the build.
"""

import logging
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)


def load_yaml(filename: str, data_dir: Path | str) -> Any:
    """Load ``<data_dir>/<filename>``, or ``[]`` if it can't be read."""
    path = Path(data_dir) / filename
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as exc:
        logger.error("Error loading YAML: %s (%s)", filename, exc)
        return []

    if data is None:
        logger.debug("Empty YAML document: %s", filename)
        return []
    return data


def load_sequence(filename: str, data_dir: Path | str) -> list:
    """Load a data file expected to hold a sequence of records."""
    data = load_yaml(filename, data_dir)
    if not isinstance(data, list):
        logger.warning(
            "Expected a list in %s, got %s; using an empty list",
            filename,
            type(data).__name__,
        )
        return []
    return data
