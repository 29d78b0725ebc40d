"""Configuration management for chipsite.

Config resolution order (highest priority first):
1. Programmatic (SiteConfig constructed in code)
2. Environment variables (CHIPSITE_ROOT, CHIPSITE_CHIP_SOURCES, ...)
3. Config file (./chipsite.json in the working directory)
4. Hardcoded defaults

The directory layout handed to the template engine is fixed (see SITE_DIRS)
and is not configurable.
"""

import json
import logging
import os
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any


logger = logging.getLogger(__name__)


CONFIG_FILE_NAME = "chipsite.json"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


# =============================================================================
# Directory contract
# =============================================================================


@dataclass(frozen=True)
class SiteDirs:
    """Directories the template engine works from, relative to the root."""

    input: str = "src"
    includes: str = "_includes"
    layouts: str = "_layouts"
    data: str = "_data"
    output: str = "_site"


SITE_DIRS = SiteDirs()


# =============================================================================
# Config dataclasses
# =============================================================================


@dataclass
class ChipsConfig:
    """Chip data files.

    sources are read in order and concatenated. chips-s.yml and chips-r.yml
    exist upstream but are not published yet.
    """

    sources: list[str] = field(
        default_factory=lambda: ["chips-m.yml", "chips-a.yml"]
    )
    specs_file: str = "specs.yml"


@dataclass
class DataConfig:
    """Other data files exposed as collections."""

    series_file: str = "series.yml"
    devices_file: str = "devices.yml"


@dataclass
class DebugConfig:
    trace_lookups: bool = True  # Log getChips requests and results at DEBUG


@dataclass
class SiteConfig:
    """Top-level chipsite configuration.

    Examples:
        # Package use
        config = SiteConfig(root=Path("/srv/site"))

        # CLI use: loads ./chipsite.json and env vars
        config = SiteConfig.load()
    """

    root: Path = field(default_factory=Path.cwd)
    chips: ChipsConfig = field(default_factory=ChipsConfig)
    data: DataConfig = field(default_factory=DataConfig)
    debug: DebugConfig = field(default_factory=DebugConfig)

    @classmethod
    def load(cls, config_file: Path | None = None) -> "SiteConfig":
        """Load config from file + env vars.

        Priority: env var values > chipsite.json values > defaults.
        """
        config = cls()
        config_file = config_file or Path.cwd() / CONFIG_FILE_NAME

        # Layer 1: Load from config file if it exists
        if config_file.exists():
            try:
                with open(config_file, encoding="utf-8") as f:
                    data = json.load(f)
                _apply_dict(config, data)
            except (json.JSONDecodeError, OSError, TypeError, ValueError) as exc:
                logger.warning("Failed to load config from %s: %s", config_file, exc)

        # Layer 2: Env var overrides
        if val := os.environ.get("CHIPSITE_ROOT"):
            config.root = Path(val)
        if val := os.environ.get("CHIPSITE_CHIP_SOURCES"):
            config.chips.sources = _split_list(val)
        if val := os.environ.get("CHIPSITE_SPECS_FILE"):
            config.chips.specs_file = val
        if val := os.environ.get("CHIPSITE_TRACE_LOOKUPS"):
            parsed = _parse_bool(val)
            if parsed is None:
                logger.warning("Invalid CHIPSITE_TRACE_LOOKUPS=%r, ignoring", val)
            else:
                config.debug.trace_lookups = parsed

        return config

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for display."""
        return {
            "root": str(self.root),
            "dirs": asdict(SITE_DIRS),
            "chips": asdict(self.chips),
            "data": asdict(self.data),
            "debug": asdict(self.debug),
        }

    # ── Path resolution ──

    @property
    def dirs(self) -> SiteDirs:
        return SITE_DIRS

    @property
    def input_dir(self) -> Path:
        return self.root / SITE_DIRS.input

    @property
    def data_dir(self) -> Path:
        return self.input_dir / SITE_DIRS.data

    @property
    def includes_dir(self) -> Path:
        return self.input_dir / SITE_DIRS.includes

    @property
    def layouts_dir(self) -> Path:
        return self.input_dir / SITE_DIRS.layouts

    @property
    def output_dir(self) -> Path:
        return self.root / SITE_DIRS.output


# =============================================================================
# Config dict application
# =============================================================================


def _split_list(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


def _parse_bool(value: Any) -> bool | None:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    return None


def _apply_dict(config: SiteConfig, data: dict) -> None:
    """Apply a dict of values onto a SiteConfig."""
    if not isinstance(data, dict):
        raise ValueError(f"expected a JSON object, got {type(data).__name__}")

    if "root" in data:
        config.root = Path(data["root"])
    if "chips" in data and isinstance(data["chips"], dict):
        chips = data["chips"]
        if "sources" in chips:
            sources = chips["sources"]
            if isinstance(sources, str):
                sources = _split_list(sources)
            config.chips.sources = [str(s) for s in sources]
        if "specs_file" in chips:
            config.chips.specs_file = str(chips["specs_file"])
    if "data" in data and isinstance(data["data"], dict):
        for k, v in data["data"].items():
            if hasattr(config.data, k):
                setattr(config.data, k, str(v))
    if "debug" in data and isinstance(data["debug"], dict):
        if "trace_lookups" in data["debug"]:
            parsed = _parse_bool(data["debug"]["trace_lookups"])
            if parsed is not None:
                config.debug.trace_lookups = parsed


# =============================================================================
# Global config singleton
# =============================================================================

_config: SiteConfig | None = None


def get_config() -> SiteConfig:
    """Get the global SiteConfig instance.

    First call loads from file + env vars. Subsequent calls return cached instance.
    Use configure() to replace the global config programmatically.
    """
    global _config
    if _config is None:
        _config = SiteConfig.load()
    return _config


def configure(config: SiteConfig) -> None:
    """Set the global SiteConfig programmatically."""
    global _config
    _config = config


def reset_config() -> None:
    """Reset the global config (forces reload on next get_config())."""
    global _config
    _config = None
