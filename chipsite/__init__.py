"""chipsite: data collections and template helpers for a chip catalogue site."""

__version__ = "0.3.0"

from .config import SiteConfig, configure, get_config  # noqa: E402
from .data import enrich_all, get_chips, group_specs, map_field  # noqa: E402
from .site import SiteRegistry, configure_site  # noqa: E402

__all__ = [
    "SiteConfig",
    "SiteRegistry",
    "configure",
    "configure_site",
    "enrich_all",
    "get_chips",
    "get_config",
    "group_specs",
    "map_field",
]
