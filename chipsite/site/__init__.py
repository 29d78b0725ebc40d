"""Site wiring: registry and the catalogue's registrations."""

from .registry import SiteRegistry
from .catalogue import CHIPS_COLLECTION, configure_site, load_spec_groups

__all__ = ["CHIPS_COLLECTION", "SiteRegistry", "configure_site", "load_spec_groups"]
