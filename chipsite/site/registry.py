"""Registration surface between site data and the Jinja2 environment.

A SiteRegistry collects the collections, template globals, filters and
passthrough paths a site declares, then hands them to the template engine.
"""

import logging
from collections.abc import Callable
from typing import Any

from jinja2 import ChoiceLoader, Environment, FileSystemLoader

from ..config import SiteConfig

logger = logging.getLogger(__name__)

CollectionFn = Callable[[], list]


class SiteRegistry:
    """Named collections, globals and filters for one site.

    Registering a name twice replaces the earlier entry.
    """

    def __init__(self):
        self.collections: dict[str, CollectionFn] = {}
        self.globals: dict[str, Callable[..., Any]] = {}
        self.filters: dict[str, Callable[..., Any]] = {}
        self.passthrough: list[str] = []

    def add_collection(self, name: str, fn: CollectionFn) -> None:
        if name in self.collections:
            logger.debug("Replacing collection %s", name)
        self.collections[name] = fn

    def add_global(self, name: str, fn: Callable[..., Any]) -> None:
        if name in self.globals:
            logger.debug("Replacing global %s", name)
        self.globals[name] = fn

    def add_filter(self, name: str, fn: Callable[..., Any]) -> None:
        if name in self.filters:
            logger.debug("Replacing filter %s", name)
        self.filters[name] = fn

    def add_passthrough_copy(self, path: str) -> None:
        if path not in self.passthrough:
            self.passthrough.append(path)

    def build_collections(self) -> dict[str, list]:
        """Materialize every collection once, in registration order.

        A collection that raises is logged and published as an empty list.
        """
        built: dict[str, list] = {}
        for name, fn in self.collections.items():
            try:
                items = fn()
            except Exception:
                logger.exception("Collection %s failed; publishing it empty", name)
                items = []
            built[name] = items if items is not None else []
            logger.info("Collection %s: %d item(s)", name, len(built[name]))
        return built

    def install(self, env: Environment, collections: dict[str, list]) -> Environment:
        """Bind globals, filters and built collections into ``env``."""
        env.filters.update(self.filters)
        env.globals.update(self.globals)
        env.globals["collections"] = collections
        return env

    def create_environment(
        self, config: SiteConfig, collections: dict[str, list] | None = None
    ) -> Environment:
        """Create a Jinja2 environment over the layouts and includes directories."""
        loader = ChoiceLoader(
            [
                FileSystemLoader(str(config.layouts_dir)),
                FileSystemLoader(str(config.includes_dir)),
            ]
        )
        env = Environment(loader=loader, autoescape=True)
        if collections is None:
            collections = self.build_collections()
        return self.install(env, collections)
