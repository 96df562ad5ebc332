"""Component catalog loaded from YAML.

Config source: config/components.yaml (``components:`` list). Each entry
maps onto :class:`~src.common.models.Component`; ``specifications`` may be
a mapping or a JSON string.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from ..common.config import settings
from ..common.models import Component
from .specifications import parse_specifications

logger = logging.getLogger(__name__)


class ComponentCatalog:
    """Read-only component lookup.

    Usage:
        catalog = ComponentCatalog()
        cpu = catalog.get("cpu-ryzen-7-7800x3d")
        gpus = catalog.by_category("gpu")
    """

    def __init__(self, catalog_path: str | Path | None = None) -> None:
        self._catalog_path = (
            Path(catalog_path) if catalog_path
            else settings.catalog.catalog_abs_path
        )
        self._components: dict[str, Component] | None = None

    def _load(self) -> dict[str, Component]:
        """Load and cache the catalog YAML."""
        if self._components is None:
            with open(self._catalog_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}

            components: dict[str, Component] = {}
            for entry in data.get("components", []):
                entry = dict(entry)
                entry["specifications"] = parse_specifications(entry.get("specifications"))
                component = Component(**entry)
                components[component.component_id] = component

            logger.info(
                "Loaded %d components from %s", len(components), self._catalog_path
            )
            self._components = components
        return self._components

    def __len__(self) -> int:
        return len(self._load())

    def all(self) -> list[Component]:
        return list(self._load().values())

    def get(self, component_id: str) -> Component:
        """Return a component by id. Raises KeyError if unknown."""
        components = self._load()
        if component_id not in components:
            raise KeyError(f"Component {component_id} not found in catalog")
        return components[component_id]

    def by_category(self, category: str) -> list[Component]:
        category = category.lower()
        return [c for c in self._load().values() if c.category_id.lower() == category]

    def search(self, query: str) -> list[Component]:
        """Case-insensitive search over name and description."""
        query = query.lower().strip()
        if not query:
            return self.all()
        return [
            c for c in self._load().values()
            if query in c.name.lower() or query in c.description.lower()
        ]
