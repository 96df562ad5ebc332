"""Configuration builder.

Holds one selected component per category and summarizes the build:
exact price, estimated power draw, PSU tier and compatibility issues.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from decimal import Decimal

from ..common.models import Component
from .compatibility import find_compatibility_issues
from .models import BuildSummary
from .power import estimate_power_draw, recommended_psu_wattage

logger = logging.getLogger(__name__)


class ConfigurationBuilder:
    """Assemble a PC configuration one component at a time.

    Usage:
        builder = ConfigurationBuilder()
        builder.select(cpu)
        builder.select(gpu)
        summary = builder.summarize()
        print(summary.total_price, summary.recommended_psu)
    """

    def __init__(self, components: Iterable[Component] | None = None) -> None:
        self._selected: dict[str, Component] = {}
        for component in components or []:
            self.select(component)

    @property
    def selected(self) -> dict[str, Component]:
        return dict(self._selected)

    def select(self, component: Component) -> Component | None:
        """Select a component, replacing any previous pick in its category.

        Returns:
            The replaced component, if any.

        Raises:
            ValueError: If the component is out of stock.
        """
        if not component.in_stock:
            raise ValueError(f"Component {component.component_id} is out of stock")

        category = component.category_id.lower()
        previous = self._selected.get(category)
        self._selected[category] = component
        if previous is not None:
            logger.debug(
                "Replaced %s: %s -> %s", category, previous.name, component.name
            )
        return previous

    def remove(self, category: str) -> Component | None:
        return self._selected.pop(category.lower(), None)

    def clear(self) -> None:
        self._selected.clear()

    def total_price(self) -> Decimal:
        return sum((c.price for c in self._selected.values()), Decimal("0"))

    def total_power(self) -> int:
        return estimate_power_draw(self._selected.values())

    def summarize(self) -> BuildSummary:
        total_watts = self.total_power()
        summary = BuildSummary(
            components=self.selected,
            total_price=self.total_price(),
            total_power_watts=total_watts,
            recommended_psu=recommended_psu_wattage(total_watts),
            compatibility_issues=find_compatibility_issues(self._selected, total_watts),
        )

        logger.info(
            "Build: %d components, %s EUR, %dW (PSU %s), %d issues",
            len(summary.components),
            summary.total_price,
            summary.total_power_watts,
            summary.recommended_psu,
            len(summary.compatibility_issues),
        )
        return summary
