"""Power budgeting for a PC build.

Estimates the build's draw from component TDP specs (or a name-based
fallback per category) and maps it to a standard PSU size.
"""

from __future__ import annotations

import math
import re
from collections.abc import Iterable

from ..catalog.specifications import normalize_specifications
from ..common.models import Component

# (upper bound in watts, inclusive) -> PSU tier
PSU_TIERS: list[tuple[int, str]] = [
    (300, "450W"),
    (400, "550W"),
    (500, "650W"),
    (650, "750W"),
    (800, "850W"),
]
PSU_TIER_MAX = "1000W+"
PSU_TIER_NONE = "N/A"

POWER_OVERHEAD = 1.1

# First matching name fragment wins; the last entry is the category default.
_CPU_DRAW = [
    ("i9", 125), ("i7", 95), ("i5", 65), ("i3", 50),
    ("ryzen 9", 105), ("ryzen 7", 95), ("ryzen 5", 65), ("ryzen 3", 45),
    ("", 75),
]
_GPU_DRAW = [
    ("rtx 40", 320), ("rtx 30", 260), ("rtx 20", 200), ("gtx 16", 120),
    ("rx 7", 300), ("rx 6", 230),
    ("", 150),
]
_COOLING_DRAW = [("aio", 15), ("", 5)]
_FIXED_DRAW = {"motherboard": 50, "ram": 10, "storage": 10}

_WATTAGE_RE = re.compile(r"(\d+)\s*w", re.IGNORECASE)
_NUMBER_RE = re.compile(r"(\d+)")


def recommended_psu_wattage(total_watts: float) -> str:
    """Pick the PSU tier for an estimated draw.

    >>> recommended_psu_wattage(300)
    '450W'
    >>> recommended_psu_wattage(301)
    '550W'
    """
    if total_watts <= 0:
        return PSU_TIER_NONE
    for upper_bound, tier in PSU_TIERS:
        if total_watts <= upper_bound:
            return tier
    return PSU_TIER_MAX


def extract_wattage(text: str) -> int:
    """First '<n>W' in a PSU name or spec value, 0 if none."""
    match = _WATTAGE_RE.search(text or "")
    return int(match.group(1)) if match else 0


def _lookup(table: list[tuple[str, int]], name: str) -> int:
    for fragment, watts in table:
        if fragment in name:
            return watts
    return 0


def component_power_draw(component: Component) -> int:
    """Estimated draw of a single component in watts (no overhead)."""
    tdp = normalize_specifications(component.specifications).get("tdp")
    if tdp:
        match = _NUMBER_RE.search(tdp)
        if match:
            return int(match.group(1))

    name = component.name.lower()
    category = component.category_id.lower()
    if category == "cpu":
        return _lookup(_CPU_DRAW, name)
    if category == "gpu":
        return _lookup(_GPU_DRAW, name)
    if category == "cooling":
        return _lookup(_COOLING_DRAW, name)
    return _FIXED_DRAW.get(category, 0)


def estimate_power_draw(components: Iterable[Component]) -> int:
    """Total build draw in watts, including 10% overhead, rounded up."""
    total = sum(component_power_draw(c) for c in components)
    # round() absorbs float error: 100 * 1.1 == 110.00000000000001
    return math.ceil(round(total * POWER_OVERHEAD, 6))
