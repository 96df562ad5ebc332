"""Specification key normalization.

Components arrive with free-form specification maps ("CPU Socket",
"Memory Size", "Max Power", ...). Filters, compatibility checks and the
product page all work on a canonical key vocabulary instead.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping

logger = logging.getLogger(__name__)

# Alias -> canonical key. Order matters: the first alias the key equals or
# contains wins, so longer aliases precede the shorter ones they contain.
SPEC_KEY_SYNONYMS: dict[str, str] = {
    "model": "model",
    "manufacturer": "manufacturer",
    "brand": "manufacturer",
    "vendor": "manufacturer",
    "socket": "socket",
    "core count": "cores",
    "cores": "cores",
    "thread": "threads",
    "boost clock": "boost_clock",
    "turbo": "boost_clock",
    "base clock": "base_clock",
    "core clock": "core_clock",
    "integrated graphics": "integrated_graphics",
    "chipset": "chipset",
    "tdp": "tdp",
    "thermal design power": "tdp",
    "power consumption": "tdp",
    "power connector": "power_connectors",
    "wattage": "wattage",
    "power": "wattage",
    "efficiency": "efficiency_rating",
    "80 plus": "efficiency_rating",
    "modular": "modular",
    "vram": "vram",
    "video memory": "vram",
    "memory type": "memory_type",
    "memory speed": "speed",
    "memory size": "capacity",
    "capacity": "capacity",
    "memory": "capacity",
    "form factor": "form_factor",
    "read speed": "read_speed",
    "write speed": "write_speed",
    "frequency": "speed",
    "speed": "speed",
    "interface": "interface",
    "length": "length",
    "switch": "switch_type",
    "layout": "layout",
    "connection": "connection",
    "wireless": "connection",
    "rgb": "rgb",
    "lighting": "rgb",
}


def normalize_spec_key(key: str) -> str:
    """Map a free-form specification key to its canonical name.

    Unknown keys come back lowercased and trimmed.

    >>> normalize_spec_key("Processor Model")
    'model'
    >>> normalize_spec_key("unknown-field")
    'unknown-field'
    """
    normalized = key.lower().strip()
    for alias, canonical in SPEC_KEY_SYNONYMS.items():
        if normalized == alias or alias in normalized:
            return canonical
    return normalized


def parse_specifications(raw: object) -> dict[str, str]:
    """Coerce a stored specification payload into a str -> str dict.

    Accepts None, a mapping, or a JSON object string. Anything else
    (including malformed JSON) yields an empty dict.
    """
    if not raw:
        return {}

    if isinstance(raw, str):
        try:
            parsed = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Could not parse specifications JSON: %.80s", raw)
            return {}
        if not isinstance(parsed, dict):
            logger.warning("Specifications JSON is not an object: %.80s", raw)
            return {}
        return {str(k): str(v) for k, v in parsed.items()}

    if isinstance(raw, Mapping):
        return {str(k): str(v) for k, v in raw.items()}

    logger.warning("Unsupported specifications type: %s", type(raw).__name__)
    return {}


def normalize_specifications(specs: Mapping[str, str]) -> dict[str, str]:
    """Rename every key to its canonical form. First key wins on collision."""
    normalized: dict[str, str] = {}
    for key, value in specs.items():
        canonical = normalize_spec_key(key)
        if canonical in normalized:
            logger.debug("Dropping duplicate spec '%s' (already have '%s')", key, canonical)
            continue
        normalized[canonical] = value
    return normalized
