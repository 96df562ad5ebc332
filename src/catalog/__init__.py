"""Catalog Module - Component lookup and specification normalization."""

from .loader import ComponentCatalog
from .specifications import (
    SPEC_KEY_SYNONYMS,
    normalize_spec_key,
    normalize_specifications,
    parse_specifications,
)

__all__ = [
    "ComponentCatalog",
    "SPEC_KEY_SYNONYMS",
    "normalize_spec_key",
    "normalize_specifications",
    "parse_specifications",
]
