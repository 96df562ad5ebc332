"""Configurator Module - Build pricing, power budgeting and compatibility."""

from .builder import ConfigurationBuilder
from .compatibility import check_form_factor_compatibility, find_compatibility_issues
from .models import BuildSummary, CompatibilityIssue
from .power import estimate_power_draw, extract_wattage, recommended_psu_wattage

__all__ = [
    "BuildSummary",
    "CompatibilityIssue",
    "ConfigurationBuilder",
    "check_form_factor_compatibility",
    "estimate_power_draw",
    "extract_wattage",
    "find_compatibility_issues",
    "recommended_psu_wattage",
]
