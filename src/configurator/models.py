"""Data models for the PC configurator."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from ..common.models import Component

SEVERITY_ERROR = "error"
SEVERITY_WARNING = "warning"


@dataclass
class CompatibilityIssue:
    """A problem found between selected components."""

    code: str  # e.g. cpu_socket_mismatch, psu_low_headroom
    message: str
    severity: str = SEVERITY_ERROR  # error | warning

    def to_dict(self) -> dict:
        return {"code": self.code, "message": self.message, "severity": self.severity}


@dataclass
class BuildSummary:
    """Priced and power-budgeted snapshot of a configuration."""

    components: dict[str, Component] = field(default_factory=dict)
    total_price: Decimal = Decimal("0")
    total_power_watts: int = 0
    recommended_psu: str = "N/A"
    compatibility_issues: list[CompatibilityIssue] = field(default_factory=list)

    @property
    def is_compatible(self) -> bool:
        """True when no error-level issues were found (warnings allowed)."""
        return not any(i.severity == SEVERITY_ERROR for i in self.compatibility_issues)

    def to_dict(self) -> dict:
        return {
            "components": {
                category: {
                    "component_id": c.component_id,
                    "name": c.name,
                    "price": str(c.price),
                }
                for category, c in self.components.items()
            },
            "total_price": str(self.total_price),
            "total_power_watts": self.total_power_watts,
            "recommended_psu": self.recommended_psu,
            "is_compatible": self.is_compatible,
            "compatibility_issues": [i.to_dict() for i in self.compatibility_issues],
        }
