"""Data models for account password checks."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..common.models import PasswordLevel


@dataclass
class PasswordStrengthResult:
    """Outcome of scoring a candidate password.

    ``requirements`` keys: min_length, lowercase, uppercase, digit, special.
    """

    score: int  # 0..5
    level: PasswordLevel
    requirements: dict[str, bool] = field(default_factory=dict)
    is_valid: bool = False

    @property
    def missing(self) -> list[str]:
        return [name for name, met in self.requirements.items() if not met]

    def to_dict(self) -> dict:
        return {
            "score": self.score,
            "level": self.level.value,
            "requirements": dict(self.requirements),
            "is_valid": self.is_valid,
        }
