"""Password strength scoring.

Five independent checks, one point each. A password is accepted at
registration and reset once it scores 3 or more.
"""

from __future__ import annotations

import re

from ..common.models import PasswordLevel
from .models import PasswordStrengthResult

MIN_LENGTH = 8
VALID_SCORE = 3
SPECIAL_CHARACTERS = '!@#$%^&*(),.?":{}|<>'

_REQUIREMENTS: dict[str, re.Pattern[str]] = {
    "min_length": re.compile(rf"^.{{{MIN_LENGTH},}}$", re.DOTALL),
    "lowercase": re.compile(r"[a-z]"),
    "uppercase": re.compile(r"[A-Z]"),
    "digit": re.compile(r"\d"),
    "special": re.compile(f"[{re.escape(SPECIAL_CHARACTERS)}]"),
}


def _level_for(score: int) -> PasswordLevel:
    if score <= 2:
        return PasswordLevel.WEAK
    if score == 3:
        return PasswordLevel.FAIR
    if score == 4:
        return PasswordLevel.GOOD
    return PasswordLevel.STRONG


def evaluate_password_strength(password: str) -> PasswordStrengthResult:
    """Score a password against the five requirements.

    An empty password is reported as valid and is not scored; the form
    layer is expected to reject blank input before it gets here.

    >>> evaluate_password_strength("Abcd123!").level
    <PasswordLevel.STRONG: 'strong'>
    """
    requirements = {
        name: bool(pattern.search(password))
        for name, pattern in _REQUIREMENTS.items()
    }
    score = sum(requirements.values())

    if not password:
        return PasswordStrengthResult(
            score=0,
            level=_level_for(0),
            requirements=requirements,
            is_valid=True,
        )

    return PasswordStrengthResult(
        score=score,
        level=_level_for(score),
        requirements=requirements,
        is_valid=score >= VALID_SCORE,
    )
