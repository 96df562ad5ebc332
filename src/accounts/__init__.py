"""Accounts Module - Password strength scoring."""

from .models import PasswordStrengthResult
from .password import evaluate_password_strength

__all__ = [
    "PasswordStrengthResult",
    "evaluate_password_strength",
]
