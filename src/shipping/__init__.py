"""Shipping Module - Delivery options and prices."""

from .calculator import calculate_shipping_rates, find_rate, is_capital, is_domestic

__all__ = [
    "calculate_shipping_rates",
    "find_rate",
    "is_capital",
    "is_domestic",
]
