"""Checkout Module - Promo codes and order totals."""

from .models import OrderTotals, PromoCode
from .totals import calculate_order_totals, cart_subtotal

__all__ = [
    "OrderTotals",
    "PromoCode",
    "calculate_order_totals",
    "cart_subtotal",
]
