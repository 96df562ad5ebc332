"""Data models for checkout: promo codes and order totals."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal

CENT = Decimal("0.01")


def to_cents(amount: Decimal) -> Decimal:
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)


@dataclass
class PromoCode:
    """Percentage discount code.

    Maps to the admin promo-code form: { code, discount_percentage,
    max_discount_amount, min_order_value, max_usage, expires_at, is_active }
    """

    code: str
    discount_percentage: int  # 1..100
    expires_at: datetime
    max_discount_amount: Decimal | None = None
    min_order_value: Decimal | None = None
    max_usage: int | None = None
    usage_count: int = 0
    is_active: bool = True
    description: str = ""

    def __post_init__(self) -> None:
        if not 3 <= len(self.code) <= 20:
            raise ValueError("Promo code must be 3-20 characters")
        if not 1 <= self.discount_percentage <= 100:
            raise ValueError("discount_percentage must be between 1 and 100")

    def check(self, subtotal: Decimal, now: datetime | None = None) -> None:
        """Raise ValueError if the code cannot be applied to this order.

        A naive `now` is read in the timezone of `expires_at`, and a naive
        `expires_at` in the timezone of `now`.
        """
        now = now or datetime.now(self.expires_at.tzinfo)
        if now.tzinfo is None and self.expires_at.tzinfo is not None:
            now = now.replace(tzinfo=self.expires_at.tzinfo)
        elif now.tzinfo is not None and self.expires_at.tzinfo is None:
            now = now.replace(tzinfo=None)
        if not self.is_active:
            raise ValueError(f"Promo code {self.code} is not active")
        if now >= self.expires_at:
            raise ValueError(f"Promo code {self.code} has expired")
        if self.max_usage is not None and self.usage_count >= self.max_usage:
            raise ValueError(f"Promo code {self.code} has reached its usage limit")
        if self.min_order_value is not None and subtotal < self.min_order_value:
            raise ValueError(
                f"Promo code {self.code} requires a minimum order of {self.min_order_value}"
            )

    def discount_for(self, subtotal: Decimal) -> Decimal:
        discount = subtotal * Decimal(self.discount_percentage) / Decimal(100)
        if self.max_discount_amount is not None:
            discount = min(discount, self.max_discount_amount)
        return to_cents(discount)


@dataclass
class OrderTotals:
    """Money breakdown shown at checkout and stored with the order."""

    subtotal: Decimal
    discount: Decimal
    shipping_cost: Decimal
    tax_amount: Decimal
    total: Decimal
    promo_code: str | None = None

    def to_dict(self) -> dict:
        return {
            "subtotal": str(self.subtotal),
            "discount": str(self.discount),
            "shipping_cost": str(self.shipping_cost),
            "tax_amount": str(self.tax_amount),
            "total": str(self.total),
            "promo_code": self.promo_code,
        }
