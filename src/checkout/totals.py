"""Order total calculation.

Formula: total = subtotal - discount + shipping + VAT,
where VAT = (subtotal - discount) * tax_rate. Shipping is not taxed.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import datetime
from decimal import Decimal

from ..common.config import CheckoutSettings
from ..common.models import Component, ShippingRate
from .models import OrderTotals, PromoCode, to_cents

logger = logging.getLogger(__name__)


def cart_subtotal(items: Iterable[tuple[Component, int]]) -> Decimal:
    """Sum of price * quantity over (component, quantity) pairs."""
    subtotal = Decimal("0")
    for component, quantity in items:
        if quantity <= 0:
            raise ValueError(f"Quantity for {component.component_id} must be positive")
        if quantity > component.stock:
            raise ValueError(f"Insufficient stock for {component.name}")
        subtotal += component.price * quantity
    return to_cents(subtotal)


def calculate_order_totals(
    subtotal: Decimal,
    shipping_rate: ShippingRate | None = None,
    promo: PromoCode | None = None,
    now: datetime | None = None,
    tax_rate: Decimal | None = None,
) -> OrderTotals:
    """Compute discount, VAT and grand total for an order.

    Args:
        subtotal: Cart subtotal (EUR).
        shipping_rate: Selected shipping option; free when omitted.
        promo: Promo code to apply. Validated against the subtotal.
        now: Reference time for promo expiry (default: now).
        tax_rate: VAT rate; CheckoutSettings default (0.21) when omitted.

    Raises:
        ValueError: If the promo code cannot be applied.
    """
    rate = tax_rate if tax_rate is not None else CheckoutSettings().tax_rate
    subtotal = to_cents(Decimal(subtotal))

    discount = Decimal("0.00")
    if promo is not None:
        promo.check(subtotal, now)
        discount = promo.discount_for(subtotal)

    shipping = to_cents(shipping_rate.price) if shipping_rate else Decimal("0.00")
    tax_amount = to_cents((subtotal - discount) * rate)
    total = subtotal - discount + shipping + tax_amount

    totals = OrderTotals(
        subtotal=subtotal,
        discount=discount,
        shipping_cost=shipping,
        tax_amount=tax_amount,
        total=to_cents(total),
        promo_code=promo.code if promo else None,
    )
    logger.info(
        "Order totals: subtotal=%s discount=%s shipping=%s tax=%s -> total=%s",
        totals.subtotal, totals.discount, totals.shipping_cost,
        totals.tax_amount, totals.total,
    )
    return totals
