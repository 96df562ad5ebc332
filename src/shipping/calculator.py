"""Shipping rate calculator.

Courier delivery is offered inside Latvia only and is free in Riga.
Postal delivery is always offered and is listed last.

Prices and delivery windows come from ShippingSettings
(config/settings.yaml ``shipping:`` section).
"""

from __future__ import annotations

import logging

from ..common.config import ShippingSettings
from ..common.models import ShippingAddress, ShippingMethod, ShippingRate

logger = logging.getLogger(__name__)

DOMESTIC_COUNTRY_NAMES = ("latvia", "latvija")
CAPITAL_CITY_NAMES = ("rīga", "riga")


def is_domestic(address: ShippingAddress) -> bool:
    country = address.country.lower().strip()
    return any(name in country for name in DOMESTIC_COUNTRY_NAMES)


def is_capital(address: ShippingAddress) -> bool:
    city = address.city.lower().strip()
    return any(name in city for name in CAPITAL_CITY_NAMES)


def calculate_shipping_rates(
    address: ShippingAddress,
    shipping_settings: ShippingSettings | None = None,
) -> list[ShippingRate]:
    """Return the shipping options for an address, courier first.

    Args:
        address: Destination address. Unrecognised countries and cities
                 fall through to international / non-capital pricing.
        shipping_settings: Price table; built-in defaults when omitted.

    Returns:
        List of ShippingRate. Postal is always the last entry.
    """
    cfg = shipping_settings or ShippingSettings()
    domestic = is_domestic(address)
    rates: list[ShippingRate] = []

    if domestic:
        if is_capital(address):
            price, (min_days, max_days) = cfg.courier_capital_price, cfg.courier_capital_days
        else:
            price, (min_days, max_days) = cfg.courier_regional_price, cfg.courier_regional_days
        rates.append(ShippingRate(
            method=ShippingMethod.COURIER,
            price=price,
            min_days=min_days,
            max_days=max_days,
        ))

    if domestic:
        price, (min_days, max_days) = cfg.postal_domestic_price, cfg.postal_domestic_days
    else:
        price, (min_days, max_days) = cfg.postal_international_price, cfg.postal_international_days
    rates.append(ShippingRate(
        method=ShippingMethod.POSTAL,
        price=price,
        min_days=min_days,
        max_days=max_days,
    ))

    logger.debug(
        "Shipping to %s, %s: %s",
        address.city or "?",
        address.country or "?",
        ", ".join(f"{r.method.value}={r.price}" for r in rates),
    )
    return rates


def find_rate(rates: list[ShippingRate], method: ShippingMethod | str) -> ShippingRate | None:
    """Pick the rate for a method, or None when it is not offered."""
    method = ShippingMethod(method)
    for rate in rates:
        if rate.method == method:
            return rate
    return None
