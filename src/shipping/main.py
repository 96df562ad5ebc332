"""CLI entry point for the shipping calculator.

Usage:
    python -m src.shipping.main --city "Rīga" --country Latvia
    python -m src.shipping.main --city Berlin --country Germany --postal-code 10115
"""

from __future__ import annotations

import argparse
import json
import logging

from ..common.config import Settings
from ..common.logging import setup_logging
from ..common.models import ShippingAddress
from .calculator import calculate_shipping_rates

setup_logging()
logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Shipping Rate Calculator")
    parser.add_argument("--city", type=str, default="", help="Destination city")
    parser.add_argument("--country", type=str, default="", help="Destination country")
    parser.add_argument("--street", type=str, default="", help="Street address")
    parser.add_argument("--postal-code", type=str, default="", help="Postal code")
    parser.add_argument(
        "--settings",
        type=str,
        help="Path to settings YAML (default: config/settings.yaml)",
    )

    args = parser.parse_args(argv)

    if not args.city and not args.country:
        parser.error("--city or --country is required")

    settings = Settings.load(args.settings)
    address = ShippingAddress(
        city=args.city,
        street=args.street,
        postal_code=args.postal_code,
        country=args.country,
    )
    rates = calculate_shipping_rates(address, settings.shipping)

    for rate in rates:
        logger.info(
            "  %s: %s %s (%d-%d days)",
            rate.method.value,
            rate.price,
            settings.checkout.currency,
            rate.min_days,
            rate.max_days,
        )

    print(json.dumps([r.model_dump(mode="json") for r in rates], ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
