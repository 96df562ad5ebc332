"""Tests for the shipping rate calculator."""

from __future__ import annotations

from decimal import Decimal

import pytest

from src.common.config import ShippingSettings
from src.common.models import ShippingAddress, ShippingMethod
from src.shipping.calculator import (
    calculate_shipping_rates,
    find_rate,
    is_capital,
    is_domestic,
)


def _address(city: str = "", country: str = "") -> ShippingAddress:
    return ShippingAddress(city=city, street="Brīvības iela 1", postal_code="LV-1010", country=country)


class TestAddressClassification:
    @pytest.mark.parametrize("country", ["Latvia", "latvija", "  LATVIA  ", "Republic of Latvia"])
    def test_domestic(self, country):
        assert is_domestic(_address(country=country)) is True

    @pytest.mark.parametrize("country", ["Lithuania", "Estonia", ""])
    def test_international(self, country):
        assert is_domestic(_address(country=country)) is False

    @pytest.mark.parametrize("city", ["Rīga", "riga", "RĪGA", " Riga "])
    def test_capital(self, city):
        assert is_capital(_address(city=city)) is True

    def test_not_capital(self):
        assert is_capital(_address(city="Daugavpils")) is False


class TestCalculateShippingRates:
    def test_capital(self):
        rates = calculate_shipping_rates(_address("Rīga", "Latvia"))
        assert [r.method for r in rates] == [ShippingMethod.COURIER, ShippingMethod.POSTAL]
        assert rates[0].price == 0
        assert rates[0].is_free is True
        assert (rates[0].min_days, rates[0].max_days) == (1, 2)
        assert rates[1].price == Decimal("10")

    def test_domestic_region(self):
        rates = calculate_shipping_rates(_address("Daugavpils", "Latvia"))
        assert rates[0].method == ShippingMethod.COURIER
        assert rates[0].price == Decimal("20")
        assert rates[-1].method == ShippingMethod.POSTAL
        assert rates[-1].price == Decimal("10")

    def test_international(self):
        rates = calculate_shipping_rates(_address("Berlin", "Germany"))
        assert len(rates) == 1
        assert rates[0].method == ShippingMethod.POSTAL
        assert rates[0].price == Decimal("30")
        assert (rates[0].min_days, rates[0].max_days) == (7, 14)

    def test_capital_name_abroad_is_international(self):
        rates = calculate_shipping_rates(_address("Riga", "Estonia"))
        assert [r.method for r in rates] == [ShippingMethod.POSTAL]
        assert rates[0].price == Decimal("30")

    def test_empty_address_falls_through(self):
        rates = calculate_shipping_rates(ShippingAddress())
        assert [(r.method, r.price) for r in rates] == [(ShippingMethod.POSTAL, Decimal("30"))]

    def test_custom_settings(self):
        cfg = ShippingSettings(courier_regional_price=Decimal("15"), postal_domestic_price=Decimal("7.50"))
        rates = calculate_shipping_rates(_address("Liepāja", "Latvia"), cfg)
        assert rates[0].price == Decimal("15")
        assert rates[1].price == Decimal("7.50")

    def test_repeatable(self):
        address = _address("Rīga", "Latvia")
        assert calculate_shipping_rates(address) == calculate_shipping_rates(address)


class TestFindRate:
    def test_found(self):
        rates = calculate_shipping_rates(_address("Rīga", "Latvia"))
        assert find_rate(rates, "courier").price == 0
        assert find_rate(rates, ShippingMethod.POSTAL).price == Decimal("10")

    def test_not_offered(self):
        rates = calculate_shipping_rates(_address("Paris", "France"))
        assert find_rate(rates, ShippingMethod.COURIER) is None

    def test_unknown_method(self):
        with pytest.raises(ValueError):
            find_rate([], "drone")
