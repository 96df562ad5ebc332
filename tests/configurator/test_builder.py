"""Tests for the configuration builder."""

from __future__ import annotations

from decimal import Decimal

import pytest

from src.common.models import Component
from src.configurator.builder import ConfigurationBuilder
from src.configurator.models import BuildSummary, CompatibilityIssue


class TestConfigurationBuilder:
    def test_empty_build(self):
        summary = ConfigurationBuilder().summarize()
        assert summary.total_price == Decimal("0")
        assert summary.total_power_watts == 0
        assert summary.recommended_psu == "N/A"
        assert summary.compatibility_issues == []
        assert summary.is_compatible is True

    def test_full_build(self, amd_cpu, am5_board, rtx_4070, psu_650, mid_tower):
        builder = ConfigurationBuilder([amd_cpu, am5_board, rtx_4070, psu_650, mid_tower])
        summary = builder.summarize()

        # 389.99 + 199.90 + 599.00 + 94.90 + 94.00
        assert summary.total_price == Decimal("1377.79")
        # (120 + 50 + 320) * 1.1 = 539
        assert summary.total_power_watts == 539
        assert summary.recommended_psu == "750W"
        # 650W < ceil(539 * 1.3) = 701W
        assert [i.code for i in summary.compatibility_issues] == ["psu_low_headroom"]
        assert summary.is_compatible is True

    def test_select_replaces_category(self, amd_cpu, intel_cpu):
        builder = ConfigurationBuilder()
        assert builder.select(amd_cpu) is None
        assert builder.select(intel_cpu) == amd_cpu
        assert builder.selected == {"cpu": intel_cpu}
        assert builder.total_price() == Decimal("299.00")

    def test_out_of_stock_rejected(self):
        sold_out = Component(
            component_id="case-nr200",
            category_id="case",
            name="Cooler Master NR200P",
            price=Decimal("99.00"),
            stock=0,
        )
        with pytest.raises(ValueError, match="out of stock"):
            ConfigurationBuilder().select(sold_out)

    def test_remove_and_clear(self, amd_cpu, rtx_4070):
        builder = ConfigurationBuilder([amd_cpu, rtx_4070])
        assert builder.remove("CPU") == amd_cpu
        assert builder.remove("cpu") is None
        assert list(builder.selected) == ["gpu"]
        builder.clear()
        assert builder.selected == {}

    def test_incompatible_build(self, intel_cpu, am5_board):
        summary = ConfigurationBuilder([intel_cpu, am5_board]).summarize()
        assert summary.is_compatible is False
        assert summary.compatibility_issues[0].code == "cpu_socket_mismatch"

    def test_summary_is_repeatable(self, amd_cpu, rtx_4070):
        builder = ConfigurationBuilder([amd_cpu, rtx_4070])
        assert builder.summarize().to_dict() == builder.summarize().to_dict()


class TestBuildSummary:
    def test_to_dict(self, amd_cpu):
        summary = BuildSummary(
            components={"cpu": amd_cpu},
            total_price=Decimal("389.99"),
            total_power_watts=132,
            recommended_psu="450W",
            compatibility_issues=[
                CompatibilityIssue("psu_low_headroom", "Low headroom", "warning"),
            ],
        )
        d = summary.to_dict()
        assert d["total_price"] == "389.99"
        assert d["components"]["cpu"]["name"] == "AMD Ryzen 7 7800X3D"
        assert d["is_compatible"] is True
        assert d["compatibility_issues"][0]["severity"] == "warning"
