"""Project configuration and paths.

Loads settings from config/settings.yaml and environment variables.
"""

from __future__ import annotations

import os
from decimal import Decimal
from pathlib import Path

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

# === Paths ===
PROJECT_ROOT = Path(__file__).parent.parent.parent
CONFIG_DIR = PROJECT_ROOT / "config"

# Load .env from project root
load_dotenv(PROJECT_ROOT / ".env")


class ShippingSettings(BaseModel):
    """Shipping prices (EUR) and delivery windows (days)."""
    courier_capital_price: Decimal = Decimal("0")
    courier_regional_price: Decimal = Decimal("20")
    postal_domestic_price: Decimal = Decimal("10")
    postal_international_price: Decimal = Decimal("30")
    courier_capital_days: tuple[int, int] = (1, 2)
    courier_regional_days: tuple[int, int] = (2, 3)
    postal_domestic_days: tuple[int, int] = (3, 5)
    postal_international_days: tuple[int, int] = (7, 14)


class CheckoutSettings(BaseModel):
    """Checkout settings."""
    tax_rate: Decimal = Field(default=Decimal("0.21"), ge=0, le=1)
    currency: str = "EUR"


class CatalogSettings(BaseModel):
    """Component catalog settings."""
    catalog_path: str = str(CONFIG_DIR / "components.yaml")

    @property
    def catalog_abs_path(self) -> Path:
        """Resolve catalog path relative to project root."""
        p = Path(self.catalog_path)
        if p.is_absolute():
            return p
        return PROJECT_ROOT / p


class Settings(BaseModel):
    """Top-level application settings."""
    shipping: ShippingSettings = Field(default_factory=ShippingSettings)
    checkout: CheckoutSettings = Field(default_factory=CheckoutSettings)
    catalog: CatalogSettings = Field(default_factory=CatalogSettings)

    @classmethod
    def load(cls, settings_path: str | Path | None = None) -> Settings:
        """Load settings from config/settings.yaml, falling back to defaults.

        Environment variables STOREFRONT_TAX_RATE and STOREFRONT_CATALOG_PATH
        override the file.
        """
        settings_path = Path(settings_path) if settings_path else CONFIG_DIR / "settings.yaml"
        data: dict = {}
        if settings_path.exists():
            with open(settings_path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}

        if tax_rate := os.getenv("STOREFRONT_TAX_RATE"):
            data.setdefault("checkout", {})["tax_rate"] = tax_rate
        if catalog_path := os.getenv("STOREFRONT_CATALOG_PATH"):
            data.setdefault("catalog", {})["catalog_path"] = catalog_path

        return cls(**data)


# Singleton settings instance
settings = Settings.load()
