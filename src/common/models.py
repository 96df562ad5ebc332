"""Shared Pydantic data models for the storefront core.

These models define the data contracts between the catalog, the
configurator, shipping and checkout. All modules import from here.
"""

from __future__ import annotations

from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, Field


# === Enums ===

class ComponentCategory(str, Enum):
    """Configurator component categories."""
    CPU = "cpu"
    GPU = "gpu"
    MOTHERBOARD = "motherboard"
    RAM = "ram"
    STORAGE = "storage"
    PSU = "psu"
    CASE = "case"
    COOLING = "cooling"


class ShippingMethod(str, Enum):
    """Delivery methods offered at checkout."""
    COURIER = "courier"
    POSTAL = "postal"


class PasswordLevel(str, Enum):
    """Qualitative password strength."""
    WEAK = "weak"
    FAIR = "fair"
    GOOD = "good"
    STRONG = "strong"


# === Catalog ===

class Component(BaseModel):
    """Catalog item as seen by the configurator (read-only)."""
    component_id: str
    category_id: str
    name: str
    price: Decimal = Field(ge=0, description="Unit price in EUR")
    specifications: dict[str, str] = {}
    stock: int = Field(default=0, ge=0)
    description: str = ""

    @property
    def in_stock(self) -> bool:
        return self.stock > 0


# === Shipping ===

class ShippingAddress(BaseModel):
    """Destination address entered at checkout."""
    city: str = ""
    street: str = ""
    postal_code: str = ""
    country: str = ""


class ShippingRate(BaseModel):
    """Price and delivery window for one shipping method."""
    method: ShippingMethod
    price: Decimal = Field(ge=0, description="Price in EUR")
    min_days: int = Field(ge=0)
    max_days: int = Field(ge=0)

    @property
    def is_free(self) -> bool:
        return self.price == 0
