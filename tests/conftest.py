"""Shared test fixtures for the storefront core."""

import sys
from decimal import Decimal
from pathlib import Path

import pytest
import yaml

# Ensure src is importable
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from src.common.models import Component


def make_component(
    component_id: str,
    category_id: str,
    name: str,
    price: str = "100.00",
    specifications: dict | None = None,
    stock: int = 5,
) -> Component:
    return Component(
        component_id=component_id,
        category_id=category_id,
        name=name,
        price=Decimal(price),
        specifications=specifications or {},
        stock=stock,
    )


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return PROJECT_ROOT


@pytest.fixture
def amd_cpu() -> Component:
    return make_component(
        "cpu-ryzen-7-7800x3d", "cpu", "AMD Ryzen 7 7800X3D", "389.99",
        {"Socket": "AM5", "TDP": "120W"},
    )


@pytest.fixture
def intel_cpu() -> Component:
    return make_component(
        "cpu-core-i5-13600k", "cpu", "Intel Core i5-13600K", "299.00",
        {"Socket": "LGA1700"},
    )


@pytest.fixture
def am5_board() -> Component:
    return make_component(
        "mb-asus-b650-plus", "motherboard", "ASUS TUF Gaming B650-Plus", "199.90",
        {"CPU Socket": "AM5", "Form Factor": "ATX"},
    )


@pytest.fixture
def rtx_4070() -> Component:
    return make_component("gpu-rtx-4070", "gpu", "NVIDIA GeForce RTX 4070", "599.00")


@pytest.fixture
def psu_650() -> Component:
    return make_component(
        "psu-650w-gold", "psu", "Corsair RM650e 650W 80+ Gold", "94.90",
        {"Wattage": "650W"},
    )


@pytest.fixture
def mid_tower() -> Component:
    return make_component(
        "case-nzxt-h5", "case", "NZXT H5 Flow", "94.00",
        {"Form Factor": "Mid Tower"},
    )


@pytest.fixture
def catalog_path(tmp_path) -> Path:
    """Write a small component catalog YAML and return its path."""
    data = {
        "components": [
            {
                "component_id": "cpu-ryzen-5-7600",
                "category_id": "cpu",
                "name": "AMD Ryzen 5 7600",
                "price": "199.00",
                "stock": 10,
                "specifications": {"Socket": "AM5", "TDP": "65W"},
                "description": "6 cores, 12 threads",
            },
            {
                "component_id": "mb-b650m",
                "category_id": "motherboard",
                "name": "Gigabyte B650M DS3H",
                "price": "129.00",
                "stock": 4,
                "specifications": '{"CPU Socket": "AM5", "Form Factor": "Micro-ATX"}',
            },
            {
                "component_id": "gpu-rx-7800-xt",
                "category_id": "gpu",
                "name": "Sapphire Pulse RX 7800 XT",
                "price": "529.00",
                "stock": 2,
            },
            {
                "component_id": "psu-550w",
                "category_id": "psu",
                "name": "Seasonic Focus 550W",
                "price": "79.00",
                "stock": 0,
            },
        ],
    }
    path = tmp_path / "components.yaml"
    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(data, f, allow_unicode=True)
    return path
