"""Builders for test data."""

from __future__ import annotations

from produtos.domain.model.product import Product
from produtos.domain.model.value_objects import Money


def make_product(id: str, name: str, price: str = "10.00", description: str = "") -> Product:
    return Product(id=id, name=name, price=Money.of(price), description=description)
