"""Application service: Add Product use case."""

from __future__ import annotations

import uuid

from produtos.domain.exceptions import ValidationError
from produtos.domain.model.product import Product
from produtos.domain.model.value_objects import Money
from produtos.domain.repository.product_repository import ProductRepository


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, name: str, price: str, description: str = "") -> Product:
        """Add a new product to the catalogue under a freshly generated id."""
        if not name or not name.strip():
            raise ValidationError("Product name is required")

        money = Money.of(price)
        if not money.is_positive():
            raise ValidationError("Product price must be greater than zero")

        product = Product(
            id=str(uuid.uuid4()),
            name=name.strip(),
            price=money,
            description=description.strip(),
        )
        return self._product_repo.save(product)
