"""Product entity.

Products are identified by an opaque string key and are otherwise a
name, a price and a free-text description.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from produtos.domain.exceptions import ValidationError
from produtos.domain.model.value_objects import Money


@dataclass
class Product:
    """A product in the catalogue.

    Kept as a mutable dataclass: renaming and repricing are legitimate
    mutations, and the store persists whatever state it is handed.
    """

    id: str
    name: str
    price: Money
    description: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.id, str) or not self.id.strip():
            raise ValidationError("Product id must be a non-empty string")

    def rename(self, new_name: str) -> None:
        if not new_name or not new_name.strip():
            raise ValidationError("Product name is required")
        self.name = new_name.strip()

    def update_price(self, new_price: Money) -> None:
        if not new_price.is_positive():
            raise ValidationError("Product price must be greater than zero")
        self.price = new_price

    def describe(self, text: str) -> None:
        self.description = text.strip()


# Properties a product collection can be ordered by, and how to read them.
SORT_KEYS: dict[str, Callable[[Product], Any]] = {
    "id": lambda p: p.id,
    "name": lambda p: p.name,
    "description": lambda p: p.description,
    "price": lambda p: p.price.amount,
}
