"""Integration tests for the AddProduct use case."""

import uuid

import pytest

from produtos.application.add_product import AddProductHandler
from produtos.domain.exceptions import ValidationError
from produtos.domain.model.value_objects import Money
from produtos.infrastructure.persistence.in_memory_product_repository import (
    InMemoryProductRepository,
)


class TestAddProduct:

    def test_add_assigns_uuid_and_persists(self):
        repo = InMemoryProductRepository()
        product = AddProductHandler(repo).handle("Widget", "15.00", "blue")

        uuid.UUID(product.id)  # raises if not a UUID
        assert repo.find_by_id(product.id) == product
        assert product.price == Money.of("15.00")
        assert product.description == "blue"

    def test_each_product_gets_a_distinct_id(self):
        repo = InMemoryProductRepository()
        handler = AddProductHandler(repo)

        first = handler.handle("Widget", "15.00")
        second = handler.handle("Widget", "15.00")

        assert first.id != second.id
        assert repo.count() == 2

    def test_name_is_stripped(self):
        product = AddProductHandler(InMemoryProductRepository()).handle("  Widget ", "1")
        assert product.name == "Widget"

    def test_blank_name_rejected(self):
        repo = InMemoryProductRepository()
        with pytest.raises(ValidationError, match="name is required"):
            AddProductHandler(repo).handle("   ", "15.00")
        assert repo.count() == 0

    def test_zero_price_rejected(self):
        with pytest.raises(ValidationError, match="greater than zero"):
            AddProductHandler(InMemoryProductRepository()).handle("Widget", "0")

    def test_invalid_price_rejected(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            AddProductHandler(InMemoryProductRepository()).handle("Widget", "abc")
