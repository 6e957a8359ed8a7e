"""Integration tests for the ShowProduct and ListProducts queries."""

import pytest

from produtos.application.list_products import ListProductsHandler
from produtos.application.show_product import ShowProductHandler
from produtos.domain.exceptions import EntityNotFoundError, ValidationError
from produtos.infrastructure.persistence.in_memory_product_repository import (
    InMemoryProductRepository,
)
from tests.factories import make_product


def _setup():
    return InMemoryProductRepository(
        [
            make_product("3", "Gizmo", "5.00"),
            make_product("1", "Widget", "15.00", "blue"),
            make_product("2", "Gadget", "25.00"),
        ]
    )


class TestShowProduct:

    def test_show_formats_product(self):
        dto = ShowProductHandler(_setup()).handle("1")

        assert dto.id == "1"
        assert dto.name == "Widget"
        assert dto.description == "blue"
        assert dto.price == "$15.00"

    def test_show_missing_rejected(self):
        with pytest.raises(EntityNotFoundError, match="'42' not found"):
            ShowProductHandler(_setup()).handle("42")


class TestListProducts:

    def test_default_listing_is_ordered_by_id(self):
        result = ListProductsHandler(_setup()).handle()

        assert [p.id for p in result.items] == ["1", "2", "3"]
        assert result.total_items == 3
        assert result.total_pages == 1
        assert not result.has_next

    def test_sorted_and_paged(self):
        result = ListProductsHandler(_setup()).handle(page=0, size=2, sort=["price,desc"])

        assert [p.name for p in result.items] == ["Gadget", "Widget"]
        assert result.total_pages == 2
        assert result.has_next

    def test_second_page(self):
        result = ListProductsHandler(_setup()).handle(page=1, size=2, sort=["name"])
        assert [p.name for p in result.items] == ["Widget"]

    def test_empty_catalogue(self):
        result = ListProductsHandler(InMemoryProductRepository()).handle()
        assert result.items == []
        assert result.total_items == 0

    def test_bad_sort_property_rejected(self):
        with pytest.raises(ValidationError, match="Cannot sort by"):
            ListProductsHandler(_setup()).handle(sort=["weight"])

    def test_bad_page_size_rejected(self):
        with pytest.raises(ValidationError, match="at least 1"):
            ListProductsHandler(_setup()).handle(size=0)
