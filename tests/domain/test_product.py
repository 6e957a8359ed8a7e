"""Unit tests for the Product entity."""

import pytest

from produtos.domain.exceptions import ValidationError
from produtos.domain.model.product import SORT_KEYS, Product
from produtos.domain.model.value_objects import Money


def _widget() -> Product:
    return Product(id="P1", name="Widget", price=Money.of("15.00"))


class TestProduct:

    def test_description_defaults_to_empty(self):
        assert _widget().description == ""

    def test_blank_id_rejected(self):
        with pytest.raises(ValidationError, match="non-empty"):
            Product(id="  ", name="Widget", price=Money.of("1"))

    def test_equality_is_field_by_field(self):
        assert _widget() == _widget()
        other = _widget()
        other.describe("changed")
        assert other != _widget()


class TestProductMutations:

    def test_rename_strips_whitespace(self):
        p = _widget()
        p.rename("  Gadget ")
        assert p.name == "Gadget"

    def test_rename_to_blank_rejected(self):
        p = _widget()
        with pytest.raises(ValidationError, match="name is required"):
            p.rename("   ")
        assert p.name == "Widget"

    def test_update_price(self):
        p = _widget()
        p.update_price(Money.of("29.99"))
        assert p.price == Money.of("29.99")

    def test_zero_price_rejected(self):
        p = _widget()
        with pytest.raises(ValidationError, match="greater than zero"):
            p.update_price(Money.of("0"))
        assert p.price == Money.of("15.00")

    def test_describe(self):
        p = _widget()
        p.describe(" A very blue widget ")
        assert p.description == "A very blue widget"


class TestSortKeys:

    def test_price_sorts_by_amount(self):
        assert SORT_KEYS["price"](_widget()) == Money.of("15.00").amount

    def test_sortable_properties(self):
        assert set(SORT_KEYS) == {"id", "name", "description", "price"}
