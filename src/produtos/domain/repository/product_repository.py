"""Repository contract for the Product entity."""

from __future__ import annotations

from produtos.domain.model.paging import Sort
from produtos.domain.model.product import Product
from produtos.domain.repository.crud_repository import CrudRepository


class ProductRepository(CrudRepository[Product, str]):
    """Products keyed by their string id."""

    # Pages requested without an explicit sort are ordered by id.
    DEFAULT_SORT = Sort.by("id")

    def id_of(self, entity: Product) -> str:
        return entity.id
