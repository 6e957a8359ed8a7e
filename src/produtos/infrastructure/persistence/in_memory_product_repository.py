"""Dict-backed implementation of ProductRepository.

Nothing survives the process. Used for tests and for the ``memory``
backend setting.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Iterable

from produtos.domain.model.paging import Page, PageRequest, Sort, paginate, sort_items
from produtos.domain.model.product import SORT_KEYS, Product
from produtos.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class InMemoryProductRepository(ProductRepository):

    def __init__(self, products: Iterable[Product] | None = None) -> None:
        self._store: dict[str, Product] = {}
        for p in products or []:
            self._store[p.id] = replace(p)

    # --- ProductRepository interface ------------------------------------------

    def save(self, entity: Product) -> Product:
        # Store a copy so later mutations by the caller do not leak in.
        self._store[entity.id] = replace(entity)
        logger.debug("Saved product %s", entity.id)
        return replace(entity)

    def find_by_id(self, entity_id: str) -> Product | None:
        product = self._store.get(entity_id)
        return replace(product) if product is not None else None

    def find_all(self, sort: Sort | None = None) -> list[Product]:
        products = [replace(p) for p in self._store.values()]
        if sort:
            return sort_items(products, sort, SORT_KEYS)
        return products

    def find_page(self, request: PageRequest) -> Page[Product]:
        return paginate(
            [replace(p) for p in self._store.values()],
            request,
            SORT_KEYS,
            self.DEFAULT_SORT,
        )

    def delete_by_id(self, entity_id: str) -> None:
        if self._store.pop(entity_id, None) is not None:
            logger.debug("Deleted product %s", entity_id)

    def exists_by_id(self, entity_id: str) -> bool:
        return entity_id in self._store

    def count(self) -> int:
        return len(self._store)

    def delete_all(self) -> None:
        self._store.clear()
