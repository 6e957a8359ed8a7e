"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

import json
import logging
from decimal import Decimal
from pathlib import Path

from produtos.domain.exceptions import DomainException, StorageError
from produtos.domain.model.paging import Page, PageRequest, Sort, paginate, sort_items
from produtos.domain.model.product import SORT_KEYS, Product
from produtos.domain.model.value_objects import Money
from produtos.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class JsonProductRepository(ProductRepository):
    """Keeps the whole catalogue in one JSON array.

    Every call reads the file and every write rewrites it, so two
    repositories pointed at the same path see each other's changes.
    """

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    def save(self, entity: Product) -> Product:
        products = self._load()
        products[entity.id] = entity
        self._persist(products)
        logger.debug("Saved product %s to %s", entity.id, self._file_path)
        return self._load()[entity.id]

    def find_by_id(self, entity_id: str) -> Product | None:
        return self._load().get(entity_id)

    def find_all(self, sort: Sort | None = None) -> list[Product]:
        products = list(self._load().values())
        if sort:
            return sort_items(products, sort, SORT_KEYS)
        return products

    def find_page(self, request: PageRequest) -> Page[Product]:
        return paginate(
            list(self._load().values()), request, SORT_KEYS, self.DEFAULT_SORT
        )

    def delete_by_id(self, entity_id: str) -> None:
        products = self._load()
        if products.pop(entity_id, None) is None:
            return
        self._persist(products)
        logger.debug("Deleted product %s from %s", entity_id, self._file_path)

    def exists_by_id(self, entity_id: str) -> bool:
        return entity_id in self._load()

    def count(self) -> int:
        return len(self._load())

    def delete_all(self) -> None:
        self._persist({})

    # --- Serialization helpers ------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "description": product.description,
            "price": str(product.price.amount),
            "currency": product.price.currency,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=raw["id"],
            name=raw["name"],
            description=raw.get("description", ""),
            price=Money(Decimal(raw["price"]), raw.get("currency", "USD")),
        )

    # --- File helpers ---------------------------------------------------------

    def _load(self) -> dict[str, Product]:
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
            return {item["id"]: self._to_domain(item) for item in raw}
        except OSError as exc:
            logger.error("Could not read %s: %s", self._file_path, exc)
            raise StorageError(f"Could not read {self._file_path}: {exc}") from exc
        except (ValueError, KeyError, TypeError, DomainException) as exc:
            logger.error("Corrupt product file %s: %s", self._file_path, exc)
            raise StorageError(f"Corrupt product file {self._file_path}: {exc}") from exc

    def _persist(self, products: dict[str, Product]) -> None:
        raw = [self._to_raw(p) for p in products.values()]
        try:
            self._file_path.write_text(
                json.dumps(raw, indent=2) + "\n", encoding="utf-8"
            )
        except OSError as exc:
            logger.error("Could not write %s: %s", self._file_path, exc)
            raise StorageError(f"Could not write {self._file_path}: {exc}") from exc

    def _ensure_file(self) -> None:
        try:
            if not self._file_path.exists():
                self._file_path.parent.mkdir(parents=True, exist_ok=True)
                self._file_path.write_text("[]", encoding="utf-8")
        except OSError as exc:
            raise StorageError(f"Could not create {self._file_path}: {exc}") from exc
