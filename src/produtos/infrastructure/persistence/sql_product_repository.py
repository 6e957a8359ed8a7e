"""SQLAlchemy-backed implementation of ProductRepository."""

from __future__ import annotations

import logging

from sqlalchemy import delete, func, select
from sqlalchemy.orm import Session, sessionmaker

from produtos.domain.model.paging import Page, PageRequest, Sort
from produtos.domain.model.product import SORT_KEYS, Product
from produtos.domain.model.value_objects import Money
from produtos.domain.repository.product_repository import ProductRepository
from produtos.infrastructure.persistence.database import session_scope
from produtos.infrastructure.persistence.tables import ProductRow

logger = logging.getLogger(__name__)

_COLUMNS = {
    "id": ProductRow.id,
    "name": ProductRow.name,
    "description": ProductRow.description,
    "price": ProductRow.price_amount,
}


class SqlProductRepository(ProductRepository):
    """Stores products in the ``products`` table.

    Each call runs in its own session scope; the repository holds no
    open connection between calls.
    """

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    # --- ProductRepository interface ------------------------------------------

    def save(self, entity: Product) -> Product:
        with session_scope(self._session_factory) as session:
            row = session.merge(self._to_row(entity))
            session.flush()
            # Return what the column types kept, not what was passed in.
            session.refresh(row)
            saved = self._to_domain(row)
        logger.debug("Saved product %s", entity.id)
        return saved

    def find_by_id(self, entity_id: str) -> Product | None:
        with session_scope(self._session_factory) as session:
            row = session.get(ProductRow, entity_id)
            return self._to_domain(row) if row is not None else None

    def find_all(self, sort: Sort | None = None) -> list[Product]:
        stmt = select(ProductRow)
        if sort:
            stmt = stmt.order_by(*self._order_by(sort))
        with session_scope(self._session_factory) as session:
            return [self._to_domain(row) for row in session.scalars(stmt)]

    def find_page(self, request: PageRequest) -> Page[Product]:
        stmt = (
            select(ProductRow)
            .order_by(*self._order_by(request.sort or self.DEFAULT_SORT))
            .offset(request.offset)
            .limit(request.size)
        )
        with session_scope(self._session_factory) as session:
            total = session.scalar(select(func.count()).select_from(ProductRow))
            content = [self._to_domain(row) for row in session.scalars(stmt)]
        return Page(
            content=content,
            number=request.page,
            size=request.size,
            total_elements=total or 0,
        )

    def delete_by_id(self, entity_id: str) -> None:
        with session_scope(self._session_factory) as session:
            result = session.execute(
                delete(ProductRow).where(ProductRow.id == entity_id)
            )
        if result.rowcount:
            logger.debug("Deleted product %s", entity_id)

    def exists_by_id(self, entity_id: str) -> bool:
        stmt = select(ProductRow.id).where(ProductRow.id == entity_id).limit(1)
        with session_scope(self._session_factory) as session:
            return session.scalar(stmt) is not None

    def count(self) -> int:
        with session_scope(self._session_factory) as session:
            return session.scalar(select(func.count()).select_from(ProductRow)) or 0

    def delete_all(self) -> None:
        with session_scope(self._session_factory) as session:
            session.execute(delete(ProductRow))

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _order_by(sort: Sort) -> list:
        sort.validate(SORT_KEYS)
        return [
            _COLUMNS[order.property].desc()
            if order.descending
            else _COLUMNS[order.property].asc()
            for order in sort
        ]

    @staticmethod
    def _to_row(product: Product) -> ProductRow:
        return ProductRow(
            id=product.id,
            name=product.name,
            description=product.description,
            price_amount=product.price.amount,
            currency=product.price.currency,
        )

    @staticmethod
    def _to_domain(row: ProductRow) -> Product:
        return Product(
            id=row.id,
            name=row.name,
            description=row.description or "",
            price=Money(row.price_amount, row.currency),
        )
