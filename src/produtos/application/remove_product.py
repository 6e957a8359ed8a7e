"""Application service: Remove Product use case."""

from __future__ import annotations

from produtos.domain.exceptions import EntityNotFoundError
from produtos.domain.repository.product_repository import ProductRepository


class RemoveProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str) -> None:
        # The repository ignores unknown ids; removal by a user should not.
        if not self._product_repo.exists_by_id(product_id):
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        self._product_repo.delete_by_id(product_id)
