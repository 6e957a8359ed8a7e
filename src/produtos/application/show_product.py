"""Application service: Show Product use case (query)."""

from __future__ import annotations

from produtos.application.dto import ProductDTO
from produtos.domain.exceptions import EntityNotFoundError
from produtos.domain.repository.product_repository import ProductRepository


class ShowProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str) -> ProductDTO:
        product = self._product_repo.find_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        return ProductDTO.from_domain(product)
