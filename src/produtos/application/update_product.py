"""Application service: Update Product use case."""

from __future__ import annotations

from produtos.application.dto import ProductDTO
from produtos.domain.exceptions import EntityNotFoundError
from produtos.domain.model.value_objects import Money
from produtos.domain.repository.product_repository import ProductRepository


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        product_id: str,
        name: str | None = None,
        description: str | None = None,
        price: str | None = None,
    ) -> ProductDTO:
        """Change the given fields of a product; fields left as None stay."""
        product = self._product_repo.find_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        if name is not None:
            product.rename(name)
        if description is not None:
            product.describe(description)
        if price is not None:
            product.update_price(Money.of(price, product.price.currency))

        return ProductDTO.from_domain(self._product_repo.save(product))
