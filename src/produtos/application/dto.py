"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data from the application layer to the CLI without exposing
domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from produtos.domain.model.paging import Page
from produtos.domain.model.product import Product


@dataclass(frozen=True)
class ProductDTO:
    """Output: a single product as displayed to the user."""

    id: str
    name: str
    description: str
    price: str  # formatted, e.g. "$15.00"

    @staticmethod
    def from_domain(product: Product) -> ProductDTO:
        return ProductDTO(
            id=product.id,
            name=product.name,
            description=product.description,
            price=str(product.price),
        )


@dataclass(frozen=True)
class PageDTO:
    """Output: one page of products plus navigation info."""

    items: list[ProductDTO]
    page: int
    size: int
    total_items: int
    total_pages: int
    has_next: bool

    @staticmethod
    def from_domain(page: Page[Product]) -> PageDTO:
        return PageDTO(
            items=[ProductDTO.from_domain(p) for p in page.content],
            page=page.number,
            size=page.size,
            total_items=page.total_elements,
            total_pages=page.total_pages,
            has_next=page.has_next,
        )
