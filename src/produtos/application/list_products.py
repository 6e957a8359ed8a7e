"""Application service: List Products use case (query)."""

from __future__ import annotations

from typing import Sequence

from produtos.application.dto import PageDTO
from produtos.domain.model.paging import PageRequest, Sort
from produtos.domain.repository.product_repository import ProductRepository


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self, page: int = 0, size: int = 20, sort: Sequence[str] = ()
    ) -> PageDTO:
        """Return one page of the catalogue.

        ``sort`` takes ``property[,direction]`` expressions, e.g.
        ``("price,desc", "name")``.
        """
        request = PageRequest(page=page, size=size, sort=Sort.parse(*sort))
        return PageDTO.from_domain(self._product_repo.find_page(request))
