"""Application service: List Products use case (query)."""

from __future__ import annotations

from catalog.domain.model.product import Product
from catalog.domain.repository.product_repository import (
    LIST_PAGE_SIZE,
    ProductRepository,
)


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self) -> list[Product]:
        """Return the first page (at most 100) of products, unfiltered."""
        return self._product_repo.list_first_page(LIST_PAGE_SIZE)
