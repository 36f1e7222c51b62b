"""Application service: Search Products use case (query)."""

from __future__ import annotations

from catalog.domain.exceptions import InvalidArgumentError
from catalog.domain.model.product import Product
from catalog.domain.repository.product_repository import ProductRepository


class SearchProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, name: str | None) -> list[Product]:
        """Fuzzy search by name, most relevant first.

        Ties keep whatever order the store returns them in.
        """
        if name is None or not name.strip():
            raise InvalidArgumentError("Please provide a 'name' to search for")
        return self._product_repo.search_by_name(name.strip())
