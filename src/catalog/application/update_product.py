"""Application service: Update Product use case."""

from __future__ import annotations

import logging

from catalog.domain.exceptions import InvalidArgumentError
from catalog.domain.model.product import Product, ProductChanges
from catalog.domain.model.value_objects import Price, ProductName
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        product_id: str,
        name: str | None = None,
        price: str | float | int | None = None,
    ) -> Product:
        """Replace the supplied fields of an existing product.

        Fields left as None keep their stored value. Updates are not
        re-checked for duplicates.
        """
        if not product_id or not product_id.strip():
            raise InvalidArgumentError("Product id is required")

        changes = ProductChanges(
            name=ProductName.of(name) if name is not None else None,
            price=Price.of(price) if price is not None else None,
        )
        if changes.is_empty:
            raise InvalidArgumentError("Provide a name or a price to update")

        product = self._product_repo.update(product_id.strip(), changes)
        logger.info("Updated product id=%s", product.id)
        return product
