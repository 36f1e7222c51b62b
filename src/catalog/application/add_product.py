"""Application service: Add Product use case."""

from __future__ import annotations

import logging

from catalog.domain.exceptions import DuplicateConflictError
from catalog.domain.model.product import NewProduct, Product
from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.service.duplicate_guard import DuplicateGuard

logger = logging.getLogger(__name__)


class AddProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        guard: DuplicateGuard | None = None,
    ) -> None:
        self._product_repo = product_repo
        self._guard = guard or DuplicateGuard()

    def handle(self, name: str | None, price: str | float | int | None) -> Product:
        """Add a new product to the catalog.

        Rejects the add when a product with a matching name and the same
        price already exists. The new product is visible to reads as soon
        as this returns.
        """
        new_product = NewProduct.of(name, price)

        with self._guard.hold(new_product):
            if self._product_repo.count_matching(new_product) > 0:
                logger.info(
                    "Rejected duplicate product name=%r price=%s",
                    new_product.name.value,
                    new_product.price,
                )
                raise DuplicateConflictError("Duplicate product not allowed")

            product = self._product_repo.insert(new_product)

        logger.info("Added product id=%s name=%r", product.id, product.name)
        return product
