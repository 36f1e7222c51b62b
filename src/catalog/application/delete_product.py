"""Application service: Delete Product use case.

Deletes are hard and not idempotent: deleting an id that is already gone
raises NotFoundError rather than succeeding silently.
"""

from __future__ import annotations

import logging

from catalog.domain.exceptions import InvalidArgumentError
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class DeleteProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str) -> None:
        if not product_id or not product_id.strip():
            raise InvalidArgumentError("Product id is required")

        self._product_repo.delete(product_id.strip())
        logger.info("Deleted product id=%s", product_id.strip())
