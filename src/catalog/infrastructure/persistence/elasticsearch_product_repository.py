"""Elasticsearch-backed implementation of ProductRepository.

This is the boundary where store-level failures become catalog errors:
nothing carrying an HTTP status or an Elasticsearch error body leaves
this module.
"""

from __future__ import annotations

import logging

from catalog.domain.exceptions import (
    CatalogError,
    NotFoundError,
    StoreInternalError,
    StoreTimeoutError,
    StoreUnavailableError,
)
from catalog.domain.model.product import NewProduct, Product, ProductChanges
from catalog.domain.repository.product_repository import (
    LIST_PAGE_SIZE,
    ProductRepository,
)
from catalog.infrastructure.search.client import (
    SearchIndexClient,
    SearchIndexError,
    SearchIndexTimeout,
    SearchIndexUnavailable,
)
from catalog.infrastructure.search.index_gateway import DEFAULT_INDEX_NAME

logger = logging.getLogger(__name__)


class ElasticsearchProductRepository(ProductRepository):

    def __init__(self, client: SearchIndexClient, index_name: str = DEFAULT_INDEX_NAME) -> None:
        self._client = client
        self._index = index_name

    # --- ProductRepository interface ------------------------------------------

    def list_first_page(self, size: int = LIST_PAGE_SIZE) -> list[Product]:
        try:
            result = self._client.search(self._index, {"match_all": {}}, size=size)
        except SearchIndexError as exc:
            raise _translate(exc, "Error fetching products") from exc
        return self._hits_to_domain(result)

    def search_by_name(self, name: str) -> list[Product]:
        query = {"match": {"name": {"query": name, "fuzziness": "AUTO"}}}
        try:
            result = self._client.search(self._index, query)
        except SearchIndexError as exc:
            raise _translate(exc, "Error searching products") from exc
        return self._hits_to_domain(result)

    def count_matching(self, product: NewProduct) -> int:
        query = {
            "bool": {
                "must": [
                    {"match": {"name": product.name.value}},
                    {"match": {"price": product.price.amount}},
                ]
            }
        }
        try:
            result = self._client.search(self._index, query, size=0)
        except SearchIndexError as exc:
            raise _translate(exc, "Error checking for duplicates") from exc
        return _total_hits(result)

    def insert(self, product: NewProduct) -> Product:
        try:
            result = self._client.index_document(
                self._index, product.as_document(), refresh=True
            )
        except SearchIndexError as exc:
            raise _translate(exc, "Error adding product") from exc
        return product.with_id(result["_id"])

    def update(self, product_id: str, changes: ProductChanges) -> Product:
        try:
            result = self._client.update_document(
                self._index,
                product_id,
                changes.as_partial_document(),
                refresh=True,
                return_source=True,
            )
        except SearchIndexError as exc:
            raise _translate(exc, "Error updating product", product_id) from exc

        source = result.get("get", {}).get("_source")
        if source is None:
            raise StoreInternalError(
                "Error updating product", detail=f"no source echoed: {result!r}"
            )
        return self._to_domain(result.get("_id", product_id), source)

    def delete(self, product_id: str) -> None:
        try:
            self._client.delete_document(self._index, product_id, refresh=True)
        except SearchIndexError as exc:
            raise _translate(exc, "Error deleting product", product_id) from exc

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_domain(product_id: str, source: dict) -> Product:
        return Product(
            id=product_id,
            name=source["name"],
            price=float(source["price"]),
        )

    def _hits_to_domain(self, result: dict) -> list[Product]:
        return [
            self._to_domain(hit["_id"], hit["_source"])
            for hit in result.get("hits", {}).get("hits", [])
        ]


def _total_hits(result: dict) -> int:
    total = result.get("hits", {}).get("total", 0)
    # Clusters older than 7.0 report a bare integer.
    if isinstance(total, dict):
        return int(total.get("value", 0))
    return int(total)


def _translate(
    exc: SearchIndexError,
    message: str,
    product_id: str | None = None,
) -> CatalogError:
    if isinstance(exc, SearchIndexTimeout):
        return StoreTimeoutError(f"{message}: search index timed out")
    if isinstance(exc, SearchIndexUnavailable):
        return StoreUnavailableError(f"{message}: search index unavailable")
    if (
        exc.status_code == 404
        and product_id is not None
        and exc.error_type != "index_not_found_exception"
    ):
        return NotFoundError(f"Product '{product_id}' not found")

    detail = f"{exc} body={exc.body!r}"
    logger.error("%s: %s", message, detail)
    return StoreInternalError(message, detail=detail)
