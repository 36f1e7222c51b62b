"""Index Gateway: owns the catalog index and its field mapping."""

from __future__ import annotations

import logging

from catalog.infrastructure.search.client import SearchIndexClient, SearchIndexError

logger = logging.getLogger(__name__)

DEFAULT_INDEX_NAME = "products"

PRODUCT_MAPPINGS = {
    "properties": {
        "name": {"type": "text"},
        "price": {"type": "float"},
    }
}

_ALREADY_EXISTS = "resource_already_exists_exception"


class IndexProvisioningError(Exception):
    """The catalog index could not be created; the service must not start."""


class IndexGateway:

    def __init__(self, client: SearchIndexClient, index_name: str = DEFAULT_INDEX_NAME) -> None:
        self._client = client
        self._index_name = index_name

    @property
    def index_name(self) -> str:
        return self._index_name

    def ensure_index(self) -> None:
        """Create the index with its mapping unless it already exists.

        Safe to call on every startup. Losing a creation race to another
        instance counts as success.
        """
        try:
            if self._client.index_exists(self._index_name):
                logger.debug("Index %r already exists", self._index_name)
                return
            self._client.create_index(self._index_name, PRODUCT_MAPPINGS)
        except SearchIndexError as exc:
            if exc.error_type == _ALREADY_EXISTS:
                logger.info("Index %r was created concurrently", self._index_name)
                return
            raise IndexProvisioningError(
                f"Could not ensure index {self._index_name!r}: {exc}"
            ) from exc

        logger.info("Index %r created", self._index_name)
