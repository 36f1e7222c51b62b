"""Abstract repository for the Product entity.

Defined in the domain layer so the domain never depends on
infrastructure. The Elasticsearch implementation lives in the
infrastructure layer; tests use an in-memory fake.

Implementations translate every store-level failure into a
CatalogError subclass before it leaves the repository.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from catalog.domain.model.product import NewProduct, Product, ProductChanges

# Upper bound on the unfiltered listing; only the first page is returned.
LIST_PAGE_SIZE = 100


class ProductRepository(ABC):

    @abstractmethod
    def list_first_page(self, size: int = LIST_PAGE_SIZE) -> list[Product]:
        """Return up to ``size`` products in the store's native order."""

    @abstractmethod
    def search_by_name(self, name: str) -> list[Product]:
        """Fuzzy-match ``name``, best match first."""

    @abstractmethod
    def count_matching(self, product: NewProduct) -> int:
        """Count documents whose name matches and whose price equals."""

    @abstractmethod
    def insert(self, product: NewProduct) -> Product:
        """Persist a new product, visible to reads on return."""

    @abstractmethod
    def update(self, product_id: str, changes: ProductChanges) -> Product:
        """Apply ``changes`` to an existing product.

        Raises NotFoundError when ``product_id`` does not exist.
        """

    @abstractmethod
    def delete(self, product_id: str) -> None:
        """Hard-delete a product.

        Raises NotFoundError when ``product_id`` does not exist.
        """
