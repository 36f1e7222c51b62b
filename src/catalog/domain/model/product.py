"""Product entity.

The only entity in the catalog. Its ``id`` is assigned by the document
store on creation and never changes; ``name`` and ``price`` are replaced
in place by updates.
"""

from __future__ import annotations

from dataclasses import dataclass

from catalog.domain.model.value_objects import Price, ProductName


@dataclass(frozen=True)
class Product:
    """A product as persisted in the catalog index."""

    id: str
    name: str
    price: float

    def as_document(self) -> dict:
        """The indexed body; ``id`` lives outside it."""
        return {"name": self.name, "price": self.price}


@dataclass(frozen=True)
class NewProduct:
    """A validated product that has not been assigned an id yet."""

    name: ProductName
    price: Price

    @staticmethod
    def of(name: str | None, price: str | float | int | None) -> NewProduct:
        return NewProduct(name=ProductName.of(name), price=Price.of(price))

    def as_document(self) -> dict:
        return {"name": self.name.value, "price": self.price.amount}

    def with_id(self, product_id: str) -> Product:
        return Product(id=product_id, name=self.name.value, price=self.price.amount)


@dataclass(frozen=True)
class ProductChanges:
    """Fields supplied to an update; ``None`` means "leave unchanged"."""

    name: ProductName | None = None
    price: Price | None = None

    @property
    def is_empty(self) -> bool:
        return self.name is None and self.price is None

    def as_partial_document(self) -> dict:
        doc: dict = {}
        if self.name is not None:
            doc["name"] = self.name.value
        if self.price is not None:
            doc["price"] = self.price.amount
        return doc
