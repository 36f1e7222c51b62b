"""End-to-end walk through the product lifecycle on the fake repository."""

import pytest

from catalog.application.add_product import AddProductHandler
from catalog.application.delete_product import DeleteProductHandler
from catalog.application.list_products import ListProductsHandler
from catalog.application.search_products import SearchProductsHandler
from catalog.application.update_product import UpdateProductHandler
from catalog.domain.exceptions import DuplicateConflictError, NotFoundError
from catalog.domain.model.product import Product
from tests.fakes import FakeProductRepository


def test_widget_lifecycle():
    repo = FakeProductRepository()
    add = AddProductHandler(repo)
    listing = ListProductsHandler(repo)

    widget = add.handle("Widget", 9.99)
    assert listing.handle() == [Product(id=widget.id, name="Widget", price=9.99)]

    with pytest.raises(DuplicateConflictError):
        add.handle("Widget", 9.99)

    UpdateProductHandler(repo).handle(widget.id, "Widget Pro", 12.99)
    assert listing.handle() == [Product(id=widget.id, name="Widget Pro", price=12.99)]
    assert SearchProductsHandler(repo).handle("Pro") == listing.handle()

    DeleteProductHandler(repo).handle(widget.id)
    assert listing.handle() == []

    with pytest.raises(NotFoundError):
        DeleteProductHandler(repo).handle(widget.id)
