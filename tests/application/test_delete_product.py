"""Tests for the DeleteProduct use case."""

import pytest

from catalog.application.delete_product import DeleteProductHandler
from catalog.domain.exceptions import InvalidArgumentError, NotFoundError
from catalog.domain.model.product import Product
from tests.fakes import FakeProductRepository


def _setup() -> tuple[DeleteProductHandler, FakeProductRepository]:
    repo = FakeProductRepository([Product(id="a", name="Widget", price=9.99)])
    return DeleteProductHandler(repo), repo


class TestDeleteProduct:

    def test_removes_from_listing(self):
        handler, repo = _setup()
        handler.handle("a")
        assert repo.list_first_page() == []

    def test_second_delete_not_found(self):
        handler, _ = _setup()
        handler.handle("a")
        with pytest.raises(NotFoundError):
            handler.handle("a")

    def test_unknown_id_not_found(self):
        handler, _ = _setup()
        with pytest.raises(NotFoundError, match="'zzz' not found"):
            handler.handle("zzz")

    def test_blank_id_rejected(self):
        handler, _ = _setup()
        with pytest.raises(InvalidArgumentError):
            handler.handle("")
