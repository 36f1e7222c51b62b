"""Tests for the AddProduct use case.

Uses the in-memory fake repository.
"""

import threading

import pytest

from catalog.application.add_product import AddProductHandler
from catalog.domain.exceptions import DuplicateConflictError, InvalidArgumentError
from catalog.domain.model.product import Product
from tests.fakes import FakeProductRepository


def _setup(
    products: list[Product] | None = None,
) -> tuple[AddProductHandler, FakeProductRepository]:
    repo = FakeProductRepository(products)
    return AddProductHandler(repo), repo


class TestAddProductHappyPath:

    def test_returns_assigned_id_and_fields(self):
        handler, _ = _setup()
        product = handler.handle("Widget", 9.99)
        assert product.id
        assert product.name == "Widget"
        assert product.price == 9.99

    def test_visible_in_listing(self):
        handler, repo = _setup()
        before = len(repo.list_first_page())
        product = handler.handle("Widget", 9.99)
        listed = repo.list_first_page()
        assert len(listed) == before + 1
        assert [p for p in listed if (p.name, p.price) == ("Widget", 9.99)] == [product]

    def test_price_given_as_text(self):
        handler, _ = _setup()
        assert handler.handle("Widget", "12.50").price == 12.5

    def test_same_name_different_price_allowed(self):
        handler, repo = _setup()
        handler.handle("Widget", 9.99)
        handler.handle("Widget", 10.99)
        assert len(repo.list_first_page()) == 2


class TestAddProductDuplicates:

    def test_identical_add_rejected(self):
        handler, repo = _setup()
        handler.handle("Widget", 9.99)
        with pytest.raises(DuplicateConflictError, match="Duplicate product"):
            handler.handle("Widget", 9.99)
        assert repo.inserts == 1

    def test_name_is_text_matched(self):
        handler, repo = _setup(
            [Product(id="a", name="Blue Widget", price=5.0)]
        )
        with pytest.raises(DuplicateConflictError):
            handler.handle("widget", 5.0)
        assert repo.inserts == 0

    def test_concurrent_identical_adds_insert_once(self):
        handler, repo = _setup()
        barrier = threading.Barrier(4)
        errors: list[Exception] = []

        def add():
            barrier.wait()
            try:
                handler.handle("Widget", 9.99)
            except DuplicateConflictError as exc:
                errors.append(exc)

        threads = [threading.Thread(target=add) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert repo.inserts == 1
        assert len(errors) == 3


class TestAddProductValidation:

    def test_missing_name_rejected(self):
        handler, repo = _setup()
        with pytest.raises(InvalidArgumentError, match="name is required"):
            handler.handle(None, 9.99)
        assert repo.inserts == 0

    def test_empty_name_rejected(self):
        handler, _ = _setup()
        with pytest.raises(InvalidArgumentError, match="name is required"):
            handler.handle("", 9.99)

    def test_missing_price_rejected(self):
        handler, _ = _setup()
        with pytest.raises(InvalidArgumentError, match="price is required"):
            handler.handle("Widget", None)

    def test_negative_price_rejected(self):
        handler, _ = _setup()
        with pytest.raises(InvalidArgumentError, match="cannot be negative"):
            handler.handle("Widget", -1)
