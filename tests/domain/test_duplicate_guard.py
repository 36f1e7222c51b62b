"""Unit tests for the per-key duplicate guard."""

import threading
import time

from catalog.domain.model.product import NewProduct
from catalog.domain.service.duplicate_guard import DuplicateGuard, duplicate_key


class TestDuplicateKey:

    def test_normalizes_case_and_whitespace(self):
        a = NewProduct.of("  Blue   Widget", 9.99)
        b = NewProduct.of("blue widget", "9.99")
        assert duplicate_key(a) == duplicate_key(b)

    def test_price_is_part_of_key(self):
        a = NewProduct.of("Widget", 9.99)
        b = NewProduct.of("Widget", 10)
        assert duplicate_key(a) != duplicate_key(b)


class TestDuplicateGuard:

    def test_releases_slot_after_use(self):
        guard = DuplicateGuard()
        with guard.hold(NewProduct.of("Widget", 1)):
            assert len(guard._locks) == 1
        assert len(guard._locks) == 0

    def test_releases_slot_on_error(self):
        guard = DuplicateGuard()
        try:
            with guard.hold(NewProduct.of("Widget", 1)):
                raise RuntimeError("boom")
        except RuntimeError:
            pass
        assert len(guard._locks) == 0

    def test_same_key_is_serialized(self):
        guard = DuplicateGuard()
        product = NewProduct.of("Widget", 1)
        inside = 0
        max_inside = 0
        lock = threading.Lock()

        def worker():
            nonlocal inside, max_inside
            with guard.hold(product):
                with lock:
                    inside += 1
                    max_inside = max(max_inside, inside)
                time.sleep(0.01)
                with lock:
                    inside -= 1

        threads = [threading.Thread(target=worker) for _ in range(5)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert max_inside == 1
        assert len(guard._locks) == 0

    def test_different_keys_do_not_block(self):
        guard = DuplicateGuard()
        entered = threading.Event()

        def other():
            with guard.hold(NewProduct.of("Gadget", 2)):
                entered.set()

        with guard.hold(NewProduct.of("Widget", 1)):
            t = threading.Thread(target=other)
            t.start()
            assert entered.wait(timeout=2)
        t.join()
