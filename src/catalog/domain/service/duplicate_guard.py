"""Domain service: Duplicate Guard.

The duplicate check and the insert are two separate round trips to the
document store. Two identical adds running concurrently could both see
zero matches and both insert. The guard serializes check+insert per
normalized (name, price) key so that, within one process, only one of
them can pass the check at a time. Adds for different keys never wait
on each other.

The guard is in-process only. It matters when one store instance serves
concurrent callers (threads sharing the handlers); separate processes,
such as two CLI invocations, can still race and insert a duplicate.
"""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager

from catalog.domain.model.product import NewProduct


def duplicate_key(product: NewProduct) -> tuple[str, float]:
    """Case- and whitespace-insensitive key for a name+price pair."""
    name = " ".join(product.name.value.split()).casefold()
    return name, product.price.amount


class DuplicateGuard:

    def __init__(self) -> None:
        self._mutex = threading.Lock()
        # key -> (lock, number of holders or waiters)
        self._locks: dict[tuple[str, float], tuple[threading.Lock, int]] = {}

    @contextmanager
    def hold(self, product: NewProduct) -> Iterator[None]:
        key = duplicate_key(product)
        lock = self._acquire_slot(key)
        lock.acquire()
        try:
            yield
        finally:
            lock.release()
            self._release_slot(key)

    # --- Internal helpers -----------------------------------------------------

    def _acquire_slot(self, key: tuple[str, float]) -> threading.Lock:
        with self._mutex:
            lock, users = self._locks.get(key, (threading.Lock(), 0))
            self._locks[key] = (lock, users + 1)
            return lock

    def _release_slot(self, key: tuple[str, float]) -> None:
        with self._mutex:
            lock, users = self._locks[key]
            if users <= 1:
                del self._locks[key]
            else:
                self._locks[key] = (lock, users - 1)
