"""Abstract whole-collection store.

Every entity type is persisted as one collection that is always read and
written in full.  There is no partial update: every mutation in the
system is load-entire-collection, mutate-in-memory,
overwrite-entire-collection.

Defined in the domain layer so repositories never depend on the file
format.  The JSON implementation lives in the infrastructure layer; an
indexed or transactional store can replace it without touching callers.
"""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Generic, TypeVar

T = TypeVar("T")


class CollectionStore(ABC, Generic[T]):

    def __init__(self) -> None:
        self._lock = threading.RLock()

    @abstractmethod
    def load_all(self) -> list[T]:
        """Return the whole collection; an absent collection is empty."""

    @abstractmethod
    def overwrite_all(self, items: list[T]) -> None:
        """Replace the whole collection with *items*."""

    def append(self, item: T) -> None:
        """Add *item* at the end of the collection."""
        with self.locked():
            items = self.load_all()
            items.append(item)
            self.overwrite_all(items)

    @contextmanager
    def locked(self) -> Iterator[None]:
        """Hold this store's lock across a load-modify-rewrite cycle.

        The lock is re-entrant and per store instance.  It does not
        protect against other processes writing the same file.
        """
        with self._lock:
            yield
