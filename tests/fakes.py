"""In-memory fake store for testing.

Implements the same abstract interface as the JSON store but keeps the
collection in a list.  Loads and writes deep-copy, so callers see the
same copy-on-read behaviour as with a file.  ``writes`` counts rewrites.
"""

from __future__ import annotations

import copy
from typing import TypeVar

from shopfront.domain.repository.collection_store import CollectionStore

T = TypeVar("T")


class InMemoryCollectionStore(CollectionStore[T]):

    def __init__(self, items: list[T] | None = None) -> None:
        super().__init__()
        self._items: list[T] = copy.deepcopy(list(items or []))
        self.writes = 0

    def load_all(self) -> list[T]:
        return copy.deepcopy(self._items)

    def overwrite_all(self, items: list[T]) -> None:
        self._items = copy.deepcopy(list(items))
        self.writes += 1
