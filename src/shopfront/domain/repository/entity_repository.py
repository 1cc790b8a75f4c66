"""Operations shared by every entity repository.

All lookups are a full load followed by a linear scan.  Nothing is cached
between calls, so every call observes the current file contents.
"""

from __future__ import annotations

from typing import Generic, TypeVar
from uuid import UUID

from shopfront.domain.repository.collection_store import CollectionStore

T = TypeVar("T")


class EntityRepository(Generic[T]):

    def __init__(self, store: CollectionStore[T]) -> None:
        self._store = store

    def add(self, item: T) -> T:
        """Append *item*.  Id uniqueness is not checked."""
        self._store.append(item)
        return item

    def list_all(self) -> list[T]:
        return self._store.load_all()

    def get_by_id(self, entity_id: UUID) -> T | None:
        """Return the first entity with *entity_id*, or None."""
        for item in self._store.load_all():
            if item.id == entity_id:  # type: ignore[attr-defined]
                return item
        return None

    def delete_by_id(self, entity_id: UUID) -> bool:
        """Remove every entity with *entity_id*.

        The collection is rewritten only if something was removed.
        Returns whether anything was removed.
        """
        with self._store.locked():
            items = self._store.load_all()
            kept = [i for i in items if i.id != entity_id]  # type: ignore[attr-defined]
            if len(kept) == len(items):
                return False
            self._store.overwrite_all(kept)
            return True
