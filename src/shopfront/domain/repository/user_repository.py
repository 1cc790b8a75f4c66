"""Repository for the User collection.

Users embed their orders, so order mutations here rewrite the whole
user collection.  They never touch the independent order collection.
"""

from __future__ import annotations

from collections.abc import Callable
from uuid import UUID

from shopfront.domain.model.order import Order
from shopfront.domain.model.user import User
from shopfront.domain.repository.entity_repository import EntityRepository


class UserRepository(EntityRepository[User]):

    def get_orders(self, user_id: UUID) -> list[Order]:
        """Return the user's embedded orders; empty for an unknown user."""
        user = self.get_by_id(user_id)
        return user.orders if user is not None else []

    def add_order(self, user_id: UUID, order: Order) -> bool:
        return self.modify(user_id, lambda user: user.add_order(order)) is not None

    def remove_order(self, user_id: UUID, order_id: UUID) -> bool:
        return self.modify(user_id, lambda user: user.remove_order(order_id)) is not None

    def modify(self, user_id: UUID, mutate: Callable[[User], None]) -> User | None:
        """Apply *mutate* to the user and rewrite it by delete-then-re-add.

        Every record with *user_id* is dropped and the mutated first match
        is appended, so the user moves to the end of the collection.  The
        read and the rewrite happen under one hold of the store lock.  An
        unknown user is a silent no-op returning None.
        """
        with self._store.locked():
            users = self._store.load_all()
            user = next((u for u in users if u.id == user_id), None)
            if user is None:
                return None
            mutate(user)
            kept = [u for u in users if u.id != user_id]
            kept.append(user)
            self._store.overwrite_all(kept)
            return user
