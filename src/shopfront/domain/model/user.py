"""User entity."""

from __future__ import annotations

from dataclasses import dataclass, field
from uuid import UUID, uuid4

from shopfront.domain.exceptions import ValidationError
from shopfront.domain.model.order import Order


@dataclass
class User:
    """A customer with the orders they have checked out.

    ``orders`` holds full embedded copies, not ids.
    """

    id: UUID
    name: str
    orders: list[Order] = field(default_factory=list)

    @staticmethod
    def create(name: str) -> User:
        if name is None:
            raise ValidationError("User name is required")
        return User(id=uuid4(), name=name)

    def add_order(self, order: Order) -> None:
        self.orders.append(order)

    def remove_order(self, order_id: UUID) -> None:
        self.orders = [o for o in self.orders if o.id != order_id]
