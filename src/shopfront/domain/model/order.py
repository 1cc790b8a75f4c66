"""Order entity.

Orders are stored twice: once in the independent order collection and
once embedded in the owning user's ``orders`` list.  The two copies are
only kept in step by the operations that explicitly write to both.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from uuid import UUID, uuid4

from shopfront.domain.model.product import Product


@dataclass
class Order:
    """A placed order.

    ``total_price`` is supplied by the creator and is never recomputed
    from ``products``; it may be stale or zero.
    """

    id: UUID
    user_id: UUID
    total_price: float = 0.0
    products: list[Product] = field(default_factory=list)

    @staticmethod
    def create(
        user_id: UUID,
        total_price: float = 0.0,
        products: list[Product] | None = None,
    ) -> Order:
        """Create a new order, snapshotting any products given."""
        return Order(
            id=uuid4(),
            user_id=user_id,
            total_price=float(total_price),
            products=[p.snapshot() for p in products or []],
        )
