"""Repository for the independent Order collection.

Only the shared lookups apply; the embedded copies inside users are
managed through UserRepository.
"""

from __future__ import annotations

from shopfront.domain.model.order import Order
from shopfront.domain.repository.entity_repository import EntityRepository


class OrderRepository(EntityRepository[Order]):
    pass
