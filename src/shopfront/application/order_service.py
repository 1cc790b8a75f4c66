"""Application service: Order use cases.

Operates on the independent order collection only; users' embedded
order lists are handled by UserService.
"""

from __future__ import annotations

import logging
from uuid import UUID

from shopfront.domain.exceptions import EntityNotFoundError, ValidationError
from shopfront.domain.model.order import Order
from shopfront.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class OrderService:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def add_order(self, order: Order | None) -> Order:
        if order is None:
            raise ValidationError("Order is required")
        return self._order_repo.add(order)

    def list_orders(self) -> list[Order]:
        return self._order_repo.list_all()

    def get_order(self, order_id: UUID) -> Order | None:
        return self._order_repo.get_by_id(order_id)

    def delete_order(self, order_id: UUID) -> None:
        """Delete an order, failing loudly if it does not exist."""
        if self._order_repo.get_by_id(order_id) is None:
            raise EntityNotFoundError("Order not found")
        self._order_repo.delete_by_id(order_id)
        logger.info("Deleted order %s", order_id)
