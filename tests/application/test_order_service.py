"""Tests for the order use cases."""

from uuid import uuid4

import pytest

from shopfront.application.order_service import OrderService
from shopfront.domain.exceptions import EntityNotFoundError
from shopfront.domain.model.order import Order
from shopfront.domain.repository.order_repository import OrderRepository
from tests.fakes import InMemoryCollectionStore


def _setup() -> OrderService:
    return OrderService(OrderRepository(InMemoryCollectionStore()))


class TestOrderService:

    def test_add_and_get(self):
        service = _setup()
        order = service.add_order(Order.create(uuid4(), total_price=42.0))
        assert service.get_order(order.id).total_price == 42.0

    def test_get_unknown_is_none(self):
        assert _setup().get_order(uuid4()) is None

    def test_delete(self):
        service = _setup()
        order = service.add_order(Order.create(uuid4()))
        service.delete_order(order.id)
        assert service.list_orders() == []

    def test_delete_unknown_raises(self):
        with pytest.raises(EntityNotFoundError, match="Order not found"):
            _setup().delete_order(uuid4())
