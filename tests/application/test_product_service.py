"""Tests for the product catalog use cases."""

from uuid import uuid4

import pytest

from shopfront.application.product_service import ProductService
from shopfront.domain.exceptions import EntityNotFoundError, ValidationError
from shopfront.domain.model.product import Product
from shopfront.domain.repository.product_repository import ProductRepository
from tests.fakes import InMemoryCollectionStore


def _setup(products: list[Product] | None = None) -> ProductService:
    return ProductService(ProductRepository(InMemoryCollectionStore(products)))


class TestAddAndGet:

    def test_added_product_round_trips(self):
        service = _setup()
        p = Product.create("Widget", 12.5)
        service.add_product(p)

        fetched = service.get_product(p.id)
        assert (fetched.id, fetched.name, fetched.price) == (p.id, "Widget", 12.5)

    def test_add_none_rejected(self):
        with pytest.raises(ValidationError):
            _setup().add_product(None)

    def test_get_unknown_raises(self):
        with pytest.raises(EntityNotFoundError, match="Product not found"):
            _setup().get_product(uuid4())


class TestDelete:

    def test_deleted_product_is_not_found(self):
        p = Product.create("Widget", 1.0)
        service = _setup([p])
        service.delete_product(p.id)
        with pytest.raises(EntityNotFoundError):
            service.get_product(p.id)

    def test_delete_unknown_is_noop(self):
        p = Product.create("Widget", 1.0)
        service = _setup([p])
        service.delete_product(uuid4())
        assert service.list_products() == [p]


class TestUpdateAndDiscount:

    def test_update_name_only(self):
        p = Product.create("Widget", 10.0)
        service = _setup([p])
        updated = service.update_product(p.id, name="Gizmo")
        assert updated.name == "Gizmo"
        assert service.get_product(p.id).price == 10.0

    def test_update_unknown_raises(self):
        with pytest.raises(EntityNotFoundError):
            _setup().update_product(uuid4(), price=1.0)

    def test_discount_example(self):
        a = Product.create("A", 100.00)
        b = Product.create("B", 200.00)
        service = _setup([a, b])
        service.apply_discount(20, {a.id, b.id})
        assert service.get_product(a.id).price == pytest.approx(80.00, abs=0.01)
        assert service.get_product(b.id).price == pytest.approx(160.00, abs=0.01)
