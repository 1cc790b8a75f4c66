"""Tests for the cart use cases."""

from uuid import uuid4

import pytest

from shopfront.application.cart_service import CartService
from shopfront.domain.exceptions import EntityNotFoundError, ValidationError
from shopfront.domain.model.cart import Cart
from shopfront.domain.model.product import Product
from shopfront.domain.repository.cart_repository import CartRepository
from shopfront.domain.repository.product_repository import ProductRepository
from tests.fakes import InMemoryCollectionStore


def _setup():
    widget = Product.create("Widget", 15.0)
    product_repo = ProductRepository(InMemoryCollectionStore([widget]))
    cart_repo = CartRepository(InMemoryCollectionStore())
    return CartService(cart_repo, product_repo), product_repo, widget


class TestCartLookup:

    def test_add_and_get(self):
        service, _, _ = _setup()
        cart = service.add_cart(Cart.create(uuid4()))
        assert service.get_cart(cart.id) == cart
        assert service.get_cart_by_user_id(cart.user_id) == cart

    def test_unknown_cart_is_none(self):
        service, _, _ = _setup()
        assert service.get_cart(uuid4()) is None
        assert service.get_cart_by_user_id(uuid4()) is None

    def test_add_none_rejected(self):
        service, _, _ = _setup()
        with pytest.raises(ValidationError):
            service.add_cart(None)


class TestCartProducts:

    def test_snapshot_survives_price_change(self):
        service, product_repo, widget = _setup()
        cart = service.add_cart(Cart.create(uuid4()))
        service.add_product_to_cart(cart.id, widget)

        product_repo.update(widget.id, price=99.0)

        assert service.get_cart(cart.id).products[0].price == 15.0

    def test_add_to_unknown_cart_is_silent(self):
        service, _, widget = _setup()
        service.add_product_to_cart(uuid4(), widget)
        assert service.list_carts() == []

    def test_delete_product(self):
        service, _, widget = _setup()
        cart = service.add_cart(Cart.create(uuid4()))
        service.add_product_to_cart(cart.id, widget)
        service.delete_product_from_cart(cart.id, widget.id)
        assert service.get_cart(cart.id).products == []

    def test_delete_unknown_product_reports_not_found(self):
        service, _, _ = _setup()
        cart = service.add_cart(Cart.create(uuid4()))
        with pytest.raises(EntityNotFoundError, match="Product not found"):
            service.delete_product_from_cart(cart.id, uuid4())

    def test_delete_cart_unknown_is_noop(self):
        service, _, _ = _setup()
        cart = service.add_cart(Cart.create(uuid4()))
        service.delete_cart(uuid4())
        assert service.list_carts() == [cart]
        service.delete_cart(cart.id)
        assert service.list_carts() == []
