"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
One store is shared per file path while it is in use, so that its lock
covers every repository and service touching that file within this
process.
"""

from __future__ import annotations

import threading
import weakref
from dataclasses import dataclass
from pathlib import Path

from shopfront.application.cart_service import CartService
from shopfront.application.order_service import OrderService
from shopfront.application.product_service import ProductService
from shopfront.application.user_service import UserService
from shopfront.domain.repository.cart_repository import CartRepository
from shopfront.domain.repository.order_repository import OrderRepository
from shopfront.domain.repository.product_repository import ProductRepository
from shopfront.domain.repository.user_repository import UserRepository
from shopfront.infrastructure.config import Settings, get_settings
from shopfront.infrastructure.persistence.codecs import (
    CART_CODEC,
    ORDER_CODEC,
    PRODUCT_CODEC,
    USER_CODEC,
    Codec,
)
from shopfront.infrastructure.persistence.json_collection_store import (
    JsonCollectionStore,
)


# Stores live as long as some repository still references them.
_stores: weakref.WeakValueDictionary[Path, JsonCollectionStore] = weakref.WeakValueDictionary()
_stores_lock = threading.Lock()


def _store(file_path: Path, codec: Codec) -> JsonCollectionStore:
    with _stores_lock:
        store = _stores.get(file_path)
        if store is None:
            store = JsonCollectionStore(file_path, codec)
            _stores[file_path] = store
        return store


def product_repository(settings: Settings | None = None) -> ProductRepository:
    settings = settings or get_settings()
    return ProductRepository(_store(settings.products_path.resolve(), PRODUCT_CODEC))


def cart_repository(settings: Settings | None = None) -> CartRepository:
    settings = settings or get_settings()
    return CartRepository(_store(settings.carts_path.resolve(), CART_CODEC))


def order_repository(settings: Settings | None = None) -> OrderRepository:
    settings = settings or get_settings()
    return OrderRepository(_store(settings.orders_path.resolve(), ORDER_CODEC))


def user_repository(settings: Settings | None = None) -> UserRepository:
    settings = settings or get_settings()
    return UserRepository(_store(settings.users_path.resolve(), USER_CODEC))


@dataclass(frozen=True)
class Services:
    products: ProductService
    carts: CartService
    orders: OrderService
    users: UserService


def build_services(settings: Settings | None = None) -> Services:
    settings = settings or get_settings()
    products = product_repository(settings)
    carts = cart_repository(settings)
    orders = order_repository(settings)
    users = user_repository(settings)

    order_service = OrderService(order_repo=orders)
    cart_service = CartService(cart_repo=carts, product_repo=products)
    return Services(
        products=ProductService(product_repo=products),
        carts=cart_service,
        orders=order_service,
        users=UserService(
            user_repo=users,
            order_service=order_service,
            cart_service=cart_service,
            product_repo=products,
        ),
    )
