"""Serialization between entities and their JSON-ready dict form.

Field names on disk are the entity attribute names.  UUIDs are stored as
canonical strings; products and orders are embedded inline.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar
from uuid import UUID

from shopfront.domain.model.cart import Cart
from shopfront.domain.model.order import Order
from shopfront.domain.model.product import Product
from shopfront.domain.model.user import User

T = TypeVar("T")


@dataclass(frozen=True)
class Codec(Generic[T]):
    """A pair of functions mapping one entity type to and from raw dicts."""

    to_raw: Callable[[T], dict]
    to_domain: Callable[[dict], T]


# --- Product ------------------------------------------------------------------


def product_to_raw(product: Product) -> dict:
    return {
        "id": str(product.id),
        "name": product.name,
        "price": product.price,
    }


def product_to_domain(raw: dict) -> Product:
    return Product(
        id=UUID(raw["id"]),
        name=raw["name"],
        price=float(raw["price"]),
    )


# --- Cart ---------------------------------------------------------------------


def cart_to_raw(cart: Cart) -> dict:
    return {
        "id": str(cart.id),
        "user_id": str(cart.user_id) if cart.user_id is not None else None,
        "products": [product_to_raw(p) for p in cart.products],
    }


def cart_to_domain(raw: dict) -> Cart:
    user_id = raw.get("user_id")
    return Cart(
        id=UUID(raw["id"]),
        user_id=UUID(user_id) if user_id is not None else None,
        products=[product_to_domain(p) for p in raw.get("products") or []],
    )


# --- Order --------------------------------------------------------------------


def order_to_raw(order: Order) -> dict:
    return {
        "id": str(order.id),
        "user_id": str(order.user_id),
        "total_price": order.total_price,
        "products": [product_to_raw(p) for p in order.products],
    }


def order_to_domain(raw: dict) -> Order:
    return Order(
        id=UUID(raw["id"]),
        user_id=UUID(raw["user_id"]),
        total_price=float(raw.get("total_price", 0.0)),
        products=[product_to_domain(p) for p in raw.get("products") or []],
    )


# --- User ---------------------------------------------------------------------


def user_to_raw(user: User) -> dict:
    return {
        "id": str(user.id),
        "name": user.name,
        "orders": [order_to_raw(o) for o in user.orders],
    }


def user_to_domain(raw: dict) -> User:
    return User(
        id=UUID(raw["id"]),
        name=raw["name"],
        orders=[order_to_domain(o) for o in raw.get("orders") or []],
    )


PRODUCT_CODEC: Codec[Product] = Codec(product_to_raw, product_to_domain)
CART_CODEC: Codec[Cart] = Codec(cart_to_raw, cart_to_domain)
ORDER_CODEC: Codec[Order] = Codec(order_to_raw, order_to_domain)
USER_CODEC: Codec[User] = Codec(user_to_raw, user_to_domain)
