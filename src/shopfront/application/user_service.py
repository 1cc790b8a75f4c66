"""Application service: User use cases, including checkout and cart
population.

This is the only service that coordinates several collections (users,
orders, carts and products).  None of its multi-collection workflows are
transactional: a crash between two writes leaves the collections out of
step.
"""

from __future__ import annotations

import logging
from uuid import UUID

from shopfront.application.cart_service import CartService
from shopfront.application.order_service import OrderService
from shopfront.domain.exceptions import EntityNotFoundError, ValidationError
from shopfront.domain.model.cart import Cart
from shopfront.domain.model.order import Order
from shopfront.domain.model.user import User
from shopfront.domain.repository.product_repository import ProductRepository
from shopfront.domain.repository.user_repository import UserRepository

logger = logging.getLogger(__name__)


class UserService:

    def __init__(
        self,
        user_repo: UserRepository,
        order_service: OrderService,
        cart_service: CartService,
        product_repo: ProductRepository,
    ) -> None:
        self._user_repo = user_repo
        self._order_service = order_service
        self._cart_service = cart_service
        self._product_repo = product_repo

    def add_user(self, user: User | None) -> User:
        if user is None:
            raise ValidationError("User is required")
        return self._user_repo.add(user)

    def list_users(self) -> list[User]:
        return self._user_repo.list_all()

    def get_user(self, user_id: UUID) -> User | None:
        return self._user_repo.get_by_id(user_id)

    def get_orders(self, user_id: UUID) -> list[Order]:
        return self._user_repo.get_orders(user_id)

    def checkout(self, user_id: UUID) -> Order | None:
        """Create an empty order for the user.

        The order goes into both the user's embedded list and the
        independent order collection.  An unknown user is a silent no-op
        and returns None.
        """
        order = Order.create(user_id=user_id)
        if not self._user_repo.add_order(user_id, order):
            logger.debug("Checkout for unknown user %s ignored", user_id)
            return None
        self._order_service.add_order(order)

        logger.info("User %s checked out order %s", user_id, order.id)
        return order

    def remove_order(self, user_id: UUID, order_id: UUID) -> None:
        """Remove an order from the user's embedded list only.

        The order stays in the independent order collection.
        """
        self._user_repo.remove_order(user_id, order_id)

    def empty_cart(self, user_id: UUID) -> None:
        """Accepted but intentionally has no effect."""

    def delete_user(self, user_id: UUID) -> None:
        if not self._user_repo.delete_by_id(user_id):
            raise EntityNotFoundError("User not found")
        logger.info("Deleted user %s", user_id)

    # --- Cart population ------------------------------------------------------

    def add_product_to_cart(self, user_id: UUID, product_id: UUID) -> Cart:
        """Add a catalog product to the user's cart.

        The cart is created on first use.  Raises EntityNotFoundError if
        the product does not exist; the freshly created cart is kept in
        that case.
        """
        cart = self._cart_service.get_cart_by_user_id(user_id)
        if cart is None:
            cart = self._cart_service.add_cart(Cart.create(user_id=user_id))

        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError("Product not found")

        self._cart_service.add_product_to_cart(cart.id, product)
        return cart

    def delete_product_from_cart(self, user_id: UUID, product_id: UUID) -> None:
        cart = self._cart_service.get_cart_by_user_id(user_id)
        if cart is None:
            raise EntityNotFoundError("Cart is empty")
        self._cart_service.delete_product_from_cart(cart.id, product_id)
