"""Application service: Cart use cases.

Carts hold product *snapshots*: the product's fields are copied in at
the moment it is added.
"""

from __future__ import annotations

import logging
from uuid import UUID

from shopfront.domain.exceptions import EntityNotFoundError, ValidationError
from shopfront.domain.model.cart import Cart
from shopfront.domain.model.product import Product
from shopfront.domain.repository.cart_repository import CartRepository
from shopfront.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class CartService:

    def __init__(
        self,
        cart_repo: CartRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._cart_repo = cart_repo
        self._product_repo = product_repo

    def add_cart(self, cart: Cart | None) -> Cart:
        if cart is None:
            raise ValidationError("Cart is required")
        return self._cart_repo.add(cart)

    def list_carts(self) -> list[Cart]:
        return self._cart_repo.list_all()

    def get_cart(self, cart_id: UUID) -> Cart | None:
        return self._cart_repo.get_by_id(cart_id)

    def get_cart_by_user_id(self, user_id: UUID) -> Cart | None:
        return self._cart_repo.get_by_user_id(user_id)

    def add_product_to_cart(self, cart_id: UUID, product: Product) -> None:
        """Append a snapshot of *product*; an unknown cart is ignored."""
        if not self._cart_repo.add_product(cart_id, product):
            logger.debug("Cart %s not found, product %s not added", cart_id, product.id)

    def delete_product_from_cart(self, cart_id: UUID, product_id: UUID) -> None:
        """Remove every entry of a catalog product from the cart.

        The product must still exist in the catalog.  An unknown cart is
        ignored.
        """
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError("Product not found")
        self._cart_repo.remove_product(cart_id, product.id)

    def delete_cart(self, cart_id: UUID) -> None:
        if self._cart_repo.delete_by_id(cart_id):
            logger.info("Deleted cart %s", cart_id)
