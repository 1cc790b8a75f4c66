"""Repository for the Cart collection.

Product mutations load the whole cart collection, change the nested
``products`` list of the matching cart, and rewrite every cart.
"""

from __future__ import annotations

from uuid import UUID

from shopfront.domain.model.cart import Cart
from shopfront.domain.model.product import Product
from shopfront.domain.repository.entity_repository import EntityRepository


class CartRepository(EntityRepository[Cart]):

    def get_by_user_id(self, user_id: UUID) -> Cart | None:
        """Return the first cart owned by *user_id*, or None."""
        for cart in self._store.load_all():
            if cart.user_id == user_id:
                return cart
        return None

    def add_product(self, cart_id: UUID, product: Product) -> bool:
        """Append a snapshot of *product* to the cart.

        An unknown cart is a silent no-op; returns whether a cart matched.
        """
        with self._store.locked():
            carts = self._store.load_all()
            for cart in carts:
                if cart.id == cart_id:
                    cart.add_product(product)
                    self._store.overwrite_all(carts)
                    return True
        return False

    def remove_product(self, cart_id: UUID, product_id: UUID) -> bool:
        """Remove every entry of *product_id* from matching carts."""
        with self._store.locked():
            carts = self._store.load_all()
            matched = False
            for cart in carts:
                if cart.id == cart_id:
                    cart.remove_product(product_id)
                    matched = True
            if matched:
                self._store.overwrite_all(carts)
            return matched

