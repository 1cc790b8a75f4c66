"""Repository for the Product collection."""

from __future__ import annotations

from collections.abc import Iterable
from uuid import UUID

from shopfront.domain.exceptions import EntityNotFoundError
from shopfront.domain.model.product import Product
from shopfront.domain.repository.entity_repository import EntityRepository


class ProductRepository(EntityRepository[Product]):

    def update(
        self,
        product_id: UUID,
        name: str | None = None,
        price: float | None = None,
    ) -> Product:
        """Partially update a product.

        ``None`` means "not provided" and leaves the field alone; an
        explicit ``0.0`` price is applied.
        """
        with self._store.locked():
            products = self._store.load_all()
            for product in products:
                if product.id == product_id:
                    if name is not None:
                        product.name = name
                    if price is not None:
                        product.price = float(price)
                    self._store.overwrite_all(products)
                    return product
        raise EntityNotFoundError("Product not found")

    def apply_discount(self, discount: float, product_ids: Iterable[UUID]) -> int:
        """Discount every listed product in a single rewrite.

        Ids that match nothing are ignored.  Returns the number of
        products changed.
        """
        wanted = set(product_ids)
        with self._store.locked():
            products = self._store.load_all()
            changed = 0
            for product in products:
                if product.id in wanted:
                    product.apply_discount(discount)
                    changed += 1
            self._store.overwrite_all(products)
            return changed
