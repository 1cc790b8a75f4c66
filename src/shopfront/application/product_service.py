"""Application service: Product catalog use cases."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from uuid import UUID

from shopfront.domain.exceptions import EntityNotFoundError, ValidationError
from shopfront.domain.model.product import Product
from shopfront.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class ProductService:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def add_product(self, product: Product | None) -> Product:
        if product is None:
            raise ValidationError("Product is required")
        return self._product_repo.add(product)

    def list_products(self) -> list[Product]:
        return self._product_repo.list_all()

    def get_product(self, product_id: UUID) -> Product:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError("Product not found")
        return product

    def update_product(
        self,
        product_id: UUID,
        name: str | None = None,
        price: float | None = None,
    ) -> Product:
        """Update the given fields; fields left as None keep their value.

        This does NOT affect carts or orders that already embed a
        snapshot of the product.
        """
        return self._product_repo.update(product_id, name=name, price=price)

    def apply_discount(self, discount: float, product_ids: Iterable[UUID]) -> int:
        """Apply a percentage discount to every listed product.

        The discount is not bounds-checked.
        """
        changed = self._product_repo.apply_discount(discount, product_ids)
        logger.info("Applied %s%% discount to %d product(s)", discount, changed)
        return changed

    def delete_product(self, product_id: UUID) -> None:
        """Delete a product; deleting an unknown id is a no-op."""
        if self._product_repo.delete_by_id(product_id):
            logger.info("Deleted product %s", product_id)
