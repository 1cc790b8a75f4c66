"""Cart entity."""

from __future__ import annotations

from dataclasses import dataclass, field
from uuid import UUID, uuid4

from shopfront.domain.model.product import Product


@dataclass
class Cart:
    """A shopping cart holding product snapshots.

    A cart may exist before it is attached to a user, hence the optional
    ``user_id``.  Duplicates are allowed: adding the same product twice
    yields two entries.
    """

    id: UUID
    user_id: UUID | None = None
    products: list[Product] = field(default_factory=list)

    @staticmethod
    def create(user_id: UUID | None = None) -> Cart:
        return Cart(id=uuid4(), user_id=user_id)

    def add_product(self, product: Product) -> None:
        self.products.append(product.snapshot())

    def remove_product(self, product_id: UUID) -> int:
        """Drop every entry for *product_id*; return how many were removed."""
        before = len(self.products)
        self.products = [p for p in self.products if p.id != product_id]
        return before - len(self.products)
