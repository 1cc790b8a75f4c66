"""Product entity.

Products live independently of carts and orders. Whenever a product is
added to a cart or an order, a *snapshot* of its current fields is
embedded there, so later price changes never reach back into existing
carts or orders.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from uuid import UUID, uuid4

from shopfront.domain.exceptions import ValidationError


@dataclass
class Product:
    """A product in the catalog.

    ``price`` is a plain float and is not bounds-checked: a discount over
    100% legitimately produces a negative price.
    """

    id: UUID
    name: str
    price: float

    @staticmethod
    def create(name: str, price: float) -> Product:
        """Create a new product with a freshly generated id."""
        if name is None:
            raise ValidationError("Product name is required")
        return Product(id=uuid4(), name=name, price=float(price))

    def snapshot(self) -> Product:
        """Return an independent copy for embedding in a cart or order."""
        return replace(self)

    def apply_discount(self, discount: float) -> None:
        """Reduce the price by *discount* percent."""
        self.price = self.price * (1 - discount / 100)
