"""Request/response bodies for the HTTP surface.

Field names match the entity attribute names, which are also the field
names on disk.  A body that omits ``id`` gets a freshly generated one.
"""

from __future__ import annotations

from uuid import UUID, uuid4

from pydantic import BaseModel, Field

from shopfront.domain.model.cart import Cart
from shopfront.domain.model.order import Order
from shopfront.domain.model.product import Product
from shopfront.domain.model.user import User


class ProductSchema(BaseModel):
    id: UUID = Field(default_factory=uuid4)
    name: str
    price: float

    @classmethod
    def from_domain(cls, product: Product) -> ProductSchema:
        return cls(id=product.id, name=product.name, price=product.price)

    def to_domain(self) -> Product:
        return Product(id=self.id, name=self.name, price=self.price)


class ProductUpdate(BaseModel):
    """Partial update: a field left out (or null) keeps its current value."""

    name: str | None = None
    price: float | None = None


class CartSchema(BaseModel):
    id: UUID = Field(default_factory=uuid4)
    user_id: UUID | None = None
    products: list[ProductSchema] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, cart: Cart) -> CartSchema:
        return cls(
            id=cart.id,
            user_id=cart.user_id,
            products=[ProductSchema.from_domain(p) for p in cart.products],
        )

    def to_domain(self) -> Cart:
        return Cart(
            id=self.id,
            user_id=self.user_id,
            products=[p.to_domain() for p in self.products],
        )


class OrderSchema(BaseModel):
    id: UUID = Field(default_factory=uuid4)
    user_id: UUID
    total_price: float = 0.0
    products: list[ProductSchema] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, order: Order) -> OrderSchema:
        return cls(
            id=order.id,
            user_id=order.user_id,
            total_price=order.total_price,
            products=[ProductSchema.from_domain(p) for p in order.products],
        )

    def to_domain(self) -> Order:
        return Order(
            id=self.id,
            user_id=self.user_id,
            total_price=self.total_price,
            products=[p.to_domain() for p in self.products],
        )


class UserSchema(BaseModel):
    id: UUID = Field(default_factory=uuid4)
    name: str
    orders: list[OrderSchema] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, user: User) -> UserSchema:
        return cls(
            id=user.id,
            name=user.name,
            orders=[OrderSchema.from_domain(o) for o in user.orders],
        )

    def to_domain(self) -> User:
        return User(
            id=self.id,
            name=self.name,
            orders=[o.to_domain() for o in self.orders],
        )
