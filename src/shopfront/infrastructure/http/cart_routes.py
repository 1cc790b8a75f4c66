"""Cart endpoints."""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Query
from fastapi.responses import PlainTextResponse

from shopfront.domain.exceptions import EntityNotFoundError
from shopfront.infrastructure.bootstrap import Services
from shopfront.infrastructure.http.dependencies import get_services
from shopfront.infrastructure.http.schemas import CartSchema, ProductSchema

router = APIRouter(prefix="/cart", tags=["cart"])


@router.post("/", response_model=CartSchema)
def add_cart(body: CartSchema, services: Services = Depends(get_services)):
    return CartSchema.from_domain(services.carts.add_cart(body.to_domain()))


@router.get("/", response_model=list[CartSchema])
def list_carts(services: Services = Depends(get_services)):
    return [CartSchema.from_domain(c) for c in services.carts.list_carts()]


@router.get("/user/{user_id}", response_model=CartSchema | None)
def get_cart_by_user_id(user_id: UUID, services: Services = Depends(get_services)):
    cart = services.carts.get_cart_by_user_id(user_id)
    return CartSchema.from_domain(cart) if cart is not None else None


@router.get("/{cart_id}", response_model=CartSchema | None)
def get_cart(cart_id: UUID, services: Services = Depends(get_services)):
    cart = services.carts.get_cart(cart_id)
    return CartSchema.from_domain(cart) if cart is not None else None


@router.put("/addProduct/{cart_id}", response_class=PlainTextResponse)
def add_product_to_cart(
    cart_id: UUID, body: ProductSchema, services: Services = Depends(get_services)
):
    services.carts.add_product_to_cart(cart_id, body.to_domain())
    return "Product added to cart"


@router.put("/deleteProduct/{cart_id}", response_class=PlainTextResponse)
def delete_product_from_cart(
    cart_id: UUID,
    product_id: UUID = Query(alias="productId"),
    services: Services = Depends(get_services),
):
    try:
        services.carts.delete_product_from_cart(cart_id, product_id)
    except EntityNotFoundError as exc:
        return str(exc)
    return "Product removed from cart"


@router.delete("/delete/{cart_id}", response_class=PlainTextResponse)
def delete_cart(cart_id: UUID, services: Services = Depends(get_services)):
    services.carts.delete_cart(cart_id)
    return "Cart deleted successfully"
