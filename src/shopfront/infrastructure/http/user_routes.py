"""User endpoints, including checkout and cart population."""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Query
from fastapi.responses import PlainTextResponse

from shopfront.domain.exceptions import EntityNotFoundError
from shopfront.infrastructure.bootstrap import Services
from shopfront.infrastructure.http.dependencies import get_services
from shopfront.infrastructure.http.schemas import OrderSchema, UserSchema

router = APIRouter(prefix="/user", tags=["user"])


@router.post("/", response_model=UserSchema)
def add_user(body: UserSchema, services: Services = Depends(get_services)):
    user = services.users.add_user(body.to_domain())
    return UserSchema.from_domain(user)


@router.get("/", response_model=list[UserSchema])
def list_users(services: Services = Depends(get_services)):
    return [UserSchema.from_domain(u) for u in services.users.list_users()]


@router.put("/addProductToCart", response_class=PlainTextResponse)
def add_product_to_cart(
    user_id: UUID = Query(alias="userId"),
    product_id: UUID = Query(alias="productId"),
    services: Services = Depends(get_services),
):
    try:
        services.users.add_product_to_cart(user_id, product_id)
    except EntityNotFoundError as exc:
        return str(exc)
    return "Product added to cart"


@router.put("/deleteProductFromCart", response_class=PlainTextResponse)
def delete_product_from_cart(
    user_id: UUID = Query(alias="userId"),
    product_id: UUID = Query(alias="productId"),
    services: Services = Depends(get_services),
):
    try:
        services.users.delete_product_from_cart(user_id, product_id)
    except EntityNotFoundError as exc:
        return str(exc)
    return "Product removed from cart"


@router.get("/{user_id}", response_model=UserSchema | None)
def get_user(user_id: UUID, services: Services = Depends(get_services)):
    user = services.users.get_user(user_id)
    return UserSchema.from_domain(user) if user is not None else None


@router.delete("/delete/{user_id}", response_class=PlainTextResponse)
def delete_user(user_id: UUID, services: Services = Depends(get_services)):
    try:
        services.users.delete_user(user_id)
    except EntityNotFoundError as exc:
        return str(exc)
    return "User deleted successfully"


@router.get("/{user_id}/orders", response_model=list[OrderSchema])
def get_orders(user_id: UUID, services: Services = Depends(get_services)):
    return [OrderSchema.from_domain(o) for o in services.users.get_orders(user_id)]


@router.post("/{user_id}/checkout", response_class=PlainTextResponse)
def checkout(user_id: UUID, services: Services = Depends(get_services)):
    services.users.checkout(user_id)
    return "Order added successfully"


@router.post("/{user_id}/removeOrder", response_class=PlainTextResponse)
def remove_order(
    user_id: UUID,
    order_id: UUID = Query(alias="orderId"),
    services: Services = Depends(get_services),
):
    services.users.remove_order(user_id, order_id)
    return "Order removed successfully"


@router.delete("/{user_id}/emptyCart", response_class=PlainTextResponse)
def empty_cart(user_id: UUID, services: Services = Depends(get_services)):
    services.users.empty_cart(user_id)
    return "Cart emptied successfully"
