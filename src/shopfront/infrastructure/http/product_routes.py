"""Product catalog endpoints.

Unlike the other resources, a missing product is reported as HTTP 404.
"""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Body, Depends, HTTPException
from fastapi.responses import PlainTextResponse

from shopfront.domain.exceptions import EntityNotFoundError
from shopfront.infrastructure.bootstrap import Services
from shopfront.infrastructure.http.dependencies import get_services
from shopfront.infrastructure.http.schemas import ProductSchema, ProductUpdate

router = APIRouter(prefix="/product", tags=["product"])


@router.post("/", response_model=ProductSchema)
def add_product(body: ProductSchema, services: Services = Depends(get_services)):
    return ProductSchema.from_domain(services.products.add_product(body.to_domain()))


@router.get("/", response_model=list[ProductSchema])
def list_products(services: Services = Depends(get_services)):
    return [ProductSchema.from_domain(p) for p in services.products.list_products()]


@router.put("/applyDiscount", response_class=PlainTextResponse)
def apply_discount(
    discount: float,
    product_ids: list[UUID] = Body(...),
    services: Services = Depends(get_services),
):
    services.products.apply_discount(discount, product_ids)
    return "Discount applied successfully"


@router.get("/{product_id}", response_model=ProductSchema)
def get_product(product_id: UUID, services: Services = Depends(get_services)):
    try:
        product = services.products.get_product(product_id)
    except EntityNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    return ProductSchema.from_domain(product)


@router.put("/update/{product_id}", response_model=ProductSchema)
def update_product(
    product_id: UUID, body: ProductUpdate, services: Services = Depends(get_services)
):
    try:
        product = services.products.update_product(
            product_id, name=body.name, price=body.price
        )
    except EntityNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    return ProductSchema.from_domain(product)


@router.delete("/delete/{product_id}", response_class=PlainTextResponse)
def delete_product(product_id: UUID, services: Services = Depends(get_services)):
    services.products.delete_product(product_id)
    return "Product deleted successfully"
