"""Order endpoints (independent order collection only)."""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from shopfront.domain.exceptions import EntityNotFoundError
from shopfront.infrastructure.bootstrap import Services
from shopfront.infrastructure.http.dependencies import get_services
from shopfront.infrastructure.http.schemas import OrderSchema

router = APIRouter(prefix="/order", tags=["order"])


@router.post("/", response_model=OrderSchema)
def add_order(body: OrderSchema, services: Services = Depends(get_services)):
    return OrderSchema.from_domain(services.orders.add_order(body.to_domain()))


@router.get("/", response_model=list[OrderSchema])
def list_orders(services: Services = Depends(get_services)):
    return [OrderSchema.from_domain(o) for o in services.orders.list_orders()]


@router.get("/{order_id}", response_model=OrderSchema | None)
def get_order(order_id: UUID, services: Services = Depends(get_services)):
    order = services.orders.get_order(order_id)
    return OrderSchema.from_domain(order) if order is not None else None


@router.delete("/delete/{order_id}", response_class=PlainTextResponse)
def delete_order(order_id: UUID, services: Services = Depends(get_services)):
    try:
        services.orders.delete_order(order_id)
    except EntityNotFoundError as exc:
        return str(exc)
    return "Order deleted successfully"
