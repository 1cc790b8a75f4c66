"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI

from shopfront.infrastructure.bootstrap import build_services
from shopfront.infrastructure.config import Settings, get_settings
from shopfront.infrastructure.http import (
    cart_routes,
    order_routes,
    product_routes,
    user_routes,
)
from shopfront.infrastructure.logging_setup import configure_logging


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="shopfront")
    app.state.services = build_services(settings)

    app.include_router(user_routes.router)
    app.include_router(cart_routes.router)
    app.include_router(order_routes.router)
    app.include_router(product_routes.router)
    return app
