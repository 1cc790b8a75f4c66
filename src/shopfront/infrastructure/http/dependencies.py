"""Request-scoped access to the services wired by the app factory."""

from __future__ import annotations

from fastapi import Request

from shopfront.infrastructure.bootstrap import Services


def get_services(request: Request) -> Services:
    services = getattr(request.app.state, "services", None)
    if services is None:
        raise RuntimeError("Services not configured on the application")
    return services
