"""Reusable FastAPI dependencies."""

from fastapi import Request

from admin_wallet.core.config import Settings
from admin_wallet.core.container import ApplicationContainer
from admin_wallet.domain.payments import PaymentService


def get_container(request: Request) -> ApplicationContainer:
    return request.app.state.container


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_payment_service(request: Request) -> PaymentService:
    service = get_container(request).payment_service
    if service is None:
        raise RuntimeError("Payment service requested before application startup")
    return service


__all__ = [
    "get_container",
    "get_app_settings",
    "get_payment_service",
]
