from fastapi import APIRouter

from admin_wallet.interfaces.http.routers import health, wallet


def create_api_router(prefix: str = "") -> APIRouter:
    router = APIRouter(prefix=prefix)
    router.include_router(wallet.router, tags=["wallet"])
    router.include_router(health.router, tags=["health"])
    return router


__all__ = [
    "create_api_router",
]
