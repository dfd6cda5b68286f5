"""Liveness probe."""
from fastapi import APIRouter, Depends

from admin_wallet.core.config import Settings
from admin_wallet.interfaces.http.deps import get_app_settings
from admin_wallet.interfaces.http.schemas import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse, summary="Liveness probe")
async def health(settings: Settings = Depends(get_app_settings)) -> HealthResponse:
    return HealthResponse(network=settings.stellar_network)
