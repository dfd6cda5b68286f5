from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from admin_wallet import __version__
from admin_wallet.core.config import Settings, get_settings
from admin_wallet.core.container import build_container
from admin_wallet.core.logs import configure_logging
from admin_wallet.interfaces.http import create_api_router
from admin_wallet.interfaces.http.errors import register_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI):
    container = build_container(app.state.settings)
    app.state.container = container
    try:
        yield
    finally:
        await container.shutdown()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    secret = settings.admin_stellar_secret.get_secret_value() if settings.admin_stellar_secret else None
    configure_logging(settings.log_level, secrets=[secret] if secret else [])

    app = FastAPI(
        title=settings.project_name,
        description="Administrative gateway for a custodial Stellar account",
        version=__version__,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.settings = settings

    register_exception_handlers(app)
    app.include_router(create_api_router())
    return app
