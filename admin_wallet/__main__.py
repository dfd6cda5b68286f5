import uvicorn

from admin_wallet.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "admin_wallet.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=settings.server.reload,
    )


if __name__ == "__main__":
    main()
