"""Application configuration using pydantic settings with structured sections."""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import BaseModel, Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from admin_wallet.domain.ledger import AdminCredentials, LedgerNetwork, resolve_network

NETWORK_ALIASES = {
    "testnet": "testnet",
    "test": "testnet",
    "public": "public",
    "pubnet": "public",
    "mainnet": "public",
    "production": "public",
}


class ServerSettings(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False


class HorizonSettings(BaseModel):
    testnet_url: str = "https://horizon-testnet.stellar.org"
    public_url: str = "https://horizon.stellar.org"
    request_timeout: float = Field(default=20.0, gt=0)


class TransactionSettings(BaseModel):
    timeout_seconds: int = Field(default=30, gt=0)


class Settings(BaseSettings):
    """Top-level application settings with nested sections.

    The admin key material keeps the names used by existing deployments
    (``ADMIN_STELLAR_SECRET``, ``ADMIN_STELLAR_PUBLIC``, ``STELLAR_NETWORK``).
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_nested_delimiter="__",
        extra="ignore",
        case_sensitive=False,
    )

    debug: bool = False
    project_name: str = "Stellar Admin Wallet"
    log_level: str = "INFO"

    admin_stellar_secret: Optional[SecretStr] = None
    admin_stellar_public: Optional[str] = None
    stellar_network: Literal["testnet", "public"] = "testnet"

    server: ServerSettings = ServerSettings()
    horizon: HorizonSettings = HorizonSettings()
    transaction: TransactionSettings = TransactionSettings()

    @field_validator("admin_stellar_secret", "admin_stellar_public", mode="before")
    @classmethod
    def _blank_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("stellar_network", mode="before")
    @classmethod
    def _normalize_network(cls, value):
        if isinstance(value, str):
            return NETWORK_ALIASES.get(value.strip().lower(), value)
        return value

    @property
    def network(self) -> LedgerNetwork:
        return resolve_network(
            self.stellar_network,
            testnet_url=self.horizon.testnet_url,
            public_url=self.horizon.public_url,
        )

    @property
    def admin_credentials(self) -> AdminCredentials:
        secret = self.admin_stellar_secret.get_secret_value() if self.admin_stellar_secret else None
        return AdminCredentials(public_address=self.admin_stellar_public, secret_seed=secret)

    @property
    def host(self) -> str:
        return self.server.host

    @property
    def port(self) -> int:
        return self.server.port

    @property
    def request_timeout(self) -> float:
        return self.horizon.request_timeout

    @property
    def transaction_timeout(self) -> int:
        return self.transaction.timeout_seconds


@lru_cache()
def get_settings() -> Settings:
    return Settings()
