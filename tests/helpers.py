"""Test doubles and builders shared across the test suite."""

from __future__ import annotations

from typing import Any, Optional

from fastapi.testclient import TestClient
from stellar_sdk import Network

from admin_wallet.core.config import Settings
from admin_wallet.domain.ledger import (
    AccountSnapshot,
    AdminCredentials,
    Balance,
    SubmissionResult,
    TransactionEnvelope,
)
from admin_wallet.domain.payments import PaymentService
from admin_wallet.infrastructure.stellar import StellarEnvelopeSigner
from admin_wallet.interfaces.http.deps import get_payment_service
from admin_wallet.main import create_app

FIXED_NOW = 1_700_000_000.0


class FakeLedger:
    """LedgerClient double that records every call in order."""

    def __init__(
        self,
        *,
        sequence: int = 100,
        base_fee: int = 100,
        balances: tuple[Balance, ...] = (Balance(asset_type="native", amount="1234.5678900"),),
        submit_result: Optional[dict[str, Any]] = None,
        load_error: Optional[Exception] = None,
        fee_error: Optional[Exception] = None,
        submit_error: Optional[Exception] = None,
    ) -> None:
        self.sequence = sequence
        self.base_fee = base_fee
        self.balances = balances
        self.submit_result = submit_result or {"hash": "abc123", "ledger": 4242, "successful": True}
        self.load_error = load_error
        self.fee_error = fee_error
        self.submit_error = submit_error
        self.calls: list[tuple[str, Any]] = []
        self.submitted: list[TransactionEnvelope] = []

    async def load_account(self, address: str) -> AccountSnapshot:
        self.calls.append(("load_account", address))
        if self.load_error is not None:
            raise self.load_error
        return AccountSnapshot(account_id=address, sequence=self.sequence, balances=self.balances)

    async def fetch_base_fee(self) -> int:
        self.calls.append(("fetch_base_fee", None))
        if self.fee_error is not None:
            raise self.fee_error
        return self.base_fee

    async def submit(self, envelope: TransactionEnvelope) -> SubmissionResult:
        self.calls.append(("submit", envelope.hash))
        self.submitted.append(envelope)
        if self.submit_error is not None:
            raise self.submit_error
        return SubmissionResult(
            hash=self.submit_result.get("hash", envelope.hash),
            ledger=self.submit_result.get("ledger"),
            successful=bool(self.submit_result.get("successful", True)),
            raw=self.submit_result,
        )


def build_service(
    ledger: FakeLedger,
    credentials: AdminCredentials,
    *,
    transaction_timeout: int = 30,
) -> PaymentService:
    return PaymentService(
        ledger,
        StellarEnvelopeSigner(),
        credentials,
        network_passphrase=Network.TESTNET_NETWORK_PASSPHRASE,
        transaction_timeout=transaction_timeout,
        clock=lambda: FIXED_NOW,
    )


def build_client(service: PaymentService, **settings_overrides: Any) -> TestClient:
    settings = Settings(_env_file=None, log_level="WARNING", **settings_overrides)
    app = create_app(settings)
    app.dependency_overrides[get_payment_service] = lambda: service
    return TestClient(app)
