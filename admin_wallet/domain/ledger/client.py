"""Ports for the remote ledger network and transaction signing."""

from __future__ import annotations

from typing import Protocol

from .models import AccountSnapshot, AdminIdentity, SubmissionResult, TransactionEnvelope


class LedgerClient(Protocol):
    async def load_account(self, address: str) -> AccountSnapshot:
        ...

    async def fetch_base_fee(self) -> int:
        ...

    async def submit(self, envelope: TransactionEnvelope) -> SubmissionResult:
        ...


class EnvelopeSigner(Protocol):
    def derive_identity(self, secret_seed: str) -> AdminIdentity:
        ...

    def sign(self, envelope: TransactionEnvelope, identity: AdminIdentity) -> TransactionEnvelope:
        ...
