"""Payment domain service: balance queries and payment submission."""

from __future__ import annotations

import logging
import time
from typing import Callable

from admin_wallet.domain.ledger import (
    AdminCredentials,
    AdminIdentity,
    ConfigurationError,
    EnvelopeSigner,
    LedgerClient,
    SubmissionResult,
    TransactionEnvelope,
)

from .builder import build_payment_envelope
from .models import PaymentIntent

logger = logging.getLogger(__name__)


class PaymentService:
    """Orchestrates ledger calls for the admin account.

    No state is kept between calls: sequence number and base fee are read
    from the ledger on every payment, and concurrent payments are left for the
    ledger's sequence check to order.
    """

    def __init__(
        self,
        ledger: LedgerClient,
        signer: EnvelopeSigner,
        credentials: AdminCredentials,
        *,
        network_passphrase: str,
        transaction_timeout: int = 30,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._ledger = ledger
        self._signer = signer
        self._credentials = credentials
        self._network_passphrase = network_passphrase
        self._transaction_timeout = transaction_timeout
        self._clock = clock

    def admin_identity(self) -> AdminIdentity:
        seed = self._credentials.secret_seed
        if not seed:
            raise ConfigurationError("Admin secret key is not configured")
        identity = self._signer.derive_identity(seed)
        expected = self._credentials.public_address
        if expected and expected != identity.public_key:
            raise ConfigurationError("Admin secret key does not match the configured admin address")
        return identity

    def admin_address(self) -> str:
        if self._credentials.public_address:
            return self._credentials.public_address
        if self._credentials.secret_seed:
            return self.admin_identity().public_key
        raise ConfigurationError("Admin account is not configured")

    async def get_balance(self) -> str:
        snapshot = await self._ledger.load_account(self.admin_address())
        return snapshot.native_balance().amount

    async def prepare_payment(self, intent: PaymentIntent, identity: AdminIdentity) -> TransactionEnvelope:
        snapshot = await self._ledger.load_account(identity.public_key)
        base_fee = await self._ledger.fetch_base_fee()
        envelope = build_payment_envelope(
            snapshot,
            intent,
            base_fee=base_fee,
            network_passphrase=self._network_passphrase,
            timeout_seconds=self._transaction_timeout,
            now=self._clock(),
        )
        return self._signer.sign(envelope, identity)

    async def send_payment(self, intent: PaymentIntent) -> SubmissionResult:
        identity = self.admin_identity()
        envelope = await self.prepare_payment(intent, identity)
        logger.info(
            "Submitting payment of %s to %s (sequence %s, fee %s, hash %s)",
            intent.amount,
            intent.destination,
            envelope.sequence,
            envelope.fee,
            envelope.hash,
        )
        result = await self._ledger.submit(envelope)
        logger.info("Payment %s applied in ledger %s", result.hash, result.ledger)
        return result
