"""Transaction envelope construction."""

from __future__ import annotations

from admin_wallet.domain.ledger import (
    AccountSnapshot,
    PaymentOperation,
    ProtocolError,
    TimeBounds,
    TransactionEnvelope,
)

from .models import PaymentIntent


def build_payment_envelope(
    snapshot: AccountSnapshot,
    intent: PaymentIntent,
    *,
    base_fee: int,
    network_passphrase: str,
    timeout_seconds: int,
    now: float,
) -> TransactionEnvelope:
    """Build an unsigned single-payment envelope from a fresh account snapshot.

    The envelope consumes sequence ``snapshot.sequence + 1``; the ledger refuses
    it if the account moved on in the meantime. Building is pure, so calling it
    twice on the same snapshot yields equal envelopes.
    """
    if base_fee < 1:
        raise ProtocolError(f"Ledger reported an unusable base fee: {base_fee}")
    operation = PaymentOperation(destination=intent.destination, amount=intent.amount)
    return TransactionEnvelope(
        source_account=snapshot.account_id,
        sequence=snapshot.sequence + 1,
        base_fee=base_fee,
        operations=(operation,),
        time_bounds=TimeBounds(min_time=0, max_time=int(now) + timeout_seconds),
        network_passphrase=network_passphrase,
    )
