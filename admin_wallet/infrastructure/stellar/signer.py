"""Encode and sign transaction envelopes with stellar_sdk."""

from __future__ import annotations

from stellar_sdk import Account, Asset, Keypair, TransactionBuilder

from admin_wallet.domain.ledger import (
    AdminIdentity,
    ConfigurationError,
    RejectedError,
    TransactionEnvelope,
)


class StellarEnvelopeSigner:
    """Translates domain envelopes into signed XDR."""

    def derive_identity(self, secret_seed: str) -> AdminIdentity:
        try:
            keypair = Keypair.from_secret(secret_seed)
        except ValueError as exc:
            # The seed itself must never reach the message.
            raise ConfigurationError("Admin secret key is malformed") from exc
        return AdminIdentity(public_key=keypair.public_key, secret_seed=secret_seed)

    def sign(self, envelope: TransactionEnvelope, identity: AdminIdentity) -> TransactionEnvelope:
        keypair = Keypair.from_secret(identity.secret_seed)
        # TransactionBuilder consumes source.sequence + 1.
        source = Account(envelope.source_account, envelope.sequence - 1)
        builder = TransactionBuilder(
            source_account=source,
            network_passphrase=envelope.network_passphrase,
            base_fee=envelope.base_fee,
        )
        builder.add_time_bounds(envelope.time_bounds.min_time, envelope.time_bounds.max_time)
        try:
            for operation in envelope.operations:
                builder.append_payment_op(
                    destination=operation.destination,
                    asset=Asset.native(),
                    amount=operation.amount,
                )
            transaction = builder.build()
            transaction.sign(keypair)
            xdr = transaction.to_xdr()
            tx_hash = transaction.hash_hex()
        except ValueError as exc:
            # Amounts are validated upstream; the destination is the only unchecked input.
            destinations = ", ".join(repr(operation.destination) for operation in envelope.operations)
            raise RejectedError(
                "Invalid destination",
                title="Invalid destination",
                detail=f"{destinations} is not a valid ledger address",
            ) from exc
        return envelope.signed(xdr=xdr, tx_hash=tx_hash, signer=keypair.public_key)
