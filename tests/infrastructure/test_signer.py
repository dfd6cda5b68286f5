"""Tests for XDR encoding and signing."""

import pytest
from stellar_sdk import Keypair, Network
from stellar_sdk import TransactionEnvelope as SdkTransactionEnvelope

from admin_wallet.domain.ledger import (
    ConfigurationError,
    PaymentOperation,
    RejectedError,
    TimeBounds,
    TransactionEnvelope,
)
from admin_wallet.infrastructure.stellar import StellarEnvelopeSigner

PASSPHRASE = Network.TESTNET_NETWORK_PASSPHRASE


def _envelope(source: str, destination: str, sequence: int = 101) -> TransactionEnvelope:
    return TransactionEnvelope(
        source_account=source,
        sequence=sequence,
        base_fee=100,
        operations=(PaymentOperation(destination=destination, amount="10.5"),),
        time_bounds=TimeBounds(min_time=0, max_time=1_700_000_030),
        network_passphrase=PASSPHRASE,
    )


def test_signed_xdr_matches_the_domain_envelope(admin_keypair: Keypair, destination: str) -> None:
    signer = StellarEnvelopeSigner()
    identity = signer.derive_identity(admin_keypair.secret)

    signed = signer.sign(_envelope(admin_keypair.public_key, destination), identity)

    assert signed.signer == admin_keypair.public_key
    decoded = SdkTransactionEnvelope.from_xdr(signed.xdr, PASSPHRASE)
    transaction = decoded.transaction
    assert transaction.source.account_id == admin_keypair.public_key
    assert transaction.sequence == 101
    assert transaction.fee == 100
    assert transaction.preconditions.time_bounds.min_time == 0
    assert transaction.preconditions.time_bounds.max_time == 1_700_000_030
    assert len(transaction.operations) == 1
    payment = transaction.operations[0]
    assert payment.destination.account_id == destination
    assert payment.asset.is_native()
    assert payment.amount == "10.5"
    assert decoded.hash_hex() == signed.hash
    assert len(decoded.signatures) == 1
    admin_keypair.verify(decoded.hash(), decoded.signatures[0].signature)


def test_signature_commits_to_the_network_passphrase(admin_keypair: Keypair, destination: str) -> None:
    signer = StellarEnvelopeSigner()
    identity = signer.derive_identity(admin_keypair.secret)

    signed = signer.sign(_envelope(admin_keypair.public_key, destination), identity)

    public_view = SdkTransactionEnvelope.from_xdr(signed.xdr, Network.PUBLIC_NETWORK_PASSPHRASE)
    assert public_view.hash_hex() != signed.hash


def test_invalid_destination_is_reported_as_rejection(admin_keypair: Keypair) -> None:
    signer = StellarEnvelopeSigner()
    identity = signer.derive_identity(admin_keypair.secret)

    with pytest.raises(RejectedError) as excinfo:
        signer.sign(_envelope(admin_keypair.public_key, "not-an-address"), identity)

    assert excinfo.value.kind == "rejected"


def test_malformed_seed_is_a_configuration_error() -> None:
    with pytest.raises(ConfigurationError) as excinfo:
        StellarEnvelopeSigner().derive_identity("SBROKENSEED")

    assert "SBROKENSEED" not in excinfo.value.message
