"""Domain models for ledger reads and transaction envelopes."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Mapping, Optional

from .exceptions import ProtocolError

NATIVE_ASSET_TYPE = "native"


@dataclass(slots=True, frozen=True)
class Balance:
    asset_type: str
    amount: str
    asset_code: Optional[str] = None
    asset_issuer: Optional[str] = None

    @property
    def is_native(self) -> bool:
        return self.asset_type == NATIVE_ASSET_TYPE


@dataclass(slots=True, frozen=True)
class AccountSnapshot:
    """Account state as reported by the ledger at one point in time."""

    account_id: str
    sequence: int
    balances: tuple[Balance, ...] = ()

    def native_balance(self) -> Balance:
        native = [balance for balance in self.balances if balance.is_native]
        if len(native) != 1:
            raise ProtocolError(
                f"Ledger reported {len(native)} native balance entries for account {self.account_id}"
            )
        return native[0]


@dataclass(slots=True, frozen=True)
class PaymentOperation:
    destination: str
    amount: str
    asset_type: str = NATIVE_ASSET_TYPE


@dataclass(slots=True, frozen=True)
class TimeBounds:
    min_time: int
    max_time: int


@dataclass(slots=True, frozen=True)
class TransactionEnvelope:
    """A single-payment transaction, unsigned until ``signed`` is called.

    ``base_fee`` is the per-operation fee; the ledger charges
    ``base_fee * len(operations)``.
    """

    source_account: str
    sequence: int
    base_fee: int
    operations: tuple[PaymentOperation, ...]
    time_bounds: TimeBounds
    network_passphrase: str = field(repr=False)
    xdr: Optional[str] = field(default=None, repr=False)
    hash: Optional[str] = None
    signer: Optional[str] = None

    @property
    def fee(self) -> int:
        return self.base_fee * len(self.operations)

    @property
    def is_signed(self) -> bool:
        return self.xdr is not None

    def signed(self, *, xdr: str, tx_hash: str, signer: str) -> "TransactionEnvelope":
        if self.is_signed:
            raise ValueError("Envelope is already signed")
        return replace(self, xdr=xdr, hash=tx_hash, signer=signer)


@dataclass(slots=True, frozen=True)
class SubmissionResult:
    hash: str
    ledger: Optional[int]
    successful: bool
    raw: Mapping[str, Any] = field(default_factory=dict, repr=False)


@dataclass(slots=True, frozen=True)
class AdminCredentials:
    """Configured admin account material; either field may be missing."""

    public_address: Optional[str] = None
    secret_seed: Optional[str] = field(default=None, repr=False)


@dataclass(slots=True, frozen=True)
class AdminIdentity:
    """Signing identity derived from a well-formed secret seed."""

    public_key: str
    secret_seed: str = field(repr=False)
