"""Ledger domain exports"""

from .client import EnvelopeSigner, LedgerClient
from .exceptions import (
    ConfigurationError,
    NetworkError,
    NotFoundError,
    ProtocolError,
    RejectedError,
    SubmissionUnknownError,
    ValidationError,
    WalletError,
)
from .models import (
    NATIVE_ASSET_TYPE,
    AccountSnapshot,
    AdminCredentials,
    AdminIdentity,
    Balance,
    PaymentOperation,
    SubmissionResult,
    TimeBounds,
    TransactionEnvelope,
)
from .networks import LedgerNetwork, resolve_network

__all__ = [
    "EnvelopeSigner",
    "LedgerClient",
    "ConfigurationError",
    "NetworkError",
    "NotFoundError",
    "ProtocolError",
    "RejectedError",
    "SubmissionUnknownError",
    "ValidationError",
    "WalletError",
    "NATIVE_ASSET_TYPE",
    "AccountSnapshot",
    "AdminCredentials",
    "AdminIdentity",
    "Balance",
    "PaymentOperation",
    "SubmissionResult",
    "TimeBounds",
    "TransactionEnvelope",
    "LedgerNetwork",
    "resolve_network",
]
