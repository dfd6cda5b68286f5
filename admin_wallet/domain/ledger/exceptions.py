"""Ledger domain specific exceptions.

Every failure the gateway can report is one of these variants. Each carries a
``kind`` tag and the HTTP status it maps to so the interface layer never has to
inspect message text.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional


class WalletError(Exception):
    """Base class for gateway domain errors."""

    kind = "error"
    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_payload(self) -> dict[str, Any]:
        return {"error": self.message, "kind": self.kind}


class ValidationError(WalletError):
    """Raised when caller input is malformed."""

    kind = "validation"
    status_code = 400


class ConfigurationError(WalletError):
    """Raised when secrets or network settings are missing or malformed."""

    kind = "configuration"


class NotFoundError(WalletError):
    """Raised when the ledger reports that an account does not exist."""

    kind = "not_found"


class ProtocolError(WalletError):
    """Raised when the ledger answers with data that breaks an expected invariant."""

    kind = "protocol"


class RejectedError(WalletError):
    """Raised when the ledger explicitly refuses a transaction.

    The rejection details are kept verbatim; a rejected transaction did not
    apply, so the caller may rebuild it from fresh account state.
    """

    kind = "rejected"

    def __init__(
        self,
        message: str,
        *,
        title: Optional[str] = None,
        detail: Optional[str] = None,
        result_codes: Optional[Mapping[str, Any]] = None,
        extras: Optional[Mapping[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.title = title
        self.detail = detail
        self.result_codes = dict(result_codes) if result_codes else None
        self.extras = dict(extras) if extras else None

    def to_payload(self) -> dict[str, Any]:
        payload = super().to_payload()
        payload["rejection"] = {
            "title": self.title,
            "detail": self.detail,
            "result_codes": self.result_codes,
            "extras": self.extras,
        }
        return payload


class NetworkError(WalletError):
    """Raised on connectivity failures, timeouts and 5xx answers from the ledger."""

    kind = "network"


class SubmissionUnknownError(NetworkError):
    """Raised when a submission failed in transport and may still have applied.

    Retrying blindly can pay twice: look the transaction up by hash first.
    """

    kind = "submission_unknown"

    def __init__(self, message: str, *, transaction_hash: Optional[str] = None) -> None:
        super().__init__(message)
        self.transaction_hash = transaction_hash

    def to_payload(self) -> dict[str, Any]:
        payload = super().to_payload()
        payload["transaction_hash"] = self.transaction_hash
        return payload


__all__ = [
    "WalletError",
    "ValidationError",
    "ConfigurationError",
    "NotFoundError",
    "ProtocolError",
    "RejectedError",
    "NetworkError",
    "SubmissionUnknownError",
]
