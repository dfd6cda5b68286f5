"""Pydantic schemas for the HTTP surface."""

from typing import Any, Optional

from pydantic import BaseModel

from admin_wallet.domain.payments import PaymentRequest


class BalanceResponse(BaseModel):
    balance: str


class PaymentResponse(BaseModel):
    result: dict[str, Any]


class ErrorResponse(BaseModel):
    error: str
    kind: Optional[str] = None


class HealthResponse(BaseModel):
    status: str = "ok"
    network: str


__all__ = [
    "BalanceResponse",
    "ErrorResponse",
    "HealthResponse",
    "PaymentRequest",
    "PaymentResponse",
]
