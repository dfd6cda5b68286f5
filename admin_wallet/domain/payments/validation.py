"""Parsing and validation of payment request bodies.

All checks here run before any ledger call, so a rejected body never causes
network traffic.
"""

from __future__ import annotations

import re
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import PydanticCustomError

from admin_wallet.domain.ledger import ValidationError

from .models import PaymentIntent

INVALID_BODY = "Invalid JSON body"
MISSING_FIELD = "Missing destination or amount"
INVALID_AMOUNT = "Invalid amount"
INVALID_DESTINATION = "Invalid destination"

# Amounts are int64 counts of 10^-7 units on the ledger.
AMOUNT_DECIMALS = 7
MAX_AMOUNT = Decimal("922337203685.4775807")
AMOUNT_PATTERN = re.compile(r"[0-9]+(\.[0-9]+)?")

BODY_ERROR_TYPES = {"json_invalid", "json_type", "model_type", "model_attributes_type"}
MISSING_ERROR_TYPES = {"missing", "blank"}


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


class PaymentRequest(BaseModel):
    """Body of ``POST /``."""

    model_config = ConfigDict(str_strip_whitespace=True)

    destination: str = Field(..., min_length=1)
    amount: Decimal = Field(..., gt=0, le=MAX_AMOUNT, decimal_places=AMOUNT_DECIMALS)

    @field_validator("destination", mode="before")
    @classmethod
    def _reject_blank(cls, value: Any) -> Any:
        if _is_blank(value):
            raise PydanticCustomError("blank", "Field must not be empty")
        return value

    @field_validator("amount", mode="before")
    @classmethod
    def _plain_decimal(cls, value: Any) -> str:
        if _is_blank(value):
            raise PydanticCustomError("blank", "Field must not be empty")
        # Only plain digits with an optional fraction; no signs, exponents or digit grouping.
        if isinstance(value, bool) or not isinstance(value, (str, int, float)):
            raise PydanticCustomError("amount_type", "Amount must be a decimal string or number")
        text = str(value).strip()
        if not AMOUNT_PATTERN.fullmatch(text):
            raise PydanticCustomError("amount_format", "Amount must be a plain positive decimal")
        return text

    def to_intent(self) -> PaymentIntent:
        return PaymentIntent(destination=self.destination, amount=format(self.amount, "f"))


def _to_domain_error(exc: PydanticValidationError) -> ValidationError:
    errors = exc.errors()
    types = {error["type"] for error in errors}
    if types & BODY_ERROR_TYPES:
        return ValidationError(INVALID_BODY)
    if types & MISSING_ERROR_TYPES:
        return ValidationError(MISSING_FIELD)
    if any(error["loc"] and error["loc"][0] == "amount" for error in errors):
        return ValidationError(INVALID_AMOUNT)
    return ValidationError(INVALID_DESTINATION)


def parse_amount(value: Any) -> str:
    """Return the amount as a plain decimal string or raise ValidationError."""
    try:
        request = PaymentRequest.model_validate({"destination": "-", "amount": value})
    except PydanticValidationError as exc:
        raise ValidationError(INVALID_AMOUNT) from exc
    return format(request.amount, "f")


def parse_payment_intent(payload: Any) -> PaymentIntent:
    try:
        return PaymentRequest.model_validate(payload).to_intent()
    except PydanticValidationError as exc:
        raise _to_domain_error(exc) from exc


def parse_payment_body(raw: bytes | str) -> PaymentIntent:
    try:
        return PaymentRequest.model_validate_json(raw).to_intent()
    except PydanticValidationError as exc:
        raise _to_domain_error(exc) from exc


__all__ = [
    "INVALID_AMOUNT",
    "INVALID_BODY",
    "INVALID_DESTINATION",
    "MISSING_FIELD",
    "MAX_AMOUNT",
    "PaymentRequest",
    "parse_amount",
    "parse_payment_intent",
    "parse_payment_body",
]
