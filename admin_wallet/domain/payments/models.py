"""Domain models for payment requests."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class PaymentIntent:
    destination: str
    amount: str
