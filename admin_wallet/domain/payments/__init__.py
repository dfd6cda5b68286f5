"""Payment domain exports"""

from .builder import build_payment_envelope
from .models import PaymentIntent
from .service import PaymentService
from .validation import PaymentRequest, parse_amount, parse_payment_body, parse_payment_intent

__all__ = [
    "PaymentIntent",
    "PaymentService",
    "build_payment_envelope",
    "PaymentRequest",
    "parse_amount",
    "parse_payment_body",
    "parse_payment_intent",
]
