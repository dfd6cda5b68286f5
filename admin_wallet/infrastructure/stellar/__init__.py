"""Stellar network adapters"""

from .horizon import HorizonLedgerClient
from .signer import StellarEnvelopeSigner

__all__ = [
    "HorizonLedgerClient",
    "StellarEnvelopeSigner",
]
