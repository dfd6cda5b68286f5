"""Ledger network definitions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from stellar_sdk import Network

NetworkName = Literal["testnet", "public"]

PASSPHRASES: dict[str, str] = {
    "testnet": Network.TESTNET_NETWORK_PASSPHRASE,
    "public": Network.PUBLIC_NETWORK_PASSPHRASE,
}


@dataclass(slots=True, frozen=True)
class LedgerNetwork:
    """Horizon endpoint paired with the passphrase signatures must commit to."""

    name: str
    horizon_url: str
    passphrase: str


def resolve_network(name: str, *, testnet_url: str, public_url: str) -> LedgerNetwork:
    if name not in PASSPHRASES:
        raise ValueError(f"Unknown ledger network: {name}")
    horizon_url = testnet_url if name == "testnet" else public_url
    return LedgerNetwork(name=name, horizon_url=horizon_url.rstrip("/"), passphrase=PASSPHRASES[name])
