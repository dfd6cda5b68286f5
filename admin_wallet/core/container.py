"""Simple dependency container for wiring core services."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from admin_wallet.core.config import Settings
from admin_wallet.domain.payments import PaymentService
from admin_wallet.infrastructure.stellar import HorizonLedgerClient, StellarEnvelopeSigner

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ApplicationContainer:
    settings: Settings
    ledger_client: Optional[HorizonLedgerClient] = field(default=None)
    payment_service: Optional[PaymentService] = field(default=None)

    def init_infrastructure(self) -> None:
        """Open the Horizon client and build the services that share it."""
        network = self.settings.network
        self.ledger_client = HorizonLedgerClient(network, request_timeout=self.settings.request_timeout)
        self.payment_service = PaymentService(
            self.ledger_client,
            StellarEnvelopeSigner(),
            self.settings.admin_credentials,
            network_passphrase=network.passphrase,
            transaction_timeout=self.settings.transaction_timeout,
        )
        logger.info("Using %s ledger network at %s", network.name, network.horizon_url)

    async def shutdown(self) -> None:
        if self.ledger_client is not None:
            await self.ledger_client.close()
            self.ledger_client = None
        self.payment_service = None


def build_container(settings: Settings) -> ApplicationContainer:
    container = ApplicationContainer(settings=settings)
    container.init_infrastructure()
    return container


__all__ = ["ApplicationContainer", "build_container"]
