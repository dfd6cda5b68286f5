"""Shared fixtures."""

import pytest
from fastapi.testclient import TestClient
from stellar_sdk import Keypair

from admin_wallet.domain.ledger import AdminCredentials
from admin_wallet.domain.payments import PaymentService
from tests.helpers import FakeLedger, build_client, build_service


@pytest.fixture
def admin_keypair() -> Keypair:
    return Keypair.random()


@pytest.fixture
def destination() -> str:
    return Keypair.random().public_key


@pytest.fixture
def ledger() -> FakeLedger:
    return FakeLedger()


@pytest.fixture
def service(ledger: FakeLedger, admin_keypair: Keypair) -> PaymentService:
    return build_service(ledger, AdminCredentials(secret_seed=admin_keypair.secret))


@pytest.fixture
def client(service: PaymentService) -> TestClient:
    return build_client(service)
