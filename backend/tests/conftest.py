import os
import random
import tempfile
from datetime import datetime, timedelta, timezone

# Isolate the application's storage and logs before paysim reads its settings
_TMP_DIR = tempfile.mkdtemp(prefix="paysim-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_TMP_DIR, 'paysim.db')}"
os.environ["LOG_DIR"] = os.path.join(_TMP_DIR, "logs")
os.environ["GATEWAY_LATENCY_SECONDS"] = "0"

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from paysim.database import init_db
from paysim.schemas.schemas import Payment
from paysim.services.blob_store import BlobStore
from paysim.services.gateway import GatewaySimulator
from paysim.services.ledger import PaymentLedger

BASE_DATE = datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc)

VALID_FIELDS = {
    "creditCard": {
        "paymentMethod": "creditCard",
        "cardholderName": "Asha Verma",
        "cardNumber": "1234567890123456",
        "expiryDate": "12/27",
        "cvv": "123",
        "amount": "49.99",
        "description": "Annual plan",
    },
    "paypal": {
        "paymentMethod": "paypal",
        "paypalEmail": "asha@example.com",
        "amount": "10",
    },
    "razorpay": {
        "paymentMethod": "razorpay",
        "razorpayId": "rzp_live_123",
        "amount": 250,
    },
    "netbanking": {
        "paymentMethod": "netbanking",
        "bankName": "State Bank",
        "accountNumber": "12345678",
        "amount": "0.01",
    },
}


class FixedRandom(random.Random):
    """Random source whose draws are pinned for deterministic outcomes."""

    def __init__(self, value: float, number: int = 123456789):
        super().__init__(0)
        self.value = value
        self.number = number

    def random(self):
        return self.value

    def randint(self, a, b):
        return self.number


@pytest.fixture
def session_factory(tmp_path):
    engine = create_engine(f"sqlite:///{tmp_path / 'store.db'}", connect_args={"check_same_thread": False})
    init_db(bind=engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    engine.dispose()


@pytest.fixture
def store(session_factory):
    return BlobStore(session_factory)


@pytest.fixture
def ledger(store):
    ledger = PaymentLedger(store)
    ledger.load()
    yield ledger
    ledger.close()


@pytest.fixture
def make_payment():
    counter = {"n": 0}

    def factory(method="creditCard", minutes=0, **overrides):
        counter["n"] += 1
        data = {key: value for key, value in VALID_FIELDS[method].items()}
        data.update(
            id=f"pay-{counter['n']}",
            amount=float(data["amount"]),
            date=BASE_DATE + timedelta(minutes=minutes),
        )
        data.update(overrides)
        return Payment.model_validate(data)

    return factory


@pytest.fixture
def approving_gateway():
    return GatewaySimulator(rng=FixedRandom(0.0), latency_seconds=0)


@pytest.fixture
def declining_gateway():
    return GatewaySimulator(rng=FixedRandom(0.999), latency_seconds=0)


@pytest.fixture
def client(approving_gateway):
    from fastapi.testclient import TestClient
    from paysim.main import app

    with TestClient(app) as test_client:
        app.state.ledger.clear()
        app.state.gateway = approving_gateway
        yield test_client
        app.state.ledger.clear()
