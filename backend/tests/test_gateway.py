import asyncio
import random

import pytest

from paysim.services.gateway import GatewaySimulator
from paysim.services.methods import FAILURE_MESSAGES

from conftest import FixedRandom

PREFIXES = {"creditCard": "CC", "paypal": "PP", "razorpay": "RP", "netbanking": "NB"}
NAMES = {"creditCard": "Credit Card", "paypal": "PayPal", "razorpay": "RazorPay", "netbanking": "Net Banking"}


@pytest.mark.parametrize("method", list(PREFIXES))
def test_success_mints_prefixed_transaction_id(method, approving_gateway, make_payment):
    response = asyncio.run(approving_gateway.process(make_payment(method)))

    assert response.success is True
    assert response.transaction_id == f"{PREFIXES[method]}123456789"
    assert response.message == f"Payment processed successfully via {NAMES[method]}"


@pytest.mark.parametrize("method", list(PREFIXES))
def test_decline_returns_method_specific_message(method, declining_gateway, make_payment):
    response = asyncio.run(declining_gateway.process(make_payment(method)))

    assert response.success is False
    assert response.transaction_id is None
    assert response.message == FAILURE_MESSAGES[method]


def test_decline_messages_are_exact():
    assert FAILURE_MESSAGES["creditCard"] == "Payment declined by the bank. Please try another card."
    assert FAILURE_MESSAGES["netbanking"] == (
        "Net Banking payment failed. Please check your bank account details and try again."
    )


def test_invalid_details_fail_without_random_draw(make_payment):
    rng = FixedRandom(0.0)
    rng.random = lambda: pytest.fail("random outcome drawn for invalid payment")
    gateway = GatewaySimulator(rng=rng, latency_seconds=0)

    response = gateway.simulate(make_payment("creditCard", cardNumber="1234"))

    assert response.success is False
    assert response.message == "Invalid creditCard details. Payment failed."


def test_unknown_method_is_rejected(approving_gateway, make_payment):
    response = approving_gateway.simulate(make_payment("paypal", paymentMethod="crypto"))
    assert response.message == "Invalid crypto details. Payment failed."


def test_success_rate_boundary(make_payment):
    payment = make_payment("paypal")
    assert GatewaySimulator(rng=FixedRandom(0.9499), success_rate=0.95).simulate(payment).success
    assert not GatewaySimulator(rng=FixedRandom(0.95), success_rate=0.95).simulate(payment).success


def test_seeded_rng_is_reproducible(make_payment):
    payment = make_payment("razorpay")
    gateway_a = GatewaySimulator(rng=random.Random(42))
    gateway_b = GatewaySimulator(rng=random.Random(42))
    outcomes_a = [gateway_a.simulate(payment).model_dump() for _ in range(20)]
    outcomes_b = [gateway_b.simulate(payment).model_dump() for _ in range(20)]

    assert outcomes_a == outcomes_b


def test_transaction_number_range():
    gateway = GatewaySimulator(rng=random.Random(3))
    for _ in range(50):
        txn = gateway.generate_transaction_id("netbanking")
        assert txn.startswith("NB")
        assert 0 <= int(txn[2:]) <= 999_999_999
    assert gateway.generate_transaction_id("wire").startswith("TXN")


def test_process_waits_for_the_configured_latency(make_payment):
    delays = []

    async def fake_sleep(seconds):
        delays.append(seconds)

    gateway = GatewaySimulator(rng=FixedRandom(0.0), latency_seconds=1.5, sleep=fake_sleep)
    asyncio.run(gateway.process(make_payment("paypal")))

    assert delays == [1.5]


@pytest.mark.parametrize("kwargs", [{"success_rate": 1.5}, {"success_rate": -0.1}, {"latency_seconds": -1}])
def test_rejects_bad_configuration(kwargs):
    with pytest.raises(ValueError):
        GatewaySimulator(**kwargs)
