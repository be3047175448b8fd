"""
Gateway Simulator — Stand-in for a real payment processor.
Re-validates the payment, then approves or declines it at random after a
fixed network-like delay.
"""
import asyncio
import logging
import random
from typing import Awaitable, Callable, Optional

from paysim.schemas.schemas import Payment, PaymentResponse
from paysim.services.methods import failure_message, method_name, transaction_prefix
from paysim.services.rule_selector import validate_payment_details

logger = logging.getLogger(__name__)

DEFAULT_SUCCESS_RATE = 0.95
DEFAULT_LATENCY_SECONDS = 1.5
MAX_TRANSACTION_NUMBER = 999_999_999


class GatewaySimulator:
    """Simulated payment gateway with an injectable random source.

    ``process`` is not re-entrant per submission: callers must wait for a
    call to resolve before submitting the same form again.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        success_rate: float = DEFAULT_SUCCESS_RATE,
        latency_seconds: float = DEFAULT_LATENCY_SECONDS,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        if not 0.0 <= success_rate <= 1.0:
            raise ValueError(f"success_rate must be within [0, 1], got {success_rate}")
        if latency_seconds < 0:
            raise ValueError(f"latency_seconds must be >= 0, got {latency_seconds}")
        self.rng = rng or random.Random()
        self.success_rate = success_rate
        self.latency_seconds = latency_seconds
        self._sleep = sleep

    async def process(self, payment: Payment) -> PaymentResponse:
        """Process a payment through the simulated gateway."""
        logger.info(
            "Gateway processing payment %s via %s (amount=%.2f)",
            payment.id, payment.payment_method, payment.amount,
        )
        await self._sleep(self.latency_seconds)
        response = self.simulate(payment)
        logger.info(
            "Gateway outcome for %s: success=%s txn=%s",
            payment.id, response.success, response.transaction_id,
        )
        return response

    def simulate(self, payment: Payment) -> PaymentResponse:
        """Decide the outcome for a payment without the network delay."""
        if not validate_payment_details(payment):
            return PaymentResponse(
                success=False,
                message=f"Invalid {payment.payment_method} details. Payment failed.",
            )

        if self.rng.random() < self.success_rate:
            return PaymentResponse(
                success=True,
                transaction_id=self.generate_transaction_id(payment.payment_method),
                message=f"Payment processed successfully via {method_name(payment.payment_method)}",
            )

        return PaymentResponse(success=False, message=failure_message(payment.payment_method))

    def generate_transaction_id(self, method: str) -> str:
        return f"{transaction_prefix(method)}{self.rng.randint(0, MAX_TRANSACTION_NUMBER)}"
