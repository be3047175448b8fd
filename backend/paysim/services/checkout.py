"""
Checkout Service — Turns raw form values into a Payment, runs it through the
gateway and records successful payments in the ledger.
"""
import logging
import time
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Optional, Tuple

from fastapi.concurrency import run_in_threadpool

from paysim.schemas.schemas import Payment, PaymentResponse
from paysim.services.gateway import GatewaySimulator
from paysim.services.ledger import PaymentLedger
from paysim.services.methods import METHOD_FIELDS
from paysim.services.rule_selector import METHOD_FIELD, normalize_fields, validate_form
from paysim.utils.validators import to_number

logger = logging.getLogger(__name__)

UNEXPECTED_ERROR_MESSAGE = (
    "An unexpected error occurred while processing your payment. Please try again later."
)


class PaymentValidationError(Exception):
    """Raised when submitted form values fail their field rules."""

    def __init__(self, errors: Dict[str, List[str]]):
        self.errors = errors
        fields = ", ".join(sorted(errors))
        super().__init__(f"Invalid payment details: {fields}")


def new_payment_id() -> str:
    """Timestamp-based id with a random suffix so same-millisecond ids differ."""
    return f"{int(time.time() * 1000)}-{uuid.uuid4().hex[:8]}"


class CheckoutService:
    def __init__(self, gateway: GatewaySimulator, ledger: PaymentLedger):
        self.gateway = gateway
        self.ledger = ledger

    def build_payment(self, fields: Mapping[str, Any], now: Optional[datetime] = None) -> Payment:
        """Validate raw form values and build the Payment record.

        Only the selected method's fields and the common fields are kept.

        Raises:
            PaymentValidationError: with per-field messages when invalid.
        """
        values = normalize_fields(fields)
        errors = validate_form(values)
        if errors:
            raise PaymentValidationError(errors)

        method = str(values[METHOD_FIELD])
        data: Dict[str, Any] = {
            "id": new_payment_id(),
            "paymentMethod": method,
            "amount": to_number(values["amount"]),
            "description": str(values.get("description") or ""),
            "date": now or datetime.now(timezone.utc),
        }
        for name in METHOD_FIELDS[method]:
            data[name] = str(values[name])

        return Payment.model_validate(data)

    async def submit(self, fields: Mapping[str, Any]) -> Tuple[Payment, PaymentResponse]:
        """Validate, process and, on success, record a payment.

        Declines come back as ``success=False`` responses; only invalid form
        values raise.
        """
        payment = self.build_payment(fields)

        try:
            response = await self.gateway.process(payment)
        except Exception:
            logger.exception("Unexpected error while processing payment %s", payment.id)
            return payment, PaymentResponse(success=False, message=UNEXPECTED_ERROR_MESSAGE)

        if response.success:
            payment = payment.model_copy(update={"transaction_id": response.transaction_id})
            # The ledger commits through a blocking SQLAlchemy session
            await run_in_threadpool(self.ledger.append, payment)
            logger.info("Payment %s recorded with transaction %s", payment.id, payment.transaction_id)
        else:
            logger.info("Payment %s not recorded: %s", payment.id, response.message)

        return payment, response
