"""
Payment Method Catalog — Display names, transaction prefixes and decline messages.
"""
from enum import Enum
from typing import Dict, Tuple


class PaymentMethod(str, Enum):
    CREDIT_CARD = "creditCard"
    PAYPAL = "paypal"
    RAZORPAY = "razorpay"
    NETBANKING = "netbanking"


METHOD_NAMES: Dict[str, str] = {
    PaymentMethod.CREDIT_CARD.value: "Credit Card",
    PaymentMethod.PAYPAL.value: "PayPal",
    PaymentMethod.RAZORPAY.value: "RazorPay",
    PaymentMethod.NETBANKING.value: "Net Banking",
}

TRANSACTION_PREFIXES: Dict[str, str] = {
    PaymentMethod.CREDIT_CARD.value: "CC",
    PaymentMethod.PAYPAL.value: "PP",
    PaymentMethod.RAZORPAY.value: "RP",
    PaymentMethod.NETBANKING.value: "NB",
}
DEFAULT_TRANSACTION_PREFIX = "TXN"

FAILURE_MESSAGES: Dict[str, str] = {
    PaymentMethod.CREDIT_CARD.value: "Payment declined by the bank. Please try another card.",
    PaymentMethod.PAYPAL.value: "PayPal payment failed. Please check your PayPal account and try again.",
    PaymentMethod.RAZORPAY.value: "RazorPay payment failed. Please try again later.",
    PaymentMethod.NETBANKING.value: "Net Banking payment failed. Please check your bank account details and try again.",
}
DEFAULT_FAILURE_MESSAGE = "Payment failed. Please try again."

# Form fields owned by each method (camelCase, as submitted by the form)
METHOD_FIELDS: Dict[str, Tuple[str, ...]] = {
    PaymentMethod.CREDIT_CARD.value: ("cardholderName", "cardNumber", "expiryDate", "cvv"),
    PaymentMethod.PAYPAL.value: ("paypalEmail",),
    PaymentMethod.RAZORPAY.value: ("razorpayId",),
    PaymentMethod.NETBANKING.value: ("bankName", "accountNumber"),
}

COMMON_FIELDS: Tuple[str, ...] = ("amount", "description")


def _tag(method) -> str:
    return method.value if isinstance(method, PaymentMethod) else str(method or "")


def is_known_method(method) -> bool:
    return _tag(method) in METHOD_FIELDS


def method_name(method) -> str:
    """Human-readable method name; unknown tags are returned as-is."""
    tag = _tag(method)
    return METHOD_NAMES.get(tag, tag)


def transaction_prefix(method) -> str:
    return TRANSACTION_PREFIXES.get(_tag(method), DEFAULT_TRANSACTION_PREFIX)


def failure_message(method) -> str:
    return FAILURE_MESSAGES.get(_tag(method), DEFAULT_FAILURE_MESSAGE)
