"""
Validation Rule Selector — Maps a payment method to its required-field rules.

Rule sets are immutable values built once per method. Switching method on a
form means asking for a different rule set, so fields belonging to other
methods simply have no rules attached.
"""
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Tuple

from paysim.schemas.schemas import Payment
from paysim.services.methods import METHOD_FIELDS, PaymentMethod, is_known_method
from paysim.utils import validators as v
from paysim.utils.formatting import digits_only, format_expiry

Rules = Mapping[str, Tuple[v.FieldRule, ...]]

METHOD_FIELD = "paymentMethod"

_METHOD_RULES: Dict[str, Rules] = {
    PaymentMethod.CREDIT_CARD.value: MappingProxyType({
        "cardholderName": (v.required("Cardholder name is required"),),
        "cardNumber": (
            v.required("Card number is required"),
            v.pattern(v.CARD_NUMBER_PATTERN, "Card number must be 16 digits"),
        ),
        "expiryDate": (
            v.required("Expiry date is required"),
            v.pattern(v.EXPIRY_PATTERN, "Expiry date must be in MM/YY format"),
        ),
        "cvv": (
            v.required("CVV is required"),
            v.pattern(v.CVV_PATTERN, "CVV must be 3 or 4 digits"),
        ),
    }),
    PaymentMethod.PAYPAL.value: MappingProxyType({
        "paypalEmail": (
            v.required("PayPal email is required"),
            v.email("Enter a valid PayPal email address"),
        ),
    }),
    PaymentMethod.RAZORPAY.value: MappingProxyType({
        "razorpayId": (
            v.required("RazorPay ID is required"),
            v.min_length(6, "RazorPay ID must be longer than 5 characters"),
        ),
    }),
    PaymentMethod.NETBANKING.value: MappingProxyType({
        "bankName": (v.required("Bank name is required"),),
        "accountNumber": (
            v.required("Account number is required"),
            v.min_length(8, "Account number must be at least 8 characters"),
        ),
    }),
}

_NO_RULES: Rules = MappingProxyType({})

COMMON_RULES: Rules = MappingProxyType({
    "amount": (
        v.required("Amount is required"),
        v.min_value(0.01, "Amount must be at least 0.01"),
    ),
    "description": (),
})

_TRIMMED_FIELDS = frozenset(name for names in METHOD_FIELDS.values() for name in names)

_NORMALIZERS = {
    "cardNumber": digits_only,
    "cvv": digits_only,
    "expiryDate": format_expiry,
}


def _tag(method: Any) -> str:
    return method.value if isinstance(method, PaymentMethod) else str(method or "")


def rules_for(method: Any) -> Rules:
    """Method-specific rules. Unknown methods get no rules at all."""
    return _METHOD_RULES.get(_tag(method), _NO_RULES)


def form_rules(method: Any) -> Rules:
    """Full rule set for a form with ``method`` selected: common + method fields."""
    return MappingProxyType({**COMMON_RULES, **rules_for(method)})


def normalize_fields(fields: Mapping[str, Any]) -> Dict[str, Any]:
    """Trim method fields, then apply the input normalizers the form runs on keystroke.

    Validation and the stored Payment both see the returned values.
    """
    normalized = dict(fields)
    for name in _TRIMMED_FIELDS:
        value = normalized.get(name)
        if isinstance(value, str):
            normalized[name] = value.strip()
    for name, normalize in _NORMALIZERS.items():
        value = normalized.get(name)
        if isinstance(value, str):
            normalized[name] = normalize(value)
    return normalized


def validate_form(fields: Mapping[str, Any]) -> Dict[str, List[str]]:
    """Validate raw form values. An empty result means the form is valid."""
    errors: Dict[str, List[str]] = {}
    method = fields.get(METHOD_FIELD)

    if v.is_empty(method):
        errors[METHOD_FIELD] = ["Payment method is required"]
    elif not is_known_method(method):
        errors[METHOD_FIELD] = [f"Unsupported payment method: {method}"]

    for name, rules in form_rules(method).items():
        messages = v.validate_field(fields.get(name), rules)
        if messages:
            errors[name] = messages

    return errors


def is_form_valid(fields: Mapping[str, Any]) -> bool:
    return not validate_form(fields)


def validate_payment_details(payment: Payment) -> bool:
    """Re-check a Payment's method-specific fields against the form rules."""
    if not is_known_method(payment.payment_method):
        return False
    values = payment.model_dump(by_alias=True)
    return all(
        not v.validate_field(values.get(name), rules)
        for name, rules in rules_for(payment.payment_method).items()
    )
