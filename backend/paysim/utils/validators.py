"""
Validators — Composable field rules for the payment form.

Only ``required`` rejects an empty value; every other rule passes on empty
input so that optional fields can carry format rules.
"""
import math
import re
from dataclasses import dataclass
from typing import Any, Callable, List, Sequence

CARD_NUMBER_PATTERN = r"^[0-9]{16}$"
EXPIRY_PATTERN = r"^(0[1-9]|1[0-2])\/[0-9]{2}$"
CVV_PATTERN = r"^[0-9]{3,4}$"
EMAIL_PATTERN = r"^[^\s@]+@[^\s@]+\.[^\s@]+$"


@dataclass(frozen=True)
class FieldRule:
    code: str      # required | pattern | minlength | min | email
    message: str
    check: Callable[[Any], bool]

    def __call__(self, value: Any) -> bool:
        return self.check(value)


def is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    return False


def required(message: str = "This field is required") -> FieldRule:
    return FieldRule("required", message, lambda value: not is_empty(value))


def pattern(regex: str, message: str) -> FieldRule:
    compiled = re.compile(regex)

    def check(value: Any) -> bool:
        if is_empty(value):
            return True
        return bool(compiled.fullmatch(str(value)))

    return FieldRule("pattern", message, check)


def min_length(length: int, message: str | None = None) -> FieldRule:
    def check(value: Any) -> bool:
        if is_empty(value):
            return True
        return len(str(value)) >= length

    return FieldRule("minlength", message or f"Must be at least {length} characters", check)


def min_value(minimum: float, message: str | None = None) -> FieldRule:
    def check(value: Any) -> bool:
        if is_empty(value):
            return True
        number = to_number(value)
        return number is not None and number >= minimum

    return FieldRule("min", message or f"Must be at least {minimum}", check)


def email(message: str = "Enter a valid email address") -> FieldRule:
    compiled = re.compile(EMAIL_PATTERN)

    def check(value: Any) -> bool:
        if is_empty(value):
            return True
        return bool(compiled.fullmatch(str(value)))

    return FieldRule("email", message, check)


def to_number(value: Any) -> float | None:
    """Parse a numeric form value; None unless it is a finite number."""
    if isinstance(value, bool):
        return None
    # float() accepts digit separators ("1_000"); form input must not
    if isinstance(value, str) and "_" in value:
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def validate_field(value: Any, rules: Sequence[FieldRule]) -> List[str]:
    """Return the messages of every rule the value fails, in rule order."""
    return [rule.message for rule in rules if not rule(value)]
