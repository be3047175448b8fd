"""
Formatting Utilities — Input normalizers and display masking for card data.
"""
import re


def digits_only(value: str | None) -> str:
    """Strip every character that is not an ASCII digit (card number, CVV)."""
    if not value:
        return ""
    return re.sub(r"[^0-9]", "", str(value))


def format_expiry(value: str | None) -> str:
    """Normalize free-form expiry input into MM/YY.

    "1225" -> "12/25", "12/2" -> "12/2", "1" -> "1". Extra digits past the
    year are dropped.
    """
    if not value:
        return ""
    digits = digits_only(value)
    if len(digits) <= 2:
        return digits
    return f"{digits[:2]}/{digits[2:4]}"


def mask_card_number(card_number: str | None) -> str:
    """Mask all but the last four digits: "**** **** **** 3456"."""
    if not card_number:
        return ""
    return "**** " * 3 + str(card_number)[-4:]
