from paysim.utils.formatting import digits_only, format_expiry, mask_card_number
from paysim.utils.validators import FieldRule, validate_field

__all__ = [
    "digits_only", "format_expiry", "mask_card_number",
    "FieldRule", "validate_field",
]
