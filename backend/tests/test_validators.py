import pytest

from paysim.utils import validators as v
from paysim.utils.formatting import digits_only, format_expiry, mask_card_number


class TestFieldRules:
    def test_required_rejects_empty_values(self):
        rule = v.required()
        assert not rule(None)
        assert not rule("")
        assert not rule("   ")
        assert rule("x")
        assert rule(0)

    def test_format_rules_pass_on_empty_input(self):
        for rule in (v.pattern(v.CVV_PATTERN, "bad"), v.min_length(8), v.min_value(0.01), v.email()):
            assert rule("")
            assert rule(None)

    @pytest.mark.parametrize("value,ok", [
        ("1234567890123456", True),
        ("123456789012345", False),
        ("1234 5678 9012 3456", False),
        ("12345678901234567", False),
        ("1234567890123456\n", False),
    ])
    def test_card_number_pattern(self, value, ok):
        assert v.pattern(v.CARD_NUMBER_PATTERN, "bad")(value) is ok

    @pytest.mark.parametrize("value,ok", [
        ("01/25", True), ("12/30", True), ("00/25", False), ("13/25", False), ("1/25", False), ("12/2025", False),
    ])
    def test_expiry_pattern(self, value, ok):
        assert v.pattern(v.EXPIRY_PATTERN, "bad")(value) is ok

    @pytest.mark.parametrize("value,ok", [
        ("a@b.co", True), ("first.last@mail.example.org", True),
        ("a@b", False), ("a b@c.de", False), ("@b.co", False), ("a@.co", False),
    ])
    def test_email_shape(self, value, ok):
        assert v.email()(value) is ok

    def test_min_length_and_min_value(self):
        assert not v.min_length(6)("abcde")
        assert v.min_length(6)("abcdef")
        assert v.min_value(0.01)("0.01")
        assert not v.min_value(0.01)("0")
        assert not v.min_value(0.01)("abc")
        assert not v.min_value(0.01)(True)

    def test_validate_field_collects_messages_in_order(self):
        rules = (v.required("needed"), v.pattern(v.CVV_PATTERN, "3 or 4 digits"))
        assert v.validate_field("", rules) == ["needed"]
        assert v.validate_field("12", rules) == ["3 or 4 digits"]
        assert v.validate_field("123", rules) == []


class TestFormatting:
    def test_digits_only(self):
        assert digits_only("1234-5678 9012x3456") == "1234567890123456"
        assert digits_only(None) == ""

    @pytest.mark.parametrize("raw,expected", [
        ("1", "1"), ("12", "12"), ("122", "12/2"), ("1225", "12/25"),
        ("12/25", "12/25"), ("12-2599", "12/25"), ("", ""),
    ])
    def test_format_expiry(self, raw, expected):
        assert format_expiry(raw) == expected

    def test_mask_card_number_keeps_last_four(self):
        masked = mask_card_number("1234567890123456")
        assert masked == "**** **** **** 3456"
        assert masked.endswith("3456")

    def test_mask_card_number_does_not_require_valid_input(self):
        assert mask_card_number("98").endswith("98")
        assert mask_card_number("") == ""
        assert mask_card_number(None) == ""


class TestAsciiDigits:
    ARABIC_INDIC_CARD = "١٢٣٤٥٦٧٨٩٠١٢٣٤٥٦"
    FULL_WIDTH_CVV = "１２３"

    def test_patterns_reject_non_ascii_digits(self):
        assert not v.pattern(v.CARD_NUMBER_PATTERN, "bad")(self.ARABIC_INDIC_CARD)
        assert not v.pattern(v.CVV_PATTERN, "bad")(self.FULL_WIDTH_CVV)
        assert not v.pattern(v.EXPIRY_PATTERN, "bad")("12/٢٥")

    def test_digits_only_drops_non_ascii_digits(self):
        assert digits_only(self.ARABIC_INDIC_CARD) == ""
        assert digits_only("12３4") == "124"
        assert format_expiry("١٢٢٥") == ""


@pytest.mark.parametrize("value,expected", [
    ("10", 10.0), (" 2.5 ", 2.5), (7, 7.0),
    ("1_000", None), ("0_0.1", None), ("nan", None), (True, None), (None, None),
])
def test_to_number(value, expected):
    assert v.to_number(value) == expected
