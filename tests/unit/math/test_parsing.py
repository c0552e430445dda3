"""Tests for decimal text parsing and rendering."""

import pytest
from structlog.testing import capture_logs

from bigint.errors import IntegerError, InvalidFormat
from bigint.parsing import format_decimal, parse_decimal
from bigint.types import Sign


class TestParseDecimal:
    """Tests for accepted input."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("1234", (Sign.POSITIVE, (1, 2, 3, 4))),
            ("+1234", (Sign.POSITIVE, (1, 2, 3, 4))),
            ("-1234", (Sign.NEGATIVE, (1, 2, 3, 4))),
            ("001234", (Sign.POSITIVE, (1, 2, 3, 4))),
            ("+001234", (Sign.POSITIVE, (1, 2, 3, 4))),
            ("-001234", (Sign.NEGATIVE, (1, 2, 3, 4))),
            ("0", (Sign.POSITIVE, (0,))),
            ("0000", (Sign.POSITIVE, (0,))),
            ("1000", (Sign.POSITIVE, (1, 0, 0, 0))),
        ],
    )
    def test_valid(self, text, expected):
        assert parse_decimal(text) == expected

    @pytest.mark.parametrize("text", ["-0", "-0000", "+0"])
    def test_zero_is_never_negative(self, text):
        assert parse_decimal(text) == (Sign.POSITIVE, (0,))


class TestParseDecimalRejects:
    """Tests for malformed input."""

    @pytest.mark.parametrize(
        "text",
        ["", "a", "1234+", "--1234", "++1234", "+12.34", "-+1", "12-34"],
    )
    def test_malformed(self, text):
        with pytest.raises(InvalidFormat):
            parse_decimal(text)

    @pytest.mark.parametrize("text", ["-", "+"])
    def test_sign_without_digits(self, text):
        with pytest.raises(InvalidFormat, match="sign without digits"):
            parse_decimal(text)

    @pytest.mark.parametrize("text", [" 12", "12 ", "1_000", "٣"])
    def test_whitespace_and_non_ascii_digits(self, text):
        """Only ASCII 0-9 count as digits."""
        with pytest.raises(InvalidFormat, match="non-digit"):
            parse_decimal(text)

    def test_message_names_position(self):
        with pytest.raises(InvalidFormat) as exc_info:
            parse_decimal("1234+")
        assert "'+' at position 4" in str(exc_info.value)

    def test_error_is_value_error(self):
        """InvalidFormat can be caught as ValueError or IntegerError."""
        with pytest.raises(ValueError):
            parse_decimal("x")
        with pytest.raises(IntegerError):
            parse_decimal("x")

    def test_non_str_raises_type_error(self):
        with pytest.raises(TypeError, match="must be str"):
            parse_decimal(1234)  # type: ignore[arg-type]

    def test_rejection_is_logged(self):
        with capture_logs() as logs:
            with pytest.raises(InvalidFormat):
                parse_decimal("12a")
        assert logs == [
            {
                "event": "invalid_integer_format",
                "log_level": "debug",
                "text": "12a",
                "reason": "non-digit 'a' at position 2",
            }
        ]


class TestFormatDecimal:
    """Tests for canonical rendering."""

    def test_positive_has_no_sign(self):
        assert format_decimal(Sign.POSITIVE, (4, 2)) == "42"

    def test_negative_has_minus(self):
        assert format_decimal(Sign.NEGATIVE, (4, 2)) == "-42"

    def test_zero(self):
        assert format_decimal(Sign.POSITIVE, (0,)) == "0"
