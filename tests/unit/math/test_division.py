"""Tests for Integer.div (truncating long division)."""

import pytest
from structlog.testing import capture_logs

from bigint import (
    ONE,
    ZERO,
    DivisionByZero,
    DivisionStrategy,
    EngineConfig,
    Integer,
    IntegerError,
    Sign,
)

I = Integer  # noqa: E741


class TestDivision:
    """Quotients under every division strategy."""

    def test_simple(self, division_config):
        assert str(I("100").div(I("3"), config=division_config)) == "33"

    @pytest.mark.parametrize(
        "dividend,divisor,expected",
        [
            ("1234567", "89", "13871"),
            ("10203", "3", "3401"),
            ("600", "25", "24"),
            ("1000", "7", "142"),
            ("7000", "7", "1000"),
            ("10101", "101", "100"),
            ("50050005", "5", "10010001"),
            ("1000000000000", "1000", "1000000000"),
        ],
    )
    def test_long_division(self, division_config, dividend, divisor, expected):
        assert str(I(dividend).div(I(divisor), config=division_config)) == expected

    @pytest.mark.parametrize(
        "dividend,divisor,expected",
        [
            ("7", "2", "3"),
            ("-7", "2", "-3"),
            ("7", "-2", "-3"),
            ("-7", "-2", "3"),
        ],
    )
    def test_truncates_toward_zero(self, division_config, dividend, divisor, expected):
        """Signs are applied after dividing magnitudes; no floor adjustment."""
        assert str(I(dividend).div(I(divisor), config=division_config)) == expected

    def test_large_operands(self, division_config, big_positive, small_negative):
        expected = str(-(123456789123456789123456789 // 987654321))
        assert str(big_positive.div(small_negative, config=division_config)) == expected

    def test_default_config(self):
        assert I("1001").div(I("7")) == I("143")


class TestDivisionShortcuts:
    """Cases answered without running long division."""

    def test_zero_dividend(self):
        assert I("0").div(I("-12")) == ZERO

    def test_divisor_one(self):
        assert I("-987").div(ONE) == I("-987")

    def test_divisor_minus_one(self):
        assert I("-987").div(I("-1")) == I("987")

    def test_smaller_magnitude_is_zero(self):
        result = I("-3").div(I("7"))
        assert result == ZERO
        assert result.sign is Sign.POSITIVE

    def test_equal_magnitudes(self):
        assert I("-123").div(I("123")) == I("-1")
        assert I("-123").div(I("-123")) == ONE


class TestDivisionByZero:
    """Tests for the zero-divisor error path."""

    @pytest.mark.parametrize("dividend", ["0", "5", "-5"])
    def test_raises(self, dividend):
        with pytest.raises(DivisionByZero):
            I(dividend).div(ZERO)

    def test_negative_zero_divisor(self):
        with pytest.raises(DivisionByZero):
            I("5").div(I("-0"))

    def test_catchable_as_builtin(self):
        with pytest.raises(ZeroDivisionError):
            I("5").div(ZERO)
        with pytest.raises(IntegerError):
            I("5").div(ZERO)

    def test_message(self):
        with pytest.raises(DivisionByZero, match="Division by zero: -5 / 0"):
            I("-5").div(ZERO)

    def test_is_logged(self):
        with capture_logs() as logs:
            with pytest.raises(DivisionByZero):
                I("42").div(ZERO)
        assert logs == [{"event": "division_by_zero", "log_level": "debug", "dividend": "42"}]

    def test_requires_integer_divisor(self):
        with pytest.raises(TypeError):
            I("5").div(5)  # type: ignore[arg-type]


class TestStrategiesAgree:
    """Both quotient-digit strategies give the same quotient."""

    @pytest.mark.parametrize(
        "dividend,divisor",
        [
            ("99999999999999999999", "99999"),
            ("10000000000000000000001", "9999999"),
            ("31415926535897932384626433832795", "271828"),
            ("1" + "0" * 80, "19"),
        ],
    )
    def test_agree(self, dividend, divisor):
        quotients = {
            I(dividend).div(I(divisor), config=EngineConfig(division_strategy=strategy))
            for strategy in DivisionStrategy
        }
        assert len(quotients) == 1
        assert int(quotients.pop()) == int(dividend) // int(divisor)
