"""Arbitrary-precision decimal integer value type.

Integer stores a sign and a tuple of decimal digits (most-significant
first). Values are immutable: every operation returns a new Integer and
never touches its operands.

Usage pattern:
    from bigint import Integer

    a = Integer("123456789123456789123456789")
    b = Integer("-987654321")

    total = a + b
    product = a * b
    quotient = a.div(b)   # truncates toward zero

    str(Integer("100").div(Integer("3")))  # "33"
"""

from __future__ import annotations

import structlog

from bigint.config import DEFAULT_ENGINE_CONFIG, EngineConfig
from bigint.digits import (
    ONE_DIGITS,
    ZERO_DIGITS,
    compare_magnitudes,
    divide_magnitudes,
    is_zero,
    multiply_magnitudes,
)
from bigint.errors import DivisionByZero
from bigint.parsing import format_decimal, parse_decimal
from bigint.signed import signed_difference, signed_sum
from bigint.types import Digits, Ordering, Sign

__all__ = [
    "Integer",
    "ZERO",
    "ONE",
    "construct",
    "to_decimal_string",
    "compare",
    "negate",
    "add",
    "sub",
    "mul",
    "div",
]

logger = structlog.get_logger()


class Integer:
    """Exact signed integer of unbounded size.

    Construct from decimal text; an optional leading ``+`` or ``-`` is
    allowed and leading zeros are ignored:

        Integer("-001234")  # -1234
        Integer("0000")     # 0

    Zero is always positive. Division is the named method ``div``, which
    truncates toward zero; ``/`` and ``//`` are deliberately not defined.

    Attributes:
        sign: Sign.POSITIVE or Sign.NEGATIVE (read-only)
        digits: Magnitude digits, most-significant first (read-only)
    """

    __slots__ = ("_sign", "_digits")
    _sign: Sign
    _digits: Digits

    def __init__(self, value: str | Integer) -> None:
        """Create an Integer from decimal text or another Integer.

        Raises:
            InvalidFormat: If the text is not a valid decimal integer
            TypeError: If value is neither a str nor an Integer
        """
        if isinstance(value, Integer):
            self._sign = value._sign
            self._digits = value._digits
        else:
            self._sign, self._digits = parse_decimal(value)

    @classmethod
    def _from_parts(cls, sign: Sign, digits: Digits) -> Integer:
        """Wrap an already-canonical magnitude, forcing zero positive."""
        instance = cls.__new__(cls)
        instance._sign = Sign.POSITIVE if is_zero(digits) else sign
        instance._digits = digits
        return instance

    @classmethod
    def from_int(cls, value: int) -> Integer:
        """Create from a Python int (via its decimal text)."""
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"Integer.from_int requires int, got {type(value).__name__}")
        return cls(str(value))

    # --- Properties ---

    @property
    def sign(self) -> Sign:
        return self._sign

    @property
    def digits(self) -> Digits:
        return self._digits

    @property
    def is_negative(self) -> bool:
        return self._sign is Sign.NEGATIVE

    @property
    def is_zero(self) -> bool:
        return is_zero(self._digits)

    def __repr__(self) -> str:
        return f"Integer({str(self)!r})"

    def __str__(self) -> str:
        return format_decimal(self._sign, self._digits)

    def __hash__(self) -> int:
        return hash((self._sign, self._digits))

    # --- Arithmetic operations ---

    def negate(self) -> Integer:
        """Flip the sign. Zero negates to itself."""
        return Integer._from_parts(self._sign.flipped, self._digits)

    def abs(self) -> Integer:
        """Absolute value."""
        if self._sign is Sign.POSITIVE:
            return self
        return Integer._from_parts(Sign.POSITIVE, self._digits)

    def add(self, other: Integer) -> Integer:
        """self + other."""
        other = _require_integer(other, "add")
        sign, digits = signed_sum((self._sign, self._digits), (other._sign, other._digits))
        return Integer._from_parts(sign, digits)

    def sub(self, other: Integer) -> Integer:
        """self - other."""
        other = _require_integer(other, "sub")
        if self == other:
            return ZERO
        sign, digits = signed_difference(
            (self._sign, self._digits), (other._sign, other._digits)
        )
        return Integer._from_parts(sign, digits)

    def mul(self, other: Integer) -> Integer:
        """self * other."""
        other = _require_integer(other, "mul")
        if self.is_zero or other.is_zero:
            return ZERO
        sign = Sign.of_product(self._sign, other._sign)
        return Integer._from_parts(sign, multiply_magnitudes(self._digits, other._digits))

    def div(self, other: Integer, config: EngineConfig | None = None) -> Integer:
        """Quotient of self / other, truncated toward zero.

        Signs are stripped, the magnitudes divided, and the sign reapplied,
        so -7 / 2 == -3 and 7 / -2 == -3. No remainder adjustment is made.

        Args:
            other: Divisor
            config: Engine configuration. Uses DEFAULT_ENGINE_CONFIG if not provided.

        Raises:
            DivisionByZero: If other is zero
        """
        other = _require_integer(other, "div")
        if other.is_zero:
            logger.debug("division_by_zero", dividend=str(self))
            raise DivisionByZero(f"Division by zero: {self} / 0")

        sign = Sign.of_product(self._sign, other._sign)
        if other._digits == ONE_DIGITS:
            return Integer._from_parts(sign, self._digits)

        ordering = compare_magnitudes(self._digits, other._digits)
        if ordering < 0:
            return ZERO
        if ordering == 0:
            return Integer._from_parts(sign, ONE_DIGITS)

        strategy = (config or DEFAULT_ENGINE_CONFIG).division_strategy
        quotient = divide_magnitudes(self._digits, other._digits, strategy.quotient_digit)
        return Integer._from_parts(sign, quotient)

    def __add__(self, other: Integer) -> Integer:
        if not isinstance(other, Integer):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Integer) -> Integer:
        if not isinstance(other, Integer):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, other: Integer) -> Integer:
        if not isinstance(other, Integer):
            return NotImplemented
        return self.mul(other)

    def __neg__(self) -> Integer:
        return self.negate()

    def __pos__(self) -> Integer:
        """Unary positive (returns self)."""
        return self

    def __abs__(self) -> Integer:
        return self.abs()

    # --- Comparison operations ---

    def compare(self, other: Integer) -> Ordering:
        """Total order by mathematical value.

        Signs decide first (negative before positive). With equal signs the
        magnitudes are compared by length and then digit by digit, and the
        result is reversed for negative values.
        """
        other = _require_integer(other, "compare")
        if self._sign is not other._sign:
            return Ordering.LESS if self.is_negative else Ordering.GREATER
        result = compare_magnitudes(self._digits, other._digits)
        if self.is_negative:
            result = -result
        return Ordering.from_int(result)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Integer):
            return NotImplemented
        return self._sign is other._sign and self._digits == other._digits

    def __lt__(self, other: Integer) -> bool:
        if not isinstance(other, Integer):
            return NotImplemented
        return self.compare(other) is Ordering.LESS

    def __le__(self, other: Integer) -> bool:
        if not isinstance(other, Integer):
            return NotImplemented
        return self.compare(other) is not Ordering.GREATER

    def __gt__(self, other: Integer) -> bool:
        if not isinstance(other, Integer):
            return NotImplemented
        return self.compare(other) is Ordering.GREATER

    def __ge__(self, other: Integer) -> bool:
        if not isinstance(other, Integer):
            return NotImplemented
        return self.compare(other) is not Ordering.LESS

    # --- Conversion ---

    def __int__(self) -> int:
        """Convert to a Python int.

        Goes through decimal text, so values longer than
        ``sys.get_int_max_str_digits()`` raise ValueError.
        """
        return int(str(self))

    def __bool__(self) -> bool:
        """True if non-zero."""
        return not self.is_zero


def _require_integer(value: object, operation: str) -> Integer:
    if not isinstance(value, Integer):
        raise TypeError(f"Integer.{operation} requires Integer, got {type(value).__name__}")
    return value


ZERO = Integer._from_parts(Sign.POSITIVE, ZERO_DIGITS)
ONE = Integer._from_parts(Sign.POSITIVE, ONE_DIGITS)


# =============================================================================
# Module-level operations
# =============================================================================


def construct(text: str) -> Integer:
    """Parse decimal text. Raises InvalidFormat on malformed input."""
    return Integer(text)


def to_decimal_string(value: Integer) -> str:
    """Canonical decimal text: '-' only for negatives, no leading zeros."""
    return str(_require_integer(value, "to_decimal_string"))


def compare(a: Integer, b: Integer) -> Ordering:
    return _require_integer(a, "compare").compare(b)


def negate(a: Integer) -> Integer:
    return _require_integer(a, "negate").negate()


def add(a: Integer, b: Integer) -> Integer:
    return _require_integer(a, "add").add(b)


def sub(a: Integer, b: Integer) -> Integer:
    return _require_integer(a, "sub").sub(b)


def mul(a: Integer, b: Integer) -> Integer:
    return _require_integer(a, "mul").mul(b)


def div(a: Integer, b: Integer, config: EngineConfig | None = None) -> Integer:
    """Truncating division. Raises DivisionByZero if b is zero."""
    return _require_integer(a, "div").div(b, config=config)
