"""Digit-sequence arithmetic on unsigned magnitudes.

A magnitude is a tuple of decimal digits, most-significant first, with no
leading zero unless it is exactly ``(0,)``. Every function here takes
canonical magnitudes and returns a canonical magnitude; signs are handled
one layer up in ``bigint.signed`` and ``bigint.integer``.

Carries and borrows are accumulated in a plain ``list[int]`` whose slots
may hold values outside 0-9 while an operation runs. ``_resolve_carries``
turns the accumulator back into digits in one right-to-left pass, so no
caller ever sees a non-canonical digit.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from bigint.errors import DivisionByZero
from bigint.types import Digits

__all__ = [
    # Constants
    "ZERO_DIGITS",
    "ONE_DIGITS",
    # Normalizer / comparator
    "trim_leading_zeros",
    "is_zero",
    "compare_magnitudes",
    # Arithmetic
    "add_magnitudes",
    "subtract_magnitudes",
    "multiply_magnitudes",
    "divide_magnitudes",
    # Quotient-digit strategies
    "QuotientDigitFn",
    "quotient_digit_by_subtraction",
    "quotient_digit_by_estimate",
]

ZERO_DIGITS: Digits = (0,)
ONE_DIGITS: Digits = (1,)

# (remainder, divisor) -> (quotient digit, reduced remainder)
QuotientDigitFn = Callable[[Digits, Digits], tuple[int, Digits]]


# =============================================================================
# Normalizer and comparator
# =============================================================================


def trim_leading_zeros(digits: Sequence[int]) -> Digits:
    """Drop leading zeros, keeping a single 0 for the value zero."""
    last = len(digits) - 1
    if last < 0:
        return ZERO_DIGITS
    start = 0
    while start < last and digits[start] == 0:
        start += 1
    return tuple(digits[start:])


def is_zero(digits: Digits) -> bool:
    return digits == ZERO_DIGITS


def compare_magnitudes(a: Digits, b: Digits) -> int:
    """Compare two canonical magnitudes.

    A longer canonical magnitude is always larger; equal lengths compare
    digit by digit from the most-significant end, which for tuples is
    plain lexicographic order.

    Returns:
        -1 if a < b, 0 if a == b, 1 if a > b
    """
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1
    if a == b:
        return 0
    return -1 if a < b else 1


def _resolve_carries(acc: list[int]) -> Digits:
    """Propagate carries and borrows right to left, then trim.

    Slot 0 must absorb the final carry, so callers size the accumulator
    with enough leading room for the result.
    """
    for k in range(len(acc) - 1, 0, -1):
        carry, acc[k] = divmod(acc[k], 10)
        acc[k - 1] += carry
    return trim_leading_zeros(acc)


# =============================================================================
# Addition, subtraction, multiplication
# =============================================================================


def add_magnitudes(a: Digits, b: Digits) -> Digits:
    """Right-aligned digit-wise sum with one extra leading slot for the carry."""
    if is_zero(a):
        return b
    if is_zero(b):
        return a

    longer, shorter = (a, b) if len(a) >= len(b) else (b, a)
    offset = len(longer) - len(shorter)

    acc = [0] * (len(longer) + 1)
    for i, digit in enumerate(longer):
        acc[i + 1] = digit
    for j, digit in enumerate(shorter):
        acc[offset + j + 1] += digit

    return _resolve_carries(acc)


def subtract_magnitudes(larger: Digits, smaller: Digits) -> Digits:
    """Compute larger - smaller for magnitudes with larger >= smaller.

    Digit differences may go negative in the accumulator; each one is
    resolved by borrowing from the next more-significant slot.

    Raises:
        ValueError: If smaller is greater than larger
    """
    ordering = compare_magnitudes(larger, smaller)
    if ordering < 0:
        raise ValueError(
            f"Cannot subtract larger magnitude {_show(smaller)} from {_show(larger)}"
        )
    if ordering == 0:
        return ZERO_DIGITS
    if len(larger) == 1:
        return (larger[0] - smaller[0],)

    offset = len(larger) - len(smaller)
    acc = list(larger)
    for j, digit in enumerate(smaller):
        acc[offset + j] -= digit

    return _resolve_carries(acc)


def multiply_magnitudes(a: Digits, b: Digits) -> Digits:
    """Schoolbook product.

    The product of digit pair (i, j) lands in slot i + j + 1 and its carry
    moves into slot i + j, so ``len(a) + len(b)`` slots hold any result.
    """
    if is_zero(a) or is_zero(b):
        return ZERO_DIGITS
    if a == ONE_DIGITS:
        return b
    if b == ONE_DIGITS:
        return a

    acc = [0] * (len(a) + len(b))
    for i in range(len(a) - 1, -1, -1):
        a_digit = a[i]
        if a_digit == 0:
            continue
        for j in range(len(b) - 1, -1, -1):
            acc[i + j + 1] += a_digit * b[j]

    return _resolve_carries(acc)


# =============================================================================
# Division
# =============================================================================


def quotient_digit_by_subtraction(remainder: Digits, divisor: Digits) -> tuple[int, Digits]:
    """Subtract the divisor until the remainder drops below it.

    Called with divisor <= remainder < 10 * divisor, so the count is 1-9.
    """
    count = 0
    while compare_magnitudes(remainder, divisor) >= 0:
        remainder = subtract_magnitudes(remainder, divisor)
        count += 1
    return count, remainder


def quotient_digit_by_estimate(remainder: Digits, divisor: Digits) -> tuple[int, Digits]:
    """Estimate the digit from leading digits, then correct downward.

    With m = len(divisor) - 1, the remainder is below (top + 1) * 10**m and
    the divisor is at least divisor[0] * 10**m, so ``top // divisor[0]``
    never underestimates the true digit.
    """
    if len(remainder) > len(divisor):
        top = remainder[0] * 10 + remainder[1]
    else:
        top = remainder[0]
    estimate = min(9, top // divisor[0])

    product = multiply_magnitudes(divisor, (estimate,))
    while compare_magnitudes(product, remainder) > 0:
        estimate -= 1
        product = subtract_magnitudes(product, divisor)

    return estimate, subtract_magnitudes(remainder, product)


def _append_digit(remainder: Digits, digit: int) -> Digits:
    if is_zero(remainder):
        return (digit,)
    return remainder + (digit,)


def divide_magnitudes(
    dividend: Digits,
    divisor: Digits,
    quotient_digit: QuotientDigitFn = quotient_digit_by_subtraction,
) -> Digits:
    """Long division of magnitudes, truncating.

    Args:
        dividend: Canonical magnitude
        divisor: Canonical, non-zero magnitude
        quotient_digit: Strategy producing each quotient digit

    Returns:
        floor(dividend / divisor) as a canonical magnitude

    Raises:
        DivisionByZero: If divisor is zero
    """
    if is_zero(divisor):
        raise DivisionByZero(f"Division by zero: {_show(dividend)} / 0")
    if divisor == ONE_DIGITS:
        return dividend

    ordering = compare_magnitudes(dividend, divisor)
    if ordering < 0:
        return ZERO_DIGITS
    if ordering == 0:
        return ONE_DIGITS

    return _long_divide(dividend, divisor, quotient_digit)


def _long_divide(dividend: Digits, divisor: Digits, quotient_digit: QuotientDigitFn) -> Digits:
    """Core loop for dividend > divisor > 1."""
    n = len(dividend)

    # Shortest prefix that is not less than the divisor
    i = len(divisor)
    remainder = dividend[:i]
    if compare_magnitudes(remainder, divisor) < 0:
        i += 1
        remainder = dividend[:i]

    quotient: list[int] = []
    while True:
        digit, remainder = quotient_digit(remainder, divisor)
        quotient.append(digit)
        if i >= n:
            break

        if is_zero(remainder):
            # Exact so far: each zero dividend digit is a zero quotient digit
            while dividend[i] == 0:
                quotient.append(0)
                i += 1
                if i >= n:
                    return tuple(quotient)

        remainder = _append_digit(remainder, dividend[i])
        i += 1
        while compare_magnitudes(remainder, divisor) < 0:
            quotient.append(0)
            if i >= n:
                return tuple(quotient)
            remainder = _append_digit(remainder, dividend[i])
            i += 1

    return tuple(quotient)


def _show(digits: Digits) -> str:
    return "".join(map(str, digits))
