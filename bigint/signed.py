"""Signed sum and difference over (sign, magnitude) pairs.

Addition and subtraction share one routine per sign case instead of
calling each other: every ``SignCase`` maps to a handler in a table, and
each handler only combines unsigned magnitudes. A signed value here is a
plain ``(Sign, Digits)`` pair; ``bigint.integer`` wraps the result.
"""

from __future__ import annotations

from collections.abc import Callable

from bigint.digits import ZERO_DIGITS, add_magnitudes, compare_magnitudes, subtract_magnitudes
from bigint.types import Digits, Sign, SignCase

Signed = tuple[Sign, Digits]

_Handler = Callable[[Digits, Digits], Signed]


def magnitude_difference(minuend: Digits, subtrahend: Digits) -> Signed:
    """|minuend| - |subtrahend| as a signed value.

    The smaller magnitude is always subtracted from the larger one; the
    sign records which side was larger. Equal magnitudes give canonical
    (positive) zero.
    """
    ordering = compare_magnitudes(minuend, subtrahend)
    if ordering == 0:
        return Sign.POSITIVE, ZERO_DIGITS
    if ordering > 0:
        return Sign.POSITIVE, subtract_magnitudes(minuend, subtrahend)
    return Sign.NEGATIVE, subtract_magnitudes(subtrahend, minuend)


def _positive_sum(a: Digits, b: Digits) -> Signed:
    return Sign.POSITIVE, add_magnitudes(a, b)


def _negative_sum(a: Digits, b: Digits) -> Signed:
    return Sign.NEGATIVE, add_magnitudes(a, b)


def _reversed_difference(a: Digits, b: Digits) -> Signed:
    return magnitude_difference(b, a)


# a + b, keyed by the signs of (a, b)
SUM_HANDLERS: dict[SignCase, _Handler] = {
    SignCase.BOTH_POSITIVE: _positive_sum,
    SignCase.POSITIVE_NEGATIVE: magnitude_difference,  # |a| - |b|
    SignCase.NEGATIVE_POSITIVE: _reversed_difference,  # |b| - |a|
    SignCase.BOTH_NEGATIVE: _negative_sum,  # -(|a| + |b|)
}

# a - b, keyed by the signs of (a, b)
DIFFERENCE_HANDLERS: dict[SignCase, _Handler] = {
    SignCase.BOTH_POSITIVE: magnitude_difference,  # |a| - |b|
    SignCase.POSITIVE_NEGATIVE: _positive_sum,  # |a| + |b|
    SignCase.NEGATIVE_POSITIVE: _negative_sum,  # -(|a| + |b|)
    SignCase.BOTH_NEGATIVE: _reversed_difference,  # |b| - |a|
}


def signed_sum(a: Signed, b: Signed) -> Signed:
    """a + b."""
    handler = SUM_HANDLERS[SignCase.of(a[0], b[0])]
    return handler(a[1], b[1])


def signed_difference(a: Signed, b: Signed) -> Signed:
    """a - b."""
    handler = DIFFERENCE_HANDLERS[SignCase.of(a[0], b[0])]
    return handler(a[1], b[1])
