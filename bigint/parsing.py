"""Decimal text parsing and canonical rendering.

Accepted grammar: an optional single ``+`` or ``-`` at position 0,
followed by one or more ASCII digits. Leading zeros are dropped and zero
is always unsigned.
"""

from __future__ import annotations

from typing import NoReturn

import structlog

from bigint.digits import is_zero, trim_leading_zeros
from bigint.errors import InvalidFormat
from bigint.types import Digits, Sign

logger = structlog.get_logger()

_DIGIT_VALUES = {str(d): d for d in range(10)}
_SIGNS = {"+": Sign.POSITIVE, "-": Sign.NEGATIVE}


def parse_decimal(text: str) -> tuple[Sign, Digits]:
    """Parse decimal text into a canonical (sign, magnitude) pair.

    Args:
        text: e.g. "1234", "+001234", "-1234"

    Returns:
        Tuple of (sign, digits)

    Raises:
        TypeError: If text is not a str
        InvalidFormat: If text is empty, a sign is misplaced or repeated,
            or a character is not a decimal digit
    """
    if not isinstance(text, str):
        raise TypeError(f"Integer text must be str, got {type(text).__name__}")
    if not text:
        _reject(text, "empty text")

    sign = _SIGNS.get(text[0])
    start = 0 if sign is None else 1
    if start == len(text):
        _reject(text, "sign without digits")

    values: list[int] = []
    for position in range(start, len(text)):
        char = text[position]
        value = _DIGIT_VALUES.get(char)
        if value is None:
            if char in _SIGNS:
                _reject(text, f"sign {char!r} at position {position}")
            _reject(text, f"non-digit {char!r} at position {position}")
        values.append(value)

    digits = trim_leading_zeros(values)
    if sign is None or is_zero(digits):
        sign = Sign.POSITIVE
    return sign, digits


def format_decimal(sign: Sign, digits: Digits) -> str:
    """Render a canonical value; only negative values carry a sign."""
    body = "".join(map(str, digits))
    if sign is Sign.NEGATIVE:
        return "-" + body
    return body


def _reject(text: str, reason: str) -> NoReturn:
    logger.debug("invalid_integer_format", text=text, reason=reason)
    raise InvalidFormat(f"Invalid integer {text!r}: {reason}")
