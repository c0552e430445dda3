"""Shared enums and type aliases for the integer engine."""

from __future__ import annotations

from enum import Enum

# A magnitude: decimal digits 0-9, most-significant first, never empty.
Digits = tuple[int, ...]


class Sign(Enum):
    """Sign of an Integer. Zero is always POSITIVE."""

    POSITIVE = "+"
    NEGATIVE = "-"

    @property
    def flipped(self) -> Sign:
        return Sign.NEGATIVE if self is Sign.POSITIVE else Sign.POSITIVE

    @classmethod
    def of_product(cls, left: Sign, right: Sign) -> Sign:
        """Same signs give POSITIVE, mixed signs give NEGATIVE."""
        return cls.POSITIVE if left is right else cls.NEGATIVE


class Ordering(Enum):
    """Result of comparing two Integers."""

    LESS = -1
    EQUAL = 0
    GREATER = 1

    @classmethod
    def from_int(cls, value: int) -> Ordering:
        if value < 0:
            return cls.LESS
        if value > 0:
            return cls.GREATER
        return cls.EQUAL


class SignCase(Enum):
    """The four sign combinations of a binary operation's operands."""

    BOTH_POSITIVE = (Sign.POSITIVE, Sign.POSITIVE)
    POSITIVE_NEGATIVE = (Sign.POSITIVE, Sign.NEGATIVE)
    NEGATIVE_POSITIVE = (Sign.NEGATIVE, Sign.POSITIVE)
    BOTH_NEGATIVE = (Sign.NEGATIVE, Sign.NEGATIVE)

    @classmethod
    def of(cls, left: Sign, right: Sign) -> SignCase:
        return cls((left, right))
