"""Integer engine error classes.

Both errors are raised before any result is built; there is no partial
result to recover and nothing to retry.
"""


class IntegerError(Exception):
    """Base error for Integer operations."""

    pass


class InvalidFormat(IntegerError, ValueError):
    """Construction text is not an optionally signed run of decimal digits."""

    pass


class DivisionByZero(IntegerError, ZeroDivisionError):
    """Divisor is zero."""

    pass
