"""Arbitrary-precision decimal integers."""

from bigint.config import DEFAULT_ENGINE_CONFIG, DivisionStrategy, EngineConfig
from bigint.errors import DivisionByZero, IntegerError, InvalidFormat
from bigint.integer import (
    ONE,
    ZERO,
    Integer,
    add,
    compare,
    construct,
    div,
    mul,
    negate,
    sub,
    to_decimal_string,
)
from bigint.types import Ordering, Sign

__version__ = "0.1.0"
__all__ = [
    # Value type
    "Integer",
    "ZERO",
    "ONE",
    "Sign",
    "Ordering",
    # Operations
    "construct",
    "to_decimal_string",
    "compare",
    "negate",
    "add",
    "sub",
    "mul",
    "div",
    # Configuration
    "EngineConfig",
    "DivisionStrategy",
    "DEFAULT_ENGINE_CONFIG",
    # Errors
    "IntegerError",
    "InvalidFormat",
    "DivisionByZero",
    "__version__",
]
