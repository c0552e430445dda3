"""Test helpers module for shared test utilities.

This module consolidates common test utilities to reduce duplication:
- reference: int-backed oracle for expected results
- cases: fixed operand tables and seeded random corpora
"""

from tests.helpers.cases import (
    FIXED_PAIRS,
    MALFORMED_PAIRS,
    random_digits,
    random_pairs,
    sign_variants,
)
from tests.helpers.reference import REFERENCE_OPERATIONS, reference_div, reference_result

__all__ = [
    # Cases
    "FIXED_PAIRS",
    "MALFORMED_PAIRS",
    "sign_variants",
    "random_digits",
    "random_pairs",
    # Reference
    "REFERENCE_OPERATIONS",
    "reference_div",
    "reference_result",
]
