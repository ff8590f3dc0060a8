"""Hypothesis strategies for Kurrency property-based testing.

Strategies are organized by domain:

- amounts: Valid, invalid and very large amount strings, Decimal amounts
- codes: Registered, mixed-case, and malformed currency codes

Usage:
    from tests.strategies import decimal_amount_strings, registered_codes
    from tests.strategies.amounts import invalid_amount_strings
"""

from .amounts import (
    amount_by_shape,
    decimal_amount_strings,
    decimal_amounts,
    invalid_amount_strings,
    large_amount_strings,
    surrounding_whitespace,
)
from .codes import (
    code_by_digits,
    malformed_codes,
    mixed_case_codes,
    registered_codes,
    three_letter_codes,
)

__all__ = [
    "amount_by_shape",
    "code_by_digits",
    "decimal_amount_strings",
    "decimal_amounts",
    "invalid_amount_strings",
    "large_amount_strings",
    "malformed_codes",
    "mixed_case_codes",
    "registered_codes",
    "surrounding_whitespace",
    "three_letter_codes",
]
