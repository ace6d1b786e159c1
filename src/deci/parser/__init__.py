"""
Parsing of user-supplied decimal literals.
"""

from src.deci.parser.literal import (
    DECIMAL_PATTERN,
    normalize_decimal_string,
    validate_and_normalize_literal,
)

__all__ = [
    "DECIMAL_PATTERN",
    "normalize_decimal_string",
    "validate_and_normalize_literal",
]
