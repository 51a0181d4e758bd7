"""
Domain models and value objects.

Contains the fixed-point number representation and its helpers.
"""

from arbitraire.core.domain.fixed_point import (
    DIGIT_ALPHABET,
    MAX_TEXT_BASE,
    MIN_BASE,
    FixedPointNumber,
    Sign,
    compare_magnitude,
    result_sign,
    validate_base,
    validate_scale,
)

__all__ = [
    # Constants
    "DIGIT_ALPHABET",
    "MAX_TEXT_BASE",
    "MIN_BASE",
    # Model
    "FixedPointNumber",
    "Sign",
    # Helpers
    "compare_magnitude",
    "result_sign",
    "validate_base",
    "validate_scale",
]
