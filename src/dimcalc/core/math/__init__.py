"""
Core math modules для dimcalc

Численные примитивы с гарантией отсутствия молчаливых inf/NaN.
"""

from dimcalc.core.math.numerical_safeguards import (
    EPS_QUANTITY_DEFAULT,
    checked_divide,
    checked_result,
    is_scalar,
    is_valid_float,
    validate_finite,
    within_tolerance,
)

__all__ = [
    # Epsilon constants
    "EPS_QUANTITY_DEFAULT",
    # Validation
    "is_scalar",
    "is_valid_float",
    "validate_finite",
    "checked_result",
    # Division / comparison
    "checked_divide",
    "within_tolerance",
]
