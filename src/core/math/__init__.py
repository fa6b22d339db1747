"""
Core math modules

Численные примитивы для конверсий частота ↔ период.
"""

from src.core.math.numerical_safeguards import (
    ceil_with_epsilon,
    is_valid_float,
    is_within_tolerance,
    round_half_away_from_zero,
    sanitize_float,
)

__all__ = [
    # NaN/Inf sanitization
    "is_valid_float",
    "sanitize_float",
    # Rounding
    "round_half_away_from_zero",
    "ceil_with_epsilon",
    # Tolerance comparisons
    "is_within_tolerance",
]
