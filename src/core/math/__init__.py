"""
Core math modules

Точная рациональная арифметика, декодирование оснований и интерполяция.
"""

# Exact Fraction
from src.core.math.exact_fraction import (
    DivisionByZero,
    ExactFraction,
    ExactIntegerResult,
    FractionError,
    InvalidFraction,
    NotAnInteger,
)

# Base Decoding
from src.core.math.base_decoding import (
    DIGIT_ALPHABET,
    MAX_BASE,
    MIN_BASE,
    BaseDecodingError,
    decode_base_value,
    encode_base_value,
    format_decimal,
    validate_base,
)

# Lagrange Interpolation
from src.core.math.interpolation import (
    InterpolationResult,
    evaluate_at_zero,
    interpolate_secret,
    lagrange_term_at_zero,
)

__all__ = [
    # Exact Fraction — Types
    "ExactFraction",
    "ExactIntegerResult",
    # Exact Fraction — Exceptions
    "FractionError",
    "InvalidFraction",
    "DivisionByZero",
    "NotAnInteger",
    # Base Decoding — Constants
    "DIGIT_ALPHABET",
    "MAX_BASE",
    "MIN_BASE",
    # Base Decoding — Exceptions
    "BaseDecodingError",
    # Base Decoding — Functions
    "decode_base_value",
    "encode_base_value",
    "format_decimal",
    "validate_base",
    # Interpolation — Types
    "InterpolationResult",
    # Interpolation — Functions
    "evaluate_at_zero",
    "interpolate_secret",
    "lagrange_term_at_zero",
]
