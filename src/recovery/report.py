"""
Report — текстовое представление результата

Рациональное значение печатается всегда точно ("n" или "n/d"),
никогда не округляется.
"""

from typing import List

from src.core.math.base_decoding import format_decimal
from src.core.math.exact_fraction import DivisionByZero, FractionError, InvalidFraction
from src.recovery.document import (
    InsufficientSharesError,
    MalformedDocumentError,
    MissingShareFieldError,
)
from src.recovery.pipeline import RecoveryResult


def render_report(result: RecoveryResult) -> List[str]:
    """
    Строки отчёта для консоли.

    Examples:
        f(0) as rational = 2
        Secret (C) = 2

        f(0) as rational = -1/2
        Secret is not an integer. Rational value: -1/2
    """
    lines = [f"f(0) as rational = {result.secret}"]

    if result.exact.is_integer:
        lines.append(f"Secret (C) = {format_decimal(result.exact.value)}")
    else:
        lines.append(f"Secret is not an integer. Rational value: {result.secret}")

    return lines


def render_failure(error: Exception) -> str:
    """Сообщение об ошибке с указанием нарушенного инварианта."""
    if isinstance(error, DivisionByZero):
        return f"Error: duplicate x-coordinates in selected points ({error})"
    if isinstance(error, InvalidFraction):
        return f"Error: zero denominator ({error})"
    if isinstance(error, FractionError):
        return f"Error: arithmetic failure ({error})"
    if isinstance(error, InsufficientSharesError):
        return f"Error: insufficient shares ({error})"
    if isinstance(error, MissingShareFieldError):
        return f"Error: invalid share entry ({error})"
    if isinstance(error, MalformedDocumentError):
        return f"Error: malformed share document ({error})"
    return f"Error: {error}"
