"""
Lagrange Interpolation at Zero — восстановление свободного члена полинома

Для k точек с попарно различными x существует единственный полином f
степени ≤ k-1, проходящий через них. Модуль вычисляет f(0) по формуле
Лагранжа целиком в точной рациональной арифметике (ExactFraction).

ФОРМУЛЫ:
    term_i = y_i × Π_{j≠i} (0 - x_j) / (x_i - x_j)
    f(0)   = Σ_i term_i

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Никакого округления: результат — точная дробь
2. Результат не зависит от порядка точек и порядка суммирования
3. Совпадающие x → DivisionByZero (единственный способ отказа алгоритма)
4. Нет разделяемого состояния: каждый вызов — чистая свёртка по точкам
"""

import logging
from dataclasses import dataclass
from functools import reduce
from typing import Sequence

from src.core.domain.point import Point
from src.core.math.exact_fraction import ExactFraction, ExactIntegerResult

logger = logging.getLogger(__name__)


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class InterpolationResult:
    """Результат интерполяции в нуле."""

    # Точное значение f(0)
    secret: ExactFraction

    # Исход запроса точного целого (целое / нецелое — оба валидны)
    exact: ExactIntegerResult

    point_count: int


# =============================================================================
# LAGRANGE
# =============================================================================


def lagrange_term_at_zero(points: Sequence[Point], i: int) -> ExactFraction:
    """
    Вклад i-го базисного полинома Лагранжа в f(0).

    Строится инкрементально: начиная с y_i, для каждого j != i
    умножается на (0 - x_j) и делится на (x_i - x_j).

    Args:
        points: Точки интерполяции
        i: Индекс точки в points

    Returns:
        term_i как ExactFraction

    Raises:
        DivisionByZero: если x_i совпадает с x_j для некоторого j != i
    """
    xi = points[i].x
    term = ExactFraction.from_integer(points[i].y)

    for j, pj in enumerate(points):
        if j == i:
            continue
        term = term.multiply(ExactFraction.from_integer(-pj.x))
        term = term.divide(ExactFraction.from_integer(xi - pj.x))

    return term


def evaluate_at_zero(points: Sequence[Point]) -> ExactFraction:
    """
    Значение f(0) интерполяционного полинома через все points.

    k = len(points); сложность O(k²) операций над большими целыми.

    Args:
        points: k >= 1 точек с попарно различными x

    Returns:
        Точное значение f(0)

    Raises:
        ValueError: если points пуст
        DivisionByZero: если две точки имеют одинаковый x

    Examples:
        >>> pts = [Point(x=1, y=4), Point(x=2, y=8), Point(x=3, y=14)]
        >>> str(evaluate_at_zero(pts))
        '2'
    """
    k = len(points)
    if k < 1:
        raise ValueError(f"at least one point is required, got {k}")

    logger.debug("evaluate_at_zero: k=%d", k)

    return reduce(
        lambda acc, i: acc.add(lagrange_term_at_zero(points, i)),
        range(k),
        ExactFraction.zero(),
    )


def interpolate_secret(points: Sequence[Point]) -> InterpolationResult:
    """
    f(0) вместе с результатом запроса точного целого.

    Нецелый f(0) не является ошибкой: exact.is_integer=False, а точное
    рациональное значение остаётся в secret.
    """
    secret = evaluate_at_zero(points)
    exact = secret.to_exact_integer()

    if not exact.is_integer:
        logger.info("Interpolated value is not an integer (%s)", exact.reason)

    return InterpolationResult(
        secret=secret,
        exact=exact,
        point_count=len(points),
    )
