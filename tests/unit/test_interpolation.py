"""
Тесты для модуля Lagrange Interpolation at Zero

Проверяет:
1. Точное восстановление свободного члена полиномов известной степени
2. Нецелые значения f(0) (tagged-результат, не исключение)
3. Независимость от порядка точек
4. Отказ при совпадающих x (DivisionByZero)
5. Вклады отдельных базисных полиномов
"""

import pytest

from src.core.domain.point import Point
from src.core.math.exact_fraction import DivisionByZero, ExactFraction
from src.core.math.interpolation import (
    InterpolationResult,
    evaluate_at_zero,
    interpolate_secret,
    lagrange_term_at_zero,
)


def eval_poly(coeffs, x):
    """Значение полинома (coeffs[0] — свободный член) по схеме Горнера."""
    result = 0
    for c in reversed(coeffs):
        result = result * x + c
    return result


def sample_points(coeffs, xs):
    return [Point(x=x, y=eval_poly(coeffs, x)) for x in xs]


# =============================================================================
# СЦЕНАРИИ
# =============================================================================


class TestScenarios:
    """Конкретные наборы точек"""

    def test_quadratic_x2_plus_x_plus_2(self) -> None:
        """f(x) = x² + x + 2 → f(0) = 2"""
        points = [Point(x=1, y=4), Point(x=2, y=8), Point(x=3, y=14)]
        result = evaluate_at_zero(points)
        assert result == ExactFraction.from_integer(2)
        assert result.to_exact_integer().unwrap() == 2

    def test_quadratic_x2_plus_3(self) -> None:
        """(1,4), (2,7), (3,12) лежат на f(x) = x² + 3 → f(0) = 3"""
        points = [Point(x=1, y=4), Point(x=2, y=7), Point(x=3, y=12)]
        result = evaluate_at_zero(points)
        assert result == ExactFraction.from_integer(3)
        assert result.to_exact_integer().value == 3

    def test_identity_line(self) -> None:
        """f(x) = x → f(0) = 0"""
        points = [Point(x=1, y=1), Point(x=2, y=2)]
        assert evaluate_at_zero(points) == ExactFraction.from_integer(0)

    def test_non_integer_secret(self) -> None:
        """f(x) = 1.5x - 0.5 → f(0) = -1/2"""
        points = [Point(x=1, y=1), Point(x=3, y=4)]
        result = evaluate_at_zero(points)
        assert result == ExactFraction(-1, 2)

        exact = result.to_exact_integer()
        assert exact.is_integer is False
        assert exact.fraction == ExactFraction(-1, 2)

    def test_single_point_is_constant(self) -> None:
        """k = 1: полином степени 0, f(0) = y"""
        assert evaluate_at_zero([Point(x=5, y=-17)]) == ExactFraction.from_integer(-17)

    def test_point_at_zero(self) -> None:
        """Точка с x = 0 даёт f(0) напрямую"""
        points = sample_points([9, -4, 1], [0, 2, 7])
        assert evaluate_at_zero(points) == ExactFraction.from_integer(9)


# =============================================================================
# ТОЧНОСТЬ
# =============================================================================


class TestExactness:
    """Восстановление свободного члена полиномов с известными коэффициентами"""

    @pytest.mark.parametrize(
        "coeffs, xs",
        [
            ([7], [3]),
            ([-5, 2], [1, 4]),
            ([123456789, -7, 3, 11], [1, 2, 5, 9]),
            ([0, 1, 0, 0, 1], [-3, -1, 2, 4, 10]),
            ([42, -1, -1, -1, -1, -1], [1, 2, 3, 4, 5, 6]),
        ],
    )
    def test_reproduces_constant_term(self, coeffs, xs) -> None:
        points = sample_points(coeffs, xs)
        assert evaluate_at_zero(points) == ExactFraction.from_integer(coeffs[0])

    def test_lower_degree_polynomial_with_more_points(self) -> None:
        """Степень ≤ k-1: лишние точки не мешают"""
        points = sample_points([11, 2], [1, 2, 3, 4, 5])
        assert evaluate_at_zero(points) == ExactFraction.from_integer(11)

    def test_hundreds_of_digits(self) -> None:
        """Коэффициенты из сотен цифр восстанавливаются без округления"""
        secret = 36**250 + 987654321
        coeffs = [secret, 10**180 + 3, -(7**200), 2**600]
        points = sample_points(coeffs, [2, 3, 5, 8])
        result = evaluate_at_zero(points)
        assert result.to_exact_integer().value == secret

    def test_rational_coefficients(self) -> None:
        """f(x) = (x² + x) / 2 + 1: дробные коэффициенты, целые y"""
        points = [Point(x=x, y=x * (x + 1) // 2 + 1) for x in (1, 2, 3)]
        assert evaluate_at_zero(points) == ExactFraction.from_integer(1)


# =============================================================================
# ПОРЯДОК
# =============================================================================


class TestOrderIndependence:
    """Результат не зависит от порядка точек"""

    def test_permutations(self) -> None:
        points = sample_points([-3, 5, 0, 2], [1, 4, 6, 9])
        expected = evaluate_at_zero(points)

        assert evaluate_at_zero(list(reversed(points))) == expected
        assert evaluate_at_zero(points[2:] + points[:2]) == expected

    def test_non_integer_order_independent(self) -> None:
        points = [Point(x=1, y=1), Point(x=3, y=4), Point(x=4, y=2)]
        assert evaluate_at_zero(points) == evaluate_at_zero(points[::-1])

    def test_input_not_modified(self) -> None:
        points = [Point(x=1, y=4), Point(x=2, y=7), Point(x=3, y=12)]
        snapshot = list(points)
        evaluate_at_zero(points)
        assert points == snapshot


# =============================================================================
# ОТКАЗЫ
# =============================================================================


class TestFailures:
    """Нарушения предусловий"""

    def test_duplicate_x_raises(self) -> None:
        points = [Point(x=1, y=4), Point(x=2, y=7), Point(x=1, y=9)]
        with pytest.raises(DivisionByZero):
            evaluate_at_zero(points)

    def test_duplicate_identical_points_raise(self) -> None:
        points = [Point(x=2, y=5), Point(x=2, y=5)]
        with pytest.raises(DivisionByZero):
            evaluate_at_zero(points)

    def test_empty_raises(self) -> None:
        with pytest.raises(ValueError, match="at least one point"):
            evaluate_at_zero([])


# =============================================================================
# БАЗИСНЫЕ ВКЛАДЫ
# =============================================================================


class TestLagrangeTerm:
    """Тесты lagrange_term_at_zero"""

    def test_terms_for_known_points(self) -> None:
        """(1,4), (2,7), (3,12): вклады 12, -21, 12"""
        points = [Point(x=1, y=4), Point(x=2, y=7), Point(x=3, y=12)]
        terms = [lagrange_term_at_zero(points, i) for i in range(3)]
        assert terms == [
            ExactFraction.from_integer(12),
            ExactFraction.from_integer(-21),
            ExactFraction.from_integer(12),
        ]

    def test_fractional_term(self) -> None:
        """(1,1), (3,4): вклады 3/2 и -2"""
        points = [Point(x=1, y=1), Point(x=3, y=4)]
        assert lagrange_term_at_zero(points, 0) == ExactFraction(3, 2)
        assert lagrange_term_at_zero(points, 1) == ExactFraction(-2)


# =============================================================================
# INTERPOLATE SECRET
# =============================================================================


class TestInterpolateSecret:
    """Тесты interpolate_secret"""

    def test_integer_result(self) -> None:
        result = interpolate_secret([Point(x=1, y=4), Point(x=2, y=8), Point(x=3, y=14)])
        assert isinstance(result, InterpolationResult)
        assert result.secret == ExactFraction(2)
        assert result.exact.is_integer is True
        assert result.exact.value == 2
        assert result.point_count == 3

    def test_non_integer_result(self) -> None:
        result = interpolate_secret([Point(x=1, y=1), Point(x=3, y=4)])
        assert result.secret == ExactFraction(-1, 2)
        assert result.exact.is_integer is False
        assert result.exact.value is None

    def test_duplicate_propagates(self) -> None:
        with pytest.raises(DivisionByZero):
            interpolate_secret([Point(x=3, y=1), Point(x=3, y=2)])
