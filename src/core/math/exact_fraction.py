"""
ExactFraction — точная рациональная арифметика

Рациональное число numerator/denominator поверх int произвольной точности.
Используется для интерполяции, где float-округление недопустимо: входные
значения после декодирования из base-36 могут содержать сотни цифр.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. denominator > 0 (знак всегда хранится в numerator)
2. gcd(|numerator|, denominator) == 1 после каждого создания
3. Ноль всегда представлен как 0/1
4. Экземпляры immutable: каждая операция возвращает новый объект
5. Только int операнды (float/bool отклоняются) — никакой аппроксимации
"""

import math
from dataclasses import dataclass
from typing import Optional, Union

from src.core.math.base_decoding import format_decimal


# =============================================================================
# EXCEPTIONS
# =============================================================================


class FractionError(ArithmeticError):
    """Базовая ошибка точной рациональной арифметики."""
    pass


class InvalidFraction(FractionError):
    """
    Попытка создать дробь с нулевым знаменателем.

    Фатальна для операции, которая её вызвала; никогда не заменяется
    значением по умолчанию.
    """
    pass


class DivisionByZero(FractionError):
    """
    Деление на дробь, равную нулю.

    При интерполяции означает совпадающие x-координаты (x_i == x_j).
    """
    pass


class NotAnInteger(FractionError):
    """
    Дробь не является целым числом (denominator != 1).

    Ожидаемый, восстановимый исход: поднимается только при явном unwrap()
    результата ExactIntegerResult. Исходная дробь доступна в атрибуте fraction.
    """

    def __init__(self, fraction: "ExactFraction"):
        super().__init__(f"Not an integer: {fraction}")
        self.fraction = fraction


# =============================================================================
# EXACT FRACTION
# =============================================================================


def _require_int(value: object, name: str) -> int:
    # bool является подклассом int, но как операнд дроби это всегда ошибка
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be int, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class ExactFraction:
    """
    Immutable рациональное число в канонической форме.

    Конструктор нормализует знак и сокращает дробь, поэтому равенство
    двух экземпляров совпадает с равенством чисел, а hash согласован с ==.

    Examples:
        >>> ExactFraction(6, -4)
        ExactFraction(numerator=-3, denominator=2)
        >>> str(ExactFraction(0, 7))
        '0'
        >>> ExactFraction(1, 0)  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        InvalidFraction: zero denominator
    """

    numerator: int
    denominator: int = 1

    def __post_init__(self) -> None:
        n = _require_int(self.numerator, "numerator")
        d = _require_int(self.denominator, "denominator")

        if d == 0:
            raise InvalidFraction(f"zero denominator (numerator={format_decimal(n)})")

        if d < 0:
            n, d = -n, -d

        # math.gcd(0, d) == d, поэтому 0/d → 0/1
        g = math.gcd(n, d)
        object.__setattr__(self, "numerator", n // g)
        object.__setattr__(self, "denominator", d // g)

    # -------------------------------------------------------------------------
    # Фабрики
    # -------------------------------------------------------------------------

    @classmethod
    def zero(cls) -> "ExactFraction":
        """Каноничный ноль 0/1."""
        return cls(0, 1)

    @classmethod
    def from_integer(cls, value: int) -> "ExactFraction":
        """Каноничная дробь value/1."""
        return cls(value, 1)

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def add(self, other: "ExactFraction") -> "ExactFraction":
        """(a.n * b.d + b.n * a.d) / (a.d * b.d), затем нормализация."""
        return ExactFraction(
            self.numerator * other.denominator + other.numerator * self.denominator,
            self.denominator * other.denominator,
        )

    def subtract(self, other: "ExactFraction") -> "ExactFraction":
        return self.add(other.negate())

    def multiply(self, other: "ExactFraction") -> "ExactFraction":
        """(a.n * b.n) / (a.d * b.d), затем нормализация."""
        return ExactFraction(
            self.numerator * other.numerator,
            self.denominator * other.denominator,
        )

    def divide(self, other: "ExactFraction") -> "ExactFraction":
        """
        (a.n * b.d) / (a.d * b.n), затем нормализация.

        Raises:
            DivisionByZero: если other равна нулю
        """
        if other.numerator == 0:
            raise DivisionByZero(f"divide {self} by zero fraction")
        return ExactFraction(
            self.numerator * other.denominator,
            self.denominator * other.numerator,
        )

    def negate(self) -> "ExactFraction":
        return ExactFraction(-self.numerator, self.denominator)

    # -------------------------------------------------------------------------
    # Запросы
    # -------------------------------------------------------------------------

    def is_zero(self) -> bool:
        return self.numerator == 0

    def is_integer(self) -> bool:
        return self.denominator == 1

    def to_exact_integer(self) -> "ExactIntegerResult":
        """
        Запрос точного целого значения.

        Не поднимает исключение для нецелого значения: возвращает
        tagged-результат, который вызывающий код обязан проверить.

        Returns:
            ExactIntegerResult с is_integer=True и value, если
            numerator mod denominator == 0, иначе is_integer=False
        """
        quotient, remainder = divmod(self.numerator, self.denominator)
        if remainder == 0:
            return ExactIntegerResult(
                is_integer=True,
                value=quotient,
                fraction=self,
                reason="",
            )
        return ExactIntegerResult(
            is_integer=False,
            value=None,
            fraction=self,
            reason=f"denominator {format_decimal(self.denominator)} != 1",
        )

    def to_exact_integer_strict(self) -> int:
        """
        Raises:
            NotAnInteger: если дробь не целая
        """
        return self.to_exact_integer().unwrap()

    # -------------------------------------------------------------------------
    # Операторы
    # -------------------------------------------------------------------------

    def __add__(self, other: Union["ExactFraction", int]) -> "ExactFraction":
        return self.add(_coerce(other))

    __radd__ = __add__

    def __sub__(self, other: Union["ExactFraction", int]) -> "ExactFraction":
        return self.subtract(_coerce(other))

    def __rsub__(self, other: Union["ExactFraction", int]) -> "ExactFraction":
        return _coerce(other).subtract(self)

    def __mul__(self, other: Union["ExactFraction", int]) -> "ExactFraction":
        return self.multiply(_coerce(other))

    __rmul__ = __mul__

    def __truediv__(self, other: Union["ExactFraction", int]) -> "ExactFraction":
        return self.divide(_coerce(other))

    def __rtruediv__(self, other: Union["ExactFraction", int]) -> "ExactFraction":
        return _coerce(other).divide(self)

    def __neg__(self) -> "ExactFraction":
        return self.negate()

    def __str__(self) -> str:
        if self.denominator == 1:
            return format_decimal(self.numerator)
        return f"{format_decimal(self.numerator)}/{format_decimal(self.denominator)}"


def _coerce(value: Union[ExactFraction, int]) -> ExactFraction:
    if isinstance(value, ExactFraction):
        return value
    return ExactFraction.from_integer(value)


# =============================================================================
# EXACT INTEGER RESULT
# =============================================================================


@dataclass(frozen=True)
class ExactIntegerResult:
    """Результат запроса to_exact_integer()."""

    is_integer: bool
    value: Optional[int]

    # Исходная дробь остаётся доступной в обоих исходах
    fraction: ExactFraction

    # Пустая строка при is_integer=True
    reason: str

    def unwrap(self) -> int:
        """
        Raises:
            NotAnInteger: если is_integer=False
        """
        if not self.is_integer:
            raise NotAnInteger(self.fraction)
        return self.value
