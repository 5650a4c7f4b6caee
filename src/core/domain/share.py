"""
Share — модели записей документа с shares

Immutable Pydantic модели для:
- объекта "keys" (n — общее число shares, k — порог)
- одной записи share с числовым ключом ({"base": ..., "value": ...})

Числовые поля принимают как JSON-числа, так и строки цифр ("4"),
поскольку документы с shares нередко хранят их строками.
"""

from typing import Any

from pydantic import BaseModel, Field, field_validator

from src.core.domain.point import Point
from src.core.math.base_decoding import MAX_BASE, MIN_BASE, decode_base_value, format_decimal


def _reject_bool(v: Any) -> Any:
    if isinstance(v, bool):
        raise ValueError(f"expected integer, got bool {v}")
    return v


# =============================================================================
# THRESHOLD KEYS
# =============================================================================


class ThresholdKeys(BaseModel):
    """
    Объект "keys" документа.

    n не участвует в вычислениях: для интерполяции используются первые k
    записей с числовыми ключами.
    """

    n: int = Field(..., ge=1, description="Общее число shares")
    k: int = Field(..., gt=0, description="Порог: число точек для интерполяции")

    model_config = {"frozen": True}  # Immutable

    @field_validator("n", "k", mode="before")
    @classmethod
    def reject_bool(cls, v: Any) -> Any:
        return _reject_bool(v)

    @property
    def degree(self) -> int:
        """Степень полинома, однозначно задаваемого k точками."""
        return self.k - 1


# =============================================================================
# SHARE ENTRY
# =============================================================================


class ShareEntry(BaseModel):
    """Одна запись share: значение value в основании base."""

    base: int = Field(..., ge=MIN_BASE, le=MAX_BASE, description="Основание (2..36)")
    value: str = Field(..., min_length=1, description="Строка цифр в основании base")

    model_config = {"frozen": True}  # Immutable

    @field_validator("base", mode="before")
    @classmethod
    def reject_bool(cls, v: Any) -> Any:
        return _reject_bool(v)

    @field_validator("value", mode="before")
    @classmethod
    def stringify_integer_value(cls, v: Any) -> Any:
        """JSON-число в value трактуется как строка его десятичной записи."""
        if isinstance(v, int) and not isinstance(v, bool):
            return format_decimal(v)
        return v

    def decode(self) -> int:
        """
        Raises:
            BaseDecodingError: если value не является числом в основании base
        """
        return decode_base_value(self.value, self.base)

    def to_point(self, x: int) -> Point:
        return Point(x=x, y=self.decode())
