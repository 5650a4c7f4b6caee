"""
Point — точка интерполяции (share)

Immutable Pydantic модель одной точки (x, y) скрытого полинома.
x — индекс share, y — декодированное значение share.
"""

from pydantic import BaseModel, Field


class Point(BaseModel):
    """
    Точка (x, y) с целыми координатами произвольной точности.

    Strict-режим: float и строки не приводятся к int, чтобы в интерполяцию
    не попало приближённое значение.
    """

    x: int = Field(..., strict=True, description="Индекс share (x-координата)")
    y: int = Field(..., strict=True, description="Декодированное значение share")

    model_config = {"frozen": True}  # Immutable

    def as_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)
