"""Recovery pipeline — документ → точки → f(0) → точное целое.

Порядок:
1. Разбор/загрузка документа (слой данных)
2. Выбор первых k точек по возрастанию ключа
3. Интерполяция Лагранжа в нуле (ядро)
4. Запрос точного целого (tagged-результат)
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from src.core.domain.point import Point
from src.core.domain.share import ThresholdKeys
from src.core.math.exact_fraction import ExactFraction, ExactIntegerResult
from src.core.math.interpolation import interpolate_secret
from src.recovery.config import RecoveryConfig
from src.recovery.document import ShareDocument, load_share_document, select_points

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RecoveryResult:
    """Результат восстановления секрета."""

    keys: ThresholdKeys
    points: Tuple[Point, ...]

    # Точное значение f(0)
    secret: ExactFraction

    # Целое / нецелое — оба исхода валидны
    exact: ExactIntegerResult

    details: str

    @property
    def is_integer(self) -> bool:
        return self.exact.is_integer


def recover_secret(document: ShareDocument, k: Optional[int] = None) -> RecoveryResult:
    """
    Восстановление f(0) из разобранного документа.

    Args:
        document: Документ с shares
        k: Переопределение порога (default: document.keys.k)

    Raises:
        ShareDocumentError: при ошибках слоя данных
        DivisionByZero: если среди выбранных точек есть одинаковые x
    """
    points = select_points(document, k)
    interpolation = interpolate_secret(points)

    if interpolation.exact.is_integer:
        details = f"k={len(points)}: secret is an integer"
    else:
        details = f"k={len(points)}: secret is not an integer ({interpolation.exact.reason})"

    logger.info("Recovered f(0) from %d points", len(points))

    return RecoveryResult(
        keys=document.keys,
        points=tuple(points),
        secret=interpolation.secret,
        exact=interpolation.exact,
        details=details,
    )


def recover_secret_from_file(config: RecoveryConfig) -> RecoveryResult:
    """Загрузка документа по config.input_path и восстановление f(0)."""
    logger.debug("Loading share document from %s", config.input_path)
    document = load_share_document(
        config.input_path,
        validate_schema=config.validate_schema,
    )
    return recover_secret(document, k=config.threshold_override)
