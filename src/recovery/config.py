"""Конфигурация восстановления секрета."""

from dataclasses import dataclass
from pathlib import Path
from typing import Final, Optional

# Имя входного файла по умолчанию (в текущей директории)
DEFAULT_INPUT_PATH: Final[str] = "input.json"

DEFAULT_LOG_LEVEL: Final[str] = "WARNING"


@dataclass(frozen=True)
class RecoveryConfig:
    """Конфигурация запуска восстановления.

    threshold_override заменяет k из объекта "keys" документа; None —
    использовать k документа.
    """

    input_path: Path = Path(DEFAULT_INPUT_PATH)
    threshold_override: Optional[int] = None
    validate_schema: bool = True
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self) -> None:
        if self.threshold_override is not None and self.threshold_override <= 0:
            raise ValueError(
                f"threshold_override must be positive, got {self.threshold_override}"
            )
