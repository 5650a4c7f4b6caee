"""
Logging helpers.

Модули получают logger через logging.getLogger(__name__); конфигурация
handlers выполняется один раз на уровне entry point (CLI), не при импорте.
"""

import logging
from typing import Final, Union

LOG_FORMAT: Final[str] = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Корневой logger пакета
ROOT_LOGGER_NAME: Final[str] = "src"


def configure_logging(level: Union[int, str] = logging.WARNING) -> logging.Logger:
    """
    Настройка stderr handler для логгеров пакета.

    Повторный вызов только меняет уровень, не добавляя второй handler.

    Args:
        level: Уровень логирования (int или имя, например "DEBUG")

    Returns:
        Корневой logger пакета

    Raises:
        ValueError: если имя уровня неизвестно
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"unknown log level: {level}")
        level = resolved

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger
