"""
Recovery — слой данных и представления поверх ядра.

Чтение документа с shares, выбор первых k точек, восстановление f(0)
и вывод результата в консоль.
"""

from src.recovery.config import RecoveryConfig
from src.recovery.document import (
    InsufficientSharesError,
    MalformedDocumentError,
    MissingShareFieldError,
    ShareDocument,
    ShareDocumentError,
    ShareRecord,
    load_share_document,
    parse_share_document,
    select_points,
)
from src.recovery.pipeline import RecoveryResult, recover_secret, recover_secret_from_file
from src.recovery.report import render_failure, render_report

__all__ = [
    # Config
    "RecoveryConfig",
    # Document
    "ShareDocument",
    "ShareRecord",
    "load_share_document",
    "parse_share_document",
    "select_points",
    # Document — Exceptions
    "ShareDocumentError",
    "MalformedDocumentError",
    "InsufficientSharesError",
    "MissingShareFieldError",
    # Pipeline
    "RecoveryResult",
    "recover_secret",
    "recover_secret_from_file",
    # Report
    "render_report",
    "render_failure",
]
