"""
Contract Validation Module

Модуль для валидации JSON контрактов (документ с shares).
"""

from .validators import (
    SCHEMA_DIR,
    ContractValidator,
    SchemaLoader,
    ShareDocumentValidator,
    default_schema_loader,
    validate_share_document,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ShareDocumentValidator",
    # Functions
    "default_schema_loader",
    "validate_share_document",
    # Constants
    "SCHEMA_DIR",
]
