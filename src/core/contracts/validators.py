"""
JSON Schema Contract Validators

Валидация документа с shares по JSON Schema контракту (jsonschema,
Draft 2020-12).

Схемы лежат в каталоге schema/ рядом с модулем и устанавливаются вместе
с пакетом. Контракт проверяет только форму верхнего уровня и объект
"keys": записи shares разбираются лишь для первых k ключей, поэтому
записи сверх k схемой не ограничиваются.

Схемы:
- share_document.json
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional

import jsonschema
from jsonschema import Draft202012Validator

SCHEMA_DIR = Path(__file__).parent / "schema"

SHARE_DOCUMENT_SCHEMA = "share_document"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов с кэшем.

    Каждая схема проходит meta-validation при первой загрузке.
    """

    def __init__(self, schema_dir: Optional[Path] = None):
        self._schema_dir = Path(schema_dir) if schema_dir is not None else SCHEMA_DIR
        if not self._schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        self._schemas: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка схемы по имени без расширения.

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


_default_loader: Optional[SchemaLoader] = None


def default_schema_loader() -> SchemaLoader:
    """Общий загрузчик для SCHEMA_DIR, создаётся при первом обращении."""
    global _default_loader
    if _default_loader is None:
        _default_loader = SchemaLoader()
    return _default_loader


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """Валидатор данных против одной JSON Schema."""

    def __init__(self, schema_name: str, loader: Optional[SchemaLoader] = None):
        self.schema_name = schema_name
        self.schema = (loader or default_schema_loader()).load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Any) -> None:
        """
        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)


class ShareDocumentValidator(ContractValidator):
    """Валидатор для share_document контракта."""

    def __init__(self, loader: Optional[SchemaLoader] = None):
        super().__init__(SHARE_DOCUMENT_SCHEMA, loader)


def validate_share_document(data: Any) -> None:
    """
    Валидация документа с shares.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    ShareDocumentValidator().validate(data)
