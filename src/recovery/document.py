"""
Share Document — чтение документа и выбор точек

Формат документа:
    {
        "keys": {"n": 4, "k": 3},
        "1": {"base": "10", "value": "4"},
        "2": {"base": "2", "value": "111"},
        ...
    }

Правила выбора:
1. Ключи, не являющиеся неотрицательным целым, игнорируются
2. Числовые ключи сортируются по возрастанию (не в порядке документа)
3. Берутся первые k ключей: ключ → x, декодированный value → y
4. Записи сверх первых k не используются и не проверяются на
   согласованность с полиномом
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Mapping, Optional, Tuple, Union

from jsonschema import ValidationError
from pydantic import ValidationError as ModelValidationError

from src.core.contracts import ShareDocumentValidator
from src.core.domain.point import Point
from src.core.domain.share import ShareEntry, ThresholdKeys
from src.core.math.base_decoding import BaseDecodingError

logger = logging.getLogger(__name__)

KEYS_FIELD = "keys"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ShareDocumentError(ValueError):
    """Базовая ошибка слоя данных (документ с shares)."""
    pass


class MalformedDocumentError(ShareDocumentError):
    """Документ не JSON, не соответствует схеме или некорректен объект keys."""
    pass


class InsufficientSharesError(ShareDocumentError):
    """Записей с числовыми ключами меньше, чем k."""

    def __init__(self, available: int, required: int):
        super().__init__(
            f"Not enough points to pick k={required}: only {available} numeric entries"
        )
        self.available = available
        self.required = required


class MissingShareFieldError(ShareDocumentError):
    """Выбранная запись не содержит base/value или value не декодируется."""

    def __init__(self, key: str, message: str):
        super().__init__(f"Invalid share for key {key!r}: {message}")
        self.key = key


# =============================================================================
# DOCUMENT
# =============================================================================


def parse_share_key(key: str) -> Optional[int]:
    """
    x-координата для ключа верхнего уровня.

    Returns:
        int для неотрицательного десятичного ключа, иначе None
        ("keys", "-1", "+2", "a1" → None)
    """
    if key.isascii() and key.isdigit():
        return int(key)
    return None


@dataclass(frozen=True)
class ShareRecord:
    """Запись с числовым ключом, ещё не декодированная."""

    x: int
    key: str
    raw: Any


@dataclass(frozen=True)
class ShareDocument:
    """Разобранный документ с shares."""

    keys: ThresholdKeys

    # Отсортированы по (x, key); "01" и "1" — две записи с x=1
    records: Tuple[ShareRecord, ...] = ()

    # Ключи верхнего уровня, отброшенные как нечисловые
    ignored_keys: Tuple[str, ...] = ()

    @property
    def share_count(self) -> int:
        return len(self.records)


def parse_share_document(data: Any, validate_schema: bool = True) -> ShareDocument:
    """
    Разбор документа из уже загруженного JSON объекта.

    Args:
        data: Результат json.load
        validate_schema: Проверять документ по share_document.json

    Returns:
        ShareDocument

    Raises:
        MalformedDocumentError: если документ не объект, нарушает схему,
            или объект keys некорректен
    """
    if not isinstance(data, Mapping):
        raise MalformedDocumentError(
            f"document must be a JSON object, got {type(data).__name__}"
        )

    if validate_schema:
        try:
            ShareDocumentValidator().validate(dict(data))
        except ValidationError as e:
            path = "/".join(str(p) for p in e.absolute_path) or "<root>"
            raise MalformedDocumentError(f"schema violation at {path}: {e.message}") from e

    raw_keys = data.get(KEYS_FIELD)
    if not isinstance(raw_keys, Mapping):
        raise MalformedDocumentError(f"Missing '{KEYS_FIELD}' object")

    try:
        keys = ThresholdKeys(n=raw_keys.get("n"), k=raw_keys.get("k"))
    except ModelValidationError as e:
        raise MalformedDocumentError(f"Invalid '{KEYS_FIELD}': {e}") from e

    if keys.k > keys.n:
        logger.warning("Threshold k=%d exceeds share count n=%d", keys.k, keys.n)

    records: List[ShareRecord] = []
    ignored: List[str] = []
    for key, raw in data.items():
        if key == KEYS_FIELD:
            continue
        x = parse_share_key(key)
        if x is None:
            ignored.append(key)
            continue
        records.append(ShareRecord(x=x, key=key, raw=raw))

    records.sort(key=lambda r: (r.x, r.key))

    if ignored:
        logger.debug("Ignoring non-numeric keys: %s", ignored)

    return ShareDocument(keys=keys, records=tuple(records), ignored_keys=tuple(ignored))


def load_share_document(
    path: Union[str, Path],
    validate_schema: bool = True,
) -> ShareDocument:
    """
    Загрузка документа с shares из JSON файла.

    Raises:
        FileNotFoundError: если файл не найден
        MalformedDocumentError: если файл не является валидным документом
    """
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except UnicodeDecodeError as e:
            raise MalformedDocumentError(f"{path} is not valid UTF-8: {e}") from e
        except ValueError as e:
            # JSONDecodeError, а также целые литералы длиннее
            # sys.get_int_max_str_digits()
            raise MalformedDocumentError(f"{path} is not valid JSON: {e}") from e

    return parse_share_document(data, validate_schema=validate_schema)


# =============================================================================
# SELECTION
# =============================================================================


def decode_record(record: ShareRecord) -> Point:
    """
    Декодирование записи в Point.

    Raises:
        MissingShareFieldError: нет base/value, неверные типы или value
            не является числом в основании base
    """
    raw = record.raw
    if not isinstance(raw, Mapping):
        raise MissingShareFieldError(record.key, "entry is not an object")

    for field_name in ("base", "value"):
        if field_name not in raw:
            raise MissingShareFieldError(record.key, f"missing '{field_name}'")

    try:
        entry = ShareEntry(base=raw["base"], value=raw["value"])
        return entry.to_point(record.x)
    except ModelValidationError as e:
        raise MissingShareFieldError(record.key, str(e)) from e
    except BaseDecodingError as e:
        raise MissingShareFieldError(record.key, str(e)) from e


def select_points(document: ShareDocument, k: Optional[int] = None) -> List[Point]:
    """
    Первые k записей по возрастанию числового ключа, декодированные в Point.

    Args:
        document: Разобранный документ
        k: Число точек (default: document.keys.k)

    Returns:
        Ровно k точек

    Raises:
        ValueError: если k <= 0
        InsufficientSharesError: если записей с числовыми ключами меньше k
        MissingShareFieldError: если выбранная запись некорректна
    """
    if k is None:
        k = document.keys.k
    if k <= 0:
        raise ValueError(f"k must be positive, got {k}")

    available = document.share_count
    if available < k:
        raise InsufficientSharesError(available=available, required=k)

    selected = document.records[:k]
    if available > k:
        logger.info("Using first %d of %d shares; %d ignored", k, available, available - k)

    logger.debug("Selected keys: %s", [r.key for r in selected])

    return [decode_record(r) for r in selected]
