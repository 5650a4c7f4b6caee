"""
Base Decoding — декодирование значений в произвольной системе счисления

Значения shares передаются строками цифр в основании base (2..36).
Алфавитные цифры регистронезависимы. Результат — int произвольной точности.

Длина значения не ограничена лимитом интерпретатора на преобразование
строк в int (sys.get_int_max_str_digits).

В отличие от встроенного int(value, base), строгий парсер не принимает
пробелы, '_' разделители и префиксы '0x'/'0o'/'0b': такая строка в
документе с shares является ошибкой данных, а не допустимым форматом.
"""

from typing import Final

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

MIN_BASE: Final[int] = 2
MAX_BASE: Final[int] = 36

# Цифры в порядке значения: '0'..'9', затем 'a'..'z'
DIGIT_ALPHABET: Final[str] = "0123456789abcdefghijklmnopqrstuvwxyz"

_DIGIT_VALUES: Final[dict[str, int]] = {ch: i for i, ch in enumerate(DIGIT_ALPHABET)}

# Длина блока для int(chunk, base); меньше минимально допустимого
# sys.set_int_max_str_digits (640), поэтому лимит интерпретатора не срабатывает
_CHUNK_DIGITS: Final[int] = 600

_DECIMAL_CHUNK: Final[int] = 10 ** _CHUNK_DIGITS


# =============================================================================
# EXCEPTIONS
# =============================================================================


class BaseDecodingError(ValueError):
    """Строка не является корректным числом в заданном основании."""
    pass


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_base(base: int) -> None:
    """
    Проверка, что основание поддерживается.

    Raises:
        BaseDecodingError: если base не int или вне [MIN_BASE, MAX_BASE]
    """
    if isinstance(base, bool) or not isinstance(base, int):
        raise BaseDecodingError(f"base must be int, got {type(base).__name__}")

    if base < MIN_BASE or base > MAX_BASE:
        raise BaseDecodingError(
            f"base must be in [{MIN_BASE}, {MAX_BASE}], got {base}"
        )


# =============================================================================
# DECODE / ENCODE
# =============================================================================


def decode_base_value(value: str, base: int) -> int:
    """
    Декодирование строки цифр в основании base в int.

    Допускается один ведущий знак '+' или '-'.

    Args:
        value: Строка цифр (регистр букв не важен)
        base: Основание системы счисления (2..36)

    Returns:
        Декодированное целое число (произвольной точности)

    Raises:
        BaseDecodingError: пустая строка, недопустимая цифра или основание

    Examples:
        >>> decode_base_value("111", 2)
        7
        >>> decode_base_value("FF", 16)
        255
        >>> decode_base_value("-zz", 36)
        -1295
    """
    validate_base(base)

    if not isinstance(value, str):
        raise BaseDecodingError(f"value must be str, got {type(value).__name__}")

    digits = value.lower()
    sign = 1
    if digits[:1] in ("+", "-"):
        sign = -1 if digits[0] == "-" else 1
        digits = digits[1:]

    if not digits:
        raise BaseDecodingError(f"value has no digits: {value!r}")

    for ch in digits:
        digit = _DIGIT_VALUES.get(ch)
        if digit is None or digit >= base:
            raise BaseDecodingError(
                f"invalid digit {ch!r} for base {base} in value {value!r}"
            )

    # Цифры проверены выше; разбор блоками по _CHUNK_DIGITS
    number = 0
    for start in range(0, len(digits), _CHUNK_DIGITS):
        chunk = digits[start:start + _CHUNK_DIGITS]
        try:
            number = number * base ** len(chunk) + int(chunk, base)
        except ValueError as e:
            raise BaseDecodingError(f"cannot decode value in base {base}: {e}") from e

    return sign * number


def encode_base_value(number: int, base: int) -> str:
    """
    Кодирование int в строку цифр основания base (нижний регистр).

    Обратная операция к decode_base_value с точностью до ведущих нулей
    и регистра букв.

    Examples:
        >>> encode_base_value(255, 16)
        'ff'
        >>> encode_base_value(0, 7)
        '0'
    """
    validate_base(base)

    if isinstance(number, bool) or not isinstance(number, int):
        raise BaseDecodingError(f"number must be int, got {type(number).__name__}")

    if number == 0:
        return "0"

    negative = number < 0
    remaining = -number if negative else number

    digits = []
    while remaining:
        remaining, digit = divmod(remaining, base)
        digits.append(DIGIT_ALPHABET[digit])

    if negative:
        digits.append("-")

    return "".join(reversed(digits))


def format_decimal(number: int) -> str:
    """
    Десятичная запись int любой длины.

    str(int) для чисел длиннее sys.get_int_max_str_digits() цифр
    бросает ValueError; здесь число режется на блоки по _CHUNK_DIGITS.

    Examples:
        >>> format_decimal(-1295)
        '-1295'
        >>> len(format_decimal(10**5000))
        5001
    """
    if isinstance(number, bool) or not isinstance(number, int):
        raise BaseDecodingError(f"number must be int, got {type(number).__name__}")

    negative = number < 0
    remaining = -number if negative else number

    chunks = []
    while True:
        remaining, chunk = divmod(remaining, _DECIMAL_CHUNK)
        if remaining == 0:
            chunks.append(str(chunk))
            break
        chunks.append(str(chunk).zfill(_CHUNK_DIGITS))

    text = "".join(reversed(chunks))
    return "-" + text if negative else text
