"""
Literal Parser — нормализация десятичных литералов

Приводит пользовательский литерал к единственной канонической форме с '.'
в качестве десятичного разделителя, пригодной для движка:

- '.' и ',' допускаются и как десятичный, и как группирующий разделитель
- десятичным считается ПОСЛЕДНИЙ (самый правый) разделитель любого вида
- все разделители левее него — группирующие и удаляются
- ведущий '-' сохраняется, ведущий '+' отбрасывается

Нормализатор выполняет только строковое преобразование: не проверяет
величину и не обращается к движку.
"""

import re
from typing import Final

from src.deci.config import DeciConfiguration
from src.deci.errors import InvalidLiteral
from src.deci.log import LiteralNormalizedEvent, LiteralRejectedEvent, log_literal_event

# Грамматика литерала: группы по 3 цифры, простая последовательность цифр
# с одним разделителем, целое, либо разделитель с цифрами (".5")
DECIMAL_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^[-+]?(?:\d{1,3}(?:[.,]\d{3})*(?:[.,]\d*)?|\d+[.,]\d*|\d+|[.,]\d+)$",
    re.ASCII,
)

_SEPARATORS: Final[str] = ".,"


def _strip_separators(raw: str) -> str:
    return "".join(ch for ch in raw if ch not in _SEPARATORS)


def _normalize_with_decimal(raw: str, decimal_index: int) -> str:
    integer_part = _strip_separators(raw[:decimal_index]) or "0"
    fraction_part = raw[decimal_index + 1 :]
    return f"{integer_part}.{fraction_part}"


def normalize_decimal_string(raw: str) -> str:
    """
    Нормализация десятичного литерала.

    Args:
        raw: Исходная строка

    Returns:
        Литерал с '.' в качестве десятичной точки

    Examples:
        >>> normalize_decimal_string("1.234,56")
        '1234.56'
        >>> normalize_decimal_string("1,234.56")
        '1234.56'
        >>> normalize_decimal_string("-2,5")
        '-2.5'
        >>> normalize_decimal_string(".5")
        '0.5'
        >>> normalize_decimal_string("1,2,3")
        '12.3'
        >>> normalize_decimal_string("   -")
        '-0'
    """
    if not raw:
        return raw

    trimmed = raw.strip()
    is_negative = trimmed.startswith("-")
    has_sign = is_negative or trimmed.startswith("+")
    unsigned = trimmed[1:] if has_sign else trimmed

    if not unsigned:
        return "-0" if is_negative else "0"

    # rfind() == -1 когда разделителя нет, поэтому max() сразу даёт
    # самый правый разделитель любого вида
    decimal_index = max(unsigned.rfind("."), unsigned.rfind(","))

    if decimal_index < 0:
        normalized = _strip_separators(unsigned)
    else:
        normalized = _normalize_with_decimal(unsigned, decimal_index)

    return f"-{normalized}" if is_negative else normalized


def validate_and_normalize_literal(raw: str) -> str:
    """
    Проверка литерала по грамматике и нормализация.

    Args:
        raw: Исходная строка

    Returns:
        Нормализованный литерал

    Raises:
        InvalidLiteral: Пустая строка или несоответствие грамматике
    """
    trimmed = raw.strip()
    logging_enabled = DeciConfiguration.logging_enabled

    if not trimmed:
        log_literal_event(
            LiteralRejectedEvent(raw, "Value is blank or whitespace only"), logging_enabled
        )
        raise InvalidLiteral("Deci literal must not be blank")

    if not DECIMAL_PATTERN.match(trimmed):
        log_literal_event(
            LiteralRejectedEvent(raw, "Value does not match decimal format"), logging_enabled
        )
        raise InvalidLiteral(f"Invalid decimal literal: '{raw}'")

    normalized = normalize_decimal_string(raw)
    if normalized != trimmed:
        log_literal_event(LiteralNormalizedEvent(raw, normalized), logging_enabled)

    return normalized
