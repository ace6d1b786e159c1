"""
Formatting — представление Deci для отображения

Валюта, разделители тысяч, проценты, научная запись, фиксированные
шаблоны, запись числа словами (английский) и выравнивание.

Функции не меняют величину: округление выполняется только там, где
явно задан scale (HALF_UP).
"""

from typing import Final

from src.deci.constants import HUNDRED
from src.deci.deci import Deci
from src.deci.rounding import RoundingMode

# Шаблон → (scale, с разделителем тысяч)
FORMAT_PATTERNS: Final[dict[str, tuple[int, bool]]] = {
    "0.00": (2, False),
    "#,##0.00": (2, True),
    "0.0000": (4, False),
    "#,##0": (0, True),
}

_ONES: Final[tuple[str, ...]] = (
    "", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine",
)
_TEENS: Final[tuple[str, ...]] = (
    "ten", "eleven", "twelve", "thirteen", "fourteen",
    "fifteen", "sixteen", "seventeen", "eighteen", "nineteen",
)
_TENS: Final[tuple[str, ...]] = (
    "", "", "twenty", "thirty", "forty", "fifty", "sixty", "seventy", "eighty", "ninety",
)
_SCALE_WORDS: Final[tuple[str, ...]] = ("", "thousand", "million", "billion", "trillion")

TOO_LARGE_FOR_WORDS: Final[str] = "number too large"


# =============================================================================
# РАЗДЕЛИТЕЛИ, ВАЛЮТА, ПРОЦЕНТЫ
# =============================================================================


def format_with_thousands_separator(value: Deci, separator: str = ",") -> str:
    """
    Examples:
        >>> format_with_thousands_separator(Deci("-1234567.89"))
        '-1,234,567.89'
    """
    text = str(value)
    integer_part, dot, fraction_part = text.partition(".")

    is_negative = integer_part.startswith("-")
    digits = integer_part[1:] if is_negative else integer_part

    groups: list[str] = []
    while len(digits) > 3:
        groups.append(digits[-3:])
        digits = digits[:-3]
    groups.append(digits)

    formatted = separator.join(reversed(groups))
    sign = "-" if is_negative else ""
    return f"{sign}{formatted}{dot}{fraction_part}"


def format_currency(
    value: Deci,
    currency_symbol: str = "$",
    scale: int = 2,
    thousands_separator: str = ",",
) -> str:
    """
    Examples:
        >>> format_currency(Deci("1234.5"))
        '$1,234.50'
        >>> format_currency(Deci("-0.5"), "€")
        '-€0.50'
    """
    rounded = value.set_scale(scale, RoundingMode.HALF_UP)
    formatted = format_with_thousands_separator(rounded, thousands_separator)
    if rounded.is_negative():
        return f"-{currency_symbol}{formatted[1:]}"
    return f"{currency_symbol}{formatted}"


def format_as_percentage(value: Deci, scale: int = 1, symbol: str = "%") -> str:
    """Доля → процент: 0.1234 → "12.3%"."""
    rounded = (value * HUNDRED).set_scale(scale, RoundingMode.HALF_UP)
    return f"{rounded}{symbol}"


def format_pattern(value: Deci, pattern: str) -> str:
    """
    Форматирование по фиксированному шаблону.

    Поддерживаются: "0.00", "#,##0.00", "0.0000", "#,##0".

    Raises:
        ValueError: Неизвестный шаблон
    """
    try:
        scale, grouped = FORMAT_PATTERNS[pattern]
    except KeyError:
        raise ValueError(f"Unknown format pattern: {pattern}") from None

    rounded = value.set_scale(scale, RoundingMode.HALF_UP)
    if grouped:
        return format_with_thousands_separator(rounded)
    return str(rounded)


# =============================================================================
# НАУЧНАЯ ЗАПИСЬ
# =============================================================================


def to_scientific_notation(value: Deci, precision: int = 6) -> str:
    """
    Научная запись с усечённой мантиссой.

    Args:
        value: Значение
        precision: Цифр мантиссы после точки (дополняется нулями)

    Examples:
        >>> to_scientific_notation(Deci("12345.678"), 3)
        '1.234E+4'
        >>> to_scientific_notation(Deci("0.00042"))
        '4.200000E-4'
    """
    if value.is_zero():
        return "0.0E+0"

    text = str(value.abs())
    decimal_index = text.find(".")
    first_nonzero_index = next(i for i, ch in enumerate(text) if ch.isdigit() and ch != "0")
    significant = "".join(ch for ch in text[first_nonzero_index:] if ch.isdigit())

    if decimal_index < 0:
        exponent = len(text) - first_nonzero_index - 1
    elif first_nonzero_index < decimal_index:
        exponent = decimal_index - first_nonzero_index - 1
    else:
        exponent = decimal_index - first_nonzero_index

    if precision > 0 and len(significant) > 1:
        mantissa = f"{significant[0]}.{significant[1:1 + precision].ljust(precision, '0')}"
    else:
        mantissa = significant[0]

    sign = "-" if value.is_negative() else ""
    exponent_sign = "+" if exponent >= 0 else ""
    return f"{sign}{mantissa}E{exponent_sign}{exponent}"


# =============================================================================
# ЧИСЛО СЛОВАМИ
# =============================================================================


def _chunk_to_words(chunk: int) -> str:
    # chunk в [1, 999]
    words: list[str] = []
    hundreds, rest = divmod(chunk, 100)
    if hundreds:
        words.append(f"{_ONES[hundreds]} hundred")

    if rest >= 20:
        tens, ones = divmod(rest, 10)
        words.append(_TENS[tens] if not ones else f"{_TENS[tens]} {_ONES[ones]}")
    elif rest >= 10:
        words.append(_TEENS[rest - 10])
    elif rest:
        words.append(_ONES[rest])

    return " ".join(words)


def _integer_to_words(number: int) -> str:
    if number == 0:
        return "zero"

    groups: list[str] = []
    scale_index = 0
    while number:
        number, chunk = divmod(number, 1000)
        if chunk:
            scale_word = _SCALE_WORDS[scale_index]
            chunk_words = _chunk_to_words(chunk)
            groups.append(f"{chunk_words} {scale_word}" if scale_word else chunk_words)
        scale_index += 1

    return " ".join(reversed(groups))


def to_words(value: Deci) -> str:
    """
    Целая часть числа словами (английский), дробная часть отбрасывается.

    Поддерживается |value| < 10^15; для больших значений
    возвращается TOO_LARGE_FOR_WORDS.

    Examples:
        >>> to_words(Deci("-1042"))
        'negative one thousand forty two'
        >>> to_words(Deci("115.99"))
        'one hundred fifteen'
    """
    integer_part = value.abs().to_int()
    if integer_part == 0:
        return "zero"
    if integer_part >= 1000 ** len(_SCALE_WORDS):
        return TOO_LARGE_FOR_WORDS

    words = _integer_to_words(integer_part)
    return f"negative {words}" if value.is_negative() else words


# =============================================================================
# ВЫРАВНИВАНИЕ
# =============================================================================


def pad(value: Deci, width: int, pad_char: str = " ", pad_left: bool = True) -> str:
    """Дополнение строкового представления до width символов."""
    text = str(value)
    if pad_left:
        return text.rjust(width, pad_char)
    return text.ljust(width, pad_char)
