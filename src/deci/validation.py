"""
Validation — проверки значений Deci

Предикаты и мягкие проверки для прикладного кода (формы, денежные суммы,
проценты, ставки). Ошибки аргументов — ValueError, как в validate_* хелперах.
"""

from dataclasses import dataclass
from typing import Final

from src.deci.constants import HUNDRED, THOUSAND
from src.deci.deci import Deci
from src.deci.parser.literal import DECIMAL_PATTERN

# Допуск по умолчанию для is_approximately_equal
APPROX_TOLERANCE_DEFAULT: Final[Deci] = Deci("0.000001")

# Количество знаков после точки по валютам
CURRENCY_DECIMAL_PLACES: Final[dict[str, int]] = {
    "USD": 2,
    "EUR": 2,
    "GBP": 2,
    "CAD": 2,
    "AUD": 2,
    "JPY": 0,
    "KRW": 0,
    "BTC": 8,
}
CURRENCY_DECIMAL_PLACES_DEFAULT: Final[int] = 2


def _require_ordered(lower: Deci, upper: Deci) -> None:
    if lower > upper:
        raise ValueError(
            f"Min value ({lower}) must be less than or equal to max value ({upper})"
        )


# =============================================================================
# ЛИТЕРАЛЫ
# =============================================================================


def is_valid_deci(text: str) -> bool:
    """
    Проверка, что строка — допустимый литерал Deci.

    Все ',' предварительно заменяются на '.' и строка проверяется по
    DECIMAL_PATTERN без нормализации.
    """
    if not text or text.isspace():
        return False
    sanitized = text.strip().replace(",", ".")
    return DECIMAL_PATTERN.match(sanitized) is not None


# =============================================================================
# ДИАПАЗОНЫ
# =============================================================================


def is_in_range(value: Deci, lower: Deci, upper: Deci) -> bool:
    """
    lower <= value <= upper.

    Raises:
        ValueError: Если lower > upper
    """
    _require_ordered(lower, upper)
    return lower <= value <= upper


def clamp(value: Deci, lower: Deci, upper: Deci) -> Deci:
    """
    Ограничение value диапазоном [lower, upper].

    Raises:
        ValueError: Если lower > upper
    """
    _require_ordered(lower, upper)
    if value < lower:
        return lower
    if value > upper:
        return upper
    return value


# =============================================================================
# ЦЕЛОЧИСЛЕННОСТЬ
# =============================================================================


def is_whole(value: Deci) -> bool:
    """Нет дробной части (хвостовые нули set_scale не считаются)."""
    text = str(value)
    if "." not in text:
        return True
    return all(ch == "0" for ch in text.split(".", 1)[1])


def is_even(value: Deci) -> bool:
    """
    Raises:
        ValueError: Если value не целое
    """
    if not is_whole(value):
        raise ValueError(f"Value must be a whole number: {value}")
    return value.to_int() % 2 == 0


def is_odd(value: Deci) -> bool:
    """
    Raises:
        ValueError: Если value не целое
    """
    if not is_whole(value):
        raise ValueError(f"Value must be a whole number: {value}")
    return value.to_int() % 2 != 0


# =============================================================================
# БЕЗОПАСНОЕ ДЕЛЕНИЕ
# =============================================================================


def safe_divide(value: Deci, divisor: Deci, default: Deci = Deci.ZERO) -> Deci:
    """
    Деление с fallback при нулевом делителе.

    Выбор значения по умолчанию остаётся явным решением вызывающего кода.

    Examples:
        >>> safe_divide(Deci("10"), Deci("4"))
        Deci('2.5')
        >>> safe_divide(Deci("10"), Deci.ZERO, default=Deci("-1"))
        Deci('-1')
    """
    if divisor.is_zero():
        return default
    return value / divisor


# =============================================================================
# ДЕНЬГИ, ПРОЦЕНТЫ, СТАВКИ
# =============================================================================


def has_valid_decimal_places(value: Deci, max_decimal_places: int) -> bool:
    """
    Не более max_decimal_places цифр после точки в канонической строке.

    Raises:
        ValueError: Если max_decimal_places < 0
    """
    if max_decimal_places < 0:
        raise ValueError(f"Max decimal places must be non-negative: {max_decimal_places}")
    return value.scale() <= max_decimal_places


def is_valid_currency_amount(value: Deci, currency: str = "USD") -> bool:
    """
    Соответствие точности валюты.

    USD/EUR/GBP/CAD/AUD — 2 знака, JPY/KRW — целые, BTC — 8 знаков,
    прочие — 2 знака.
    """
    places = CURRENCY_DECIMAL_PLACES.get(currency.upper(), CURRENCY_DECIMAL_PLACES_DEFAULT)
    if places == 0:
        return is_whole(value)
    return has_valid_decimal_places(value, places)


def is_valid_percentage(
    value: Deci,
    allow_negative: bool = False,
    allow_over_100: bool = False,
) -> bool:
    """
    Процент в [0, 100].

    Args:
        allow_negative: Нижняя граница -100 вместо 0
        allow_over_100: Верхняя граница 1000 вместо 100
    """
    lower = -HUNDRED if allow_negative else Deci.ZERO
    upper = THOUSAND if allow_over_100 else HUNDRED
    return is_in_range(value, lower, upper)


def is_positive_strict(value: Deci) -> bool:
    return value > Deci.ZERO


def is_non_negative(value: Deci) -> bool:
    return value >= Deci.ZERO


def is_valid_tax_rate(value: Deci) -> bool:
    """Налоговая ставка как доля: [0, 1]."""
    return is_in_range(value, Deci.ZERO, Deci.ONE)


def is_valid_interest_rate(value: Deci, max_rate: Deci = Deci.ONE) -> bool:
    """Процентная ставка как доля: [0, max_rate]."""
    return is_in_range(value, Deci.ZERO, max_rate)


def is_approximately_equal(
    value: Deci,
    other: Deci,
    tolerance: Deci = APPROX_TOLERANCE_DEFAULT,
) -> bool:
    """|value - other| <= tolerance."""
    return (value - other).abs() <= tolerance


# =============================================================================
# ВАЛИДАЦИЯ ФОРМ
# =============================================================================


@dataclass(frozen=True)
class ValidationResult:
    """Результат проверки поля формы."""

    is_valid: bool
    error_message: str | None = None


def validate_for_form(
    value: Deci,
    min_value: Deci | None = None,
    max_value: Deci | None = None,
    max_decimal_places: int | None = None,
    must_be_positive: bool = False,
) -> ValidationResult:
    """
    Проверка значения поля формы.

    Проверки выполняются по порядку: положительность, минимум, максимум,
    количество знаков. Возвращается первая нарушенная.
    """
    if must_be_positive and not is_positive_strict(value):
        return ValidationResult(False, "Value must be positive")

    if min_value is not None and value < min_value:
        return ValidationResult(False, f"Value must be at least {min_value}")

    if max_value is not None and value > max_value:
        return ValidationResult(False, f"Value must be at most {max_value}")

    if max_decimal_places is not None and not has_valid_decimal_places(
        value, max_decimal_places
    ):
        return ValidationResult(
            False, f"Value can have at most {max_decimal_places} decimal places"
        )

    return ValidationResult(True)
