"""
Derived Arithmetic — производные алгоритмы над Deci

Чистые функции поверх публичного контракта Deci (никаких обращений к движку
напрямую), поэтому ведут себя одинаково при любом движке:

- sqrt: метод Ньютона с ограничением числа итераций
- power / power_int: целая степень (square-and-multiply)
- mod / remainder: остаток с усечением (DOWN) и с округлением (HALF_UP) частного
- round_to_nearest: округление до ближайшего кратного
- round_to_significant_digits: округление до N значащих цифр

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. sqrt всегда завершается (не более SQRT_MAX_ITERATIONS итераций)
2. mod и remainder намеренно различаются для отрицательных операндов
3. Все ошибки аргументов — специфичные исключения из src.deci.errors
"""

from typing import Final

from src.deci.config import get_division_policy
from src.deci.constants import TWO
from src.deci.deci import Deci
from src.deci.errors import (
    DivisionByZero,
    ExponentOutOfRange,
    InvalidDigitCount,
    InvalidMultiple,
    NegativeRadicand,
    NonIntegerExponent,
)
from src.deci.rounding import RoundingMode

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Максимум итераций Ньютона для sqrt
SQRT_MAX_ITERATIONS: Final[int] = 50

# Точность sqrt по умолчанию (цифр после точки)
SQRT_DEFAULT_PRECISION: Final[int] = 10

# Максимальный модуль показателя степени (32-bit signed int)
MAX_EXPONENT: Final[int] = 2**31 - 1


# =============================================================================
# КВАДРАТНЫЙ КОРЕНЬ
# =============================================================================


def sqrt(value: Deci, precision: int = SQRT_DEFAULT_PRECISION) -> Deci:
    """
    Квадратный корень методом Ньютона.

    Алгоритм:
        x_0 = v / 2
        x_{n+1} = (x_n + v / x_n) / 2
        стоп, если |x_{n+1} - x_n| округляется до нуля на precision + 2 знаках
        (HALF_UP), либо после SQRT_MAX_ITERATIONS итераций

    Промежуточные деления выполняются с scale не меньше, чем у политики
    деления, precision + 2 и scale(v) + 1 — итерации не обнуляются для
    малых v.

    Ограничение: пока x_n много больше корня, итерация лишь делит x_n
    пополам, поэтому при начальном x_0 = v / 2 точный результат
    гарантирован примерно до v ~ 10^24. Для больших v лимит итераций
    исчерпывается раньше сходимости: sqrt(10^30, 2) даёт
    1022385952250990.87 вместо 10^15. Это касается и standard_deviation.

    Args:
        value: Подкоренное значение (>= 0)
        precision: Цифр после точки в результате

    Returns:
        sqrt(value), округлённый HALF_UP до precision

    Raises:
        NegativeRadicand: Если value < 0

    Examples:
        >>> sqrt(Deci("4"), 0)
        Deci('2')
        >>> sqrt(Deci("2"), 3)
        Deci('1.414')
    """
    if value.is_negative():
        raise NegativeRadicand(f"Cannot calculate square root of negative number: {value}")

    if value.is_zero():
        return Deci.ZERO
    if value == Deci.ONE:
        return Deci.ONE

    policy = get_division_policy()
    working_scale = max(policy.fractional_digits, precision + 2, value.scale() + 1)
    mode = policy.rounding_mode

    x = value.divide(TWO, working_scale, mode)
    for _ in range(SQRT_MAX_ITERATIONS):
        previous = x
        x = (x + value.divide(x, working_scale, mode)).divide(TWO, working_scale, mode)

        diff = (x - previous).abs()
        if diff.set_scale(precision + 2, RoundingMode.HALF_UP).is_zero():
            break

    return x.set_scale(precision, RoundingMode.HALF_UP)


# =============================================================================
# СТЕПЕНИ
# =============================================================================


def power_int(value: Deci, exponent: int) -> Deci:
    """
    Неотрицательная целая степень повторным умножением.

    Raises:
        ValueError: Если exponent < 0
    """
    if exponent < 0:
        raise ValueError(f"Negative exponents are not supported: {exponent}")

    result = Deci.ONE
    for _ in range(exponent):
        result *= value
    return result


def _power_positive(value: Deci, exponent: int) -> Deci:
    # square-and-multiply: O(log exponent) умножений
    result = Deci.ONE
    base = value
    remaining = exponent

    while remaining > 0:
        if remaining & 1:
            result *= base
        remaining >>= 1
        if remaining:
            base *= base

    return result


def power(value: Deci, exponent: Deci | int) -> Deci:
    """
    Возведение в целую степень, заданную как Deci.

    Отрицательная степень — обратное значение положительной (через оператор
    "/" и глобальную политику деления).

    Args:
        value: Основание
        exponent: Показатель (должен быть целым)

    Returns:
        value ** exponent

    Raises:
        NonIntegerExponent: Если exponent не целый
        ExponentOutOfRange: Если |exponent| > MAX_EXPONENT
        DivisionByZero: Если value == 0 и exponent < 0

    Examples:
        >>> power(Deci("2"), Deci("10"))
        Deci('1024')
        >>> power(Deci("2"), -2)
        Deci('0.25')
    """
    if not isinstance(exponent, Deci):
        exponent = Deci(exponent)

    if exponent.is_zero():
        return Deci.ONE
    if exponent == Deci.ONE:
        return value

    exp = exponent.to_int()
    if Deci(exp) != exponent:
        raise NonIntegerExponent(f"Exponent must be an integer: {exponent}")
    if abs(exp) > MAX_EXPONENT:
        raise ExponentOutOfRange(f"Exponent {exp} exceeds supported range ±{MAX_EXPONENT}")

    if exp < 0:
        return Deci.ONE / _power_positive(value, -exp)
    return _power_positive(value, exp)


# =============================================================================
# ОСТАТКИ
# =============================================================================


def mod(value: Deci, divisor: Deci) -> Deci:
    """
    Остаток с усечённым частным: v - trunc(v / d) * d.

    Знак результата совпадает со знаком делимого: mod(-7, 3) == -1.

    Raises:
        DivisionByZero: Если divisor == 0
    """
    if divisor.is_zero():
        raise DivisionByZero("Division by zero in modulo operation")

    # Частное округляется один раз, независимо от политики деления
    quotient = value.divide(divisor, 0, RoundingMode.DOWN)
    return value - quotient * divisor


def remainder(value: Deci, divisor: Deci) -> Deci:
    """
    Остаток с частным, округлённым HALF_UP: v - round(v / d) * d.

    В отличие от mod, результат может иметь знак, противоположный
    делимому: remainder(7, 3) == 1, remainder(8, 3) == -1.

    Raises:
        DivisionByZero: Если divisor == 0
    """
    if divisor.is_zero():
        raise DivisionByZero("Division by zero in remainder operation")

    quotient = value.divide(divisor, 0, RoundingMode.HALF_UP)
    return value - quotient * divisor


# =============================================================================
# ОКРУГЛЕНИЯ
# =============================================================================


def round_to_nearest(value: Deci, multiple: Deci) -> Deci:
    """
    Округление до ближайшего кратного multiple (ничья — от нуля).

    Raises:
        InvalidMultiple: Если multiple == 0

    Examples:
        >>> round_to_nearest(Deci("4.7"), Deci("5"))
        Deci('5')
        >>> round_to_nearest(Deci("0.37"), Deci("0.5"))
        Deci('0.5')
    """
    if multiple.is_zero():
        raise InvalidMultiple("Cannot round to nearest zero")

    quotient = value.divide(multiple, 0, RoundingMode.HALF_UP)
    return quotient * multiple


def _leading_digit_exponent(value: Deci) -> int:
    """
    Десятичный порядок первой ненулевой цифры |value| (value != 0).

    "123.4" → 2, "5" → 0, "0.0012" → -3
    """
    text = str(value.abs())
    decimal_index = text.find(".")
    integer_length = len(text) if decimal_index < 0 else decimal_index

    first_digit_index = 0
    for index, ch in enumerate(text):
        if ch not in "0.":
            first_digit_index = index
            break

    if first_digit_index < integer_length:
        return integer_length - first_digit_index - 1
    return decimal_index - first_digit_index


def round_to_significant_digits(value: Deci, digits: int) -> Deci:
    """
    Округление (HALF_UP) до digits значащих цифр.

    Если целевой scale отрицательный (значащих цифр меньше, чем цифр в
    целой части), округление выполняется сдвигом на степень десяти.

    Args:
        value: Исходное значение
        digits: Количество значащих цифр (> 0)

    Returns:
        Округлённое значение. При неотрицательном целевом scale это
        результат set_scale: хвостовые нули сохраняются, и если округление
        переносит разряд, строка показывает на одну цифру больше

    Raises:
        InvalidDigitCount: Если digits <= 0

    Examples:
        >>> round_to_significant_digits(Deci("123.456"), 3)
        Deci('123')
        >>> round_to_significant_digits(Deci("0.001234"), 3)
        Deci('0.00123')
        >>> round_to_significant_digits(Deci("12345"), 2)
        Deci('12000')
        >>> round_to_significant_digits(Deci("-0.0009995"), 3)
        Deci('-0.001000')
    """
    if digits <= 0:
        raise InvalidDigitCount(f"Number of significant digits must be positive: {digits}")

    if value.is_zero():
        return Deci.ZERO

    target_scale = digits - 1 - _leading_digit_exponent(value)
    if target_scale >= 0:
        return value.set_scale(target_scale, RoundingMode.HALF_UP)

    shift = power_int(Deci.TEN, -target_scale)
    return value.divide(shift, 0, RoundingMode.HALF_UP) * shift
