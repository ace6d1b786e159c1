"""
Statistics — описательная статистика по коллекциям Deci

Все функции возвращают None, если статистика не определена для входа
(пустая коллекция, выборочная дисперсия по одному элементу, нулевая
сумма весов, неположительные значения в harmonic_mean).

Деления выполняются оператором "/" и подчиняются глобальной DivisionPolicy.

ФОРМУЛЫ:
    mean = Σx / n
    variance_population = Σ(x - mean)² / n
    variance_sample     = Σ(x - mean)² / (n - 1)
    weighted_average = Σ(x·w) / Σw
    harmonic_mean = n / Σ(1/x)
"""

from collections.abc import Callable, Iterable, Sequence

from src.deci.constants import TWO
from src.deci.deci import Deci
from src.deci.math.arithmetic import SQRT_DEFAULT_PRECISION, sqrt
from src.deci.math.bulk import sum_deci


def mean(values: Iterable[Deci]) -> Deci | None:
    """
    Среднее арифметическое.

    Examples:
        >>> mean([Deci("2"), Deci("4"), Deci("9")])
        Deci('5')
    """
    items = list(values)
    if not items:
        return None
    return sum_deci(items) / Deci(len(items))


def median(values: Iterable[Deci]) -> Deci | None:
    """Медиана; для чётного n — среднее двух центральных значений."""
    ordered = sorted(values)
    if not ordered:
        return None

    size = len(ordered)
    if size % 2 == 0:
        return (ordered[size // 2 - 1] + ordered[size // 2]) / TWO
    return ordered[size // 2]


def minimum(values: Iterable[Deci]) -> Deci | None:
    return min(values, default=None)


def maximum(values: Iterable[Deci]) -> Deci | None:
    return max(values, default=None)


def value_range(values: Iterable[Deci]) -> Deci | None:
    """Размах max - min."""
    items = list(values)
    if not items:
        return None
    return max(items) - min(items)


def sum_of_squares(values: Iterable[Deci]) -> Deci | None:
    """Сумма квадратов отклонений от среднего."""
    items = list(values)
    center = mean(items)
    if center is None:
        return None

    total = Deci.ZERO
    for value in items:
        deviation = value - center
        total += deviation * deviation
    return total


def variance(values: Iterable[Deci], population: bool = False) -> Deci | None:
    """
    Дисперсия.

    Args:
        values: Значения
        population: True — генеральная (делитель n), False — выборочная (n - 1)

    Returns:
        Дисперсия; None для пустого входа или выборочной дисперсии при n < 2

    Examples:
        >>> data = [Deci(x) for x in (2, 4, 4, 4, 5, 5, 7, 9)]
        >>> variance(data, population=True)
        Deci('4')
    """
    items = list(values)
    if not items:
        return None
    if not population and len(items) <= 1:
        return None

    squares = sum_of_squares(items)
    if squares is None:
        return None

    divisor = len(items) if population else len(items) - 1
    return squares / Deci(divisor)


def standard_deviation(
    values: Iterable[Deci],
    population: bool = False,
    precision: int = SQRT_DEFAULT_PRECISION,
) -> Deci | None:
    """
    Стандартное отклонение: sqrt(variance), precision знаков после точки.

    Точность ограничена итерацией sqrt: для дисперсии больше ~10^24
    результат может быть неточным.
    """
    var = variance(values, population)
    if var is None:
        return None
    return sqrt(var, precision)


def weighted_average(values: Iterable[Deci], weights: Sequence[Deci]) -> Deci | None:
    """
    Взвешенное среднее.

    Returns:
        None если вход или веса пусты, их длины различаются, либо Σw == 0
    """
    items = list(values)
    if not items or not weights or len(items) != len(weights):
        return None

    total_weight = sum_deci(weights)
    if total_weight.is_zero():
        return None

    weighted_sum = sum_deci(value * weight for value, weight in zip(items, weights))
    return weighted_sum / total_weight


def harmonic_mean(values: Iterable[Deci]) -> Deci | None:
    """
    Гармоническое среднее.

    Returns:
        None если вход пуст или содержит значения <= 0
    """
    items = list(values)
    if not items:
        return None
    if any(value <= Deci.ZERO for value in items):
        return None

    reciprocals = sum_deci(Deci.ONE / value for value in items)
    return Deci(len(items)) / reciprocals


def count_where(values: Iterable[Deci], predicate: Callable[[Deci], bool]) -> int:
    return sum(1 for value in values if predicate(value))
