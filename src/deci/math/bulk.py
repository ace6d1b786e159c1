"""
Bulk Operations — операции над коллекциями Deci

Преобразования, зависящие от порядка (cumulative_sum, moving_average,
differences, group_consecutive_similar), обходят вход слева направо и
сохраняют его порядок. Остальные не зависят от порядка входа.

Все функции принимают любой Iterable[Deci] и возвращают новый list.
"""

from collections.abc import Callable, Iterable
from typing import Final

from src.deci.constants import HUNDRED
from src.deci.deci import Deci
from src.deci.errors import DivisionByZero
from src.deci.rounding import RoundingMode

# IQR-множитель по умолчанию для filter_outliers
OUTLIER_IQR_MULTIPLIER: Final[Deci] = Deci("1.5")


# =============================================================================
# АГРЕГАТЫ
# =============================================================================


def sum_deci(values: Iterable[Deci]) -> Deci:
    """Сумма; Deci.ZERO для пустого входа."""
    total = Deci.ZERO
    for value in values:
        total += value
    return total


def multiply_all(values: Iterable[Deci]) -> Deci:
    """Произведение; Deci.ONE для пустого входа."""
    product = Deci.ONE
    for value in values:
        product *= value
    return product


def average(values: Iterable[Deci]) -> Deci:
    """Среднее арифметическое; Deci.ZERO для пустого входа."""
    items = list(values)
    if not items:
        return Deci.ZERO
    return sum_deci(items) / Deci(len(items))


# =============================================================================
# ПОЭЛЕМЕНТНЫЕ ПРЕОБРАЗОВАНИЯ
# =============================================================================


def apply_to_all(values: Iterable[Deci], operation: Callable[[Deci], Deci]) -> list[Deci]:
    return [operation(value) for value in values]


def add_to_all(values: Iterable[Deci], addend: Deci) -> list[Deci]:
    return [value + addend for value in values]


def subtract_from_all(values: Iterable[Deci], subtrahend: Deci) -> list[Deci]:
    return [value - subtrahend for value in values]


def multiply_all_by(values: Iterable[Deci], multiplier: Deci) -> list[Deci]:
    return [value * multiplier for value in values]


def divide_all_by(values: Iterable[Deci], divisor: Deci) -> list[Deci]:
    """
    Деление каждого элемента на divisor (оператор "/", глобальная политика).

    Raises:
        DivisionByZero: Если divisor == 0 (даже для пустого входа)
    """
    if divisor.is_zero():
        raise DivisionByZero("Cannot divide by zero")
    return [value / divisor for value in values]


def apply_percentage_change(values: Iterable[Deci], percentage_change: Deci) -> list[Deci]:
    """
    Изменение всех значений на процент.

    Args:
        values: Исходные значения
        percentage_change: Процент (10 → +10%, -5 → -5%)
    """
    multiplier = Deci.ONE + percentage_change / HUNDRED
    return multiply_all_by(values, multiplier)


def round_all(values: Iterable[Deci], scale: int, rounding_mode: RoundingMode) -> list[Deci]:
    return [value.set_scale(scale, rounding_mode) for value in values]


# =============================================================================
# МАСШТАБИРОВАНИЕ
# =============================================================================


def normalize(values: Iterable[Deci]) -> list[Deci]:
    """
    Min-max нормализация в [0, 1].

    Returns:
        Нормализованные значения в исходном порядке; если вход пуст или
        все значения равны — исходные значения без изменений
    """
    items = list(values)
    if not items:
        return items

    lowest = min(items)
    value_span = max(items) - lowest
    if value_span.is_zero():
        return items

    return [(value - lowest) / value_span for value in items]


def scale_to_sum(values: Iterable[Deci], target_sum: Deci) -> list[Deci]:
    """
    Пропорциональное масштабирование так, чтобы сумма стала target_sum.

    Raises:
        DivisionByZero: Если текущая сумма равна нулю
    """
    items = list(values)
    if not items:
        return items

    current_sum = sum_deci(items)
    if current_sum.is_zero():
        raise DivisionByZero("Cannot scale when current sum is zero")

    return multiply_all_by(items, target_sum / current_sum)


# =============================================================================
# ФИЛЬТРАЦИЯ И ГРУППИРОВКА
# =============================================================================


def filter_in_range(values: Iterable[Deci], lower: Deci, upper: Deci) -> list[Deci]:
    """
    Значения из [lower, upper] (включительно) в исходном порядке.

    Raises:
        ValueError: Если lower > upper
    """
    if lower > upper:
        raise ValueError(f"Min value ({lower}) must be less than or equal to max value ({upper})")
    return [value for value in values if lower <= value <= upper]


def filter_outliers(
    values: Iterable[Deci],
    multiplier: Deci = OUTLIER_IQR_MULTIPLIER,
) -> list[Deci]:
    """
    Удаление выбросов по правилу межквартильного размаха (IQR).

    Алгоритм:
        q1 = sorted[n // 4], q3 = sorted[3n // 4], iqr = q3 - q1
        оставить значения из [q1 - iqr * k, q3 + iqr * k]

    Args:
        values: Исходные значения
        multiplier: Множитель k (default: 1.5)

    Returns:
        Отсортированные по возрастанию значения без выбросов; при n < 4
        фильтрация не выполняется (возвращается отсортированный вход)
    """
    ordered = sorted(values)
    if len(ordered) < 4:
        return ordered

    q1 = ordered[len(ordered) // 4]
    q3 = ordered[(len(ordered) * 3) // 4]
    iqr = q3 - q1

    lower_bound = q1 - iqr * multiplier
    upper_bound = q3 + iqr * multiplier

    return [value for value in ordered if lower_bound <= value <= upper_bound]


def group_consecutive_similar(values: Iterable[Deci], tolerance: Deci) -> list[list[Deci]]:
    """
    Группы подряд идущих значений, соседние элементы которых отличаются
    не более чем на tolerance.
    """
    groups: list[list[Deci]] = []
    current: list[Deci] = []
    previous: Deci | None = None

    for value in values:
        if previous is None or (value - previous).abs() <= tolerance:
            current.append(value)
        else:
            groups.append(current)
            current = [value]
        previous = value

    if current:
        groups.append(current)

    return groups


def partition(
    values: Iterable[Deci],
    predicate: Callable[[Deci], bool],
) -> tuple[list[Deci], list[Deci]]:
    """(удовлетворяющие predicate, остальные), порядок сохраняется."""
    matched: list[Deci] = []
    rest: list[Deci] = []
    for value in values:
        (matched if predicate(value) else rest).append(value)
    return matched, rest


# =============================================================================
# ПОСЛЕДОВАТЕЛЬНОСТИ
# =============================================================================


def cumulative_sum(values: Iterable[Deci]) -> list[Deci]:
    """Накопленные суммы слева направо."""
    result: list[Deci] = []
    running = Deci.ZERO
    for value in values:
        running += value
        result.append(running)
    return result


def moving_average(values: Iterable[Deci], window_size: int) -> list[Deci]:
    """
    Скользящее среднее с окном window_size.

    Returns:
        len(values) - window_size + 1 значений; [] если вход короче окна

    Raises:
        ValueError: Если window_size <= 0
    """
    if window_size <= 0:
        raise ValueError(f"Window size must be positive: {window_size}")

    items = list(values)
    if len(items) < window_size:
        return []

    divisor = Deci(window_size)
    return [
        sum_deci(items[start : start + window_size]) / divisor
        for start in range(len(items) - window_size + 1)
    ]


def differences(values: Iterable[Deci]) -> list[Deci]:
    """Разности соседних элементов (b - a)."""
    items = list(values)
    return [current - prev for prev, current in zip(items, items[1:])]


def top_n(values: Iterable[Deci], n: int) -> list[Deci]:
    """
    N наибольших значений по убыванию.

    Raises:
        ValueError: Если n < 0
    """
    if n < 0:
        raise ValueError(f"N must be non-negative: {n}")
    return sorted(values, reverse=True)[:n]


def bottom_n(values: Iterable[Deci], n: int) -> list[Deci]:
    """
    N наименьших значений по возрастанию.

    Raises:
        ValueError: Если n < 0
    """
    if n < 0:
        raise ValueError(f"N must be non-negative: {n}")
    return sorted(values)[:n]
