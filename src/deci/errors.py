"""
Deci Errors — Иерархия исключений

Все ошибки ядра наследуются от DeciError и от соответствующего встроенного
исключения, чтобы вызывающий код мог ловить их привычным способом
(например, ZeroDivisionError для деления на ноль).

Ошибки синхронные и терминальные для вызова: ядро их не подавляет и
не повторяет операцию.
"""


class DeciError(Exception):
    """Базовое исключение для всех ошибок Deci."""

    pass


class InvalidLiteral(DeciError, ValueError):
    """
    Строка не является допустимым десятичным литералом.

    Возникает для пустых/пробельных строк и строк, не соответствующих
    грамматике DECIMAL_PATTERN, а также для NaN/Inf при конверсии float.
    """

    pass


class DivisionByZero(DeciError, ZeroDivisionError):
    """Деление (или modulo/remainder) на значение с нулевой величиной."""

    pass


class InvalidScale(DeciError, ValueError):
    """Отрицательный scale в set_scale/divide."""

    pass


class InvalidMultiple(DeciError, ValueError):
    """Нулевой шаг в round_to_nearest."""

    pass


class InvalidDigitCount(DeciError, ValueError):
    """Неположительное число значащих цифр."""

    pass


class NegativeRadicand(DeciError, ValueError):
    """Квадратный корень из отрицательного значения."""

    pass


class NonIntegerExponent(DeciError, ValueError):
    """Показатель степени не является целым числом."""

    pass


class ExponentOutOfRange(DeciError, OverflowError):
    """Модуль показателя степени превышает поддерживаемый диапазон."""

    pass
