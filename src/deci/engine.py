"""
Arithmetic Engine — адаптер arbitrary-precision движка

Ядро не реализует длинную арифметику само: все численные операции
делегируются движку через протокол ArithmeticEngine. Единственный адаптер —
DecimalEngine поверх стандартного модуля decimal (libmpdec).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. add/subtract/multiply точны (контекст с MAX_PREC, округления нет)
2. divide_to_scale корректно округляет: частное считается с одной
   "липкой" защитной цифрой (ROUND_05UP), затем округляется до scale
   запрошенным режимом — двойного округления не бывает
3. Отрицательный ноль наружу не выходит
4. to_plain_string никогда не использует экспоненциальную запись
"""

from decimal import (
    MAX_EMAX,
    MAX_PREC,
    MIN_EMIN,
    ROUND_05UP,
    ROUND_CEILING,
    ROUND_DOWN,
    ROUND_FLOOR,
    ROUND_HALF_DOWN,
    ROUND_HALF_EVEN,
    ROUND_HALF_UP,
    ROUND_UP,
    Context,
    Decimal,
    DivisionByZero,
    InvalidOperation,
    Overflow,
)
from typing import Final, Protocol, runtime_checkable

from src.deci.rounding import RoundingMode

# Соответствие семи режимов ядра режимам модуля decimal
DECIMAL_ROUNDING: Final[dict[RoundingMode, str]] = {
    RoundingMode.UP: ROUND_UP,
    RoundingMode.DOWN: ROUND_DOWN,
    RoundingMode.CEILING: ROUND_CEILING,
    RoundingMode.FLOOR: ROUND_FLOOR,
    RoundingMode.HALF_UP: ROUND_HALF_UP,
    RoundingMode.HALF_DOWN: ROUND_HALF_DOWN,
    RoundingMode.HALF_EVEN: ROUND_HALF_EVEN,
}


@runtime_checkable
class ArithmeticEngine(Protocol):
    """
    Контракт arbitrary-precision движка.

    Величины непрозрачны для ядра: оно получает их только из parse()
    и результатов других операций движка.
    """

    def parse(self, literal: str) -> Decimal:
        """Нормализованный литерал → величина."""
        ...

    def add(self, a: Decimal, b: Decimal) -> Decimal: ...

    def subtract(self, a: Decimal, b: Decimal) -> Decimal: ...

    def multiply(self, a: Decimal, b: Decimal) -> Decimal: ...

    def divide_to_scale(
        self, dividend: Decimal, divisor: Decimal, scale: int, rounding_mode: RoundingMode
    ) -> Decimal:
        """Частное, округлённое до scale цифр после точки."""
        ...

    def set_scale(self, value: Decimal, scale: int, rounding_mode: RoundingMode) -> Decimal: ...

    def compare(self, a: Decimal, b: Decimal) -> int:
        """-1 / 0 / +1 по величине."""
        ...

    def strip_trailing_zeros(self, value: Decimal) -> Decimal: ...

    def negate(self, value: Decimal) -> Decimal: ...

    def absolute(self, value: Decimal) -> Decimal: ...

    def signum(self, value: Decimal) -> int: ...

    def to_plain_string(self, value: Decimal) -> str: ...

    def to_float(self, value: Decimal) -> float: ...

    def to_int(self, value: Decimal) -> int:
        """Усечение к нулю."""
        ...


class DecimalEngine:
    """Адаптер ArithmeticEngine поверх модуля decimal."""

    def __init__(self) -> None:
        # Точный контекст: MAX_PREC исключает округление в add/sub/mul,
        # прерывания на InvalidOperation/DivisionByZero/Overflow
        self._context = Context(
            prec=MAX_PREC,
            rounding=ROUND_HALF_UP,
            Emax=MAX_EMAX,
            Emin=MIN_EMIN,
            traps=[InvalidOperation, DivisionByZero, Overflow],
        )

    # -------------------------------------------------------------------------
    # Конверсии
    # -------------------------------------------------------------------------

    def parse(self, literal: str) -> Decimal:
        value = self._context.create_decimal(literal)
        if not value.is_finite():
            raise InvalidOperation(f"non-finite literal: {literal!r}")
        return value

    def to_plain_string(self, value: Decimal) -> str:
        # format "f" раскрывает экспоненту: Decimal("1E+2") → "100"
        return format(self._without_negative_zero(value), "f")

    def to_float(self, value: Decimal) -> float:
        return float(value)

    def to_int(self, value: Decimal) -> int:
        return int(value)

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def add(self, a: Decimal, b: Decimal) -> Decimal:
        return self._context.add(a, b)

    def subtract(self, a: Decimal, b: Decimal) -> Decimal:
        return self._context.subtract(a, b)

    def multiply(self, a: Decimal, b: Decimal) -> Decimal:
        return self._context.multiply(a, b)

    def divide_to_scale(
        self,
        dividend: Decimal,
        divisor: Decimal,
        scale: int,
        rounding_mode: RoundingMode,
    ) -> Decimal:
        """
        Деление с округлением до фиксированного scale.

        Алгоритм:
            1. Оценка порядка частного: adjusted(a) - adjusted(b) + 1 цифр
               до точки (верхняя граница)
            2. Деление с точностью "до scale + 1 знака после точки"
               в режиме ROUND_05UP: неточный результат никогда не
               заканчивается на 0 или 5, поэтому последняя цифра
               однозначно кодирует "точно / ровно половина / больше / меньше"
            3. Финальное quantize до scale запрошенным режимом

        Raises:
            ZeroDivisionError: Если divisor == 0
        """
        if not divisor:
            raise ZeroDivisionError("Division by zero")

        quantum = Decimal(1).scaleb(-scale, context=self._context)
        if not dividend:
            return self.set_scale(Decimal(0), scale, rounding_mode)

        digits = dividend.adjusted() - divisor.adjusted() + 1 + scale + 1
        sticky_context = self._context.copy()
        sticky_context.prec = max(digits, 1)
        sticky_context.rounding = ROUND_05UP

        sticky = sticky_context.divide(dividend, divisor)
        rounded = sticky.quantize(
            quantum,
            rounding=DECIMAL_ROUNDING[rounding_mode],
            context=self._context,
        )
        return self._without_negative_zero(rounded)

    def set_scale(self, value: Decimal, scale: int, rounding_mode: RoundingMode) -> Decimal:
        rounded = value.quantize(
            Decimal(1).scaleb(-scale, context=self._context),
            rounding=DECIMAL_ROUNDING[rounding_mode],
            context=self._context,
        )
        return self._without_negative_zero(rounded)

    # -------------------------------------------------------------------------
    # Сравнение и знак
    # -------------------------------------------------------------------------

    def compare(self, a: Decimal, b: Decimal) -> int:
        if a < b:
            return -1
        if a > b:
            return 1
        return 0

    def strip_trailing_zeros(self, value: Decimal) -> Decimal:
        if not value:
            return Decimal(0)
        return value.normalize(self._context)

    def negate(self, value: Decimal) -> Decimal:
        return self._without_negative_zero(self._context.minus(value))

    def absolute(self, value: Decimal) -> Decimal:
        return self._context.abs(value)

    def signum(self, value: Decimal) -> int:
        if not value:
            return 0
        return -1 if value.is_signed() else 1

    @staticmethod
    def _without_negative_zero(value: Decimal) -> Decimal:
        if not value and value.is_signed():
            return value.copy_abs()
        return value


# Глобальный движок ядра
ENGINE: Final[DecimalEngine] = DecimalEngine()
