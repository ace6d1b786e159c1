"""
Deci — неизменяемое десятичное значение произвольной точности

Канонический value type ядра:
- Конструирование только из нормализованного литерала (str/int/float)
  или из результата операции движка
- Равенство и hash определены по величине: Deci("2.00") == Deci("2")
- Каноническая строка — plain-запись без экспоненты и без
  навязанных хвостовых нулей (их сохраняет только set_scale)
- Оператор "/" читает глобальную DivisionPolicy в момент вызова

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Экземпляр не мутирует после создания
2. a == b  ⇒  hash(a) == hash(b)
3. Deci(str(v)) == v для любого v
4. Деление на ноль всегда DivisionByZero (и "/", и divide)
"""

from __future__ import annotations

import math
from decimal import Decimal, InvalidOperation
from typing import Any, ClassVar, Final

from src.deci.config import get_division_policy
from src.deci.engine import ENGINE
from src.deci.errors import DivisionByZero, InvalidLiteral, InvalidScale
from src.deci.parser.literal import validate_and_normalize_literal
from src.deci.rounding import RoundingMode

_ENGINE: Final = ENGINE


def _literal_from_float(value: float) -> str:
    if not math.isfinite(value):
        raise InvalidLiteral(f"Cannot convert non-finite float to Deci: {value}")
    text = repr(value)
    if "e" in text or "E" in text:
        # repr(1e-07) == "1e-07": раскрываем в plain-запись
        text = _ENGINE.to_plain_string(_ENGINE.parse(text))
    return text


def _check_scale(scale: int) -> None:
    if scale < 0:
        raise InvalidScale(f"Scale must be non-negative: {scale}")


class Deci:
    """
    Arbitrary-precision decimal.

    Examples:
        >>> Deci("1.234,56")
        Deci('1234.56')
        >>> Deci("2.00") == Deci(2)
        True
        >>> str(Deci("1") / Deci("3"))
        '0.33333333333333333333'
    """

    __slots__ = ("_value",)

    ZERO: ClassVar[Deci]
    ONE: ClassVar[Deci]
    TEN: ClassVar[Deci]

    _value: Decimal

    def __init__(self, value: Deci | str | int | float) -> None:
        if isinstance(value, Deci):
            magnitude = value._value
        elif isinstance(value, bool):
            raise TypeError("Cannot construct Deci from bool")
        elif isinstance(value, str):
            magnitude = self._parse_literal(value)
        elif isinstance(value, int):
            magnitude = self._parse_literal(str(value))
        elif isinstance(value, float):
            magnitude = self._parse_literal(_literal_from_float(value))
        else:
            raise TypeError(f"Cannot construct Deci from {type(value).__name__}")

        object.__setattr__(self, "_value", magnitude)

    @staticmethod
    def _parse_literal(raw: str) -> Decimal:
        normalized = validate_and_normalize_literal(raw)
        try:
            parsed = _ENGINE.parse(normalized)
        except InvalidOperation as e:
            raise InvalidLiteral(f"Invalid decimal literal: '{raw}'") from e
        return _ENGINE.strip_trailing_zeros(parsed)

    @classmethod
    def _from_engine(cls, magnitude: Decimal, strip: bool = True) -> Deci:
        """Обёртка результата движка без повторного разбора строки."""
        instance = object.__new__(cls)
        if strip:
            magnitude = _ENGINE.strip_trailing_zeros(magnitude)
        object.__setattr__(instance, "_value", magnitude)
        return instance

    # -------------------------------------------------------------------------
    # Неизменяемость
    # -------------------------------------------------------------------------

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self) -> tuple[type[Deci], tuple[str]]:
        return (type(self), (str(self),))

    # -------------------------------------------------------------------------
    # Fallible parsing
    # -------------------------------------------------------------------------

    @classmethod
    def from_string_or_none(cls, value: str) -> Deci | None:
        """Разбор строки; None для недопустимого литерала."""
        try:
            return cls(value)
        except InvalidLiteral:
            return None

    @classmethod
    def from_string_or_zero(cls, value: str) -> Deci:
        """Разбор строки; Deci.ZERO для недопустимого литерала."""
        return cls.parse_or_default(value, cls.ZERO)

    @classmethod
    def parse_or_default(cls, value: str, default: Deci) -> Deci:
        """
        Разбор строки с явным значением по умолчанию.

        Args:
            value: Литерал
            default: Значение при недопустимом литерале

        Returns:
            Разобранное значение либо default
        """
        parsed = cls.from_string_or_none(value)
        return default if parsed is None else parsed

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def __add__(self, other: Deci) -> Deci:
        if not isinstance(other, Deci):
            return NotImplemented
        return Deci._from_engine(_ENGINE.add(self._value, other._value))

    def __sub__(self, other: Deci) -> Deci:
        if not isinstance(other, Deci):
            return NotImplemented
        return Deci._from_engine(_ENGINE.subtract(self._value, other._value))

    def __mul__(self, other: Deci) -> Deci:
        if not isinstance(other, Deci):
            return NotImplemented
        return Deci._from_engine(_ENGINE.multiply(self._value, other._value))

    def __truediv__(self, other: Deci) -> Deci:
        if not isinstance(other, Deci):
            return NotImplemented
        policy = get_division_policy()
        return self.divide(other, policy.fractional_digits, policy.rounding_mode)

    def divide(self, divisor: Deci, scale: int, rounding_mode: RoundingMode) -> Deci:
        """
        Деление с явным scale и режимом округления (политика игнорируется).

        Args:
            divisor: Делитель
            scale: Цифр после точки (>= 0)
            rounding_mode: Режим округления

        Returns:
            Частное без хвостовых нулей

        Raises:
            InvalidScale: Если scale < 0
            DivisionByZero: Если divisor == 0
        """
        _check_scale(scale)
        if divisor.is_zero():
            raise DivisionByZero(f"Division by zero: {self} / {divisor}")
        quotient = _ENGINE.divide_to_scale(self._value, divisor._value, scale, rounding_mode)
        return Deci._from_engine(quotient)

    def set_scale(self, scale: int, rounding_mode: RoundingMode) -> Deci:
        """
        Округление до scale цифр после точки.

        Результат сохраняет ровно scale цифр в строковой форме:
        Deci("1.2").set_scale(2, RoundingMode.DOWN) → "1.20".

        Raises:
            InvalidScale: Если scale < 0
        """
        _check_scale(scale)
        return Deci._from_engine(
            _ENGINE.set_scale(self._value, scale, rounding_mode), strip=False
        )

    def abs(self) -> Deci:
        return Deci._from_engine(_ENGINE.absolute(self._value))

    def negate(self) -> Deci:
        return Deci._from_engine(_ENGINE.negate(self._value))

    def max(self, other: Deci) -> Deci:
        return self if self >= other else other

    def min(self, other: Deci) -> Deci:
        return self if self <= other else other

    def __neg__(self) -> Deci:
        return self.negate()

    def __pos__(self) -> Deci:
        return self

    def __abs__(self) -> Deci:
        return self.abs()

    # -------------------------------------------------------------------------
    # Предикаты
    # -------------------------------------------------------------------------

    def is_zero(self) -> bool:
        return _ENGINE.signum(self._value) == 0

    def is_negative(self) -> bool:
        return _ENGINE.signum(self._value) < 0

    def is_positive(self) -> bool:
        return _ENGINE.signum(self._value) > 0

    def __bool__(self) -> bool:
        return not self.is_zero()

    # -------------------------------------------------------------------------
    # Сравнение, равенство, hash
    # -------------------------------------------------------------------------

    def compare_to(self, other: Deci) -> int:
        """-1 / 0 / +1 по величине, независимо от scale."""
        return _ENGINE.compare(self._value, other._value)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Deci):
            return NotImplemented
        return self.compare_to(other) == 0

    def __hash__(self) -> int:
        # hash(Decimal) зависит только от величины: hash(Decimal("2.00")) == hash(Decimal("2"))
        return hash(self._value)

    def __lt__(self, other: Deci) -> bool:
        if not isinstance(other, Deci):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: Deci) -> bool:
        if not isinstance(other, Deci):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: Deci) -> bool:
        if not isinstance(other, Deci):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: Deci) -> bool:
        if not isinstance(other, Deci):
            return NotImplemented
        return self.compare_to(other) >= 0

    # -------------------------------------------------------------------------
    # Конверсии
    # -------------------------------------------------------------------------

    def to_float(self) -> float:
        """Ближайшее double-приближение."""
        return _ENGINE.to_float(self._value)

    def to_int(self) -> int:
        """Целая часть (усечение к нулю)."""
        return _ENGINE.to_int(self._value)

    def __float__(self) -> float:
        return self.to_float()

    def __int__(self) -> int:
        return self.to_int()

    def __str__(self) -> str:
        return _ENGINE.to_plain_string(self._value)

    def __repr__(self) -> str:
        return f"Deci('{self}')"

    def scale(self) -> int:
        """Количество цифр после точки в канонической строке."""
        text = str(self)
        separator_index = text.find(".")
        if separator_index < 0:
            return 0
        return len(text) - separator_index - 1

    def precision(self) -> int:
        """Количество цифр в канонической строке (без знака и точки)."""
        return sum(1 for ch in str(self) if ch.isdigit())


Deci.ZERO = Deci("0")
Deci.ONE = Deci("1")
Deci.TEN = Deci("10")
