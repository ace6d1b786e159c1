"""
Deci — канонический десятичный тип произвольной точности

Нормализация литералов с '.'/',' разделителями, неизменяемое значение
с равенством по величине, глобальная политика деления, семь режимов
округления и производные алгоритмы поверх публичного контракта.
"""

from src.deci.config import (
    DEFAULT_DIVISION_POLICY,
    DeciConfiguration,
    DeciSettings,
    DivisionPolicy,
    configure_from_settings,
    division_policy,
    get_division_policy,
    reset_division_policy,
    set_division_policy,
)
from src.deci.deci import Deci
from src.deci.engine import ENGINE, ArithmeticEngine, DecimalEngine
from src.deci.errors import (
    DeciError,
    DivisionByZero,
    ExponentOutOfRange,
    InvalidDigitCount,
    InvalidLiteral,
    InvalidMultiple,
    InvalidScale,
    NegativeRadicand,
    NonIntegerExponent,
)
from src.deci.parser import normalize_decimal_string
from src.deci.rounding import RoundingMode

__all__ = [
    # Value type
    "Deci",
    "RoundingMode",
    # Configuration
    "DEFAULT_DIVISION_POLICY",
    "DeciConfiguration",
    "DeciSettings",
    "DivisionPolicy",
    "configure_from_settings",
    "division_policy",
    "get_division_policy",
    "reset_division_policy",
    "set_division_policy",
    # Engine
    "ENGINE",
    "ArithmeticEngine",
    "DecimalEngine",
    # Parsing
    "normalize_decimal_string",
    # Errors
    "DeciError",
    "DivisionByZero",
    "ExponentOutOfRange",
    "InvalidDigitCount",
    "InvalidLiteral",
    "InvalidMultiple",
    "InvalidScale",
    "NegativeRadicand",
    "NonIntegerExponent",
]
