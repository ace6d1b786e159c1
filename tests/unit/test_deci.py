"""
Тесты для значения Deci

Проверяет:
1. Конструирование из str/int/float и отказ для недопустимых литералов
2. Равенство и hash по величине, каноническую строку
3. Точную арифметику и деление по глобальной политике
4. divide/set_scale во всех семи режимах округления
5. Неизменяемость и fallible-разбор
"""

import copy
import pickle

import pytest

from src.deci import (
    DeciError,
    DivisionByZero,
    InvalidLiteral,
    InvalidScale,
    RoundingMode,
    division_policy,
)
from src.deci.deci import Deci

# =============================================================================
# КОНСТРУИРОВАНИЕ
# =============================================================================


class TestConstruction:
    """Тесты для конструирования Deci"""

    @pytest.mark.parametrize(
        "literal, expected",
        [
            ("1.234,56", "1234.56"),
            ("1,234.56", "1234.56"),
            ("-2,5", "-2.5"),
            (".5", "0.5"),
            ("+12", "12"),
            ("2.00", "2"),
            ("000", "0"),
            ("-0", "0"),
            ("-0.000", "0"),
            ("  42  ", "42"),
            ("5.", "5"),
            ("1.000.000", "1000"),
        ],
    )
    def test_from_string(self, literal: str, expected: str) -> None:
        """Строка → каноническая строка"""
        assert str(Deci(literal)) == expected

    @pytest.mark.parametrize(
        "number, expected",
        [(0, "0"), (42, "42"), (-7, "-7"), (10**30, "1" + "0" * 30)],
    )
    def test_from_int(self, number: int, expected: str) -> None:
        """int → точное значение"""
        assert str(Deci(number)) == expected

    @pytest.mark.parametrize(
        "number, expected",
        [
            (0.1, "0.1"),
            (-2.5, "-2.5"),
            (3.0, "3"),
            (1e-07, "0.0000001"),
            (1e20, "100000000000000000000"),
        ],
    )
    def test_from_float_uses_shortest_repr(self, number: float, expected: str) -> None:
        """float → кратчайшая десятичная запись, без экспоненты"""
        assert str(Deci(number)) == expected

    @pytest.mark.parametrize("number", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_float_rejected(self, number: float) -> None:
        """NaN/Inf — InvalidLiteral"""
        with pytest.raises(InvalidLiteral):
            Deci(number)

    @pytest.mark.parametrize("literal", ["", "   ", "abc", "1e5", "NaN", "1..2", "--1", "1,2,3"])
    def test_invalid_string_rejected(self, literal: str) -> None:
        """Недопустимые литералы — InvalidLiteral"""
        with pytest.raises(InvalidLiteral):
            Deci(literal)

    def test_invalid_literal_is_deci_error(self) -> None:
        """InvalidLiteral ловится как DeciError и ValueError"""
        with pytest.raises(DeciError):
            Deci("abc")
        with pytest.raises(ValueError):
            Deci("abc")

    @pytest.mark.parametrize("value", [True, None, [1], b"1"])
    def test_unsupported_types_rejected(self, value: object) -> None:
        """bool и прочие типы — TypeError"""
        with pytest.raises(TypeError):
            Deci(value)  # type: ignore[arg-type]

    def test_copy_constructor(self) -> None:
        """Deci(Deci) — то же значение"""
        original = Deci("12.5")
        assert Deci(original) == original

    def test_class_constants(self) -> None:
        """ZERO / ONE / TEN"""
        assert str(Deci.ZERO) == "0"
        assert str(Deci.ONE) == "1"
        assert str(Deci.TEN) == "10"


# =============================================================================
# РАВЕНСТВО, HASH, СТРОКА
# =============================================================================


class TestEqualityAndHash:
    """Тесты для равенства и hash"""

    def test_scale_independent_equality(self) -> None:
        """Deci("2.00") == Deci("2")"""
        assert Deci("2.00") == Deci("2")
        assert Deci("2.00") == Deci(2)

    def test_equal_values_equal_hash(self) -> None:
        """a == b ⇒ hash(a) == hash(b)"""
        assert hash(Deci("2.00")) == hash(Deci("2"))
        assert hash(Deci("1,5")) == hash(Deci("1.50"))
        assert hash(Deci("100")) == hash(Deci("10") * Deci("10"))

    def test_set_scale_result_hashes_as_magnitude(self) -> None:
        """Хвостовые нули set_scale не влияют на hash"""
        padded = Deci("1.2").set_scale(4, RoundingMode.DOWN)
        assert padded == Deci("1.2")
        assert hash(padded) == hash(Deci("1.2"))

    def test_usable_as_dict_key(self) -> None:
        """Значения с одинаковой величиной — один ключ"""
        prices = {Deci("2.50"): "a"}
        prices[Deci("2.5")] = "b"
        assert len(prices) == 1
        assert prices[Deci("2.500")] == "b"

    def test_not_equal_to_other_types(self) -> None:
        """Сравнение с не-Deci — False"""
        assert Deci("1") != 1
        assert Deci("1") != "1"

    @pytest.mark.parametrize(
        "literal",
        ["0", "-1234.5678", "0.0000001", "123456789012345678901234567890.123456789"],
    )
    def test_string_round_trip(self, literal: str) -> None:
        """Deci(str(v)) == v"""
        value = Deci(literal)
        assert Deci(str(value)) == value

    def test_repr(self) -> None:
        """repr показывает каноническую строку"""
        assert repr(Deci("1.234,50")) == "Deci('1234.5')"

    def test_large_value_plain_string(self) -> None:
        """Без экспоненциальной записи для больших значений"""
        assert str(Deci("1" + "0" * 50)) == "1" + "0" * 50


class TestOrdering:
    """Тесты для сравнения"""

    def test_compare_to(self) -> None:
        """-1 / 0 / +1"""
        assert Deci("1.5").compare_to(Deci("2")) == -1
        assert Deci("2.0").compare_to(Deci("2")) == 0
        assert Deci("-1").compare_to(Deci("-2")) == 1

    def test_operators(self) -> None:
        """<, <=, >, >="""
        assert Deci("0.1") < Deci("0.2")
        assert Deci("0.10") <= Deci("0.1")
        assert Deci("-3") > Deci("-4")
        assert Deci("5") >= Deci("5.000")

    def test_sorting(self) -> None:
        """sorted() работает по величине"""
        values = [Deci("3"), Deci("-1.5"), Deci("2.25"), Deci("0")]
        assert [str(v) for v in sorted(values)] == ["-1.5", "0", "2.25", "3"]

    def test_max_min(self) -> None:
        """max/min между двумя значениями"""
        a, b = Deci("1.5"), Deci("-2")
        assert a.max(b) == a
        assert a.min(b) == b

    def test_ordering_with_other_types_raises(self) -> None:
        """Сравнение порядка с int — TypeError"""
        with pytest.raises(TypeError):
            _ = Deci("1") < 2  # type: ignore[operator]


# =============================================================================
# АРИФМЕТИКА
# =============================================================================


class TestArithmetic:
    """Тесты для точной арифметики"""

    def test_no_binary_float_error(self) -> None:
        """0.1 + 0.2 == 0.3"""
        assert Deci("0.1") + Deci("0.2") == Deci("0.3")
        assert str(Deci("0.1") + Deci("0.2")) == "0.3"

    def test_subtract_multiply(self) -> None:
        """Вычитание и умножение точны"""
        assert str(Deci("10.25") - Deci("0.25")) == "10"
        assert str(Deci("1.5") * Deci("1.5")) == "2.25"
        assert str(Deci("-0.5") * Deci("4")) == "-2"

    def test_large_operands_exact(self) -> None:
        """Произвольная точность"""
        a = Deci("123456789012345678901234567890")
        b = Deci("987654321098765432109876543210")
        assert a + b - b == a
        assert (a * b) / b == a

    def test_result_strips_trailing_zeros(self) -> None:
        """Результат арифметики без хвостовых нулей"""
        assert str(Deci("1.50") + Deci("1.50")) == "3"

    def test_negation_and_abs(self) -> None:
        """negate / abs / унарные операторы"""
        value = Deci("-3.5")
        assert str(value.negate()) == "3.5"
        assert str(-value) == "3.5"
        assert str(value.abs()) == "3.5"
        assert str(abs(value)) == "3.5"
        assert +value is value

    def test_negated_zero_is_zero(self) -> None:
        """Отрицательный ноль не появляется"""
        result = -Deci.ZERO
        assert str(result) == "0"
        assert not result.is_negative()

    def test_mixed_types_not_supported(self) -> None:
        """Deci + int — TypeError"""
        with pytest.raises(TypeError):
            _ = Deci("1") + 1  # type: ignore[operator]

    def test_predicates(self) -> None:
        """is_zero / is_negative / is_positive / bool"""
        assert Deci("0.00").is_zero()
        assert Deci("-0.1").is_negative()
        assert Deci("0.1").is_positive()
        assert not Deci.ZERO
        assert Deci("0.001")


class TestDivisionOperator:
    """Тесты для оператора "/" и глобальной политики"""

    def test_default_policy(self) -> None:
        """По умолчанию 20 знаков HALF_UP"""
        assert str(Deci("1") / Deci("3")) == "0.33333333333333333333"
        assert str(Deci("2") / Deci("3")) == "0.66666666666666666667"

    def test_exact_quotient_stripped(self) -> None:
        """Точное частное без хвостовых нулей"""
        assert str(Deci("10") / Deci("4")) == "2.5"
        assert str(Deci("10") / Deci("5")) == "2"

    def test_policy_applies_immediately(self) -> None:
        """Смена политики видна следующему делению"""
        with division_policy(2, RoundingMode.HALF_UP):
            assert str(Deci("1") / Deci("3")) == "0.33"
        assert str(Deci("1") / Deci("3")) == "0.33333333333333333333"

    def test_policy_rounding_mode(self) -> None:
        """Режим округления политики"""
        with division_policy(0, RoundingMode.FLOOR):
            assert str(Deci("-7") / Deci("2")) == "-4"
        with division_policy(0, RoundingMode.DOWN):
            assert str(Deci("-7") / Deci("2")) == "-3"

    def test_division_by_zero(self) -> None:
        """Деление на ноль — DivisionByZero / ZeroDivisionError"""
        with pytest.raises(DivisionByZero):
            _ = Deci("1") / Deci("0")
        with pytest.raises(ZeroDivisionError):
            _ = Deci("1") / Deci("0.000")

    def test_zero_dividend(self) -> None:
        """0 / x == 0"""
        assert str(Deci("0") / Deci("7")) == "0"


class TestExplicitDivide:
    """Тесты для divide"""

    def test_ignores_policy(self) -> None:
        """Явный scale не зависит от политики"""
        with division_policy(0, RoundingMode.DOWN):
            assert str(Deci("1").divide(Deci("3"), 4, RoundingMode.HALF_UP)) == "0.3333"

    @pytest.mark.parametrize(
        "mode, expected",
        [
            (RoundingMode.UP, "0.34"),
            (RoundingMode.DOWN, "0.33"),
            (RoundingMode.CEILING, "0.34"),
            (RoundingMode.FLOOR, "0.33"),
            (RoundingMode.HALF_UP, "0.33"),
            (RoundingMode.HALF_DOWN, "0.33"),
            (RoundingMode.HALF_EVEN, "0.33"),
        ],
    )
    def test_one_third(self, mode: RoundingMode, expected: str) -> None:
        """1/3 до 2 знаков во всех режимах"""
        assert str(Deci("1").divide(Deci("3"), 2, mode)) == expected

    @pytest.mark.parametrize(
        "mode, expected",
        [
            (RoundingMode.HALF_UP, "3"),
            (RoundingMode.HALF_DOWN, "2"),
            (RoundingMode.HALF_EVEN, "2"),
            (RoundingMode.UP, "3"),
            (RoundingMode.DOWN, "2"),
        ],
    )
    def test_exact_tie(self, mode: RoundingMode, expected: str) -> None:
        """10/4 = 2.5 — ничья при scale 0"""
        assert str(Deci("10").divide(Deci("4"), 0, mode)) == expected

    def test_tie_is_not_double_rounded(self) -> None:
        """Частное чуть больше половины округляется вверх в HALF_DOWN"""
        # 1.0000001 / 2 = 0.50000005 → при scale 0 больше половины
        assert str(Deci("1.0000001").divide(Deci("2"), 0, RoundingMode.HALF_DOWN)) == "1"
        # 0.99999999 / 2 = 0.499999995 → меньше половины
        assert str(Deci("0.99999999").divide(Deci("2"), 0, RoundingMode.HALF_UP)) == "0"

    def test_result_strips_trailing_zeros(self) -> None:
        """Частное без хвостовых нулей"""
        assert str(Deci("1").divide(Deci("4"), 5, RoundingMode.HALF_UP)) == "0.25"

    def test_negative_scale_rejected(self) -> None:
        """scale < 0 — InvalidScale"""
        with pytest.raises(InvalidScale):
            Deci("1").divide(Deci("3"), -1, RoundingMode.HALF_UP)

    def test_zero_divisor_rejected(self) -> None:
        """divisor == 0 — DivisionByZero"""
        with pytest.raises(DivisionByZero):
            Deci("1").divide(Deci.ZERO, 2, RoundingMode.HALF_UP)

    def test_tiny_quotient(self) -> None:
        """Частное много меньше 10^-scale"""
        tiny = Deci("1").divide(Deci("1" + "0" * 30), 2, RoundingMode.UP)
        assert str(tiny) == "0.01"
        assert Deci("1").divide(Deci("1" + "0" * 30), 2, RoundingMode.HALF_UP).is_zero()


# =============================================================================
# SET_SCALE
# =============================================================================

_SET_SCALE_INPUTS = ["5.5", "2.5", "1.6", "1.1", "1.0", "-1.0", "-1.1", "-1.6", "-2.5", "-5.5"]

_SET_SCALE_TABLE = {
    RoundingMode.UP: ["6", "3", "2", "2", "1", "-1", "-2", "-2", "-3", "-6"],
    RoundingMode.DOWN: ["5", "2", "1", "1", "1", "-1", "-1", "-1", "-2", "-5"],
    RoundingMode.CEILING: ["6", "3", "2", "2", "1", "-1", "-1", "-1", "-2", "-5"],
    RoundingMode.FLOOR: ["5", "2", "1", "1", "1", "-1", "-2", "-2", "-3", "-6"],
    RoundingMode.HALF_UP: ["6", "3", "2", "1", "1", "-1", "-1", "-2", "-3", "-6"],
    RoundingMode.HALF_DOWN: ["5", "2", "2", "1", "1", "-1", "-1", "-2", "-2", "-5"],
    RoundingMode.HALF_EVEN: ["6", "2", "2", "1", "1", "-1", "-1", "-2", "-2", "-6"],
}


class TestSetScale:
    """Тесты для set_scale"""

    @pytest.mark.parametrize("mode", list(RoundingMode))
    def test_rounding_table(self, mode: RoundingMode) -> None:
        """Таблица округления до целого для каждого режима"""
        results = [str(Deci(v).set_scale(0, mode)) for v in _SET_SCALE_INPUTS]
        assert results == _SET_SCALE_TABLE[mode]

    @pytest.mark.parametrize(
        "value, mode, expected",
        [
            ("1.235", RoundingMode.HALF_UP, "1.24"),
            ("1.235", RoundingMode.HALF_DOWN, "1.23"),
            ("1.235", RoundingMode.HALF_EVEN, "1.24"),
            ("1.225", RoundingMode.HALF_EVEN, "1.22"),
            ("-1.235", RoundingMode.HALF_UP, "-1.24"),
            ("-1.235", RoundingMode.HALF_DOWN, "-1.23"),
        ],
    )
    def test_midpoints_at_scale_two(self, value: str, mode: RoundingMode, expected: str) -> None:
        """Ничья на границе scale 2"""
        assert str(Deci(value).set_scale(2, mode)) == expected

    def test_keeps_trailing_zeros(self) -> None:
        """set_scale сохраняет ровно scale цифр"""
        assert str(Deci("1.2").set_scale(2, RoundingMode.DOWN)) == "1.20"
        assert str(Deci("5").set_scale(3, RoundingMode.HALF_UP)) == "5.000"
        assert Deci("1.2").set_scale(2, RoundingMode.DOWN).scale() == 2

    def test_rounds_to_negative_zero_as_zero(self) -> None:
        """Округление отрицательного значения до нуля даёт "0.00" без знака"""
        result = Deci("-0.001").set_scale(2, RoundingMode.HALF_UP)
        assert str(result) == "0.00"
        assert not result.is_negative()

    def test_negative_scale_rejected(self) -> None:
        """scale < 0 — InvalidScale"""
        with pytest.raises(InvalidScale, match="non-negative"):
            Deci("1.5").set_scale(-1, RoundingMode.HALF_UP)

    def test_following_arithmetic_strips(self) -> None:
        """Арифметика над результатом set_scale снова каноническая"""
        padded = Deci("1.2").set_scale(3, RoundingMode.DOWN)
        assert str(padded + Deci.ZERO) == "1.2"


# =============================================================================
# НЕИЗМЕНЯЕМОСТЬ И FALLIBLE-РАЗБОР
# =============================================================================


class TestImmutability:
    """Тесты для неизменяемости"""

    def test_attribute_assignment_rejected(self) -> None:
        """Присваивание атрибута — AttributeError"""
        value = Deci("1")
        with pytest.raises(AttributeError):
            value._value = None  # type: ignore[misc]
        with pytest.raises(AttributeError):
            value.extra = 1  # type: ignore[attr-defined]

    def test_attribute_deletion_rejected(self) -> None:
        """Удаление атрибута — AttributeError"""
        value = Deci("1")
        with pytest.raises(AttributeError):
            del value._value

    def test_operations_return_new_instances(self) -> None:
        """Операции не меняют операнды"""
        value = Deci("2.5")
        _ = value + Deci("1")
        _ = value.set_scale(3, RoundingMode.UP)
        assert str(value) == "2.5"

    def test_pickle_and_copy(self) -> None:
        """pickle / copy сохраняют значение"""
        value = Deci("-1234.5678")
        assert pickle.loads(pickle.dumps(value)) == value
        assert copy.copy(value) == value
        assert copy.deepcopy(value) == value


class TestFallibleParsing:
    """Тесты для from_string_or_none / from_string_or_zero / parse_or_default"""

    def test_or_none(self) -> None:
        """None для недопустимого литерала"""
        assert Deci.from_string_or_none("abc") is None
        assert Deci.from_string_or_none("") is None
        assert Deci.from_string_or_none("1,5") == Deci("1.5")

    def test_or_zero(self) -> None:
        """ZERO для недопустимого литерала"""
        assert Deci.from_string_or_zero("x") == Deci.ZERO
        assert Deci.from_string_or_zero("7") == Deci("7")

    def test_or_default(self) -> None:
        """Явное значение по умолчанию"""
        assert Deci.parse_or_default("  ", Deci.ONE) == Deci.ONE
        assert Deci.parse_or_default("3.25", Deci.ONE) == Deci("3.25")


# =============================================================================
# КОНВЕРСИИ
# =============================================================================


class TestConversions:
    """Тесты для to_float / to_int / scale / precision"""

    def test_to_float(self) -> None:
        """Ближайший double"""
        assert Deci("0.1").to_float() == 0.1
        assert float(Deci("-2.5")) == -2.5

    def test_to_int_truncates(self) -> None:
        """Усечение к нулю"""
        assert Deci("7.9").to_int() == 7
        assert Deci("-7.9").to_int() == -7
        assert int(Deci("123456789012345678901234567890.5")) == 123456789012345678901234567890

    def test_scale_and_precision(self) -> None:
        """Цифры канонической строки"""
        value = Deci("123.4500")
        assert value.scale() == 2
        assert value.precision() == 5
        assert Deci("1000").scale() == 0
        assert Deci("1000").precision() == 4
