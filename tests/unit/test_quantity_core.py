"""
Тесты Quantity Core

Проверяет:
1. Конструирование и валидацию (единица чужой размерности, NaN)
2. Конверсию to / in_unit / to_primary
3. Арифметику convert-then-combine и скалярные операции
4. Равенство, хэш и порядок по первичным значениям
5. approx_eq с толерантностью той же размерности
6. Разбор строк и отображение
7. Dimensionless
"""

import math

import pytest
from pydantic import ValidationError

from dimcalc import (
    DimensionMismatchError,
    Dimensionless,
    DimensionlessUnit,
    Length,
    LengthUnit,
    Mass,
    MassUnit,
    QuantityError,
    QuantityOverflowError,
    Time,
    TimeUnit,
    UndefinedRatioError,
    UnitParseError,
    approx_eq,
    attempt,
)
from dimcalc.core.quantity import split_value_and_symbol

# =============================================================================
# КОНСТРУИРОВАНИЕ
# =============================================================================


class TestConstruction:
    """Тесты создания величин"""

    def test_named_factory(self) -> None:
        length = Length.meters(5)
        assert length.value == 5.0
        assert length.unit is LengthUnit.METERS

    def test_generic_constructor(self) -> None:
        assert Length(5, LengthUnit.KILOMETERS) == Length.kilometers(5)

    def test_keyword_constructor(self) -> None:
        assert Length(value=2.0, unit=LengthUnit.FEET).unit is LengthUnit.FEET

    def test_value_stored_as_supplied(self) -> None:
        """Значение не нормализуется в первичную единицу"""
        length = Length.feet(3)
        assert length.value == 3.0
        assert length.unit is LengthUnit.FEET

    def test_unit_of_other_dimension_rejected(self) -> None:
        with pytest.raises(DimensionMismatchError, match="requires a LengthUnit"):
            Length(5, TimeUnit.SECONDS)

    def test_nan_and_inf_rejected(self) -> None:
        with pytest.raises(ValueError, match="NaN/Inf"):
            Length.meters(float("nan"))
        with pytest.raises(ValueError, match="NaN/Inf"):
            Time.seconds(float("inf"))

    def test_invalid_value_is_input_error(self) -> None:
        """NaN/Inf на входе: ошибка валидации поля, а не ошибка арифметики"""
        with pytest.raises(ValidationError, match="Length value must be a valid float") as exc_info:
            Length.meters(float("inf"))
        assert not isinstance(exc_info.value, QuantityError)
        with pytest.raises(ValidationError, match="must be a real number"):
            Length(value="five", unit=LengthUnit.METERS)

    def test_immutable(self) -> None:
        """Величина неизменяема"""
        length = Length.meters(5)
        with pytest.raises(ValidationError, match="frozen"):
            length.value = 10.0


# =============================================================================
# КОНВЕРСИЯ
# =============================================================================


class TestConversion:
    """Тесты to / in_unit / to_primary"""

    def test_to(self) -> None:
        assert Length.kilometers(1).to(LengthUnit.METERS) == 1000.0
        assert Length.meters(1500).to(LengthUnit.KILOMETERS) == 1.5

    def test_to_same_unit_is_exact(self) -> None:
        assert Length.meters(0.1).to(LengthUnit.METERS) == 0.1

    def test_to_foreign_unit_rejected(self) -> None:
        with pytest.raises(DimensionMismatchError, match="not a unit of Length"):
            Length.meters(1).to(TimeUnit.SECONDS)

    def test_in_unit(self) -> None:
        result = Length.meters(1500).in_unit(LengthUnit.KILOMETERS)
        assert result.value == 1.5
        assert result.unit is LengthUnit.KILOMETERS
        assert isinstance(result, Length)

    def test_to_primary(self) -> None:
        assert Length.kilometers(2).to_primary() == 2000.0
        assert Mass.kilograms(2).to_primary() == 2000.0  # граммы

    def test_tuples(self) -> None:
        assert Length.meters(100).to_tuple() == (100.0, "m")
        assert Length.kilometers(1).to_tuple_in(LengthUnit.METERS) == (1000.0, "m")

    def test_named_converters(self) -> None:
        assert Time.hours(2).to_minutes() == pytest.approx(120.0)
        assert Mass.kilograms(1).to_pounds() == pytest.approx(2.2046226218)


# =============================================================================
# АРИФМЕТИКА
# =============================================================================


class TestArithmetic:
    """Тесты арифметики"""

    def test_add_uses_left_unit(self) -> None:
        """Инвариант: результат в единице левого операнда"""
        result = Length.kilometers(1) + Length.meters(500)
        assert result.unit is LengthUnit.KILOMETERS
        assert result.value == 1.5

        result = Length.meters(500) + Length.kilometers(1)
        assert result.unit is LengthUnit.METERS
        assert result.value == 1500.0

    def test_subtract(self) -> None:
        assert Length.meters(10) - Length.meters(3) == Length.meters(7)
        assert (Time.hours(1) - Time.minutes(30)).to_minutes() == pytest.approx(30.0)

    def test_add_other_dimension_rejected(self) -> None:
        with pytest.raises(DimensionMismatchError, match="Length and Time"):
            Length.meters(1) + Time.seconds(1)

    def test_add_bare_number_rejected(self) -> None:
        with pytest.raises(DimensionMismatchError):
            Length.meters(1) + 5

    def test_scalar_multiplication(self) -> None:
        assert Length.meters(5) * 2 == Length.meters(10)
        assert 2 * Length.meters(5) == Length.meters(10)
        assert (Length.feet(5) * 2).unit is LengthUnit.FEET

    def test_scalar_division(self) -> None:
        result = Length.meters(10) / 4
        assert result.value == 2.5
        assert result.unit is LengthUnit.METERS

    def test_scalar_division_by_zero(self) -> None:
        with pytest.raises(UndefinedRatioError):
            Length.meters(10) / 0
        with pytest.raises(ZeroDivisionError):
            Length.meters(10) / 0.0

    def test_same_dimension_ratio(self) -> None:
        """a / b одной размерности — безразмерное float"""
        ratio = Length.kilometers(1) / Length.meters(250)
        assert isinstance(ratio, float)
        assert ratio == 4.0

    def test_same_dimension_ratio_zero_divisor(self) -> None:
        with pytest.raises(UndefinedRatioError):
            Length.meters(1) / Length.kilometers(0)

    def test_unary_and_rounding(self) -> None:
        assert (-Length.meters(3)).value == -3.0
        assert +Length.meters(3) == Length.meters(3)
        assert abs(Length.meters(-3)) == Length.meters(3)
        assert round(Length.meters(2.567), 2).value == pytest.approx(2.57)
        assert round(Length.meters(2.5)).value == 2.0
        assert math.floor(Length.meters(2.7)).value == 2.0
        assert math.ceil(Length.meters(2.1)).value == 3.0

    def test_map_preserves_unit(self) -> None:
        result = Length.feet(3).map(lambda v: v * v)
        assert result.value == 9.0
        assert result.unit is LengthUnit.FEET

    def test_unsupported_operand(self) -> None:
        with pytest.raises(TypeError):
            Length.meters(1) * "2"


class TestOverflow:
    """Переполнение float в арифметике: типизированная ошибка, а не ValueError"""

    def test_scalar_multiplication_overflow(self) -> None:
        with pytest.raises(QuantityOverflowError, match="Length arithmetic overflowed"):
            Length.meters(1e308) * 10
        with pytest.raises(QuantityOverflowError):
            10 * Length.meters(1e308)

    def test_add_overflow(self) -> None:
        with pytest.raises(QuantityOverflowError):
            Length.meters(1e308) + Length.meters(1e308)

    def test_add_across_units_overflow(self) -> None:
        """Переполнение при переводе правого операнда в единицу левого"""
        with pytest.raises(QuantityOverflowError):
            Length.meters(1) + Length.parsecs(1e300)

    def test_in_unit_overflow(self) -> None:
        with pytest.raises(QuantityOverflowError, match="conversion to"):
            Length.parsecs(1e300).in_unit(LengthUnit.MILLIMETERS)

    def test_map_non_finite(self) -> None:
        with pytest.raises(QuantityOverflowError):
            Length.meters(2).map(lambda v: v * math.inf)

    def test_overflow_is_library_error(self) -> None:
        """Переполнение перехватывается attempt как ошибка библиотеки"""
        outcome = attempt(lambda: Length.meters(1e308) * 10)
        assert not outcome.ok
        assert isinstance(outcome.error, QuantityOverflowError)
        assert isinstance(outcome.error, QuantityError)
        assert isinstance(outcome.error, OverflowError)


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


class TestComparison:
    """Тесты равенства, хэша и порядка"""

    def test_equal_across_units(self) -> None:
        assert Length.kilometers(1) == Length.meters(1000)

    def test_different_dimensions_never_equal(self) -> None:
        assert Length.meters(1) != Time.seconds(1)
        assert not (Length.meters(1) == Time.seconds(1))

    def test_not_equal_to_number(self) -> None:
        assert Length.meters(1) != 1

    def test_hash_consistent_with_equality(self) -> None:
        assert hash(Length.kilometers(1)) == hash(Length.meters(1000))
        assert len({Length.kilometers(1), Length.meters(1000), Length.meters(1)}) == 2

    def test_ordering(self) -> None:
        assert Length.meters(999) < Length.kilometers(1)
        assert Length.kilometers(1) <= Length.meters(1000)
        assert Length.feet(4) > Length.meters(1)
        assert Length.meters(1) >= Length.centimeters(100)

    def test_sorting_mixed_units(self) -> None:
        lengths = [Length.kilometers(1), Length.meters(5), Length.feet(100)]
        assert sorted(lengths) == [Length.meters(5), Length.feet(100), Length.kilometers(1)]

    def test_ordering_across_dimensions_rejected(self) -> None:
        with pytest.raises(DimensionMismatchError):
            Length.meters(1) < Time.seconds(1)


class TestApproxEq:
    """Тесты approx_eq"""

    def test_float_noise_absorbed_by_default(self) -> None:
        """Точное равенство видит ошибку float, approx_eq — нет"""
        total = Length.meters(0.1) + Length.meters(0.2)
        assert total != Length.meters(0.3)
        assert total.approx_eq(Length.meters(0.3))

    def test_explicit_tolerance(self) -> None:
        assert Length.meters(1).approx_eq(Length.millimeters(1001), Length.millimeters(2))
        assert not Length.meters(1).approx_eq(Length.millimeters(1001), Length.millimeters(0.5))

    def test_negative_tolerance_uses_magnitude(self) -> None:
        assert Length.meters(1).approx_eq(Length.millimeters(1001), Length.millimeters(-2))

    def test_bare_number_tolerance_rejected(self) -> None:
        """Толерантность — величина, а не голое число"""
        with pytest.raises(DimensionMismatchError, match="tolerance"):
            Length.meters(1).approx_eq(Length.meters(1), 0.1)

    def test_other_dimension_rejected(self) -> None:
        with pytest.raises(DimensionMismatchError):
            Length.meters(1).approx_eq(Time.seconds(1))

    def test_module_function(self) -> None:
        assert approx_eq(Time.minutes(1), Time.seconds(60.5), Time.seconds(1))


# =============================================================================
# РАЗБОР И ОТОБРАЖЕНИЕ
# =============================================================================


class TestParsing:
    """Тесты parse"""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("100 km", Length.kilometers(100)),
            ("10m", Length.meters(10)),
            ("  -2.5e3 mm  ", Length.millimeters(-2500)),
            (".5 ft", Length.feet(0.5)),
            ("+3. in", Length.inches(3)),
            ("1E2 nmi", Length.nautical_miles(100)),
        ],
    )
    def test_valid(self, text: str, expected: Length) -> None:
        parsed = Length.parse(text)
        assert parsed == expected
        assert parsed.unit is expected.unit

    def test_symbol_with_space(self) -> None:
        assert Mass.parse("2 oz t").unit is MassUnit.TROY_OUNCES

    def test_malformed_number(self) -> None:
        with pytest.raises(UnitParseError) as exc_info:
            Length.parse("abc m")
        assert exc_info.value.token == "abc"
        assert exc_info.value.dimension == "Length"
        assert exc_info.value.text == "abc m"

    def test_unknown_symbol(self) -> None:
        with pytest.raises(UnitParseError, match="unknown unit symbol") as exc_info:
            Length.parse("10 parsecs")
        assert exc_info.value.token == "parsecs"

    def test_symbol_of_other_dimension(self) -> None:
        with pytest.raises(UnitParseError, match="Length"):
            Length.parse("10 s")

    def test_missing_symbol(self) -> None:
        with pytest.raises(UnitParseError, match="missing unit symbol"):
            Length.parse("100")

    def test_empty_input(self) -> None:
        with pytest.raises(UnitParseError, match="malformed number"):
            Length.parse("   ")

    def test_number_out_of_range(self) -> None:
        with pytest.raises(UnitParseError, match="out of range"):
            Length.parse("1e400 m")

    def test_parse_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            Time.parse("soon")
        with pytest.raises(QuantityError):
            Time.parse("soon")

    def test_split_value_and_symbol(self) -> None:
        assert split_value_and_symbol("12.5 kWh", "Energy") == (12.5, "kWh")


class TestDisplay:
    def test_str(self) -> None:
        assert str(Length.meters(100)) == "100.0 m"
        assert str(Time.minutes(1.5)) == "1.5 min"

    def test_repr(self) -> None:
        assert repr(Length.meters(100)) == "Length(100.0, 'm')"


class TestClassHelpers:
    def test_units_and_lookup(self) -> None:
        assert LengthUnit.KILOMETERS in Length.units()
        assert Length.primary_unit() is LengthUnit.METERS
        assert Length.unit_by_symbol("km") is LengthUnit.KILOMETERS
        assert Length.unit_by_symbol("xx") is None
        assert Length.dimension_name == "Length"
        assert Length.si_unit is LengthUnit.METERS


# =============================================================================
# DIMENSIONLESS
# =============================================================================


class TestDimensionless:
    """Тесты безразмерных количеств"""

    def test_units(self) -> None:
        assert Dimensionless.dozen(2).to_each() == 24.0
        assert Dimensionless.gross(1).to(DimensionlessUnit.DOZEN) == 12.0
        assert float(Dimensionless.percent(50)) == 0.5

    def test_add_number_as_each(self) -> None:
        result = Dimensionless.each(5) + 3
        assert result == Dimensionless.each(8)
        assert 3 + Dimensionless.each(5) == Dimensionless.each(8)
        assert (Dimensionless.dozen(1) - 2).approx_eq(Dimensionless.each(10))

    def test_sum_of_counts(self) -> None:
        assert sum([Dimensionless.each(1), Dimensionless.dozen(1)]) == Dimensionless.each(13)

    def test_product(self) -> None:
        result = Dimensionless.each(2) * Dimensionless.each(3)
        assert isinstance(result, Dimensionless)
        assert result == Dimensionless.each(6)

    def test_ratio(self) -> None:
        assert Dimensionless.dozen(1) / Dimensionless.each(4) == 3.0
