"""
Temperature — температура в шкалах Kelvin, Celsius, Fahrenheit, Rankine

Шкалы связаны аффинно (смещение нуля), поэтому Temperature НЕ является
Quantity и не участвует в графе операторов, диапазонах и ценах.

Две разные конверсии:
- Scale conversion (показание термометра):
      (v - fp_src) * d_tgt / d_src + fp_tgt
  100 °C → 212 °F
- Degree conversion (разность температур, без смещения):
      v * d_tgt / d_src
  100 °C-градусов → 180 °F-градусов

где fp — точка замерзания воды в шкале, d — градусов шкалы на один
градус Цельсия.

АРИФМЕТИКА:
- T + T, T - T: правый операнд трактуется как разность (degrees) и
  переводится degree-конверсией в шкалу левого
- T * number, T / number: шкала сохраняется
"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, field_validator

from dimcalc.core.errors import DimensionMismatchError, UnitParseError
from dimcalc.core.math.numerical_safeguards import (
    EPS_QUANTITY_DEFAULT,
    checked_divide,
    checked_result,
    is_scalar,
    validate_finite,
    within_tolerance,
)
from dimcalc.core.quantity import split_value_and_symbol


class TemperatureScale(Enum):
    """Шкала: (symbol, freezing_point, degrees_per_celsius_degree)."""

    KELVIN = ("K", 273.15, 1.0)
    CELSIUS = ("°C", 0.0, 1.0)
    FAHRENHEIT = ("°F", 32.0, 1.8)
    RANKINE = ("°R", 491.67, 1.8)

    def __init__(self, symbol: str, freezing_point: float, degrees_per_celsius: float) -> None:
        self.symbol = symbol
        self.freezing_point = freezing_point
        self.degrees_per_celsius = degrees_per_celsius

    def __str__(self) -> str:
        return self.symbol

    @classmethod
    def from_symbol(cls, symbol: str) -> Optional["TemperatureScale"]:
        """Шкала по символу ("°C" или "C"); None если символ неизвестен."""
        for scale in cls:
            if symbol in (scale.symbol, scale.symbol.lstrip("°")):
                return scale
        return None


def convert_scale(value: float, source: TemperatureScale, target: TemperatureScale) -> float:
    """Конверсия показания между шкалами (со смещением нуля)."""
    if source is target:
        return value
    return (
        (value - source.freezing_point) * target.degrees_per_celsius / source.degrees_per_celsius
        + target.freezing_point
    )


def convert_degrees(value: float, source: TemperatureScale, target: TemperatureScale) -> float:
    """Конверсия разности температур между шкалами (без смещения)."""
    if source is target:
        return value
    return value * target.degrees_per_celsius / source.degrees_per_celsius


class Temperature(BaseModel):
    """
    Температура: значение в конкретной шкале.

    Равенство, хэш и порядок — по значению в Kelvin.
    """

    value: float
    scale: TemperatureScale

    model_config = {"frozen": True}  # Immutable

    def __init__(self, value: float, scale: TemperatureScale, **data: Any) -> None:
        if not isinstance(scale, TemperatureScale):
            raise DimensionMismatchError(f"Temperature requires a TemperatureScale, got {scale!r}")

        super().__init__(value=value, scale=scale, **data)

    @field_validator("value", mode="before")
    @classmethod
    def validate_value(cls, v: Any) -> float:
        return validate_finite(v, "Temperature value")

    @classmethod
    def kelvin(cls, value: float) -> "Temperature":
        return cls(value, TemperatureScale.KELVIN)

    @classmethod
    def celsius(cls, value: float) -> "Temperature":
        return cls(value, TemperatureScale.CELSIUS)

    @classmethod
    def fahrenheit(cls, value: float) -> "Temperature":
        return cls(value, TemperatureScale.FAHRENHEIT)

    @classmethod
    def rankine(cls, value: float) -> "Temperature":
        return cls(value, TemperatureScale.RANKINE)

    @classmethod
    def parse(cls, text: str) -> "Temperature":
        """
        Разбор "100 °C", "-40 F", "273.15 K".

        Raises:
            UnitParseError: Некорректное число или неизвестная шкала
        """
        value, symbol = split_value_and_symbol(text, "Temperature")
        scale = TemperatureScale.from_symbol(symbol)

        if scale is None:
            raise UnitParseError(symbol, "Temperature", text, "unknown temperature scale")

        return cls(value, scale)

    # -------------------------------------------------------------------------
    # Scale conversion
    # -------------------------------------------------------------------------

    def to_scale(self, scale: TemperatureScale) -> float:
        return convert_scale(self.value, self.scale, scale)

    def in_scale(self, scale: TemperatureScale) -> "Temperature":
        if scale is self.scale:
            return self
        converted = checked_result(self.to_scale(scale), f"Temperature conversion to {scale.symbol}")
        return Temperature(converted, scale)

    def to_kelvin_scale(self) -> float:
        return self.to_scale(TemperatureScale.KELVIN)

    def to_celsius_scale(self) -> float:
        return self.to_scale(TemperatureScale.CELSIUS)

    def to_fahrenheit_scale(self) -> float:
        return self.to_scale(TemperatureScale.FAHRENHEIT)

    def to_rankine_scale(self) -> float:
        return self.to_scale(TemperatureScale.RANKINE)

    def in_kelvin(self) -> "Temperature":
        return self.in_scale(TemperatureScale.KELVIN)

    def in_celsius(self) -> "Temperature":
        return self.in_scale(TemperatureScale.CELSIUS)

    def in_fahrenheit(self) -> "Temperature":
        return self.in_scale(TemperatureScale.FAHRENHEIT)

    def in_rankine(self) -> "Temperature":
        return self.in_scale(TemperatureScale.RANKINE)

    # -------------------------------------------------------------------------
    # Degree conversion
    # -------------------------------------------------------------------------

    def to_degrees(self, scale: TemperatureScale) -> float:
        return convert_degrees(self.value, self.scale, scale)

    def to_kelvin_degrees(self) -> float:
        return self.to_degrees(TemperatureScale.KELVIN)

    def to_celsius_degrees(self) -> float:
        return self.to_degrees(TemperatureScale.CELSIUS)

    def to_fahrenheit_degrees(self) -> float:
        return self.to_degrees(TemperatureScale.FAHRENHEIT)

    def to_rankine_degrees(self) -> float:
        return self.to_degrees(TemperatureScale.RANKINE)

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def approx_eq(self, other: "Temperature", tolerance: Optional["Temperature"] = None) -> bool:
        """
        Приближённое равенство в Kelvin.

        Args:
            other: Температура в любой шкале
            tolerance: Допуск как разность температур (degree-конверсия);
                None → EPS_QUANTITY_DEFAULT кельвинов

        Raises:
            DimensionMismatchError: other или tolerance не Temperature
        """
        self._require_temperature(other, "approx_eq")

        if tolerance is None:
            tol = EPS_QUANTITY_DEFAULT
        else:
            self._require_temperature(tolerance, "approx_eq tolerance")
            tol = tolerance.to_kelvin_degrees()

        return within_tolerance(self.to_kelvin_scale(), other.to_kelvin_scale(), tol)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Temperature):
            return NotImplemented
        return self.to_kelvin_scale() == other.to_kelvin_scale()

    def __hash__(self) -> int:
        return hash(("Temperature", self.to_kelvin_scale()))

    def __lt__(self, other: "Temperature") -> bool:
        self._require_temperature(other, "<")
        return self.to_kelvin_scale() < other.to_kelvin_scale()

    def __le__(self, other: "Temperature") -> bool:
        self._require_temperature(other, "<=")
        return self.to_kelvin_scale() <= other.to_kelvin_scale()

    def __gt__(self, other: "Temperature") -> bool:
        self._require_temperature(other, ">")
        return self.to_kelvin_scale() > other.to_kelvin_scale()

    def __ge__(self, other: "Temperature") -> bool:
        self._require_temperature(other, ">=")
        return self.to_kelvin_scale() >= other.to_kelvin_scale()

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def __add__(self, other: "Temperature") -> "Temperature":
        self._require_temperature(other, "+")
        return self._with_value(self.value + other.to_degrees(self.scale))

    def __sub__(self, other: "Temperature") -> "Temperature":
        self._require_temperature(other, "-")
        return self._with_value(self.value - other.to_degrees(self.scale))

    def __mul__(self, other: Any) -> "Temperature":
        if not is_scalar(other):
            raise DimensionMismatchError(
                f"Temperature can only be multiplied by a number, got {type(other).__name__}"
            )
        return self._with_value(self.value * other)

    def __rmul__(self, other: Any) -> "Temperature":
        return self.__mul__(other)

    def __truediv__(self, other: Any) -> "Temperature":
        if not is_scalar(other):
            raise DimensionMismatchError(
                f"Temperature can only be divided by a number, got {type(other).__name__}"
            )
        return self._with_value(checked_divide(self.value, other, "Temperature / scalar"))

    def __neg__(self) -> "Temperature":
        return self._with_value(-self.value)

    def __str__(self) -> str:
        return f"{self.value} {self.scale.symbol}"

    def __repr__(self) -> str:
        return f"Temperature({self.value!r}, {self.scale.symbol!r})"

    def _with_value(self, value: float) -> "Temperature":
        return Temperature(checked_result(value, "Temperature arithmetic"), self.scale)

    def _require_temperature(self, other: object, operation: str) -> None:
        if not isinstance(other, Temperature):
            raise DimensionMismatchError(
                f"Cannot apply {operation} to Temperature and "
                f"{getattr(other, 'dimension_name', None) or type(other).__name__}"
            )
