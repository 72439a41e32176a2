"""
Quantity — базовая величина (value, unit)

Immutable Pydantic модель: значение хранится ровно в той единице, в которой
его передал вызывающий код, и никогда не нормализуется неявно.

Каждая размерность — подкласс Quantity со своим Enum единиц:

    class Length(Quantity):
        dimension_name: ClassVar[str] = "Length"
        unit_type: ClassVar[type[UnitOfMeasure]] = LengthUnit
        unit: LengthUnit

ПРАВИЛА АРИФМЕТИКИ:
- a + b, a - b: только одна размерность; b переводится в единицу a,
  результат в единице a (convert-then-combine)
- q * number, q / number: единица сохраняется
- a / b одной размерности: безразмерное float-отношение
- a * b, a / b разных размерностей: только через граф операторов
- Сравнение и равенство: по значениям в первичной единице
"""

import logging
import math
import re
from typing import Any, Callable, ClassVar, Optional, TypeVar

from pydantic import BaseModel, field_validator

from dimcalc.core.errors import DimensionMismatchError, UnitParseError
from dimcalc.core.math.numerical_safeguards import (
    EPS_QUANTITY_DEFAULT,
    checked_divide,
    checked_result,
    is_scalar,
    is_valid_float,
    validate_finite,
    within_tolerance,
)
from dimcalc.core.operator_graph import OPERATOR_GRAPH, Operator
from dimcalc.core.unit import UnitOfMeasure

logger = logging.getLogger(__name__)

QuantityT = TypeVar("QuantityT", bound="Quantity")

# Число: знак, целая и/или дробная часть, экспонента
_NUMBER_PATTERN = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")

# Реестр размерностей: заполняется при определении подклассов (импорт)
_DIMENSIONS: dict[str, type["Quantity"]] = {}


# =============================================================================
# PARSING
# =============================================================================


def split_value_and_symbol(text: str, dimension: str) -> tuple[float, str]:
    """
    Разбор строки вида "<number> <symbol>".

    Пробел между числом и символом необязателен ("10m" == "10 m").
    Символ может содержать пробелы ("oz t").

    Args:
        text: Исходная строка
        dimension: Имя размерности (для сообщения об ошибке)

    Returns:
        (value, symbol)

    Raises:
        UnitParseError: Некорректное число или отсутствует символ
    """
    stripped = text.strip()
    match = _NUMBER_PATTERN.match(stripped)

    if match is None:
        token = stripped.split(maxsplit=1)[0] if stripped else ""
        raise UnitParseError(token, dimension, text, "malformed number")

    value = float(match.group())
    if not is_valid_float(value):
        raise UnitParseError(match.group(), dimension, text, "number out of range")

    symbol = stripped[match.end():].strip()
    if not symbol:
        raise UnitParseError("", dimension, text, "missing unit symbol")

    return value, symbol


def _describe(operand: object) -> str:
    return getattr(operand, "dimension_name", None) or type(operand).__name__


# =============================================================================
# QUANTITY
# =============================================================================


class Quantity(BaseModel):
    """
    Общий набор возможностей величины: value, unit, to, in_unit и арифметика.

    Подклассы задают dimension_name, unit_type и (опционально) si_unit.
    Сам Quantity не инстанцируется.
    """

    value: float
    unit: UnitOfMeasure

    model_config = {"frozen": True}  # Immutable

    dimension_name: ClassVar[str] = ""
    unit_type: ClassVar[Optional[type[UnitOfMeasure]]] = None
    si_unit: ClassVar[Optional[UnitOfMeasure]] = None

    def __init__(self, value: float, unit: UnitOfMeasure, **data: Any) -> None:
        unit_type = type(self).unit_type
        if unit_type is None:
            raise TypeError(f"{type(self).__name__} is not a concrete dimension")

        if not isinstance(unit, unit_type):
            raise DimensionMismatchError(
                f"{self.dimension_name} requires a {unit_type.__name__}, got {unit!r}"
            )

        super().__init__(value=value, unit=unit, **data)

    @field_validator("value", mode="before")
    @classmethod
    def validate_value(cls, v: Any) -> float:
        """Значение: конечное вещественное число (NaN/Inf отклоняются)."""
        return validate_finite(v, f"{cls.dimension_name} value")

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        """Проверка таблицы единиц и регистрация размерности."""
        super().__pydantic_init_subclass__(**kwargs)

        if cls.unit_type is None:
            return

        primaries = [unit for unit in cls.unit_type if unit.is_primary]
        if len(primaries) != 1:
            raise TypeError(
                f"{cls.unit_type.__name__} must declare exactly one primary unit, "
                f"found {len(primaries)}"
            )

        symbols = [unit.symbol for unit in cls.unit_type]
        if len(symbols) != len(set(symbols)):
            raise TypeError(f"{cls.unit_type.__name__} has duplicate unit symbols")

        if cls.dimension_name in _DIMENSIONS:
            raise TypeError(f"Dimension {cls.dimension_name!r} is already registered")

        _DIMENSIONS[cls.dimension_name] = cls
        logger.debug("Registered dimension %s with %d units", cls.dimension_name, len(symbols))

    # -------------------------------------------------------------------------
    # Таблица единиц
    # -------------------------------------------------------------------------

    @classmethod
    def units(cls) -> tuple[UnitOfMeasure, ...]:
        """Все единицы размерности."""
        return tuple(cls.unit_type)

    @classmethod
    def primary_unit(cls) -> UnitOfMeasure:
        """Первичная единица размерности (factor 1.0)."""
        return cls.unit_type.primary()

    @classmethod
    def unit_by_symbol(cls, symbol: str) -> Optional[UnitOfMeasure]:
        """Единица по символу или None."""
        return cls.unit_type.from_symbol(symbol)

    @classmethod
    def parse(cls: type[QuantityT], text: str) -> QuantityT:
        """
        Разбор строки "100 km" в величину этой размерности.

        Raises:
            UnitParseError: Некорректное число, неизвестный или пустой символ
        """
        value, symbol = split_value_and_symbol(text, cls.dimension_name)
        unit = cls.unit_by_symbol(symbol)

        if unit is None:
            raise UnitParseError(symbol, cls.dimension_name, text, "unknown unit symbol")

        return cls(value, unit)

    # -------------------------------------------------------------------------
    # Конверсия
    # -------------------------------------------------------------------------

    def to(self, target_unit: UnitOfMeasure) -> float:
        """
        Значение в единице target_unit.

        Raises:
            DimensionMismatchError: target_unit из другой размерности
        """
        self._require_unit(target_unit)
        return self.unit.convert_to(self.value, target_unit)

    def in_unit(self: QuantityT, target_unit: UnitOfMeasure) -> QuantityT:
        """Та же величина, выраженная в target_unit."""
        if target_unit is self.unit:
            return self
        converted = checked_result(
            self.to(target_unit), f"{self.dimension_name} conversion to {target_unit.symbol}"
        )
        return type(self)(converted, target_unit)

    def to_primary(self) -> float:
        """Значение в первичной единице."""
        return self.unit.convert_to_primary(self.value)

    def to_tuple(self) -> tuple[float, str]:
        return self.value, self.unit.symbol

    def to_tuple_in(self, target_unit: UnitOfMeasure) -> tuple[float, str]:
        return self.to(target_unit), target_unit.symbol

    def map(self: QuantityT, fn: Callable[[float], float]) -> QuantityT:
        """Применение fn к значению с сохранением единицы."""
        return self._with_value(fn(self.value))

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def approx_eq(self, other: "Quantity", tolerance: Optional["Quantity"] = None) -> bool:
        """
        Приближённое равенство: |a - b| <= |tolerance| в первичных единицах.

        Args:
            other: Величина той же размерности
            tolerance: Величина той же размерности (не голое число!);
                None → EPS_QUANTITY_DEFAULT в первичной единице

        Raises:
            DimensionMismatchError: other или tolerance другой размерности
        """
        self._require_same_dimension(other, "approx_eq")

        if tolerance is None:
            tol = EPS_QUANTITY_DEFAULT
        else:
            self._require_same_dimension(tolerance, "approx_eq tolerance")
            tol = tolerance.to_primary()

        return within_tolerance(self.to_primary(), other.to_primary(), tol)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        if not self._same_dimension(other):
            return False
        return self.to_primary() == other.to_primary()

    def __hash__(self) -> int:
        return hash((self.dimension_name, self.to_primary()))

    def __lt__(self, other: "Quantity") -> bool:
        self._require_same_dimension(other, "<")
        return self.to_primary() < other.to_primary()

    def __le__(self, other: "Quantity") -> bool:
        self._require_same_dimension(other, "<=")
        return self.to_primary() <= other.to_primary()

    def __gt__(self, other: "Quantity") -> bool:
        self._require_same_dimension(other, ">")
        return self.to_primary() > other.to_primary()

    def __ge__(self, other: "Quantity") -> bool:
        self._require_same_dimension(other, ">=")
        return self.to_primary() >= other.to_primary()

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def __add__(self: QuantityT, other: "Quantity") -> QuantityT:
        self._require_same_dimension(other, "+")
        return self._with_value(self.value + other.to(self.unit))

    def __sub__(self: QuantityT, other: "Quantity") -> QuantityT:
        self._require_same_dimension(other, "-")
        return self._with_value(self.value - other.to(self.unit))

    def __mul__(self, other: Any) -> Any:
        if is_scalar(other):
            return self._with_value(self.value * other)
        if isinstance(other, Quantity):
            return OPERATOR_GRAPH.apply(self, Operator.MULTIPLY, other)
        return NotImplemented

    def __rmul__(self, other: Any) -> Any:
        if is_scalar(other):
            return self._with_value(other * self.value)
        return NotImplemented

    def __truediv__(self, other: Any) -> Any:
        if is_scalar(other):
            return self._with_value(
                checked_divide(self.value, other, f"{self.dimension_name} / scalar")
            )
        if isinstance(other, Quantity):
            if self._same_dimension(other):
                return checked_divide(
                    self.to_primary(),
                    other.to_primary(),
                    f"{self.dimension_name} / {other.dimension_name}",
                )
            return OPERATOR_GRAPH.apply(self, Operator.DIVIDE, other)
        return NotImplemented

    def __neg__(self: QuantityT) -> QuantityT:
        return self._with_value(-self.value)

    def __pos__(self: QuantityT) -> QuantityT:
        return self

    def __abs__(self: QuantityT) -> QuantityT:
        return self._with_value(abs(self.value))

    def __round__(self: QuantityT, ndigits: Optional[int] = None) -> QuantityT:
        return self._with_value(float(round(self.value, ndigits)))

    def __floor__(self: QuantityT) -> QuantityT:
        return self._with_value(float(math.floor(self.value)))

    def __ceil__(self: QuantityT) -> QuantityT:
        return self._with_value(float(math.ceil(self.value)))

    # -------------------------------------------------------------------------
    # Отображение
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        return f"{self.value} {self.unit.symbol}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r}, {self.unit.symbol!r})"

    # -------------------------------------------------------------------------
    # Внутренние проверки
    # -------------------------------------------------------------------------

    def _with_value(self: QuantityT, value: float) -> QuantityT:
        # Операнды конечны, поэтому inf/NaN здесь означает переполнение
        return type(self)(checked_result(value, f"{self.dimension_name} arithmetic"), self.unit)

    def _same_dimension(self, other: object) -> bool:
        return isinstance(other, Quantity) and other.unit_type is self.unit_type

    def _require_same_dimension(self, other: object, operation: str) -> None:
        if not self._same_dimension(other):
            raise DimensionMismatchError(
                f"Cannot apply {operation} to {self.dimension_name} and {_describe(other)}"
            )

    def _require_unit(self, unit: object) -> None:
        if not isinstance(unit, self.unit_type):
            raise DimensionMismatchError(
                f"{unit!r} is not a unit of {self.dimension_name}"
            )


# =============================================================================
# FUNCTIONS
# =============================================================================


def approx_eq(a: Quantity, b: Quantity, tolerance: Quantity) -> bool:
    """Приближённое равенство a и b с толерантностью той же размерности."""
    return a.approx_eq(b, tolerance)


def dimension_by_name(name: str) -> type[Quantity]:
    """
    Класс размерности по имени ("Length", "Energy", ...).

    Raises:
        UnitParseError: Неизвестное имя размерности
    """
    try:
        return _DIMENSIONS[name]
    except KeyError:
        raise UnitParseError(name, "Dimension", name, "unknown dimension") from None


def dimensions() -> tuple[type[Quantity], ...]:
    """Все зарегистрированные размерности."""
    return tuple(_DIMENSIONS.values())
