"""
Dimensionless — безразмерные количества (штуки, проценты, дюжины)

Единственная размерность, допускающая сложение с голым числом: число
трактуется как количество в штуках (each).
"""

from typing import Any, ClassVar, Optional

from dimcalc.core.math.numerical_safeguards import is_scalar
from dimcalc.core.quantity import Quantity
from dimcalc.core.unit import CENTI, UnitOfMeasure


class DimensionlessUnit(UnitOfMeasure):
    EACH = ("ea", 1.0)
    PERCENT = ("%", CENTI)
    DOZEN = ("dz", 12.0)
    SCORE = ("score", 20.0)
    GROSS = ("gr", 144.0)


class Dimensionless(Quantity):
    dimension_name: ClassVar[str] = "Dimensionless"
    unit_type: ClassVar[Optional[type[UnitOfMeasure]]] = DimensionlessUnit
    si_unit: ClassVar[Optional[UnitOfMeasure]] = DimensionlessUnit.EACH

    unit: DimensionlessUnit

    @classmethod
    def each(cls, value: float) -> "Dimensionless":
        return cls(value, DimensionlessUnit.EACH)

    @classmethod
    def percent(cls, value: float) -> "Dimensionless":
        return cls(value, DimensionlessUnit.PERCENT)

    @classmethod
    def dozen(cls, value: float) -> "Dimensionless":
        return cls(value, DimensionlessUnit.DOZEN)

    @classmethod
    def score(cls, value: float) -> "Dimensionless":
        return cls(value, DimensionlessUnit.SCORE)

    @classmethod
    def gross(cls, value: float) -> "Dimensionless":
        return cls(value, DimensionlessUnit.GROSS)

    def to_each(self) -> float:
        return self.to(DimensionlessUnit.EACH)

    def to_percent(self) -> float:
        return self.to(DimensionlessUnit.PERCENT)

    # Число в сложении/вычитании: количество в штуках
    def __add__(self, other: Any) -> "Dimensionless":
        if is_scalar(other):
            other = Dimensionless.each(other)
        return super().__add__(other)

    def __radd__(self, other: Any) -> "Dimensionless":
        return self.__add__(other)

    def __sub__(self, other: Any) -> "Dimensionless":
        if is_scalar(other):
            other = Dimensionless.each(other)
        return super().__sub__(other)

    def __float__(self) -> float:
        return self.to_each()
