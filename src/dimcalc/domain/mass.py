"""
Mass — масса

Первичная единица: грамм (не килограмм). Отношение Force = Mass × Acceleration
поэтому объявляется с коэффициентом 1e-3.
"""

from typing import ClassVar, Final, Optional

from dimcalc.core.quantity import Quantity
from dimcalc.core.unit import KILO, MEGA, MICRO, MILLI, NANO, UnitOfMeasure

POUND_TO_GRAM: Final[float] = 453.59237
OUNCE_TO_GRAM: Final[float] = POUND_TO_GRAM / 16.0
TROY_GRAIN_TO_GRAM: Final[float] = 0.06479891


class MassUnit(UnitOfMeasure):
    NANOGRAMS = ("ng", NANO)
    MICROGRAMS = ("mcg", MICRO)
    MILLIGRAMS = ("mg", MILLI)
    GRAMS = ("g", 1.0)
    KILOGRAMS = ("kg", KILO)
    TONNES = ("t", MEGA)
    OUNCES = ("oz", OUNCE_TO_GRAM)
    POUNDS = ("lb", POUND_TO_GRAM)
    KILOPOUNDS = ("klb", POUND_TO_GRAM * KILO)
    STONE = ("st", POUND_TO_GRAM * 14.0)
    TROY_GRAINS = ("gr", TROY_GRAIN_TO_GRAM)
    PENNYWEIGHTS = ("dwt", TROY_GRAIN_TO_GRAM * 24.0)
    TROY_OUNCES = ("oz t", TROY_GRAIN_TO_GRAM * 480.0)
    TROY_POUNDS = ("lb t", TROY_GRAIN_TO_GRAM * 480.0 * 12.0)
    CARATS = ("ct", MILLI * 200.0)


class Mass(Quantity):
    dimension_name: ClassVar[str] = "Mass"
    unit_type: ClassVar[Optional[type[UnitOfMeasure]]] = MassUnit
    si_unit: ClassVar[Optional[UnitOfMeasure]] = MassUnit.KILOGRAMS

    unit: MassUnit

    @classmethod
    def nanograms(cls, value: float) -> "Mass":
        return cls(value, MassUnit.NANOGRAMS)

    @classmethod
    def micrograms(cls, value: float) -> "Mass":
        return cls(value, MassUnit.MICROGRAMS)

    @classmethod
    def milligrams(cls, value: float) -> "Mass":
        return cls(value, MassUnit.MILLIGRAMS)

    @classmethod
    def grams(cls, value: float) -> "Mass":
        return cls(value, MassUnit.GRAMS)

    @classmethod
    def kilograms(cls, value: float) -> "Mass":
        return cls(value, MassUnit.KILOGRAMS)

    @classmethod
    def tonnes(cls, value: float) -> "Mass":
        return cls(value, MassUnit.TONNES)

    @classmethod
    def ounces(cls, value: float) -> "Mass":
        return cls(value, MassUnit.OUNCES)

    @classmethod
    def pounds(cls, value: float) -> "Mass":
        return cls(value, MassUnit.POUNDS)

    @classmethod
    def kilopounds(cls, value: float) -> "Mass":
        return cls(value, MassUnit.KILOPOUNDS)

    @classmethod
    def stone(cls, value: float) -> "Mass":
        return cls(value, MassUnit.STONE)

    @classmethod
    def troy_grains(cls, value: float) -> "Mass":
        return cls(value, MassUnit.TROY_GRAINS)

    @classmethod
    def pennyweights(cls, value: float) -> "Mass":
        return cls(value, MassUnit.PENNYWEIGHTS)

    @classmethod
    def troy_ounces(cls, value: float) -> "Mass":
        return cls(value, MassUnit.TROY_OUNCES)

    @classmethod
    def troy_pounds(cls, value: float) -> "Mass":
        return cls(value, MassUnit.TROY_POUNDS)

    @classmethod
    def carats(cls, value: float) -> "Mass":
        return cls(value, MassUnit.CARATS)

    def to_grams(self) -> float:
        return self.to(MassUnit.GRAMS)

    def to_kilograms(self) -> float:
        return self.to(MassUnit.KILOGRAMS)

    def to_pounds(self) -> float:
        return self.to(MassUnit.POUNDS)
