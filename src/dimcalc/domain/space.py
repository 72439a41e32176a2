"""
Space — длина, площадь, объём

Первичные единицы: m, m², m³.
Имперские коэффициенты точные (международный ярд 1959 года).
"""

from typing import ClassVar, Final, Optional

from dimcalc.core.quantity import Quantity
from dimcalc.core.unit import CENTI, DECI, HECTO, KILO, MICRO, MILLI, NANO, UnitOfMeasure

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

FOOT_TO_METER: Final[float] = 0.3048
YARD_TO_METER: Final[float] = 0.9144
MILE_TO_METER: Final[float] = 1609.344
NAUTICAL_MILE_TO_METER: Final[float] = 1852.0
ASTRONOMICAL_UNIT_TO_METER: Final[float] = 1.495978707e11
LIGHT_YEAR_TO_METER: Final[float] = 9.4607304725808e15
PARSEC_TO_METER: Final[float] = 3.0856775814913673e16

US_GALLON_TO_CUBIC_METER: Final[float] = 0.003785411784


# =============================================================================
# LENGTH
# =============================================================================


class LengthUnit(UnitOfMeasure):
    ANGSTROMS = ("Å", 1e-10)
    NANOMETERS = ("nm", NANO)
    MICRONS = ("µm", MICRO)
    MILLIMETERS = ("mm", MILLI)
    CENTIMETERS = ("cm", CENTI)
    DECIMETERS = ("dm", DECI)
    METERS = ("m", 1.0)
    HECTOMETERS = ("hm", HECTO)
    KILOMETERS = ("km", KILO)
    INCHES = ("in", FOOT_TO_METER / 12.0)
    FEET = ("ft", FOOT_TO_METER)
    YARDS = ("yd", YARD_TO_METER)
    US_MILES = ("mi", MILE_TO_METER)
    NAUTICAL_MILES = ("nmi", NAUTICAL_MILE_TO_METER)
    ASTRONOMICAL_UNITS = ("au", ASTRONOMICAL_UNIT_TO_METER)
    LIGHT_YEARS = ("ly", LIGHT_YEAR_TO_METER)
    PARSECS = ("pc", PARSEC_TO_METER)


class Length(Quantity):
    dimension_name: ClassVar[str] = "Length"
    unit_type: ClassVar[Optional[type[UnitOfMeasure]]] = LengthUnit
    si_unit: ClassVar[Optional[UnitOfMeasure]] = LengthUnit.METERS

    unit: LengthUnit

    @classmethod
    def angstroms(cls, value: float) -> "Length":
        return cls(value, LengthUnit.ANGSTROMS)

    @classmethod
    def nanometers(cls, value: float) -> "Length":
        return cls(value, LengthUnit.NANOMETERS)

    @classmethod
    def microns(cls, value: float) -> "Length":
        return cls(value, LengthUnit.MICRONS)

    @classmethod
    def millimeters(cls, value: float) -> "Length":
        return cls(value, LengthUnit.MILLIMETERS)

    @classmethod
    def centimeters(cls, value: float) -> "Length":
        return cls(value, LengthUnit.CENTIMETERS)

    @classmethod
    def decimeters(cls, value: float) -> "Length":
        return cls(value, LengthUnit.DECIMETERS)

    @classmethod
    def meters(cls, value: float) -> "Length":
        return cls(value, LengthUnit.METERS)

    @classmethod
    def hectometers(cls, value: float) -> "Length":
        return cls(value, LengthUnit.HECTOMETERS)

    @classmethod
    def kilometers(cls, value: float) -> "Length":
        return cls(value, LengthUnit.KILOMETERS)

    @classmethod
    def inches(cls, value: float) -> "Length":
        return cls(value, LengthUnit.INCHES)

    @classmethod
    def feet(cls, value: float) -> "Length":
        return cls(value, LengthUnit.FEET)

    @classmethod
    def yards(cls, value: float) -> "Length":
        return cls(value, LengthUnit.YARDS)

    @classmethod
    def us_miles(cls, value: float) -> "Length":
        return cls(value, LengthUnit.US_MILES)

    @classmethod
    def nautical_miles(cls, value: float) -> "Length":
        return cls(value, LengthUnit.NAUTICAL_MILES)

    @classmethod
    def astronomical_units(cls, value: float) -> "Length":
        return cls(value, LengthUnit.ASTRONOMICAL_UNITS)

    @classmethod
    def light_years(cls, value: float) -> "Length":
        return cls(value, LengthUnit.LIGHT_YEARS)

    @classmethod
    def parsecs(cls, value: float) -> "Length":
        return cls(value, LengthUnit.PARSECS)

    def to_meters(self) -> float:
        return self.to(LengthUnit.METERS)

    def to_kilometers(self) -> float:
        return self.to(LengthUnit.KILOMETERS)

    def to_feet(self) -> float:
        return self.to(LengthUnit.FEET)

    def to_us_miles(self) -> float:
        return self.to(LengthUnit.US_MILES)


# =============================================================================
# AREA
# =============================================================================


class AreaUnit(UnitOfMeasure):
    SQUARE_MILLIMETERS = ("mm²", MILLI * MILLI)
    SQUARE_CENTIMETERS = ("cm²", CENTI * CENTI)
    SQUARE_METERS = ("m²", 1.0)
    SQUARE_KILOMETERS = ("km²", KILO * KILO)
    HECTARES = ("ha", 1e4)
    SQUARE_INCHES = ("in²", 0.00064516)
    SQUARE_FEET = ("ft²", 0.09290304)
    SQUARE_YARDS = ("yd²", 0.83612736)
    SQUARE_US_MILES = ("mi²", 2589988.110336)
    ACRES = ("ac", 4046.8564224)


class Area(Quantity):
    dimension_name: ClassVar[str] = "Area"
    unit_type: ClassVar[Optional[type[UnitOfMeasure]]] = AreaUnit
    si_unit: ClassVar[Optional[UnitOfMeasure]] = AreaUnit.SQUARE_METERS

    unit: AreaUnit

    @classmethod
    def square_millimeters(cls, value: float) -> "Area":
        return cls(value, AreaUnit.SQUARE_MILLIMETERS)

    @classmethod
    def square_centimeters(cls, value: float) -> "Area":
        return cls(value, AreaUnit.SQUARE_CENTIMETERS)

    @classmethod
    def square_meters(cls, value: float) -> "Area":
        return cls(value, AreaUnit.SQUARE_METERS)

    @classmethod
    def square_kilometers(cls, value: float) -> "Area":
        return cls(value, AreaUnit.SQUARE_KILOMETERS)

    @classmethod
    def hectares(cls, value: float) -> "Area":
        return cls(value, AreaUnit.HECTARES)

    @classmethod
    def square_inches(cls, value: float) -> "Area":
        return cls(value, AreaUnit.SQUARE_INCHES)

    @classmethod
    def square_feet(cls, value: float) -> "Area":
        return cls(value, AreaUnit.SQUARE_FEET)

    @classmethod
    def square_yards(cls, value: float) -> "Area":
        return cls(value, AreaUnit.SQUARE_YARDS)

    @classmethod
    def square_us_miles(cls, value: float) -> "Area":
        return cls(value, AreaUnit.SQUARE_US_MILES)

    @classmethod
    def acres(cls, value: float) -> "Area":
        return cls(value, AreaUnit.ACRES)

    def to_square_meters(self) -> float:
        return self.to(AreaUnit.SQUARE_METERS)

    def to_hectares(self) -> float:
        return self.to(AreaUnit.HECTARES)


# =============================================================================
# VOLUME
# =============================================================================


class VolumeUnit(UnitOfMeasure):
    CUBIC_MILLIMETERS = ("mm³", MILLI * MILLI * MILLI)
    CUBIC_CENTIMETERS = ("cm³", CENTI * CENTI * CENTI)
    CUBIC_METERS = ("m³", 1.0)
    CUBIC_KILOMETERS = ("km³", KILO * KILO * KILO)
    MILLILITERS = ("mL", CENTI * CENTI * CENTI)  # 1 mL = 1 cm³
    LITERS = ("L", DECI * DECI * DECI)  # 1 L = 1 dm³
    CUBIC_INCHES = ("in³", 1.6387064e-5)
    CUBIC_FEET = ("ft³", 0.028316846592)
    CUBIC_YARDS = ("yd³", 0.764554857984)
    US_FLUID_OUNCES = ("fl oz", US_GALLON_TO_CUBIC_METER / 128.0)
    US_CUPS = ("cup", US_GALLON_TO_CUBIC_METER / 16.0)
    US_PINTS = ("pt", US_GALLON_TO_CUBIC_METER / 8.0)
    US_QUARTS = ("qt", US_GALLON_TO_CUBIC_METER / 4.0)
    US_GALLONS = ("gal", US_GALLON_TO_CUBIC_METER)


class Volume(Quantity):
    dimension_name: ClassVar[str] = "Volume"
    unit_type: ClassVar[Optional[type[UnitOfMeasure]]] = VolumeUnit
    si_unit: ClassVar[Optional[UnitOfMeasure]] = VolumeUnit.CUBIC_METERS

    unit: VolumeUnit

    @classmethod
    def cubic_millimeters(cls, value: float) -> "Volume":
        return cls(value, VolumeUnit.CUBIC_MILLIMETERS)

    @classmethod
    def cubic_centimeters(cls, value: float) -> "Volume":
        return cls(value, VolumeUnit.CUBIC_CENTIMETERS)

    @classmethod
    def cubic_meters(cls, value: float) -> "Volume":
        return cls(value, VolumeUnit.CUBIC_METERS)

    @classmethod
    def cubic_kilometers(cls, value: float) -> "Volume":
        return cls(value, VolumeUnit.CUBIC_KILOMETERS)

    @classmethod
    def milliliters(cls, value: float) -> "Volume":
        return cls(value, VolumeUnit.MILLILITERS)

    @classmethod
    def liters(cls, value: float) -> "Volume":
        return cls(value, VolumeUnit.LITERS)

    @classmethod
    def cubic_inches(cls, value: float) -> "Volume":
        return cls(value, VolumeUnit.CUBIC_INCHES)

    @classmethod
    def cubic_feet(cls, value: float) -> "Volume":
        return cls(value, VolumeUnit.CUBIC_FEET)

    @classmethod
    def cubic_yards(cls, value: float) -> "Volume":
        return cls(value, VolumeUnit.CUBIC_YARDS)

    @classmethod
    def us_fluid_ounces(cls, value: float) -> "Volume":
        return cls(value, VolumeUnit.US_FLUID_OUNCES)

    @classmethod
    def us_cups(cls, value: float) -> "Volume":
        return cls(value, VolumeUnit.US_CUPS)

    @classmethod
    def us_pints(cls, value: float) -> "Volume":
        return cls(value, VolumeUnit.US_PINTS)

    @classmethod
    def us_quarts(cls, value: float) -> "Volume":
        return cls(value, VolumeUnit.US_QUARTS)

    @classmethod
    def us_gallons(cls, value: float) -> "Volume":
        return cls(value, VolumeUnit.US_GALLONS)

    def to_cubic_meters(self) -> float:
        return self.to(VolumeUnit.CUBIC_METERS)

    def to_liters(self) -> float:
        return self.to(VolumeUnit.LITERS)
