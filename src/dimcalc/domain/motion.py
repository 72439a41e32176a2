"""
Motion — скорость, ускорение, сила, давление

Первичные единицы: m/s, m/s², N, Pa.
"""

from typing import ClassVar, Final, Optional

from dimcalc.core.quantity import Quantity
from dimcalc.core.unit import KILO, MEGA, MILLI, UnitOfMeasure
from dimcalc.domain.space import FOOT_TO_METER, MILE_TO_METER, NAUTICAL_MILE_TO_METER
from dimcalc.domain.time import SECONDS_PER_HOUR

STANDARD_GRAVITY: Final[float] = 9.80665
POUND_TO_KILOGRAM: Final[float] = 0.45359237

ATMOSPHERE_TO_PASCAL: Final[float] = 101325.0


# =============================================================================
# VELOCITY
# =============================================================================


class VelocityUnit(UnitOfMeasure):
    METERS_PER_SECOND = ("m/s", 1.0)
    MILLIMETERS_PER_SECOND = ("mm/s", MILLI)
    KILOMETERS_PER_SECOND = ("km/s", KILO)
    KILOMETERS_PER_HOUR = ("km/h", KILO / SECONDS_PER_HOUR)
    FEET_PER_SECOND = ("ft/s", FOOT_TO_METER)
    MILES_PER_HOUR = ("mph", MILE_TO_METER / SECONDS_PER_HOUR)
    KNOTS = ("kn", NAUTICAL_MILE_TO_METER / SECONDS_PER_HOUR)


class Velocity(Quantity):
    dimension_name: ClassVar[str] = "Velocity"
    unit_type: ClassVar[Optional[type[UnitOfMeasure]]] = VelocityUnit
    si_unit: ClassVar[Optional[UnitOfMeasure]] = VelocityUnit.METERS_PER_SECOND

    unit: VelocityUnit

    @classmethod
    def meters_per_second(cls, value: float) -> "Velocity":
        return cls(value, VelocityUnit.METERS_PER_SECOND)

    @classmethod
    def millimeters_per_second(cls, value: float) -> "Velocity":
        return cls(value, VelocityUnit.MILLIMETERS_PER_SECOND)

    @classmethod
    def kilometers_per_second(cls, value: float) -> "Velocity":
        return cls(value, VelocityUnit.KILOMETERS_PER_SECOND)

    @classmethod
    def kilometers_per_hour(cls, value: float) -> "Velocity":
        return cls(value, VelocityUnit.KILOMETERS_PER_HOUR)

    @classmethod
    def feet_per_second(cls, value: float) -> "Velocity":
        return cls(value, VelocityUnit.FEET_PER_SECOND)

    @classmethod
    def miles_per_hour(cls, value: float) -> "Velocity":
        return cls(value, VelocityUnit.MILES_PER_HOUR)

    @classmethod
    def knots(cls, value: float) -> "Velocity":
        return cls(value, VelocityUnit.KNOTS)

    def to_meters_per_second(self) -> float:
        return self.to(VelocityUnit.METERS_PER_SECOND)

    def to_kilometers_per_hour(self) -> float:
        return self.to(VelocityUnit.KILOMETERS_PER_HOUR)


# =============================================================================
# ACCELERATION
# =============================================================================


class AccelerationUnit(UnitOfMeasure):
    METERS_PER_SECOND_SQUARED = ("m/s²", 1.0)
    MILLIMETERS_PER_SECOND_SQUARED = ("mm/s²", MILLI)
    FEET_PER_SECOND_SQUARED = ("ft/s²", FOOT_TO_METER)
    MILES_PER_HOUR_SQUARED = ("mph²", MILE_TO_METER / (SECONDS_PER_HOUR * SECONDS_PER_HOUR))
    EARTH_GRAVITIES = ("g", STANDARD_GRAVITY)


class Acceleration(Quantity):
    dimension_name: ClassVar[str] = "Acceleration"
    unit_type: ClassVar[Optional[type[UnitOfMeasure]]] = AccelerationUnit
    si_unit: ClassVar[Optional[UnitOfMeasure]] = AccelerationUnit.METERS_PER_SECOND_SQUARED

    unit: AccelerationUnit

    @classmethod
    def meters_per_second_squared(cls, value: float) -> "Acceleration":
        return cls(value, AccelerationUnit.METERS_PER_SECOND_SQUARED)

    @classmethod
    def millimeters_per_second_squared(cls, value: float) -> "Acceleration":
        return cls(value, AccelerationUnit.MILLIMETERS_PER_SECOND_SQUARED)

    @classmethod
    def feet_per_second_squared(cls, value: float) -> "Acceleration":
        return cls(value, AccelerationUnit.FEET_PER_SECOND_SQUARED)

    @classmethod
    def miles_per_hour_squared(cls, value: float) -> "Acceleration":
        return cls(value, AccelerationUnit.MILES_PER_HOUR_SQUARED)

    @classmethod
    def earth_gravities(cls, value: float) -> "Acceleration":
        return cls(value, AccelerationUnit.EARTH_GRAVITIES)

    def to_meters_per_second_squared(self) -> float:
        return self.to(AccelerationUnit.METERS_PER_SECOND_SQUARED)

    def to_earth_gravities(self) -> float:
        return self.to(AccelerationUnit.EARTH_GRAVITIES)


# =============================================================================
# FORCE
# =============================================================================


class ForceUnit(UnitOfMeasure):
    NEWTONS = ("N", 1.0)
    KILONEWTONS = ("kN", KILO)
    KILOGRAM_FORCE = ("kgf", STANDARD_GRAVITY)
    POUND_FORCE = ("lbf", POUND_TO_KILOGRAM * STANDARD_GRAVITY)
    DYNES = ("dyn", 1e-5)


class Force(Quantity):
    dimension_name: ClassVar[str] = "Force"
    unit_type: ClassVar[Optional[type[UnitOfMeasure]]] = ForceUnit
    si_unit: ClassVar[Optional[UnitOfMeasure]] = ForceUnit.NEWTONS

    unit: ForceUnit

    @classmethod
    def newtons(cls, value: float) -> "Force":
        return cls(value, ForceUnit.NEWTONS)

    @classmethod
    def kilonewtons(cls, value: float) -> "Force":
        return cls(value, ForceUnit.KILONEWTONS)

    @classmethod
    def kilogram_force(cls, value: float) -> "Force":
        return cls(value, ForceUnit.KILOGRAM_FORCE)

    @classmethod
    def pound_force(cls, value: float) -> "Force":
        return cls(value, ForceUnit.POUND_FORCE)

    @classmethod
    def dynes(cls, value: float) -> "Force":
        return cls(value, ForceUnit.DYNES)

    def to_newtons(self) -> float:
        return self.to(ForceUnit.NEWTONS)


# =============================================================================
# PRESSURE
# =============================================================================


class PressureUnit(UnitOfMeasure):
    PASCALS = ("Pa", 1.0)
    KILOPASCALS = ("kPa", KILO)
    MEGAPASCALS = ("MPa", MEGA)
    BARS = ("bar", 1e5)
    POUNDS_PER_SQUARE_INCH = ("psi", 6894.757293168)
    ATMOSPHERES = ("atm", ATMOSPHERE_TO_PASCAL)
    MILLIMETERS_OF_MERCURY = ("mmHg", 133.322387415)
    INCHES_OF_MERCURY = ("inHg", 3386.389)
    TORR = ("Torr", ATMOSPHERE_TO_PASCAL / 760.0)


class Pressure(Quantity):
    dimension_name: ClassVar[str] = "Pressure"
    unit_type: ClassVar[Optional[type[UnitOfMeasure]]] = PressureUnit
    si_unit: ClassVar[Optional[UnitOfMeasure]] = PressureUnit.PASCALS

    unit: PressureUnit

    @classmethod
    def pascals(cls, value: float) -> "Pressure":
        return cls(value, PressureUnit.PASCALS)

    @classmethod
    def kilopascals(cls, value: float) -> "Pressure":
        return cls(value, PressureUnit.KILOPASCALS)

    @classmethod
    def megapascals(cls, value: float) -> "Pressure":
        return cls(value, PressureUnit.MEGAPASCALS)

    @classmethod
    def bars(cls, value: float) -> "Pressure":
        return cls(value, PressureUnit.BARS)

    @classmethod
    def pounds_per_square_inch(cls, value: float) -> "Pressure":
        return cls(value, PressureUnit.POUNDS_PER_SQUARE_INCH)

    @classmethod
    def atmospheres(cls, value: float) -> "Pressure":
        return cls(value, PressureUnit.ATMOSPHERES)

    @classmethod
    def millimeters_of_mercury(cls, value: float) -> "Pressure":
        return cls(value, PressureUnit.MILLIMETERS_OF_MERCURY)

    @classmethod
    def inches_of_mercury(cls, value: float) -> "Pressure":
        return cls(value, PressureUnit.INCHES_OF_MERCURY)

    @classmethod
    def torr(cls, value: float) -> "Pressure":
        return cls(value, PressureUnit.TORR)

    def to_pascals(self) -> float:
        return self.to(PressureUnit.PASCALS)

    def to_bars(self) -> float:
        return self.to(PressureUnit.BARS)
