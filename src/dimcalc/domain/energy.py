"""
Energy — энергия и мощность

Первичные единицы: Wh (энергия) и W (мощность). Поэтому
Energy = Power × Time объявляется с коэффициентом 1/3600
(W·s → Wh).
"""

from typing import ClassVar, Final, Optional

from dimcalc.core.quantity import Quantity
from dimcalc.core.unit import GIGA, KILO, MEGA, MILLI, UnitOfMeasure
from dimcalc.domain.time import SECONDS_PER_HOUR

JOULE_TO_WATT_HOUR: Final[float] = 1.0 / SECONDS_PER_HOUR
BTU_TO_JOULE: Final[float] = 1055.05585262  # International Table BTU
BTU_TO_WATT_HOUR: Final[float] = BTU_TO_JOULE * JOULE_TO_WATT_HOUR
ELECTRON_VOLT_TO_JOULE: Final[float] = 1.602176565e-19
CALORIE_TO_JOULE: Final[float] = 4.184

HORSEPOWER_TO_WATT: Final[float] = 745.7


# =============================================================================
# ENERGY
# =============================================================================


class EnergyUnit(UnitOfMeasure):
    WATT_HOURS = ("Wh", 1.0)
    MILLIWATT_HOURS = ("mWh", MILLI)
    KILOWATT_HOURS = ("kWh", KILO)
    MEGAWATT_HOURS = ("MWh", MEGA)
    GIGAWATT_HOURS = ("GWh", GIGA)
    JOULES = ("J", JOULE_TO_WATT_HOUR)
    KILOJOULES = ("kJ", JOULE_TO_WATT_HOUR * KILO)
    MEGAJOULES = ("MJ", JOULE_TO_WATT_HOUR * MEGA)
    GIGAJOULES = ("GJ", JOULE_TO_WATT_HOUR * GIGA)
    BRITISH_THERMAL_UNITS = ("BTU", BTU_TO_WATT_HOUR)
    MMBTUS = ("MMBtu", BTU_TO_WATT_HOUR * MEGA)
    ELECTRON_VOLTS = ("eV", ELECTRON_VOLT_TO_JOULE * JOULE_TO_WATT_HOUR)
    CALORIES = ("cal", CALORIE_TO_JOULE * JOULE_TO_WATT_HOUR)
    KILOCALORIES = ("kcal", CALORIE_TO_JOULE * JOULE_TO_WATT_HOUR * KILO)


class Energy(Quantity):
    dimension_name: ClassVar[str] = "Energy"
    unit_type: ClassVar[Optional[type[UnitOfMeasure]]] = EnergyUnit
    si_unit: ClassVar[Optional[UnitOfMeasure]] = EnergyUnit.JOULES

    unit: EnergyUnit

    @classmethod
    def watt_hours(cls, value: float) -> "Energy":
        return cls(value, EnergyUnit.WATT_HOURS)

    @classmethod
    def milliwatt_hours(cls, value: float) -> "Energy":
        return cls(value, EnergyUnit.MILLIWATT_HOURS)

    @classmethod
    def kilowatt_hours(cls, value: float) -> "Energy":
        return cls(value, EnergyUnit.KILOWATT_HOURS)

    @classmethod
    def megawatt_hours(cls, value: float) -> "Energy":
        return cls(value, EnergyUnit.MEGAWATT_HOURS)

    @classmethod
    def gigawatt_hours(cls, value: float) -> "Energy":
        return cls(value, EnergyUnit.GIGAWATT_HOURS)

    @classmethod
    def joules(cls, value: float) -> "Energy":
        return cls(value, EnergyUnit.JOULES)

    @classmethod
    def kilojoules(cls, value: float) -> "Energy":
        return cls(value, EnergyUnit.KILOJOULES)

    @classmethod
    def megajoules(cls, value: float) -> "Energy":
        return cls(value, EnergyUnit.MEGAJOULES)

    @classmethod
    def gigajoules(cls, value: float) -> "Energy":
        return cls(value, EnergyUnit.GIGAJOULES)

    @classmethod
    def british_thermal_units(cls, value: float) -> "Energy":
        return cls(value, EnergyUnit.BRITISH_THERMAL_UNITS)

    @classmethod
    def mmbtus(cls, value: float) -> "Energy":
        return cls(value, EnergyUnit.MMBTUS)

    @classmethod
    def electron_volts(cls, value: float) -> "Energy":
        return cls(value, EnergyUnit.ELECTRON_VOLTS)

    @classmethod
    def calories(cls, value: float) -> "Energy":
        return cls(value, EnergyUnit.CALORIES)

    @classmethod
    def kilocalories(cls, value: float) -> "Energy":
        return cls(value, EnergyUnit.KILOCALORIES)

    def to_watt_hours(self) -> float:
        return self.to(EnergyUnit.WATT_HOURS)

    def to_kilowatt_hours(self) -> float:
        return self.to(EnergyUnit.KILOWATT_HOURS)

    def to_joules(self) -> float:
        return self.to(EnergyUnit.JOULES)


# =============================================================================
# POWER
# =============================================================================


class PowerUnit(UnitOfMeasure):
    WATTS = ("W", 1.0)
    MILLIWATTS = ("mW", MILLI)
    KILOWATTS = ("kW", KILO)
    MEGAWATTS = ("MW", MEGA)
    GIGAWATTS = ("GW", GIGA)
    BTUS_PER_HOUR = ("BTU/h", BTU_TO_JOULE / SECONDS_PER_HOUR)
    ERGS_PER_SECOND = ("erg/s", 1e-7)
    HORSEPOWER = ("hp", HORSEPOWER_TO_WATT)


class Power(Quantity):
    dimension_name: ClassVar[str] = "Power"
    unit_type: ClassVar[Optional[type[UnitOfMeasure]]] = PowerUnit
    si_unit: ClassVar[Optional[UnitOfMeasure]] = PowerUnit.WATTS

    unit: PowerUnit

    @classmethod
    def watts(cls, value: float) -> "Power":
        return cls(value, PowerUnit.WATTS)

    @classmethod
    def milliwatts(cls, value: float) -> "Power":
        return cls(value, PowerUnit.MILLIWATTS)

    @classmethod
    def kilowatts(cls, value: float) -> "Power":
        return cls(value, PowerUnit.KILOWATTS)

    @classmethod
    def megawatts(cls, value: float) -> "Power":
        return cls(value, PowerUnit.MEGAWATTS)

    @classmethod
    def gigawatts(cls, value: float) -> "Power":
        return cls(value, PowerUnit.GIGAWATTS)

    @classmethod
    def btus_per_hour(cls, value: float) -> "Power":
        return cls(value, PowerUnit.BTUS_PER_HOUR)

    @classmethod
    def ergs_per_second(cls, value: float) -> "Power":
        return cls(value, PowerUnit.ERGS_PER_SECOND)

    @classmethod
    def horsepower(cls, value: float) -> "Power":
        return cls(value, PowerUnit.HORSEPOWER)

    def to_watts(self) -> float:
        return self.to(PowerUnit.WATTS)

    def to_kilowatts(self) -> float:
        return self.to(PowerUnit.KILOWATTS)
