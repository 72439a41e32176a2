"""
Electro — напряжение, ток, сопротивление, заряд

Первичные единицы: V, A, Ω, C.
"""

from typing import ClassVar, Optional

from dimcalc.core.quantity import Quantity
from dimcalc.core.unit import KILO, MEGA, MICRO, MILLI, UnitOfMeasure
from dimcalc.domain.time import SECONDS_PER_HOUR


class ElectricPotentialUnit(UnitOfMeasure):
    VOLTS = ("V", 1.0)
    MICROVOLTS = ("µV", MICRO)
    MILLIVOLTS = ("mV", MILLI)
    KILOVOLTS = ("kV", KILO)
    MEGAVOLTS = ("MV", MEGA)


class ElectricPotential(Quantity):
    dimension_name: ClassVar[str] = "ElectricPotential"
    unit_type: ClassVar[Optional[type[UnitOfMeasure]]] = ElectricPotentialUnit
    si_unit: ClassVar[Optional[UnitOfMeasure]] = ElectricPotentialUnit.VOLTS

    unit: ElectricPotentialUnit

    @classmethod
    def volts(cls, value: float) -> "ElectricPotential":
        return cls(value, ElectricPotentialUnit.VOLTS)

    @classmethod
    def microvolts(cls, value: float) -> "ElectricPotential":
        return cls(value, ElectricPotentialUnit.MICROVOLTS)

    @classmethod
    def millivolts(cls, value: float) -> "ElectricPotential":
        return cls(value, ElectricPotentialUnit.MILLIVOLTS)

    @classmethod
    def kilovolts(cls, value: float) -> "ElectricPotential":
        return cls(value, ElectricPotentialUnit.KILOVOLTS)

    @classmethod
    def megavolts(cls, value: float) -> "ElectricPotential":
        return cls(value, ElectricPotentialUnit.MEGAVOLTS)

    def to_volts(self) -> float:
        return self.to(ElectricPotentialUnit.VOLTS)


class ElectricCurrentUnit(UnitOfMeasure):
    AMPERES = ("A", 1.0)
    MILLIAMPERES = ("mA", MILLI)


class ElectricCurrent(Quantity):
    dimension_name: ClassVar[str] = "ElectricCurrent"
    unit_type: ClassVar[Optional[type[UnitOfMeasure]]] = ElectricCurrentUnit
    si_unit: ClassVar[Optional[UnitOfMeasure]] = ElectricCurrentUnit.AMPERES

    unit: ElectricCurrentUnit

    @classmethod
    def amperes(cls, value: float) -> "ElectricCurrent":
        return cls(value, ElectricCurrentUnit.AMPERES)

    @classmethod
    def milliamperes(cls, value: float) -> "ElectricCurrent":
        return cls(value, ElectricCurrentUnit.MILLIAMPERES)

    def to_amperes(self) -> float:
        return self.to(ElectricCurrentUnit.AMPERES)


class ElectricalResistanceUnit(UnitOfMeasure):
    OHMS = ("Ω", 1.0)
    MILLIOHMS = ("mΩ", MILLI)
    KILOHMS = ("kΩ", KILO)
    MEGOHMS = ("MΩ", MEGA)


class ElectricalResistance(Quantity):
    dimension_name: ClassVar[str] = "ElectricalResistance"
    unit_type: ClassVar[Optional[type[UnitOfMeasure]]] = ElectricalResistanceUnit
    si_unit: ClassVar[Optional[UnitOfMeasure]] = ElectricalResistanceUnit.OHMS

    unit: ElectricalResistanceUnit

    @classmethod
    def ohms(cls, value: float) -> "ElectricalResistance":
        return cls(value, ElectricalResistanceUnit.OHMS)

    @classmethod
    def milliohms(cls, value: float) -> "ElectricalResistance":
        return cls(value, ElectricalResistanceUnit.MILLIOHMS)

    @classmethod
    def kilohms(cls, value: float) -> "ElectricalResistance":
        return cls(value, ElectricalResistanceUnit.KILOHMS)

    @classmethod
    def megohms(cls, value: float) -> "ElectricalResistance":
        return cls(value, ElectricalResistanceUnit.MEGOHMS)

    def to_ohms(self) -> float:
        return self.to(ElectricalResistanceUnit.OHMS)


class ElectricChargeUnit(UnitOfMeasure):
    COULOMBS = ("C", 1.0)
    MILLIAMPERE_HOURS = ("mAh", SECONDS_PER_HOUR * MILLI)
    AMPERE_HOURS = ("Ah", SECONDS_PER_HOUR)


class ElectricCharge(Quantity):
    dimension_name: ClassVar[str] = "ElectricCharge"
    unit_type: ClassVar[Optional[type[UnitOfMeasure]]] = ElectricChargeUnit
    si_unit: ClassVar[Optional[UnitOfMeasure]] = ElectricChargeUnit.COULOMBS

    unit: ElectricChargeUnit

    @classmethod
    def coulombs(cls, value: float) -> "ElectricCharge":
        return cls(value, ElectricChargeUnit.COULOMBS)

    @classmethod
    def milliampere_hours(cls, value: float) -> "ElectricCharge":
        return cls(value, ElectricChargeUnit.MILLIAMPERE_HOURS)

    @classmethod
    def ampere_hours(cls, value: float) -> "ElectricCharge":
        return cls(value, ElectricChargeUnit.AMPERE_HOURS)

    def to_coulombs(self) -> float:
        return self.to(ElectricChargeUnit.COULOMBS)
