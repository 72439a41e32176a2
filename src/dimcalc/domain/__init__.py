"""
Concrete dimensions and their unit tables.

Importing this package also declares the cross-dimension relations and
freezes the operator graph.
"""

from dimcalc.domain import relations  # noqa: F401  (declares and freezes the graph)
from dimcalc.domain.dimensionless import Dimensionless, DimensionlessUnit
from dimcalc.domain.electro import (
    ElectricalResistance,
    ElectricalResistanceUnit,
    ElectricCharge,
    ElectricChargeUnit,
    ElectricCurrent,
    ElectricCurrentUnit,
    ElectricPotential,
    ElectricPotentialUnit,
)
from dimcalc.domain.energy import Energy, EnergyUnit, Power, PowerUnit
from dimcalc.domain.mass import Mass, MassUnit
from dimcalc.domain.motion import (
    Acceleration,
    AccelerationUnit,
    Force,
    ForceUnit,
    Pressure,
    PressureUnit,
    Velocity,
    VelocityUnit,
)
from dimcalc.domain.space import Area, AreaUnit, Length, LengthUnit, Volume, VolumeUnit
from dimcalc.domain.temperature import Temperature, TemperatureScale
from dimcalc.domain.time import Time, TimeUnit

__all__ = [
    # Dimensionless
    "Dimensionless",
    "DimensionlessUnit",
    # Space
    "Length",
    "LengthUnit",
    "Area",
    "AreaUnit",
    "Volume",
    "VolumeUnit",
    # Time
    "Time",
    "TimeUnit",
    # Motion
    "Velocity",
    "VelocityUnit",
    "Acceleration",
    "AccelerationUnit",
    "Force",
    "ForceUnit",
    "Pressure",
    "PressureUnit",
    # Mass
    "Mass",
    "MassUnit",
    # Energy
    "Energy",
    "EnergyUnit",
    "Power",
    "PowerUnit",
    # Electro
    "ElectricPotential",
    "ElectricPotentialUnit",
    "ElectricCurrent",
    "ElectricCurrentUnit",
    "ElectricalResistance",
    "ElectricalResistanceUnit",
    "ElectricCharge",
    "ElectricChargeUnit",
    # Temperature
    "Temperature",
    "TemperatureScale",
]
