"""
dimcalc — dimensional analysis for physical and financial quantities.

Quantities carry a value and a unit; only dimensionally valid operations
execute. Units convert within a dimension, related dimensions combine
through the operator graph (Length / Time → Velocity), and money converts
between currencies only through explicit exchange rates.
"""

from dimcalc.core import (
    CurrencyMismatchError,
    DimensionMismatchError,
    EmptyRangeError,
    InvalidExchangeRateError,
    LikeQuantityRatio,
    Outcome,
    Quantity,
    QuantityError,
    QuantityOverflowError,
    QuantityRange,
    QuantityRatio,
    Rate,
    UndefinedRatioError,
    UnitParseError,
    approx_eq,
    attempt,
)
from dimcalc.domain import (
    Acceleration,
    AccelerationUnit,
    Area,
    AreaUnit,
    Dimensionless,
    DimensionlessUnit,
    ElectricalResistance,
    ElectricalResistanceUnit,
    ElectricCharge,
    ElectricChargeUnit,
    ElectricCurrent,
    ElectricCurrentUnit,
    ElectricPotential,
    ElectricPotentialUnit,
    Energy,
    EnergyUnit,
    Force,
    ForceUnit,
    Length,
    LengthUnit,
    Mass,
    MassUnit,
    Power,
    PowerUnit,
    Pressure,
    PressureUnit,
    Temperature,
    TemperatureScale,
    Time,
    TimeUnit,
    Velocity,
    VelocityUnit,
    Volume,
    VolumeUnit,
)
from dimcalc.market import Currency, CurrencyExchangeRate, Money, Price, convert_money

__version__ = "0.1.0"

__all__ = [
    # Errors
    "QuantityError",
    "UnitParseError",
    "DimensionMismatchError",
    "CurrencyMismatchError",
    "UndefinedRatioError",
    "EmptyRangeError",
    "InvalidExchangeRateError",
    "QuantityOverflowError",
    # Core
    "Quantity",
    "QuantityRange",
    "QuantityRatio",
    "LikeQuantityRatio",
    "Rate",
    "approx_eq",
    "Outcome",
    "attempt",
    # Dimensions
    "Dimensionless",
    "DimensionlessUnit",
    "Length",
    "LengthUnit",
    "Area",
    "AreaUnit",
    "Volume",
    "VolumeUnit",
    "Time",
    "TimeUnit",
    "Velocity",
    "VelocityUnit",
    "Acceleration",
    "AccelerationUnit",
    "Force",
    "ForceUnit",
    "Pressure",
    "PressureUnit",
    "Mass",
    "MassUnit",
    "Energy",
    "EnergyUnit",
    "Power",
    "PowerUnit",
    "ElectricPotential",
    "ElectricPotentialUnit",
    "ElectricCurrent",
    "ElectricCurrentUnit",
    "ElectricalResistance",
    "ElectricalResistanceUnit",
    "ElectricCharge",
    "ElectricChargeUnit",
    "Temperature",
    "TemperatureScale",
    # Market
    "Currency",
    "Money",
    "CurrencyExchangeRate",
    "convert_money",
    "Price",
]
