"""
Relations — объявление межразмерностных отношений

Модуль выполняется один раз при импорте dimcalc и замораживает граф.
Каждое relate(product, left, right, scale) означает
product_p = left_p * right_p * scale в первичных единицах.
"""

from dimcalc.core.operator_graph import OPERATOR_GRAPH
from dimcalc.domain.dimensionless import Dimensionless
from dimcalc.domain.electro import (
    ElectricalResistance,
    ElectricCharge,
    ElectricCurrent,
    ElectricPotential,
)
from dimcalc.domain.energy import Energy, Power
from dimcalc.domain.mass import Mass
from dimcalc.domain.motion import Acceleration, Force, Pressure, Velocity
from dimcalc.domain.space import Area, Length, Volume
from dimcalc.domain.time import SECONDS_PER_HOUR, Time

# Пространство
OPERATOR_GRAPH.relate(Area, Length, Length)
OPERATOR_GRAPH.relate(Volume, Area, Length)

# Движение
OPERATOR_GRAPH.relate(Length, Velocity, Time)
OPERATOR_GRAPH.relate(Velocity, Acceleration, Time)
OPERATOR_GRAPH.relate(Force, Mass, Acceleration, scale=1e-3)  # g → kg
OPERATOR_GRAPH.relate(Force, Pressure, Area)

# Электричество и энергия
OPERATOR_GRAPH.relate(ElectricPotential, ElectricCurrent, ElectricalResistance)
OPERATOR_GRAPH.relate(Power, ElectricPotential, ElectricCurrent)
OPERATOR_GRAPH.relate(Energy, Power, Time, scale=1.0 / SECONDS_PER_HOUR)  # W·s → Wh
OPERATOR_GRAPH.relate(ElectricCharge, ElectricCurrent, Time)

OPERATOR_GRAPH.relate(Dimensionless, Dimensionless, Dimensionless)

OPERATOR_GRAPH.freeze()
