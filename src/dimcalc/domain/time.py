"""
Time — длительность

Первичная единица: секунда.
"""

from typing import ClassVar, Final, Optional

from dimcalc.core.quantity import Quantity
from dimcalc.core.unit import MICRO, MILLI, NANO, UnitOfMeasure

SECONDS_PER_MINUTE: Final[float] = 60.0
SECONDS_PER_HOUR: Final[float] = 3600.0
SECONDS_PER_DAY: Final[float] = 86400.0


class TimeUnit(UnitOfMeasure):
    NANOSECONDS = ("ns", NANO)
    MICROSECONDS = ("µs", MICRO)
    MILLISECONDS = ("ms", MILLI)
    SECONDS = ("s", 1.0)
    MINUTES = ("min", SECONDS_PER_MINUTE)
    HOURS = ("h", SECONDS_PER_HOUR)
    DAYS = ("d", SECONDS_PER_DAY)


class Time(Quantity):
    dimension_name: ClassVar[str] = "Time"
    unit_type: ClassVar[Optional[type[UnitOfMeasure]]] = TimeUnit
    si_unit: ClassVar[Optional[UnitOfMeasure]] = TimeUnit.SECONDS

    unit: TimeUnit

    @classmethod
    def nanoseconds(cls, value: float) -> "Time":
        return cls(value, TimeUnit.NANOSECONDS)

    @classmethod
    def microseconds(cls, value: float) -> "Time":
        return cls(value, TimeUnit.MICROSECONDS)

    @classmethod
    def milliseconds(cls, value: float) -> "Time":
        return cls(value, TimeUnit.MILLISECONDS)

    @classmethod
    def seconds(cls, value: float) -> "Time":
        return cls(value, TimeUnit.SECONDS)

    @classmethod
    def minutes(cls, value: float) -> "Time":
        return cls(value, TimeUnit.MINUTES)

    @classmethod
    def hours(cls, value: float) -> "Time":
        return cls(value, TimeUnit.HOURS)

    @classmethod
    def days(cls, value: float) -> "Time":
        return cls(value, TimeUnit.DAYS)

    def to_seconds(self) -> float:
        return self.to(TimeUnit.SECONDS)

    def to_minutes(self) -> float:
        return self.to(TimeUnit.MINUTES)

    def to_hours(self) -> float:
        return self.to(TimeUnit.HOURS)

    def to_days(self) -> float:
        return self.to(TimeUnit.DAYS)
