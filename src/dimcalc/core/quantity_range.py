"""
QuantityRange — замкнутый интервал [lower, upper] одной размерности

ПОЛИТИКА: lower > upper отклоняется (EmptyRangeError), границы не
переставляются молча. lower == upper допустим (вырожденный интервал).

Границы хранятся в своих исходных единицах; все сравнения выполняются
по значениям в первичной единице.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

from dimcalc.core.errors import DimensionMismatchError, EmptyRangeError
from dimcalc.core.quantity import Quantity

QuantityT = TypeVar("QuantityT", bound=Quantity)


@dataclass(frozen=True)
class QuantityRange(Generic[QuantityT]):
    """
    Интервал величин с включёнными границами.

    Attributes:
        lower: Нижняя граница
        upper: Верхняя граница (той же размерности, upper >= lower)
    """

    lower: QuantityT
    upper: QuantityT

    def __post_init__(self) -> None:
        """
        Валидация границ.

        Raises:
            DimensionMismatchError: Границы разных размерностей
            EmptyRangeError: lower > upper
        """
        if not isinstance(self.lower, Quantity) or not isinstance(self.upper, Quantity):
            raise DimensionMismatchError("Range bounds must be quantities")

        if self.lower.unit_type is not self.upper.unit_type:
            raise DimensionMismatchError(
                f"Range bounds must share a dimension, got "
                f"{self.lower.dimension_name} and {self.upper.dimension_name}"
            )

        if self.lower > self.upper:
            raise EmptyRangeError(f"Empty range: lower {self.lower} > upper {self.upper}")

    # -------------------------------------------------------------------------
    # Принадлежность
    # -------------------------------------------------------------------------

    def contains(self, value: QuantityT) -> bool:
        """lower <= value <= upper (границы включены)."""
        return self.lower <= value <= self.upper

    def __contains__(self, value: object) -> bool:
        return self.contains(value)

    def size(self) -> QuantityT:
        """Ширина интервала в единице нижней границы."""
        return self.upper.in_unit(self.lower.unit) - self.lower

    def overlaps(self, other: "QuantityRange[QuantityT]") -> bool:
        """Есть ли общие точки (касание границами считается пересечением)."""
        return self.lower <= other.upper and other.lower <= self.upper

    def includes_range(self, other: "QuantityRange[QuantityT]") -> bool:
        """Содержит ли интервал другой интервал целиком."""
        return self.lower <= other.lower and other.upper <= self.upper

    # -------------------------------------------------------------------------
    # Преобразования
    # -------------------------------------------------------------------------

    def shift(self, delta: QuantityT) -> "QuantityRange[QuantityT]":
        """Сдвиг обеих границ на delta."""
        return QuantityRange(self.lower + delta, self.upper + delta)

    def increment(self) -> "QuantityRange[QuantityT]":
        """Следующий смежный интервал той же ширины: [upper, upper + size]."""
        return self.shift(self.size())

    def decrement(self) -> "QuantityRange[QuantityT]":
        """Предыдущий смежный интервал той же ширины: [lower - size, lower]."""
        return self.shift(-self.size())

    def expand(self, margin: QuantityT) -> "QuantityRange[QuantityT]":
        """
        Расширение на margin с каждой стороны.

        Raises:
            EmptyRangeError: Отрицательный margin делает интервал пустым
        """
        return QuantityRange(self.lower - margin, self.upper + margin)

    def contract(self, margin: QuantityT) -> "QuantityRange[QuantityT]":
        """
        Сужение на margin с каждой стороны.

        Raises:
            EmptyRangeError: margin больше половины ширины
        """
        return QuantityRange(self.lower + margin, self.upper - margin)

    def divide(self, parts: int) -> list["QuantityRange[QuantityT]"]:
        """
        Разбиение на parts равных смежных интервалов.

        Последний интервал заканчивается точно в upper.

        Raises:
            ValueError: parts < 1
        """
        if parts < 1:
            raise ValueError(f"parts must be >= 1, got {parts}")

        step = self.size() / parts
        ranges = []
        start = self.lower
        for index in range(parts):
            end = self.upper if index == parts - 1 else self.lower + step * (index + 1)
            ranges.append(QuantityRange(start, end))
            start = end
        return ranges

    def to_tuple(self) -> tuple[QuantityT, QuantityT]:
        return self.lower, self.upper

    def __str__(self) -> str:
        return f"[{self.lower}, {self.upper}]"
