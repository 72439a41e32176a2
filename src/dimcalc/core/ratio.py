"""
Ratio — отношения между величинами

Обобщение Price на пару произвольных величин:

    density = QuantityRatio(Mass.kilograms(1), Volume.liters(1))
    density.convert_to_base(Volume.liters(5))      # → 5 kg
    density.convert_to_counter(Mass.kilograms(3))  # → 3 L

    LikeQuantityRatio(Length.meters(100), Length.meters(25)).ratio()  # → 4.0

    speed = Rate(Length.meters(10), Time.seconds(1))
    speed.times(Time.seconds(5))                   # → 50 m

Результат конверсии выражается в единице соответствующего члена отношения.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Оба члена отношения — Quantity с ненулевым значением
2. convert_to_counter(convert_to_base(q)) ≈ q
3. inverse().inverse() совпадает с исходным отношением
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

from dimcalc.core.errors import DimensionMismatchError, UndefinedRatioError
from dimcalc.core.math.numerical_safeguards import checked_divide
from dimcalc.core.quantity import Quantity

BaseT = TypeVar("BaseT", bound=Quantity)
CounterT = TypeVar("CounterT", bound=Quantity)


def _require_term(term: object, role: str) -> None:
    if not isinstance(term, Quantity):
        raise DimensionMismatchError(
            f"Ratio {role} must be a Quantity, got {type(term).__name__}"
        )
    if term.value == 0:
        raise UndefinedRatioError(f"Ratio with zero {role} is undefined: {term}")


def _require_like(quantity: object, term: Quantity, role: str) -> None:
    if not isinstance(quantity, Quantity) or quantity.unit_type is not term.unit_type:
        described = getattr(quantity, "dimension_name", None) or type(quantity).__name__
        raise DimensionMismatchError(
            f"Ratio {role} is {term.dimension_name}, cannot convert {described}"
        )


# =============================================================================
# QUANTITY RATIO
# =============================================================================


@dataclass(frozen=True)
class QuantityRatio(Generic[BaseT, CounterT]):
    """
    Отношение base : counter между величинами (возможно, разных размерностей).

    Attributes:
        base: Базовая величина (например, 1 kg)
        counter: Соответствующая ей величина (например, 1 L)
    """

    base: BaseT
    counter: CounterT

    def __post_init__(self) -> None:
        """
        Валидация членов отношения.

        Raises:
            DimensionMismatchError: Член отношения не величина
            UndefinedRatioError: Член отношения равен нулю
        """
        _require_term(self.base, "base")
        _require_term(self.counter, "counter")

    def convert_to_base(self, quantity: CounterT) -> BaseT:
        """
        (quantity / counter) * base, в единице base.

        Raises:
            DimensionMismatchError: quantity не той же размерности, что counter
        """
        _require_like(quantity, self.counter, "counter")
        scale = checked_divide(quantity.to_primary(), self.counter.to_primary(), str(self))
        return self.base * scale

    def convert_to_counter(self, quantity: BaseT) -> CounterT:
        """
        (quantity / base) * counter, в единице counter.

        Raises:
            DimensionMismatchError: quantity не той же размерности, что base
        """
        _require_like(quantity, self.base, "base")
        scale = checked_divide(quantity.to_primary(), self.base.to_primary(), str(self))
        return self.counter * scale

    def inverse(self) -> "QuantityRatio[CounterT, BaseT]":
        """Отношение counter : base."""
        return QuantityRatio(self.counter, self.base)

    def __str__(self) -> str:
        return f"{self.base} : {self.counter}"


# =============================================================================
# LIKE QUANTITY RATIO
# =============================================================================


@dataclass(frozen=True)
class LikeQuantityRatio(QuantityRatio[BaseT, BaseT]):
    """Отношение двух величин одной размерности (коэффициент, КПД, масштаб)."""

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.base.unit_type is not self.counter.unit_type:
            raise DimensionMismatchError(
                f"Like ratio requires one dimension, got "
                f"{self.base.dimension_name} and {self.counter.dimension_name}"
            )

    def ratio(self) -> float:
        """base / counter как безразмерное число."""
        return checked_divide(self.base.to_primary(), self.counter.to_primary(), str(self))

    def inverse_ratio(self) -> float:
        """counter / base."""
        return checked_divide(self.counter.to_primary(), self.base.to_primary(), str(self))

    def inverse(self) -> "LikeQuantityRatio[BaseT]":
        return LikeQuantityRatio(self.counter, self.base)


# =============================================================================
# RATE
# =============================================================================

NumeratorT = TypeVar("NumeratorT", bound=Quantity)
DenominatorT = TypeVar("DenominatorT", bound=Quantity)


@dataclass(frozen=True)
class Rate(Generic[NumeratorT, DenominatorT]):
    """
    Скорость изменения: numerator на denominator (10 m за 1 s).

    В отличие от графа операторов, Rate не требует объявленного отношения
    между размерностями и не создаёт производную размерность.
    """

    numerator: NumeratorT
    denominator: DenominatorT

    def __post_init__(self) -> None:
        if not isinstance(self.numerator, Quantity):
            raise DimensionMismatchError(
                f"Rate numerator must be a Quantity, got {type(self.numerator).__name__}"
            )
        _require_term(self.denominator, "denominator")

    def value(self) -> float:
        """numerator / denominator в первичных единицах."""
        return checked_divide(
            self.numerator.to_primary(), self.denominator.to_primary(), str(self)
        )

    def times(self, quantity: DenominatorT) -> NumeratorT:
        """
        (N / D) * D = N, в единице numerator.

        Raises:
            DimensionMismatchError: quantity не той же размерности, что denominator
        """
        _require_like(quantity, self.denominator, "denominator")
        scale = checked_divide(quantity.to_primary(), self.denominator.to_primary(), str(self))
        return self.numerator * scale

    def __str__(self) -> str:
        return f"{self.numerator}/{self.denominator}"
