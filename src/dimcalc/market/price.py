"""
Price[Q] — цена за количество величины

    Price(Money.usd(10), Length.meters(2))   # $10 за 2 m
    price * Length.meters(5)                 # → Money.usd(25)
    Money.usd(25) / price                    # → Length.meters(5)

Стоимость считается в единице unit_quantity:
    cost = money * (q.to(unit_quantity.unit) / unit_quantity.value)
"""

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from dimcalc.core.errors import CurrencyMismatchError, DimensionMismatchError, UndefinedRatioError
from dimcalc.core.math.numerical_safeguards import checked_divide, is_scalar
from dimcalc.core.quantity import Quantity
from dimcalc.market.exchange_rate import CurrencyExchangeRate
from dimcalc.market.money import Money

QuantityT = TypeVar("QuantityT", bound=Quantity)


@dataclass(frozen=True)
class Price(Generic[QuantityT]):
    """
    Цена: money за unit_quantity.

    Attributes:
        money: Стоимость
        unit_quantity: Количество, за которое указана стоимость (не ноль)
    """

    money: Money
    unit_quantity: QuantityT

    def __post_init__(self) -> None:
        """
        Валидация цены.

        Raises:
            TypeError: money не Money
            DimensionMismatchError: unit_quantity не величина
            UndefinedRatioError: unit_quantity равно нулю
        """
        if not isinstance(self.money, Money):
            raise TypeError(f"Price money must be Money, got {type(self.money).__name__}")

        if not isinstance(self.unit_quantity, Quantity):
            raise DimensionMismatchError(
                f"Price unit quantity must be a Quantity, got {type(self.unit_quantity).__name__}"
            )

        if self.unit_quantity.value == 0:
            raise UndefinedRatioError(f"Price per zero quantity is undefined: {self.unit_quantity}")

    def per_unit_amount(self) -> float:
        """Сумма за одну единицу unit_quantity.unit."""
        return self.money.amount / self.unit_quantity.value

    def cost_of(self, quantity: QuantityT) -> Money:
        """
        Стоимость quantity по этой цене.

        Raises:
            DimensionMismatchError: quantity другой размерности
        """
        if not isinstance(quantity, Quantity) or quantity.unit_type is not self.unit_quantity.unit_type:
            raise DimensionMismatchError(
                f"Price per {self.unit_quantity.dimension_name} cannot be applied to "
                f"{getattr(quantity, 'dimension_name', None) or type(quantity).__name__}"
            )

        ratio = quantity.to(self.unit_quantity.unit) / self.unit_quantity.value
        return self.money * ratio

    def quantity_for(self, money: Money) -> QuantityT:
        """
        Количество, которое можно купить на money.

        Raises:
            CurrencyMismatchError: Валюта money не совпадает с валютой цены
            UndefinedRatioError: Цена равна нулю
        """
        if money.currency is not self.money.currency:
            raise CurrencyMismatchError(
                f"Cannot spend {money.currency.code} at a {self.money.currency.code} price"
            )

        ratio = checked_divide(money.amount, self.money.amount, "Money / Price")
        return self.unit_quantity * ratio

    def convert(self, rate: CurrencyExchangeRate) -> "Price[QuantityT]":
        """Та же цена в другой валюте по курсу rate."""
        return Price(rate.convert(self.money), self.unit_quantity)

    def __mul__(self, other: Any) -> Any:
        if is_scalar(other):
            return Price(self.money * other, self.unit_quantity)
        if isinstance(other, Quantity):
            return self.cost_of(other)
        return NotImplemented

    def __rmul__(self, other: Any) -> Any:
        return self.__mul__(other)

    def __truediv__(self, other: Any) -> "Price[QuantityT]":
        if is_scalar(other):
            return Price(self.money / other, self.unit_quantity)
        return NotImplemented

    def __rtruediv__(self, other: Any) -> QuantityT:
        if isinstance(other, Money):
            return self.quantity_for(other)
        return NotImplemented

    def __str__(self) -> str:
        return f"{self.money}/{self.unit_quantity}"
