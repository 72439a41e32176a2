"""
Currency Exchange Rate — явная конверсия между валютами

Курс "1 base = rate counter". Никакого неявного глобального контекста
курсов: каждая конверсия получает курс (или набор курсов) аргументом.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. base != counter
2. rate конечен и > 0
3. convert(inverse().convert(m)) == m с точностью float
"""

import logging
from typing import Any, Iterable

from pydantic import BaseModel

from dimcalc.core.errors import CurrencyMismatchError, InvalidExchangeRateError
from dimcalc.core.math.numerical_safeguards import checked_result, is_scalar, is_valid_float
from dimcalc.market.currency import Currency
from dimcalc.market.money import Money

logger = logging.getLogger(__name__)


class CurrencyExchangeRate(BaseModel):
    """
    Курс обмена base → counter.

    Attributes:
        base: Базовая валюта
        counter: Котируемая валюта
        rate: Сколько единиц counter стоит 1 единица base
    """

    base: Currency
    counter: Currency
    rate: float

    model_config = {"frozen": True}  # Immutable

    def __init__(self, base: Currency, counter: Currency, rate: float, **data: Any) -> None:
        if base is counter:
            raise InvalidExchangeRateError(
                f"Exchange rate requires different currencies, got {base}/{counter}"
            )

        if not is_scalar(rate) or not is_valid_float(rate) or rate <= 0:
            raise InvalidExchangeRateError(
                f"Exchange rate must be a finite positive number, got {rate!r}"
            )

        super().__init__(base=base, counter=counter, rate=float(rate), **data)

    def convert(self, money: Money) -> Money:
        """
        Конверсия суммы по курсу.

        base → counter: amount * rate
        counter → base: amount / rate

        Raises:
            CurrencyMismatchError: Валюта суммы не base и не counter
            QuantityOverflowError: Сконвертированная сумма переполнила float
        """
        if money.currency is self.base:
            converted = Money(checked_result(money.amount * self.rate, str(self)), self.counter)
        elif money.currency is self.counter:
            converted = Money(checked_result(money.amount / self.rate, str(self)), self.base)
        else:
            raise CurrencyMismatchError(
                f"Currency {money.currency.code} does not match rate {self}"
            )

        logger.debug("Converted %s to %s at %s", money, converted, self)
        return converted

    def inverse(self) -> "CurrencyExchangeRate":
        """Обратный курс counter → base."""
        return CurrencyExchangeRate(self.counter, self.base, 1.0 / self.rate)

    def links(self, source: Currency, target: Currency) -> bool:
        """Связывает ли курс две валюты (в любом направлении)."""
        return {source, target} == {self.base, self.counter}

    def __str__(self) -> str:
        return f"{self.base.code}/{self.counter.code} {self.rate}"

    def __repr__(self) -> str:
        return f"CurrencyExchangeRate({self.base.code!r}, {self.counter.code!r}, {self.rate!r})"


def convert_money(
    money: Money,
    target: Currency,
    rates: Iterable[CurrencyExchangeRate],
) -> Money:
    """
    Конверсия money в валюту target по первому подходящему курсу.

    Курс подходит, если связывает валюту суммы и target в любом
    направлении. Кросс-курсы (через третью валюту) не строятся.

    Args:
        money: Исходная сумма
        target: Целевая валюта
        rates: Доступные курсы

    Returns:
        Сумма в валюте target (та же сумма, если валюта совпадает)

    Raises:
        CurrencyMismatchError: Нет курса между валютами
    """
    if money.currency is target:
        return money

    for rate in rates:
        if rate.links(money.currency, target):
            return rate.convert(money)

    raise CurrencyMismatchError(
        f"No exchange rate between {money.currency.code} and {target.code}"
    )
