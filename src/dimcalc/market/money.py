"""
Money — сумма в конкретной валюте

Арифметика между суммами возможна только в одной валюте. Конверсия
между валютами выполняется только явно, через CurrencyExchangeRate.

Money / Quantity даёт Price, Money / Price даёт Quantity.
"""

from typing import Any

from pydantic import BaseModel, field_validator

from dimcalc.core.errors import CurrencyMismatchError, DimensionMismatchError, UnitParseError
from dimcalc.core.math.numerical_safeguards import (
    checked_divide,
    checked_result,
    is_scalar,
    validate_finite,
)
from dimcalc.core.quantity import Quantity, split_value_and_symbol
from dimcalc.market.currency import Currency


class Money(BaseModel):
    """
    Сумма (amount, currency).

    Равенство — одинаковые валюта и сумма; порядок между разными
    валютами не определён (CurrencyMismatchError).
    """

    amount: float
    currency: Currency

    model_config = {"frozen": True}  # Immutable

    def __init__(self, amount: float, currency: Currency, **data: Any) -> None:
        if isinstance(currency, str):
            currency = Currency.from_code(currency)
        elif not isinstance(currency, Currency):
            raise TypeError(f"Money requires a Currency, got {currency!r}")

        super().__init__(amount=amount, currency=currency, **data)

    @field_validator("amount", mode="before")
    @classmethod
    def validate_amount(cls, v: Any) -> float:
        """Сумма: конечное вещественное число."""
        return validate_finite(v, "Money amount")

    @classmethod
    def usd(cls, amount: float) -> "Money":
        return cls(amount, Currency.USD)

    @classmethod
    def eur(cls, amount: float) -> "Money":
        return cls(amount, Currency.EUR)

    @classmethod
    def gbp(cls, amount: float) -> "Money":
        return cls(amount, Currency.GBP)

    @classmethod
    def jpy(cls, amount: float) -> "Money":
        return cls(amount, Currency.JPY)

    @classmethod
    def chf(cls, amount: float) -> "Money":
        return cls(amount, Currency.CHF)

    @classmethod
    def cad(cls, amount: float) -> "Money":
        return cls(amount, Currency.CAD)

    @classmethod
    def aud(cls, amount: float) -> "Money":
        return cls(amount, Currency.AUD)

    @classmethod
    def cny(cls, amount: float) -> "Money":
        return cls(amount, Currency.CNY)

    @classmethod
    def inr(cls, amount: float) -> "Money":
        return cls(amount, Currency.INR)

    @classmethod
    def btc(cls, amount: float) -> "Money":
        return cls(amount, Currency.BTC)

    @classmethod
    def parse(cls, text: str) -> "Money":
        """
        Разбор "100 USD" или "29.99 eur".

        Raises:
            UnitParseError: Некорректное число или неизвестный код валюты
        """
        amount, code = split_value_and_symbol(text, "Money")
        try:
            currency = Currency.from_code(code)
        except UnitParseError:
            raise UnitParseError(code, "Money", text, "unknown currency code") from None
        return cls(amount, currency)

    # -------------------------------------------------------------------------
    # Отображение
    # -------------------------------------------------------------------------

    def to_formatted_string(self) -> str:
        """Символ + сумма с точностью валюты: "$29.99", "¥1000", "-€5.00"."""
        sign = "-" if self.amount < 0 else ""
        return f"{sign}{self.currency.symbol}{abs(self.amount):.{self.currency.decimals}f}"

    def __str__(self) -> str:
        return f"{self.amount} {self.currency.code}"

    def __repr__(self) -> str:
        return f"Money({self.amount!r}, {self.currency.code!r})"

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.currency is other.currency and self.amount == other.amount

    def __hash__(self) -> int:
        return hash((self.currency, self.amount))

    def __lt__(self, other: "Money") -> bool:
        self._require_same_currency(other, "<")
        return self.amount < other.amount

    def __le__(self, other: "Money") -> bool:
        self._require_same_currency(other, "<=")
        return self.amount <= other.amount

    def __gt__(self, other: "Money") -> bool:
        self._require_same_currency(other, ">")
        return self.amount > other.amount

    def __ge__(self, other: "Money") -> bool:
        self._require_same_currency(other, ">=")
        return self.amount >= other.amount

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def __add__(self, other: "Money") -> "Money":
        self._require_same_currency(other, "+")
        return self._with_amount(self.amount + other.amount)

    def __sub__(self, other: "Money") -> "Money":
        self._require_same_currency(other, "-")
        return self._with_amount(self.amount - other.amount)

    def __mul__(self, other: Any) -> "Money":
        if is_scalar(other):
            return self._with_amount(self.amount * other)
        return NotImplemented

    def __rmul__(self, other: Any) -> "Money":
        return self.__mul__(other)

    def __truediv__(self, other: Any) -> Any:
        """
        Money / number → Money
        Money / Money (одна валюта) → float
        Money / Quantity → Price
        Money / Price → Quantity (Price.__rtruediv__)
        """
        if is_scalar(other):
            return self._with_amount(checked_divide(self.amount, other, "Money / scalar"))

        if isinstance(other, Money):
            self._require_same_currency(other, "/")
            return checked_divide(self.amount, other.amount, "Money / Money")

        if isinstance(other, Quantity):
            from dimcalc.market.price import Price

            return Price(self, other)

        return NotImplemented

    def __neg__(self) -> "Money":
        return self._with_amount(-self.amount)

    def __abs__(self) -> "Money":
        return self._with_amount(abs(self.amount))

    def _with_amount(self, amount: float) -> "Money":
        return Money(checked_result(amount, f"{self.currency.code} arithmetic"), self.currency)

    def _require_same_currency(self, other: object, operation: str) -> None:
        if not isinstance(other, Money):
            raise DimensionMismatchError(
                f"Cannot apply {operation} to Money and {type(other).__name__}"
            )
        if other.currency is not self.currency:
            raise CurrencyMismatchError(
                f"Cannot apply {operation} to {self.currency.code} and {other.currency.code}"
            )
