"""
Currency — закрытый набор валют

Каждая валюта: (code, display_name, symbol, decimals). decimals — число
знаков после запятой для отображения (JPY: 0, BTC: 8).
"""

from enum import Enum

from dimcalc.core.errors import UnitParseError


class Currency(Enum):
    USD = ("USD", "US Dollar", "$", 2)
    EUR = ("EUR", "Euro", "€", 2)
    GBP = ("GBP", "British Pound Sterling", "£", 2)
    JPY = ("JPY", "Japanese Yen", "¥", 0)
    CHF = ("CHF", "Swiss Franc", "CHF", 2)
    CAD = ("CAD", "Canadian Dollar", "C$", 2)
    AUD = ("AUD", "Australian Dollar", "A$", 2)
    CNY = ("CNY", "Chinese Yuan Renminbi", "¥", 2)
    INR = ("INR", "Indian Rupee", "₹", 2)
    BTC = ("BTC", "Bitcoin", "₿", 8)

    def __init__(self, code: str, display_name: str, symbol: str, decimals: int) -> None:
        self.code = code
        self.display_name = display_name
        self.symbol = symbol
        self.decimals = decimals

    def __str__(self) -> str:
        return self.code

    @classmethod
    def from_code(cls, code: str) -> "Currency":
        """
        Валюта по ISO-коду (регистр не важен).

        Raises:
            UnitParseError: Неизвестный код
        """
        try:
            return cls[code.strip().upper()]
        except KeyError:
            raise UnitParseError(code, "Currency", code, "unknown currency code") from None
