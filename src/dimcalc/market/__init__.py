"""
Money, currencies, exchange rates and per-quantity prices.
"""

from dimcalc.market.currency import Currency
from dimcalc.market.exchange_rate import CurrencyExchangeRate, convert_money
from dimcalc.market.money import Money
from dimcalc.market.price import Price

__all__ = [
    "Currency",
    "Money",
    "CurrencyExchangeRate",
    "convert_money",
    "Price",
]
