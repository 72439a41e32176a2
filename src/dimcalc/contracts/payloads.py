"""
Payloads — dict-представления значений для обмена (JSON и т.п.)

Каждый *_from_payload сначала валидирует dict по JSON Schema, затем
разрешает имена (размерность, символ единицы, код валюты).

Ошибки:
- ValidationError (jsonschema): структура не соответствует схеме или символ
  единицы не из таблицы размерности
- UnitParseError: неизвестная размерность, шкала или валюта
"""

from typing import Any, Dict

from dimcalc.contracts.validators import (
    validate_exchange_rate,
    validate_money,
    validate_quantity,
    validate_temperature,
)
from dimcalc.core.errors import UnitParseError
from dimcalc.core.quantity import Quantity, dimension_by_name
from dimcalc.domain.temperature import Temperature, TemperatureScale
from dimcalc.market.currency import Currency
from dimcalc.market.exchange_rate import CurrencyExchangeRate
from dimcalc.market.money import Money

# =============================================================================
# QUANTITY
# =============================================================================


def quantity_to_payload(quantity: Quantity) -> Dict[str, Any]:
    return {
        "dimension": quantity.dimension_name,
        "value": quantity.value,
        "unit": quantity.unit.symbol,
    }


def quantity_from_payload(data: Dict[str, Any]) -> Quantity:
    """
    Восстановление величины из payload.

    Raises:
        ValidationError: payload не соответствует quantity.json или символ
            единицы не принадлежит размерности
        UnitParseError: Неизвестная размерность
    """
    validate_quantity(data)

    # Символ уже проверен по enum схемы размерности
    dimension = dimension_by_name(data["dimension"])
    return dimension(data["value"], dimension.unit_by_symbol(data["unit"]))


# =============================================================================
# TEMPERATURE
# =============================================================================


def temperature_to_payload(temperature: Temperature) -> Dict[str, Any]:
    return {"value": temperature.value, "scale": temperature.scale.symbol}


def temperature_from_payload(data: Dict[str, Any]) -> Temperature:
    validate_temperature(data)

    scale = TemperatureScale.from_symbol(data["scale"])
    if scale is None:
        raise UnitParseError(data["scale"], "Temperature", str(data), "unknown temperature scale")

    return Temperature(data["value"], scale)


# =============================================================================
# MONEY
# =============================================================================


def money_to_payload(money: Money) -> Dict[str, Any]:
    return {"amount": money.amount, "currency": money.currency.code}


def money_from_payload(data: Dict[str, Any]) -> Money:
    validate_money(data)
    return Money(data["amount"], Currency.from_code(data["currency"]))


# =============================================================================
# EXCHANGE RATE
# =============================================================================


def exchange_rate_to_payload(rate: CurrencyExchangeRate) -> Dict[str, Any]:
    return {"base": rate.base.code, "counter": rate.counter.code, "rate": rate.rate}


def exchange_rate_from_payload(data: Dict[str, Any]) -> CurrencyExchangeRate:
    """
    Восстановление курса из payload.

    Raises:
        ValidationError: payload не соответствует exchange_rate.json
        UnitParseError: Неизвестный код валюты
        InvalidExchangeRateError: Одинаковые валюты
    """
    validate_exchange_rate(data)
    return CurrencyExchangeRate(
        Currency.from_code(data["base"]),
        Currency.from_code(data["counter"]),
        data["rate"],
    )
