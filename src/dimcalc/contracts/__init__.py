"""
Contract Validation Module

JSON Schema контракты и dict-представления значений dimcalc.
"""

from .payloads import (
    exchange_rate_from_payload,
    exchange_rate_to_payload,
    money_from_payload,
    money_to_payload,
    quantity_from_payload,
    quantity_to_payload,
    temperature_from_payload,
    temperature_to_payload,
)
from .validators import (
    SCHEMA_NAMES,
    ContractValidator,
    contract_validator,
    load_schema,
    quantity_schema,
    quantity_schemas,
    quantity_validator,
    validate_exchange_rate,
    validate_money,
    validate_quantity,
    validate_temperature,
)

__all__ = [
    # Schemas
    "SCHEMA_NAMES",
    "load_schema",
    "quantity_schema",
    "quantity_schemas",
    # Validators
    "ContractValidator",
    "contract_validator",
    "quantity_validator",
    # Validation
    "validate_quantity",
    "validate_temperature",
    "validate_money",
    "validate_exchange_rate",
    # Payloads
    "quantity_to_payload",
    "quantity_from_payload",
    "temperature_to_payload",
    "temperature_from_payload",
    "money_to_payload",
    "money_from_payload",
    "exchange_rate_to_payload",
    "exchange_rate_from_payload",
]
