"""
JSON Schema контракты dimcalc

Базовые схемы поставляются внутри пакета (dimcalc/contracts/schema/*.json)
и читаются через importlib.resources:

- quantity.json
- temperature.json
- money.json
- exchange_rate.json

Схема quantity уточняется для каждой зарегистрированной размерности:
поле dimension фиксируется через const, поле unit ограничивается enum
символов единиц этой размерности.

    validate_quantity({"dimension": "Length", "value": 2, "unit": "km"})   # OK
    validate_quantity({"dimension": "Length", "value": 2, "unit": "kWh"})  # ValidationError

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждая схема проходит meta-validation (Draft 2020-12) при загрузке
2. Enum символов строится из таблицы единиц, а не дублируется в JSON
3. Валидаторы кэшируются: схема читается и компилируется один раз
"""

import copy
import json
import logging
from importlib.resources import files
from typing import Any, Dict, Final, Iterator

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

from dimcalc.core.quantity import Quantity, dimension_by_name, dimensions

logger = logging.getLogger(__name__)

SCHEMA_PACKAGE: Final[str] = "dimcalc.contracts"
SCHEMA_NAMES: Final[tuple[str, ...]] = ("quantity", "temperature", "money", "exchange_rate")

_SCHEMAS: Dict[str, Dict[str, Any]] = {}
_VALIDATORS: Dict[str, "ContractValidator"] = {}
_DIMENSION_VALIDATORS: Dict[type[Quantity], "ContractValidator"] = {}


# =============================================================================
# SCHEMA LOADING
# =============================================================================


def parse_schema(text: str, schema_name: str) -> Dict[str, Any]:
    """
    Разбор текста JSON Schema с meta-validation.

    Raises:
        ValueError: Текст не является валидной JSON Schema
    """
    schema = json.loads(text)
    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e.message}") from e
    return schema


def load_schema(schema_name: str) -> Dict[str, Any]:
    """
    Базовая схема из ресурсов пакета.

    Args:
        schema_name: Имя схемы без расширения (например, 'quantity')

    Returns:
        Загруженная схема как dict (общий кэшированный экземпляр)

    Raises:
        FileNotFoundError: Схема не поставляется с пакетом
        ValueError: Файл не является валидной JSON Schema
    """
    if schema_name in _SCHEMAS:
        return _SCHEMAS[schema_name]

    resource = files(SCHEMA_PACKAGE) / "schema" / f"{schema_name}.json"
    if not resource.is_file():
        raise FileNotFoundError(f"Schema not found: {schema_name}.json")

    schema = parse_schema(resource.read_text(encoding="utf-8"), schema_name)
    logger.debug("Loaded schema %s", schema_name)
    _SCHEMAS[schema_name] = schema
    return schema


def quantity_schema(dimension: type[Quantity]) -> Dict[str, Any]:
    """
    Схема quantity, суженная до одной размерности.

    dimension получает const с именем размерности, unit получает enum
    символов её единиц в порядке объявления.
    """
    schema = copy.deepcopy(load_schema("quantity"))
    name = dimension.dimension_name

    schema["$id"] = schema["$id"].replace("quantity.json", f"quantity/{name}.json")
    schema["title"] = f"{name} quantity"
    schema["properties"]["dimension"]["const"] = name
    schema["properties"]["unit"]["enum"] = [unit.symbol for unit in dimension.unit_type]
    return schema


def quantity_schemas() -> Dict[str, Dict[str, Any]]:
    """Схемы quantity для всех зарегистрированных размерностей, по имени."""
    return {dimension.dimension_name: quantity_schema(dimension) for dimension in dimensions()}


# =============================================================================
# CONTRACT VALIDATOR
# =============================================================================


class ContractValidator:
    """
    Скомпилированный валидатор одной схемы.

    Attributes:
        title: Заголовок схемы (для сообщений и логов)
        schema: Схема как dict
    """

    def __init__(self, schema: Dict[str, Any]):
        self.schema = schema
        self.title = schema.get("title", "contract")
        self._validator = Draft202012Validator(schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Данные не соответствуют схеме
        """
        self._validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self._validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        """Все ошибки валидации, а не только первая."""
        return self._validator.iter_errors(data)

    def __repr__(self) -> str:
        return f"ContractValidator({self.title!r})"


def contract_validator(schema_name: str) -> ContractValidator:
    """Кэшированный валидатор базовой схемы по имени."""
    if schema_name not in _VALIDATORS:
        _VALIDATORS[schema_name] = ContractValidator(load_schema(schema_name))
    return _VALIDATORS[schema_name]


def quantity_validator(dimension: type[Quantity]) -> ContractValidator:
    """Кэшированный валидатор quantity для одной размерности."""
    if dimension not in _DIMENSION_VALIDATORS:
        _DIMENSION_VALIDATORS[dimension] = ContractValidator(quantity_schema(dimension))
        logger.debug("Compiled quantity contract for %s", dimension.dimension_name)
    return _DIMENSION_VALIDATORS[dimension]


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_quantity(data: Dict[str, Any]) -> None:
    """
    Валидация quantity payload в два шага: общая структура, затем
    символ единицы против таблицы названной размерности.

    Raises:
        ValidationError: Структура не соответствует схеме или символ
            не принадлежит размерности
        UnitParseError: Размерность не зарегистрирована
    """
    contract_validator("quantity").validate(data)
    quantity_validator(dimension_by_name(data["dimension"])).validate(data)


def validate_temperature(data: Dict[str, Any]) -> None:
    contract_validator("temperature").validate(data)


def validate_money(data: Dict[str, Any]) -> None:
    contract_validator("money").validate(data)


def validate_exchange_rate(data: Dict[str, Any]) -> None:
    contract_validator("exchange_rate").validate(data)
