"""
Core building blocks: unit tables, the quantity base, the operator graph,
ranges, ratios and the error taxonomy.

This package is independent of concrete dimensions; those live in
dimcalc.domain.
"""

from dimcalc.core.errors import (
    CurrencyMismatchError,
    DimensionMismatchError,
    EmptyRangeError,
    InvalidExchangeRateError,
    QuantityError,
    QuantityOverflowError,
    UndefinedRatioError,
    UnitParseError,
)
from dimcalc.core.operator_graph import OPERATOR_GRAPH, Operator, OperatorGraph, Relation
from dimcalc.core.outcome import Outcome, attempt
from dimcalc.core.quantity import (
    Quantity,
    approx_eq,
    dimension_by_name,
    dimensions,
    split_value_and_symbol,
)
from dimcalc.core.quantity_range import QuantityRange
from dimcalc.core.ratio import LikeQuantityRatio, QuantityRatio, Rate
from dimcalc.core.unit import UnitOfMeasure

__all__ = [
    # Errors
    "QuantityError",
    "UnitParseError",
    "DimensionMismatchError",
    "CurrencyMismatchError",
    "UndefinedRatioError",
    "EmptyRangeError",
    "InvalidExchangeRateError",
    "QuantityOverflowError",
    # Units and quantities
    "UnitOfMeasure",
    "Quantity",
    "approx_eq",
    "dimension_by_name",
    "dimensions",
    "split_value_and_symbol",
    "QuantityRange",
    "QuantityRatio",
    "LikeQuantityRatio",
    "Rate",
    # Operator graph
    "OPERATOR_GRAPH",
    "Operator",
    "OperatorGraph",
    "Relation",
    # Outcome
    "Outcome",
    "attempt",
]
