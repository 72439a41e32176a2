"""
Unit Table — единицы измерения и коэффициенты пересчёта

Каждая размерность описывается закрытым Enum единиц. Значение члена —
пара (symbol, factor), где factor — множитель для перевода значения
в первичную (primary) единицу размерности:

    value_primary = value * factor

ИНВАРИАНТЫ:
1. В каждой размерности ровно одна единица с factor == 1.0 (primary)
2. Таблицы неизменяемы и строятся при импорте модуля
3. Символы уникальны в пределах размерности (поиск по символу однозначен)
"""

from enum import Enum
from typing import Final, Optional

# =============================================================================
# МЕТРИЧЕСКИЕ ПРИСТАВКИ
# =============================================================================

NANO: Final[float] = 1e-9
MICRO: Final[float] = 1e-6
MILLI: Final[float] = 1e-3
CENTI: Final[float] = 1e-2
DECI: Final[float] = 1e-1
HECTO: Final[float] = 1e2
KILO: Final[float] = 1e3
MEGA: Final[float] = 1e6
GIGA: Final[float] = 1e9


# =============================================================================
# UNIT OF MEASURE
# =============================================================================


class UnitOfMeasure(Enum):
    """
    Базовый Enum для единиц одной размерности.

    Члены подклассов объявляются как NAME = (symbol, factor).
    """

    def __init__(self, symbol: str, factor: float) -> None:
        self.symbol = symbol
        self.factor = factor

    def __str__(self) -> str:
        return self.symbol

    @property
    def is_primary(self) -> bool:
        """Является ли единица первичной (factor == 1.0)."""
        return self.factor == 1.0

    def convert_to_primary(self, value: float) -> float:
        """Перевод значения из этой единицы в первичную."""
        return value * self.factor

    def convert_from_primary(self, value: float) -> float:
        """Перевод значения из первичной единицы в эту."""
        return value / self.factor

    def convert_to(self, value: float, target: "UnitOfMeasure") -> float:
        """
        Перевод значения из этой единицы в target.

        Одно деление и одно умножение: value * (source / target), без
        промежуточной нормализации в первичную единицу.

        Args:
            value: Значение в этой единице
            target: Целевая единица той же размерности

        Returns:
            Значение в единице target
        """
        if target is self:
            return value
        return value * (self.factor / target.factor)

    @classmethod
    def primary(cls) -> "UnitOfMeasure":
        """Первичная единица размерности."""
        for unit in cls:
            if unit.is_primary:
                return unit
        raise TypeError(f"{cls.__name__} declares no primary unit (factor 1.0)")

    @classmethod
    def from_symbol(cls, symbol: str) -> Optional["UnitOfMeasure"]:
        """Поиск единицы по символу; None если символ неизвестен."""
        for unit in cls:
            if unit.symbol == symbol:
                return unit
        return None
