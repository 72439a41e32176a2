"""
Operator Graph — межразмерностные произведения и частные

Граф отношений вида (A, op, B) → C. Отношение объявляется один раз
через relate(product, left, right, scale):

    product_p = left_p * right_p * scale

и автоматически порождает четыре ребра:
- left * right  → product
- right * left  → product
- product / left  → right
- product / right → left

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат всегда в первичной единице результирующей размерности
2. Для каждого ребра A / B → C существует C * B → A (обратимость)
3. После freeze() граф только читается (безопасно из любых потоков)
4. Деление на величину с нулевым значением → UndefinedRatioError
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Optional

from dimcalc.core.errors import DimensionMismatchError
from dimcalc.core.math.numerical_safeguards import checked_divide, checked_result

if TYPE_CHECKING:
    from dimcalc.core.quantity import Quantity

logger = logging.getLogger(__name__)


class Operator(str, Enum):
    """Бинарный оператор между размерностями."""

    MULTIPLY = "*"
    DIVIDE = "/"


# =============================================================================
# RELATION
# =============================================================================


@dataclass(frozen=True)
class Relation:
    """
    Ребро графа: left <operator> right → result.

    Attributes:
        left: Класс размерности левого операнда
        operator: MULTIPLY или DIVIDE
        right: Класс размерности правого операнда
        result: Класс размерности результата
        scale: Множитель к произведению/частному первичных значений
    """

    left: type
    operator: Operator
    right: type
    result: type
    scale: float = 1.0

    @property
    def key(self) -> tuple[type, Operator, type]:
        return self.left, self.operator, self.right

    def evaluate(self, a: "Quantity", b: "Quantity") -> "Quantity":
        """
        Вычисление результата в первичной единице result.

        Raises:
            UndefinedRatioError: Деление на величину с нулевым значением
            QuantityOverflowError: Результат переполнил float
        """
        left_p = a.to_primary()
        right_p = b.to_primary()

        if self.operator is Operator.MULTIPLY:
            value = left_p * right_p * self.scale
        else:
            value = checked_divide(left_p, right_p, str(self)) * self.scale

        return self.result(checked_result(value, str(self)), self.result.primary_unit())

    def __str__(self) -> str:
        return (
            f"{self.left.dimension_name} {self.operator.value} "
            f"{self.right.dimension_name} -> {self.result.dimension_name}"
        )


# =============================================================================
# OPERATOR GRAPH
# =============================================================================


class OperatorGraph:
    """
    Реестр отношений между размерностями.

    Заполняется при импорте (dimcalc.domain.relations) и замораживается.
    """

    def __init__(self) -> None:
        self._relations: dict[tuple[type, Operator, type], Relation] = {}
        self._frozen = False

    @property
    def frozen(self) -> bool:
        return self._frozen

    def relate(self, product: type, left: type, right: type, scale: float = 1.0) -> None:
        """
        Объявление product = left × right (× scale).

        Args:
            product: Размерность произведения
            left: Размерность левого множителя
            right: Размерность правого множителя
            scale: Коэффициент между первичными единицами

        Raises:
            RuntimeError: Граф заморожен или ребро конфликтует с объявленным
            ValueError: scale не положительный
        """
        if self._frozen:
            raise RuntimeError("Operator graph is frozen, relations cannot be added")

        if not scale > 0:
            raise ValueError(f"Relation scale must be positive, got {scale}")

        self._register(Relation(left, Operator.MULTIPLY, right, product, scale))
        self._register(Relation(right, Operator.MULTIPLY, left, product, scale))
        self._register(Relation(product, Operator.DIVIDE, left, right, 1.0 / scale))
        self._register(Relation(product, Operator.DIVIDE, right, left, 1.0 / scale))

    def _register(self, relation: Relation) -> None:
        existing = self._relations.get(relation.key)

        if existing is None:
            self._relations[relation.key] = relation
            return

        # Повторное объявление того же отношения допустимо
        if existing != relation:
            raise RuntimeError(f"Conflicting relation {relation}, already declared {existing}")

    def lookup(self, left: type, operator: Operator, right: type) -> Optional[Relation]:
        """Ребро (left, operator, right) или None."""
        return self._relations.get((left, operator, right))

    def supports(self, left: type, operator: Operator, right: type) -> bool:
        return (left, operator, right) in self._relations

    def relations(self) -> tuple[Relation, ...]:
        """Все рёбра графа."""
        return tuple(self._relations.values())

    def apply(self, a: "Quantity", operator: Operator, b: "Quantity") -> Any:
        """
        Применение оператора к двум величинам разных размерностей.

        Raises:
            DimensionMismatchError: Отношение не объявлено
            UndefinedRatioError: Деление на нулевое значение
        """
        relation = self.lookup(type(a), operator, type(b))

        if relation is None:
            raise DimensionMismatchError(
                f"No relation declared for {type(a).dimension_name} "
                f"{operator.value} {type(b).dimension_name}"
            )

        return relation.evaluate(a, b)

    def verify(self) -> None:
        """
        Проверка обратимости: для каждого A / B → C есть C * B → A.

        Raises:
            RuntimeError: Найдено ребро без обратного
        """
        for relation in self._relations.values():
            if relation.operator is not Operator.DIVIDE:
                continue

            inverse = self.lookup(relation.result, Operator.MULTIPLY, relation.right)
            if inverse is None or inverse.result is not relation.left:
                raise RuntimeError(f"Relation {relation} has no inverse multiplication")

    def freeze(self) -> None:
        """Проверка обратимости и запрет дальнейших объявлений."""
        if self._frozen:
            return

        self.verify()
        self._frozen = True
        logger.debug("Operator graph frozen with %d relations", len(self._relations))


OPERATOR_GRAPH = OperatorGraph()
