"""
Numerical Safeguards — Safe Math Primitives

Модуль обеспечивает численную устойчивость операций над величинами:
- Проверка float на NaN/Inf при создании значений
- Деление с явной ошибкой при нулевом делителе (никаких молчаливых inf)
- Проверка результата арифметики на переполнение
- Сравнение с абсолютной толерантностью для approx_eq

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Деление на ноль никогда не даёт inf/NaN: возбуждается UndefinedRatioError
2. NaN/Inf никогда не попадают в значение величины:
   на входе ValueError, в результате арифметики QuantityOverflowError
3. Все операции детерминированы и воспроизводимы
"""

import math
import numbers
from typing import Final

from dimcalc.core.errors import QuantityOverflowError, UndefinedRatioError

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Толерантность approx_eq по умолчанию (в первичных единицах размерности)
EPS_QUANTITY_DEFAULT: Final[float] = 1e-10


# =============================================================================
# ПРОВЕРКА ЗНАЧЕНИЙ
# =============================================================================


def is_scalar(value: object) -> bool:
    """
    Является ли значение безразмерным числом (скаляром).

    bool исключён: True * Length.meters(1) — почти всегда ошибка.
    """
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


def validate_finite(value: float, name: str) -> float:
    """
    Валидация, что значение — конечное вещественное число.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        value, приведённое к float

    Raises:
        ValueError: Если value не число или NaN/Inf
    """
    if not is_scalar(value):
        raise ValueError(f"{name} must be a real number, got {value!r}")

    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")

    return float(value)


def checked_result(value: float, what: str) -> float:
    """
    Проверка результата арифметики над конечными операндами.

    В отличие от validate_finite, NaN/Inf здесь не ошибка ввода, а
    переполнение float внутри операции библиотеки.

    Args:
        value: Результат операции
        what: Описание операции (для сообщения об ошибке)

    Raises:
        QuantityOverflowError: Результат не конечен

    Examples:
        >>> checked_result(1e308 * 10, "Length * scalar")
        Traceback (most recent call last):
        ...
        dimcalc.core.errors.QuantityOverflowError: Length * scalar overflowed: result inf is not finite
    """
    if not is_valid_float(value):
        raise QuantityOverflowError(f"{what} overflowed: result {value} is not finite")
    return value


# =============================================================================
# ДЕЛЕНИЕ
# =============================================================================


def checked_divide(numerator: float, denominator: float, what: str) -> float:
    """
    Деление с явной ошибкой вместо inf/NaN.

    В отличие от fallback-подхода, нулевой делитель — это ошибка
    вызывающего кода, а не повод подставить значение по умолчанию.

    Args:
        numerator: Числитель
        denominator: Знаменатель
        what: Описание операции (для сообщения об ошибке)

    Returns:
        numerator / denominator

    Raises:
        UndefinedRatioError: Если denominator == 0 или результат не конечен

    Examples:
        >>> checked_divide(10.0, 4.0, "ratio")
        2.5
    """
    if denominator == 0:
        raise UndefinedRatioError(f"Undefined ratio in {what}: division by zero")

    result = numerator / denominator

    if not is_valid_float(result):
        raise UndefinedRatioError(
            f"Undefined ratio in {what}: {numerator} / {denominator} is not finite"
        )

    return result


# =============================================================================
# СРАВНЕНИЯ
# =============================================================================


def within_tolerance(a: float, b: float, tol: float) -> bool:
    """
    Абсолютное сравнение: |a - b| <= |tol|.

    Знак толерантности игнорируется, чтобы отрицательная толерантность
    не превращала любое сравнение в False.

    Examples:
        >>> within_tolerance(1.0, 1.0001, 0.001)
        True
        >>> within_tolerance(1.0, 1.1, -0.01)
        False
    """
    return abs(a - b) <= abs(tol)
