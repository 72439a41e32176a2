"""
Outcome — явный результат операции (значение или ошибка)

Для вызывающего кода, который предпочитает проверять результат, а не
перехватывать исключения (пакетная обработка, парсинг пользовательского
ввода). Основной API библиотеки по-прежнему возбуждает исключения.

    outcome = attempt(Length.parse, "10 parsecs")
    if not outcome.ok:
        print(outcome.error)
"""

from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar

from dimcalc.core.errors import QuantityError

T = TypeVar("T")


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """Результат операции: ok + value, либо ошибка QuantityError."""

    ok: bool
    value: Optional[T] = None
    error: Optional[QuantityError] = None

    @classmethod
    def success(cls, value: T) -> "Outcome[T]":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: QuantityError) -> "Outcome[T]":
        return cls(ok=False, error=error)

    def unwrap(self) -> T:
        """
        Значение успешного результата.

        Raises:
            QuantityError: Сохранённая ошибка, если результат неуспешный
        """
        if not self.ok:
            raise self.error
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value if self.ok else default


def attempt(fn: Callable[..., T], *args: Any, **kwargs: Any) -> Outcome[T]:
    """
    Вызов fn с упаковкой результата в Outcome.

    Перехватываются только ошибки библиотеки (QuantityError); прочие
    исключения (ошибки программирования) пробрасываются как есть.
    """
    try:
        return Outcome.success(fn(*args, **kwargs))
    except QuantityError as error:
        return Outcome.failure(error)
