"""
Errors — таксономия ошибок dimcalc

Все ошибки наследуются от QuantityError, поэтому вызывающий код может
перехватить любую ошибку библиотеки одним except. Дополнительные базовые
классы (ValueError, TypeError, ZeroDivisionError) сохраняют привычную
для Python семантику.

Библиотека никогда не завершает процесс: каждая ошибка — исключение,
которое вызывающий код может обработать (или получить через Outcome).
"""


class QuantityError(Exception):
    """Базовая ошибка всех операций с величинами, деньгами и температурой."""


class UnitParseError(QuantityError, ValueError):
    """
    Ошибка разбора текстового представления.

    Возникает при некорректном числе, неизвестном или отсутствующем символе
    единицы, неизвестном коде валюты или имени размерности.

    Attributes:
        token: Проблемный фрагмент входа
        dimension: Имя размерности, для которой выполнялся разбор
        text: Полный исходный текст
    """

    def __init__(self, token: str, dimension: str, text: str, reason: str) -> None:
        self.token = token
        self.dimension = dimension
        self.text = text
        super().__init__(
            f"Cannot parse {dimension} from {text!r}: {reason} (token {token!r})"
        )


class DimensionMismatchError(QuantityError, TypeError):
    """
    Операция между несовместимыми размерностями.

    Например, Length + Time, или произведение двух размерностей, для
    которых не объявлено отношение в графе операторов.
    """


class CurrencyMismatchError(QuantityError):
    """Операция с Money в разных валютах или конвертация по чужому курсу."""


class UndefinedRatioError(QuantityError, ZeroDivisionError):
    """Деление на величину, число или сумму с нулевым значением."""


class EmptyRangeError(QuantityError, ValueError):
    """Диапазон с lower > upper (политика: отклонять, а не переставлять)."""


class InvalidExchangeRateError(QuantityError, ValueError):
    """Курс с одинаковыми валютами, нулевым, отрицательным или NaN/Inf значением."""


class QuantityOverflowError(QuantityError, OverflowError):
    """Арифметика на конечных операндах дала NaN/Inf (переполнение float)."""
