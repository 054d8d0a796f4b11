"""Ошибки операций над временем суток.

Три вида отказов:
- TemporalRangeError: значение времени вне диапазона (recoverable)
- MissingRequiredPropertyError: у time-like объекта нет обязательного поля
- TemporalContractViolation: нарушение контракта вызывающим кодом (fatal)
"""


class TemporalError(Exception):
    """Базовый класс recoverable ошибок времени."""

    pass


class TemporalRangeError(TemporalError, ValueError):
    """Поля времени вне канонического диапазона."""

    def __init__(self, message: str = "Invalid plain time"):
        super().__init__(message)


class MissingRequiredPropertyError(TemporalError, TypeError):
    """
    Обязательное свойство отсутствует или undefined.

    Attributes:
        property_name: имя отсутствующего свойства
    """

    def __init__(self, property_name: str):
        self.property_name = property_name
        super().__init__(f"Required property {property_name} is missing or undefined")


class TemporalContractViolation(BaseException):
    """
    Недостижимое состояние: вызывающий код нарушил контракт.

    Наследуется от BaseException, чтобы обычные `except Exception`
    обработчики не перехватывали его. Это дефект программы, а не ошибка
    пользовательских данных.
    """

    pass
