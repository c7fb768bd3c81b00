"""
Ошибки расчётного ядра

Иерархия:
    CalculationError
    └── InvalidArgument (также ValueError)

InvalidArgument поднимается немедленно при структурно некорректном входе
(нераспознанная строка даты, NaN/Inf в координатах, невалидная сумма) и
никогда не ретраится. Вырожденная геометрия Haversine исключением не
является: промежуточное значение clamp-ится в [0, 1].
"""


class CalculationError(Exception):
    """Базовая ошибка расчётного ядра."""

    pass


class InvalidArgument(CalculationError, ValueError):
    """
    Вход нельзя интерпретировать как значение нужного типа.

    Наследует ValueError, поэтому существующие `except ValueError`
    продолжают работать.

    Attributes:
        argument: Имя параметра
        value: Полученное значение
    """

    def __init__(self, argument: str, value: object, reason: str) -> None:
        self.argument = argument
        self.value = value
        super().__init__(f"Invalid {argument}={value!r}: {reason}")
