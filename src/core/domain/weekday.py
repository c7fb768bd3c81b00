"""
Weekday — День недели с нумерацией Sunday=0 … Saturday=6

Нумерация совпадает с перечислением дней недели, используемым алгоритмом
Doomsday. ISO-нумерация (Monday=1 … Sunday=7) доступна через iso_index.
"""

from datetime import date
from enum import IntEnum

from src.core.constants import DAYS_PER_WEEK, ISO_SUNDAY_INDEX


class Weekday(IntEnum):
    """День недели (ordinal 0-6, воскресенье первое)"""

    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6

    @classmethod
    def of(cls, value: date) -> "Weekday":
        """
        День недели для даты.

        date.weekday() считает Monday=0, поэтому сдвигаем на один день.
        """
        return cls((value.weekday() + 1) % DAYS_PER_WEEK)

    @classmethod
    def from_ordinal(cls, ordinal: int) -> "Weekday":
        """Любой целый ordinal, нормализованный по модулю 7."""
        return cls(ordinal % DAYS_PER_WEEK)

    @property
    def iso_index(self) -> int:
        """ISO-номер дня: Monday=1 … Saturday=6, Sunday=7"""
        return ISO_SUNDAY_INDEX if self is Weekday.SUNDAY else int(self)

    @property
    def is_weekend(self) -> bool:
        return self in (Weekday.SATURDAY, Weekday.SUNDAY)
