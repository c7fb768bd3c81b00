"""
Constants — неизменяемые таблицы и коэффициенты расчётного ядра

Все "магические" числа календарной арифметики, геодезии и конверсии единиц
собраны здесь, чтобы формулы в calendar_arithmetic / geodesy / conversions
оставались проверяемыми.

Значения НЕ читаются из окружения и не меняются во время работы процесса.
"""

from decimal import Decimal
from typing import Final, Mapping
from types import MappingProxyType


# =============================================================================
# КАЛЕНДАРЬ
# =============================================================================

DAYS_PER_WEEK: Final[int] = 7
MONTHS_PER_YEAR: Final[int] = 12

# "add 10, divide by 7": (day_of_year - iso_weekday + 10) // 7
ISO_WEEK_OFFSET: Final[int] = 10

# Порядковый номер воскресенья в ISO-нумерации (Monday=1 … Sunday=7)
ISO_SUNDAY_INDEX: Final[int] = 7

# Григорианский календарь повторяет дни недели каждые 400 лет
GREGORIAN_CYCLE_YEARS: Final[int] = 400
CENTURY_YEARS: Final[int] = 100

# Doomsday: год делится на дюжины
DOOMSDAY_DOZEN: Final[int] = 12
DOOMSDAY_LEAP_SPAN: Final[int] = 4

# Якорные дни столетий внутри 400-летнего цикла (ordinal, Sunday=0).
# Ключ: номер столетия в цикле (year % 400) // 100.
#   0 → Tuesday   (2000-2099, 1600-1699)
#   1 → Sunday    (2100-2199)
#   2 → Friday    (1800-1899, 2200-2299)
#   3 → Wednesday (1900-1999)
CENTURY_ANCHOR_ORDINALS: Final[Mapping[int, int]] = MappingProxyType(
    {
        0: 2,
        1: 0,
        2: 5,
        3: 3,
    }
)

# Эпоха для utc_datetime_from_ms: 0001-01-01T00:00:00Z (тики .NET-совместимых систем)
UTC_MS_EPOCH_YEAR: Final[int] = 1


# =============================================================================
# ГЕОДЕЗИЯ
# =============================================================================

# Средний радиус Земли (IUGG), сферическая аппроксимация
EARTH_MEAN_RADIUS_METERS: Final[float] = 6371008.8

METERS_PER_KILOMETER: Final[float] = 1000.0

DEGREES_PER_HALF_TURN: Final[float] = 180.0

# Допустимые диапазоны координат (проверяются только контрактами и GeoCoordinate)
LATITUDE_MIN: Final[float] = -90.0
LATITUDE_MAX: Final[float] = 90.0
LONGITUDE_MIN: Final[float] = -180.0
LONGITUDE_MAX: Final[float] = 180.0


# =============================================================================
# ТЕМПЕРАТУРА И РАССТОЯНИЕ
# =============================================================================

FAHRENHEIT_SCALE: Final[float] = 9.0 / 5.0
CELSIUS_SCALE: Final[float] = 5.0 / 9.0
FAHRENHEIT_FREEZING_POINT: Final[float] = 32.0
CELSIUS_TO_KELVIN_OFFSET: Final[float] = 273.15

# Международный фут (1959)
FEET_TO_METERS: Final[float] = 0.3048


# =============================================================================
# ВАЛЮТА
# =============================================================================

# Количество знаков после запятой по умолчанию для round_currency
CURRENCY_DEFAULT_PLACES: Final[int] = 2

CURRENCY_ONE: Final[Decimal] = Decimal(1)
