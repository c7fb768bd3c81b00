"""
Core math modules

Чистые функции календарной арифметики, геодезии и конверсии единиц.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    clamp,
    is_valid_float,
    validate_finite,
)

# Calendar Arithmetic
from src.core.math.calendar_arithmetic import (
    DateLike,
    century_anchor,
    coerce_date,
    days_between,
    doomsday_weekday,
    first_day_of_last_month,
    first_day_of_month_prev_month,
    is_weekday,
    is_weekend,
    iso_week_of_year,
    last_day_of_last_month,
    next_weekday,
    previous_weekday,
    utc_datetime_from_ms,
    week_of,
    weekdays_between,
)

# Geodesy
from src.core.math.geodesy import (
    degrees_to_radians,
    haversine_distance,
    haversine_distance_km,
    haversine_term,
    radians_to_degrees,
)

# Conversions
from src.core.math.conversions import (
    MoneyLike,
    celsius_to_fahrenheit,
    celsius_to_kelvin,
    convert_currency,
    fahrenheit_to_celsius,
    fahrenheit_to_kelvin,
    feet_to_meters,
    meters_to_feet,
    round_currency,
    to_decimal,
)

__all__ = [
    # Numerical Safeguards — Functions
    "clamp",
    "is_valid_float",
    "validate_finite",
    # Calendar Arithmetic — Types
    "DateLike",
    # Calendar Arithmetic — Functions
    "century_anchor",
    "coerce_date",
    "days_between",
    "doomsday_weekday",
    "first_day_of_last_month",
    "first_day_of_month_prev_month",
    "is_weekday",
    "is_weekend",
    "iso_week_of_year",
    "last_day_of_last_month",
    "next_weekday",
    "previous_weekday",
    "utc_datetime_from_ms",
    "week_of",
    "weekdays_between",
    # Geodesy
    "degrees_to_radians",
    "haversine_distance",
    "haversine_distance_km",
    "haversine_term",
    "radians_to_degrees",
    # Conversions — Types
    "MoneyLike",
    # Conversions — Functions
    "celsius_to_fahrenheit",
    "celsius_to_kelvin",
    "convert_currency",
    "fahrenheit_to_celsius",
    "fahrenheit_to_kelvin",
    "feet_to_meters",
    "meters_to_feet",
    "round_currency",
    "to_decimal",
]
