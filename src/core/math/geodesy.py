"""
Geodesy — Great-circle расстояние по формуле Haversine

Модуль обеспечивает:
- Конверсию градусы ↔ радианы
- Расстояние Haversine между двумя точками на сфере среднего радиуса Земли

Сферическая аппроксимация (не эллипсоид): погрешность до ~0.5% для
антиподальных точек.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Промежуточное h clamp-ится в [0, 1]: совпадающие точки дают 0,
   антиподальные — не более π·R, NaN не возникает
2. NaN/Inf в координатах → InvalidArgument
3. d(a, b) == d(b, a), d(p, p) == 0
4. Диапазоны широты/долготы не проверяются (ответственность вызывающего)

ФОРМУЛА:
    Δlat = rad(b.lat - a.lat)
    Δlon = rad(b.lon - a.lon)
    h = sin²(Δlat/2) + cos(rad(a.lat)) · cos(rad(b.lat)) · sin²(Δlon/2)
    c = 2 · atan2(√h, √(1-h))
    distance = R · c
"""

import logging
import math

from src.core.constants import (
    DEGREES_PER_HALF_TURN,
    EARTH_MEAN_RADIUS_METERS,
    METERS_PER_KILOMETER,
)
from src.core.domain.geo import CoordinateLike, GeoCoordinate
from src.core.errors import InvalidArgument
from src.core.math.numerical_safeguards import clamp, validate_finite

logger = logging.getLogger(__name__)


# =============================================================================
# УГЛЫ
# =============================================================================


def degrees_to_radians(degrees: float) -> float:
    """
    radians = degrees × π / 180

    Examples:
        >>> degrees_to_radians(180.0)
        3.141592653589793
    """
    return degrees * math.pi / DEGREES_PER_HALF_TURN


def radians_to_degrees(radians: float) -> float:
    """degrees = radians × 180 / π"""
    return radians * DEGREES_PER_HALF_TURN / math.pi


# =============================================================================
# HAVERSINE
# =============================================================================


def _as_coordinate(value: CoordinateLike, name: str) -> GeoCoordinate:
    if isinstance(value, GeoCoordinate):
        coordinate = value
    else:
        try:
            latitude, longitude = value
        except (TypeError, ValueError) as exc:
            raise InvalidArgument(name, value, "expected GeoCoordinate or (lat, lon) pair") from exc
        coordinate = GeoCoordinate(
            latitude=validate_finite(latitude, f"{name}.latitude"),
            longitude=validate_finite(longitude, f"{name}.longitude"),
        )

    validate_finite(coordinate.latitude, f"{name}.latitude")
    validate_finite(coordinate.longitude, f"{name}.longitude")
    return coordinate


def haversine_term(a: GeoCoordinate, b: GeoCoordinate) -> float:
    """
    Промежуточное значение h формулы Haversine, clamp-нутое в [0, 1].

    Из-за округления float h может выйти за [0, 1] для совпадающих или
    почти антиподальных точек; без clamp sqrt(1 - h) дал бы NaN.
    """
    delta_lat = degrees_to_radians(b.latitude - a.latitude)
    delta_lon = degrees_to_radians(b.longitude - a.longitude)

    raw = math.sin(delta_lat / 2.0) ** 2 + math.cos(degrees_to_radians(a.latitude)) * math.cos(
        degrees_to_radians(b.latitude)
    ) * math.sin(delta_lon / 2.0) ** 2

    h = clamp(raw, 0.0, 1.0)
    if h != raw:
        logger.debug(
            "Haversine term clamped",
            extra={"operation": "haversine_term", "raw_value": raw, "clamped_value": h},
        )
    return h


def haversine_distance(
    a: CoordinateLike,
    b: CoordinateLike,
    radius_m: float = EARTH_MEAN_RADIUS_METERS,
) -> float:
    """
    Great-circle расстояние между точками в метрах.

    Args:
        a: Первая точка (GeoCoordinate или (lat, lon) в градусах)
        b: Вторая точка
        radius_m: Радиус сферы (default: средний радиус Земли 6371008.8 м)

    Returns:
        Расстояние в метрах, в диапазоне [0, π·radius_m]

    Raises:
        InvalidArgument: NaN/Inf в координатах или точка не является парой

    Examples:
        >>> round(haversine_distance((0.0, 0.0), (0.0, 180.0)))
        20015114
    """
    point_a = _as_coordinate(a, "a")
    point_b = _as_coordinate(b, "b")

    h = haversine_term(point_a, point_b)
    central_angle = 2.0 * math.atan2(math.sqrt(h), math.sqrt(1.0 - h))

    return radius_m * central_angle


def haversine_distance_km(a: CoordinateLike, b: CoordinateLike) -> float:
    """Great-circle расстояние между точками в километрах."""
    return haversine_distance(a, b) / METERS_PER_KILOMETER
