"""
GeoCoordinate — Географическая точка в десятичных градусах

Immutable Pydantic модель. Диапазоны широты/долготы НЕ навязываются
конструктором: функции геодезии считают по любым конечным значениям,
проверка диапазона — ответственность вызывающего кода (см. is_within_bounds
и контракт geo_coordinate).
"""

from typing import Tuple, Union

from pydantic import BaseModel, Field

from src.core.constants import (
    LATITUDE_MAX,
    LATITUDE_MIN,
    LONGITUDE_MAX,
    LONGITUDE_MIN,
)


class GeoCoordinate(BaseModel):
    """
    Пара (latitude, longitude) в десятичных градусах.

    Immutable модель (frozen=True).
    """

    latitude: float = Field(..., description="Широта, градусы (ожидается [-90, 90])")
    longitude: float = Field(..., description="Долгота, градусы (ожидается [-180, 180])")

    model_config = {"frozen": True}

    @classmethod
    def from_pair(cls, pair: Tuple[float, float]) -> "GeoCoordinate":
        """Создание из кортежа (lat, lon)"""
        latitude, longitude = pair
        return cls(latitude=latitude, longitude=longitude)

    @property
    def is_within_bounds(self) -> bool:
        """True если широта в [-90, 90] и долгота в [-180, 180]"""
        # NaN не проходит ни одно сравнение
        return (
            LATITUDE_MIN <= self.latitude <= LATITUDE_MAX
            and LONGITUDE_MIN <= self.longitude <= LONGITUDE_MAX
        )

    def as_pair(self) -> Tuple[float, float]:
        return (self.latitude, self.longitude)


# Точка может прийти как модель или как кортеж (lat, lon)
CoordinateLike = Union[GeoCoordinate, Tuple[float, float]]
