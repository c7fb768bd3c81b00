"""
Settings — runtime-настройки через pydantic-settings

Только параметры окружения (логирование). Расчётные константы сюда не
входят: они неизменяемы и лежат в src.core.constants.

Переменные окружения (префикс CALCKIT_):
- CALCKIT_LOG_LEVEL: уровень логирования (default: INFO)
- CALCKIT_LOG_FORMAT: json | text (default: json)
"""

from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    """Настройки приложения из переменных окружения и .env"""

    model_config = SettingsConfigDict(
        env_prefix="CALCKIT_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "json"

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Уровень приводится к верхнему регистру и должен быть известен logging"""
        level = str(v).strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {_LOG_LEVELS}, got {v!r}")
        return level


@lru_cache
def get_settings() -> Settings:
    return Settings()
