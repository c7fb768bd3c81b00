"""Infrastructure — runtime-настройки и настройка логирования."""

from .observability import JSONFormatter, setup_logging
from .settings import Settings, get_settings

__all__ = [
    "JSONFormatter",
    "Settings",
    "get_settings",
    "setup_logging",
]
