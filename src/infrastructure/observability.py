"""Structured Logging — JSON-форматтер и настройка логирования.

Инварианты:
    - Каждая запись содержит timestamp, level, logger и message
    - Extra-поля (operation, raw_value, clamped_value) выводятся, если заданы
    - Расчётные модули пишут только DEBUG; setup_logging вызывает хост-приложение
"""

import json
import logging
from datetime import datetime, timezone
from typing import Optional

from src.infrastructure.settings import get_settings

_EXTRA_FIELDS = ("operation", "raw_value", "clamped_value")


class JSONFormatter(logging.Formatter):
    """Запись лога в виде одной JSON-строки."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


def setup_logging(
    level: Optional[str] = None,
    fmt: Optional[str] = None,
    logger: Optional[logging.Logger] = None,
) -> logging.Handler:
    """Настройка логирования; незаданные аргументы берутся из Settings.

    Возвращает установленный handler, чтобы вызывающий код мог его снять.
    """
    settings = get_settings()
    level = level or settings.log_level
    fmt = fmt or settings.log_format
    target = logger or logging.root

    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    target.addHandler(handler)
    target.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
