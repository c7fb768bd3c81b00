"""Services — capability-интерфейсы внешних коллабораторов расчётного ядра.

- Mailer: отправка писем
- PermissionChecker: запросы прав администратора и доступа к файлам
"""

from .interfaces import (
    FileAccess,
    Mailer,
    PermissionChecker,
)

__all__ = [
    "FileAccess",
    "Mailer",
    "PermissionChecker",
]
