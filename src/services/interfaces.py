"""
Capability interfaces для внешних коллабораторов

Отправка почты и проверки прав доступа — I/O и платформенно-зависимый код,
который в расчётное ядро не входит. Ядро и вызывающий код видят их только
через узкие протоколы ниже; реализации (SMTP, ACL ОС) живут вне репозитория.
"""

from enum import Enum
from typing import Protocol, runtime_checkable

from src.core.domain.mail import MailMessage


class FileAccess(str, Enum):
    """Тип доступа к файлу или каталогу"""

    READ = "read"
    WRITE = "write"
    APPEND = "append"
    PATH_DISCOVERY = "path_discovery"
    ALL_ACCESS = "all_access"


@runtime_checkable
class Mailer(Protocol):
    """Отправка письма. Возвращает True, если транспорт принял письмо."""

    def send(self, message: MailMessage) -> bool: ...


@runtime_checkable
class PermissionChecker(Protocol):
    """Проверки прав текущего процесса."""

    def is_administrator(self) -> bool: ...

    def has_permission(self, path: str, access: FileAccess) -> bool: ...
