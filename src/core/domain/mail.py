"""
MailMessage — Значение письма для Mailer

Immutable Pydantic модель. Ядро само писем не отправляет: модель только
описывает, что передаётся реализации Mailer (см. src.services).
"""

from enum import Enum
from typing import List

from pydantic import BaseModel, Field, model_validator


class MailPriority(str, Enum):
    """Приоритет письма"""

    LOW = "low"
    NORMAL = "normal"
    HIGH = "high"


class MailMessage(BaseModel):
    """
    Письмо для отправки через Mailer.

    Инварианты:
    - subject и body обязательны (пустая строка допустима, None нет)
    - хотя бы один получатель в to/cc/bcc
    """

    subject: str = Field(..., description="Тема письма")
    body: str = Field(..., description="Тело письма")
    sender: str = Field(..., min_length=3, description="Адрес отправителя")
    to: List[str] = Field(default_factory=list, description="Получатели")
    cc: List[str] = Field(default_factory=list, description="Копия")
    bcc: List[str] = Field(default_factory=list, description="Скрытая копия")
    attachments: List[str] = Field(default_factory=list, description="Пути к вложениям")
    is_body_html: bool = Field(True, description="Тело письма в HTML")
    priority: MailPriority = Field(MailPriority.NORMAL, description="Приоритет")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_has_recipient(self) -> "MailMessage":
        """Проверка, что письмо кому-то адресовано"""
        if not (self.to or self.cc or self.bcc):
            raise ValueError("MailMessage requires at least one recipient in to/cc/bcc")
        return self

    @property
    def recipients(self) -> List[str]:
        """Все получатели в порядке to, cc, bcc"""
        return [*self.to, *self.cc, *self.bcc]
