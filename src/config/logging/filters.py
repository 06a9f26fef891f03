"""Filters de logging: contexto da requisição e proteção de dados do envio.

- CorrelationIdFilter: injeta `service` e
  `correlation_id` em cada record.
- SensitiveFieldFilter: mascara campos `extra` que carregariam número,
  texto ou conteúdo de mídia do envio.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

# Campos `extra` que nunca devem chegar ao output dos logs
SENSITIVE_FIELDS = frozenset(
    {"number", "chat_id", "chatId", "body", "caption", "base64", "data", "image_url"}
)

REDACTED = "[redacted]"


class CorrelationIdFilter(logging.Filter):
    """Injeta service e correlation_id do request corrente.

    O getter normalmente lê o ContextVar preenchido pelo middleware HTTP;
    sem getter (scripts, testes) o correlation_id fica vazio. Valor já
    presente no record (via `extra`) tem precedência.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self.service_name = service_name
        self._getter = correlation_id_getter

    def current_correlation_id(self) -> str:
        return self._getter() if self._getter is not None else ""

    def filter(self, record: logging.LogRecord) -> bool:
        if not getattr(record, "correlation_id", None):
            record.correlation_id = self.current_correlation_id()
        record.service = self.service_name
        return True


class SensitiveFieldFilter(logging.Filter):
    """Substitui por `[redacted]` os campos sensíveis passados em `extra`."""

    def __init__(self, fields: Iterable[str] = SENSITIVE_FIELDS) -> None:
        super().__init__()
        self.fields = frozenset(fields)

    def filter(self, record: logging.LogRecord) -> bool:
        for name in self.fields.intersection(record.__dict__):
            if record.__dict__[name] not in (None, ""):
                record.__dict__[name] = REDACTED
        return True
