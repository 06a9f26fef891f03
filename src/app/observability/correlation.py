"""Gerenciamento de correlation_id para rastreamento de requisições.

O correlation_id é propagado entre serviços e injetado em logs.
Usa ContextVar para ser async-safe.

Definido por requisição em api/middleware/correlation.py a partir do
header x-correlation-id; lido pelo CorrelationIdFilter dos logs.
"""

from __future__ import annotations

import uuid
from contextvars import ContextVar, Token

# Valores maiores vindos do header são truncados
MAX_CORRELATION_ID_LENGTH = 128

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def get_correlation_id() -> str:
    """Retorna o correlation_id do contexto atual (ou string vazia)."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o correlation_id no contexto atual.

    Args:
        correlation_id: ID recebido. Se vazio/None, gera um novo UUID.

    Returns:
        Token para reset posterior via reset_correlation_id().
    """
    value = (correlation_id or "").strip()[:MAX_CORRELATION_ID_LENGTH]
    return _correlation_id.set(value or generate_correlation_id())


def reset_correlation_id(token: Token[str]) -> None:
    """Restaura o correlation_id ao valor anterior."""
    _correlation_id.reset(token)


def generate_correlation_id() -> str:
    """Gera um novo correlation_id (UUID v4)."""
    return str(uuid.uuid4())
