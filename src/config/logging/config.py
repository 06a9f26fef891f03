"""Configuração centralizada de logging.

Um único handler JSON no root logger. Os loggers do uvicorn são
redirecionados para ele, então acesso HTTP, startup e eventos de envio
saem no mesmo formato e com o mesmo correlation_id.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.logging.filters import CorrelationIdFilter, SensitiveFieldFilter
from config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import TextIO

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "whatsapi"

UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
    stream: TextIO | None = None,
) -> logging.Handler:
    """Instala o handler JSON no root logger.

    Chamada pelo bootstrap (initialize_app / initialize_test_app).

    Args:
        level: DEBUG, INFO, WARNING, ERROR ou CRITICAL (case insensitive).
        service_name: Valor do campo `service`.
        correlation_id_getter: Fonte do correlation_id do request corrente.
        stream: Destino do output (default: stderr).

    Returns:
        O handler instalado.

    Raises:
        ValueError: Nível de log inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler(stream)
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))
    handler.addFilter(SensitiveFieldFilter())

    root = logging.getLogger()
    root.setLevel(level_upper)
    root.handlers = [handler]

    for name in UVICORN_LOGGERS:
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.handlers = []
        uvicorn_logger.propagate = True

    return handler


def get_logger(name: str) -> logging.Logger:
    """Logger do módulo; service e correlation_id vêm do handler do root."""
    return logging.getLogger(name)
