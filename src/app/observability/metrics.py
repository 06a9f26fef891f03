"""Registro de métricas via structured logging.

As métricas são registradas como logs estruturados e podem ser agregadas
posteriormente pelo sistema de logs.

Uso:
    from app.observability import record_latency

    start = time.perf_counter()
    # ... operação ...
    record_latency("whatsapp_web", "send_text", (time.perf_counter() - start) * 1000)
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
    correlation_id: str | None = None,
) -> None:
    """Registra latência de operação.

    Args:
        component: Nome do componente (ex: "whatsapp_web")
        operation: Nome da operação (ex: "send_image")
        latency_ms: Latência em milissegundos
        correlation_id: ID de correlação (default: o do contexto atual)
    """
    extra: dict[str, object] = {
        "metric_type": "latency",
        "component": component,
        "operation": operation,
        "latency_ms": round(latency_ms, 2),
    }
    if correlation_id:
        extra["correlation_id"] = correlation_id
    logger.info("metric_latency", extra=extra)
