"""Métricas via structured logging.

As entradas `metric_latency` podem ser agregadas a partir dos logs
(ex: log-based metrics do Cloud Logging).
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
    correlation_id: str | None = None,
    outcome: str | None = None,
    metadata: dict[str, str | float | int] | None = None,
) -> None:
    """Registra latência de operação.

    Args:
        component: Nome do componente (ex: "account_sync")
        operation: Nome da operação (ex: "sync_user")
        latency_ms: Latência em milissegundos
        correlation_id: ID de correlação para rastreamento
        outcome: Resultado da operação (ex: "succeeded", "failed")
        metadata: Campos adicionais opcionais (ex: uid)
    """
    extra: dict[str, object] = {
        "metric_type": "latency",
        "component": component,
        "operation": operation,
        "latency_ms": round(latency_ms, 2),
    }
    if correlation_id:
        extra["correlation_id"] = correlation_id
    if outcome:
        extra["outcome"] = outcome
    if metadata:
        extra.update(metadata)

    logger.info("metric_latency", extra=extra)
