"""Configuração centralizada de logging.

Uso:
    from config.logging import configure_logging, get_logger

    # Uma vez, no bootstrap
    configure_logging(level="INFO", service_name="account_sync_relay")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("account_sync_succeeded", extra={"uid": uid})
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "account_sync_relay"


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
) -> None:
    """Instala um único handler JSON no root logger.

    Args:
        level: Nível de log (case insensitive).
        service_name: Nome publicado no campo `service`.
        correlation_id_getter: Função que devolve o correlation_id do contexto.

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))

    root = logging.getLogger()
    root.setLevel(level_upper)
    # Substituir handlers existentes para evitar duplicação
    root.handlers = [handler]


def get_logger(name: str) -> logging.Logger:
    """Retorna logger para o módulo (geralmente `__name__`)."""
    return logging.getLogger(name)


def log_fallback(
    logger: logging.Logger,
    component: str,
    reason: str | None = None,
    elapsed_ms: float | None = None,
    **context: Any,
) -> None:
    """Registra que um caminho de fallback foi usado.

    Args:
        logger: Logger instance.
        component: Componente que aplicou o fallback (ex: "json_http_client").
        reason: Motivo curto (ex: "invalid_json_body").
        elapsed_ms: Tempo decorrido em ms, quando aplicável.
        **context: Campos adicionais (ex: uid).
    """
    extra: dict[str, object] = {
        "fallback_used": True,
        "component": component,
        **context,
    }
    if reason:
        extra["reason"] = reason
    if elapsed_ms is not None:
        extra["elapsed_ms"] = elapsed_ms

    logger.warning(
        "Fallback applied for %s",
        component,
        extra=extra,
    )
