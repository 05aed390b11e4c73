"""Bootstrap da aplicação: inicialização e wiring.

Composition root: configura logging, valida settings e conecta as
implementações concretas aos protocolos.

Uso:
    from app.bootstrap import initialize_app, validate_runtime_settings

    initialize_app()
    validate_runtime_settings()
"""

from __future__ import annotations

import logging
import os

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import get_account_sync_settings, get_base_settings

SERVICE_NAME = "account_sync_relay"

# Nível de log padrão (pode ser sobrescrito por LOG_LEVEL)
DEFAULT_LOG_LEVEL = "INFO"

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Configura logging JSON com correlation_id. Chamar uma vez no boot."""
    log_level = os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()

    configure_logging(
        level=log_level,
        service_name=SERVICE_NAME,
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` registra alerta sem bloquear execução local.

    Raises:
        RuntimeError: Se houver erro de configuração em ambiente estrito.
    """
    base = get_base_settings()
    sync = get_account_sync_settings()

    errors: list[str] = []
    errors.extend(f"base: {error}" for error in base.validate())
    errors.extend(f"account_sync: {error}" for error in sync.validate())

    if not errors:
        logger.info(
            "settings_validated",
            extra={
                "component": "bootstrap",
                "result": "ok",
                "environment": base.environment,
                "sync_endpoint": sync.sync_endpoint,
            },
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if base.is_strict:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")
