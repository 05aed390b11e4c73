"""Entrypoint do account-sync-relay.

Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI) que recebe o
push do evento de criação de conta.

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 8080

Uso (desenvolvimento):
    uvicorn app.app:app --reload --host 0.0.0.0 --port 8080
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI

from api.routes import create_api_router
from app.bootstrap import initialize_app, validate_runtime_settings
from app.bootstrap.dependencies import get_account_sync_handler
from config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

# Inicializar logging ANTES de qualquer log de módulo
initialize_app()

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Valida configuração e monta o handler antes de aceitar eventos.

    Fora de ambiente estrito, configuração inválida não bloqueia o boot:
    o handler fica indisponível e a rota de eventos só confirma e registra.
    """
    logger.info("app_starting")
    validate_runtime_settings()
    try:
        handler = get_account_sync_handler()
    except ValueError as exc:
        logger.error(
            "account_sync_handler_unavailable",
            extra={"component": "bootstrap", "error": str(exc)},
        )
    else:
        logger.info(
            "account_sync_handler_ready",
            extra={"endpoint": getattr(handler, "endpoint", None)},
        )

    yield

    logger.info("app_shutting_down")


def create_app() -> FastAPI:
    """Cria e configura a aplicação FastAPI."""
    fastapi_app = FastAPI(
        title="account-sync-relay",
        description="Relay de contas criadas no Firebase Auth para a API de usuários",
        version="1.0.0",
        lifespan=lifespan,
    )

    fastapi_app.include_router(create_api_router())

    logger.info("app_configured")

    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta (desenvolvimento)."""
    import uvicorn

    uvicorn.run(
        "app.app:app",
        host="0.0.0.0",
        port=8080,
        reload=True,
    )


if __name__ == "__main__":
    main()
