"""Factories do handler de sincronização e do cliente HTTP."""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING

from app.infra.http import HttpClientConfig, JsonHttpClient
from app.use_cases.accounts import SyncAccountCreatedUseCase
from config.settings import get_account_sync_settings

if TYPE_CHECKING:
    from app.protocols.account_sync import AccountSyncProtocol
    from config.settings import AccountSyncSettings


def create_json_http_client(settings: AccountSyncSettings | None = None) -> JsonHttpClient:
    """Cria cliente HTTP JSON com o timeout configurado (ou default do httpx)."""
    sync = settings or get_account_sync_settings()
    return JsonHttpClient(HttpClientConfig(timeout_seconds=sync.request_timeout_seconds))


def create_account_sync_use_case(
    settings: AccountSyncSettings | None = None,
) -> SyncAccountCreatedUseCase:
    """Monta o use case com settings explícitas.

    Raises:
        ValueError: Se a URL base configurada for inválida.
    """
    sync = settings or get_account_sync_settings()
    return SyncAccountCreatedUseCase(
        settings=sync,
        client=create_json_http_client(sync),
    )


@lru_cache(maxsize=1)
def get_account_sync_handler() -> AccountSyncProtocol:
    """Handler singleton usado pela rota de eventos."""
    return create_account_sync_use_case()
