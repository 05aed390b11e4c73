"""Settings da sincronização de contas com a API downstream.

A URL base é resolvida uma vez (env ou fallback) e injetada no handler;
o handler nunca consulta estado global durante a invocação.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from urllib.parse import urlsplit

# Fallback quando SONA_API_BASE_URL não está definida
DEFAULT_API_BASE_URL: str = "http://api:3000"

# Path fixo do endpoint de sincronização no backend
SYNC_USER_PATH: str = "/api/auth/sync-user"


@dataclass(frozen=True)
class AccountSyncSettings:
    """Configurações do destino de sincronização.

    Attributes:
        api_base_url: URL base da API downstream (ex: https://api.example.com)
        request_timeout_seconds: Timeout HTTP; None mantém o default do httpx
    """

    api_base_url: str = DEFAULT_API_BASE_URL
    request_timeout_seconds: float | None = None

    @property
    def sync_endpoint(self) -> str:
        """URL completa do endpoint de sincronização."""
        return f"{self.api_base_url.rstrip('/')}{SYNC_USER_PATH}"

    def validate(self) -> list[str]:
        """Valida URL base e timeout.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        parts = urlsplit(self.api_base_url)
        if parts.scheme not in ("http", "https"):
            errors.append("SONA_API_BASE_URL deve usar http ou https")
        if not parts.hostname:
            errors.append("SONA_API_BASE_URL deve conter host")

        if self.request_timeout_seconds is not None and self.request_timeout_seconds <= 0:
            errors.append("SONA_API_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _parse_timeout(raw: str) -> float | None:
    value = raw.strip()
    if not value:
        return None
    return float(value)


def _load_from_env() -> AccountSyncSettings:
    """Carrega AccountSyncSettings a partir de variáveis de ambiente."""
    return AccountSyncSettings(
        api_base_url=os.getenv("SONA_API_BASE_URL", "").strip() or DEFAULT_API_BASE_URL,
        request_timeout_seconds=_parse_timeout(os.getenv("SONA_API_TIMEOUT_SECONDS", "")),
    )


@lru_cache(maxsize=1)
def get_account_sync_settings() -> AccountSyncSettings:
    """Retorna instância cacheada de AccountSyncSettings."""
    return _load_from_env()
