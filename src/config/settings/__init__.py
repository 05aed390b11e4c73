"""Agregador de settings do account-sync-relay.

Re-exporta todas as settings e funções de cada módulo.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)

# Destino de sincronização
from config.settings.account_sync import (
    DEFAULT_API_BASE_URL,
    SYNC_USER_PATH,
    AccountSyncSettings,
    get_account_sync_settings,
)

__all__ = [
    # Constants
    "DEFAULT_API_BASE_URL",
    "SYNC_USER_PATH",
    # Account sync
    "AccountSyncSettings",
    # Base
    "BaseSettings",
    "Environment",
    "get_account_sync_settings",
    "get_base_settings",
]
