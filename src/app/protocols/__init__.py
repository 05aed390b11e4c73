"""Protocolos e contratos do core da aplicação."""

from .account_sync import AccountSyncProtocol
from .http_client import JsonHttpClientProtocol
from .models import JsonPostResult

__all__ = [
    "AccountSyncProtocol",
    "JsonHttpClientProtocol",
    "JsonPostResult",
]
