"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    AccountSyncError,
    DownstreamStatusError,
    TransportError,
)

__all__ = [
    "AccountSyncError",
    "DownstreamStatusError",
    "TransportError",
]
