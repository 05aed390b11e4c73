"""Protocolos HTTP usados pelo app.

Evita dependência direta do httpx nos casos de uso.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from .models import JsonPostResult


class JsonHttpClientProtocol(Protocol):
    """Contrato mínimo para POST de um documento JSON."""

    async def send(self, url: str, payload: dict[str, Any]) -> JsonPostResult: ...
