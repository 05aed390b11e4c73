"""Protocolo do handler de criação de conta."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.domain.account import AccountCreatedEvent


class AccountSyncProtocol(Protocol):
    """Capacidade única: sincronizar uma conta recém-criada.

    Implementações nunca propagam falhas ao chamador.
    """

    async def on_account_created(self, event: AccountCreatedEvent) -> None: ...
