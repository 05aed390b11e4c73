"""Modelos de domínio da sincronização de contas.

- AccountCreatedEvent: campos lidos do evento de criação de conta do
  provedor de identidade (somente leitura, uma vez por invocação).
- SyncPayload: documento normalizado enviado à API downstream; criado
  a cada invocação e descartado ao final.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class AccountCreatedEvent(BaseModel):
    """Conta recém-criada no provedor de identidade."""

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    uid: str = Field(..., min_length=1, description="Identificador canônico da conta.")
    email: str | None = Field(default=None, description="Email, se informado.")
    display_name: str | None = Field(
        default=None,
        alias="displayName",
        description="Nome de exibição, se informado.",
    )


class SyncPayload(BaseModel):
    """Corpo do POST para /api/auth/sync-user.

    `firebase_uid` identifica o registro downstream e nunca é vazio.
    Campos opcionais ausentes (ou null) viram null. String vazia informada
    é mantida como "": só a ausência vira null, diferente de `email || null`.
    """

    model_config = ConfigDict(frozen=True)

    firebase_uid: str = Field(..., min_length=1)
    email: str | None = None
    display_name: str | None = None

    @classmethod
    def from_event(cls, event: AccountCreatedEvent) -> SyncPayload:
        return cls(
            firebase_uid=event.uid,
            email=event.email,
            display_name=event.display_name,
        )

    def to_wire(self) -> dict[str, Any]:
        """Dict pronto para JSON, sempre com as três chaves."""
        return self.model_dump(mode="json")
