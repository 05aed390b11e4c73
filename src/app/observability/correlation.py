"""correlation_id por invocação, injetado em todos os logs.

No relay o correlation_id é o id do evento de criação de conta
(CloudEvent `ce-id`), ou um UUID novo quando o evento não traz id.

Uso:
    token = set_correlation_id(event_id)
    try:
        await use_case.on_account_created(event)
    finally:
        reset_correlation_id(token)
"""

from __future__ import annotations

import uuid
from contextvars import ContextVar, Token

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def get_correlation_id() -> str:
    """Retorna o correlation_id do contexto atual ("" se não definido)."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o correlation_id; gera um UUID quando não informado."""
    return _correlation_id.set(correlation_id or generate_correlation_id())


def reset_correlation_id(token: Token[str]) -> None:
    """Restaura o valor anterior ao `set_correlation_id` correspondente."""
    _correlation_id.reset(token)


def generate_correlation_id() -> str:
    return str(uuid.uuid4())
