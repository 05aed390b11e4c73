"""Parse do evento "user created" do Firebase Authentication.

O evento chega por push HTTP (Eventarc → Cloud Run) em um de dois modos:
- binary: headers `ce-*` e corpo = registro do usuário
- structured: corpo = CloudEvent com `specversion` e `data`
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from app.domain.account import AccountCreatedEvent

if TYPE_CHECKING:
    from collections.abc import Mapping

USER_CREATED_EVENT_TYPE = "google.firebase.auth.user.v1.created"


class AuthEventRequestError(ValueError):
    """Erro base para eventos de auth que não podem ser processados."""


class InvalidJsonError(AuthEventRequestError):
    """Corpo não é JSON ou não é um objeto."""


class InvalidEventError(AuthEventRequestError):
    """Evento sem uid válido ou de tipo inesperado."""


@dataclass(frozen=True, slots=True)
class ReceivedAuthEvent:
    """Evento parseado mais os atributos CloudEvent disponíveis."""

    event: AccountCreatedEvent
    event_id: str | None = None
    event_type: str | None = None


def parse_user_created_request(
    raw_body: bytes,
    headers: Mapping[str, str],
) -> ReceivedAuthEvent:
    """Parseia o corpo do push em AccountCreatedEvent.

    Args:
        raw_body: Corpo bruto do request
        headers: Headers recebidos

    Raises:
        InvalidJsonError: Se o JSON estiver inválido ou não for objeto
        InvalidEventError: Se o tipo não for "user created" ou faltar uid

    Returns:
        ReceivedAuthEvent com o id do evento quando presente.
    """
    body = _load_object(raw_body)
    lowered = {key.lower(): value for key, value in headers.items()}

    if "specversion" in body:
        event_id = body.get("id")
        event_type = body.get("type")
        data = body.get("data")
        if not isinstance(data, dict):
            raise InvalidEventError("cloudevent_data_not_object")
    else:
        event_id = lowered.get("ce-id")
        event_type = lowered.get("ce-type")
        data = body

    if event_type and event_type != USER_CREATED_EVENT_TYPE:
        raise InvalidEventError("unexpected_event_type")

    try:
        event = AccountCreatedEvent.model_validate(data)
    except ValidationError as exc:
        raise InvalidEventError("invalid_user_record") from exc

    return ReceivedAuthEvent(
        event=event,
        event_id=str(event_id) if event_id else None,
        event_type=event_type,
    )


def _load_object(raw_body: bytes) -> dict[str, Any]:
    try:
        payload = json.loads(raw_body or b"{}")
    except json.JSONDecodeError as exc:
        raise InvalidJsonError("invalid_json") from exc

    if not isinstance(payload, dict):
        raise InvalidJsonError("payload_not_object")
    return payload
