"""Endpoint de push do evento "user created".

Endpoint:
- POST /events/auth/user-created

Responde 200 sempre que o evento foi lido: o handler absorve falhas de
sincronização, e status fora de 2xx faria a plataforma reentregar o evento.
Eventos malformados também recebem 200 ("ignored") para não entrar em loop
de reentrega. O mesmo vale quando o handler não pôde ser montado por
configuração inválida em desenvolvimento.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from api.connectors.firebase_auth import AuthEventRequestError, parse_user_created_request
from app.bootstrap.dependencies import get_account_sync_handler
from app.observability import reset_correlation_id, set_correlation_id

logger = logging.getLogger(__name__)

router = APIRouter()

# Configuração de destino inválida (apenas fora de staging/production)
HANDLER_UNAVAILABLE_REASON = "handler_unavailable"


@router.post("/user-created")
async def receive_user_created(request: Request) -> JSONResponse:
    """Recebe o evento e executa uma tentativa de sincronização."""
    raw_body = await request.body()
    try:
        received = parse_user_created_request(raw_body, request.headers)
    except AuthEventRequestError as exc:
        logger.warning(
            "auth_event_rejected",
            extra={"reason": str(exc), "body_size": len(raw_body)},
        )
        return JSONResponse({"status": "ignored", "reason": str(exc)})

    try:
        handler = get_account_sync_handler()
    except ValueError as exc:
        logger.error(
            "account_sync_handler_unavailable",
            extra={"uid": received.event.uid, "error": str(exc)},
        )
        return JSONResponse({"status": "ignored", "reason": HANDLER_UNAVAILABLE_REASON})

    token = set_correlation_id(received.event_id)
    try:
        await handler.on_account_created(received.event)
    finally:
        reset_correlation_id(token)

    return JSONResponse({"status": "processed"})
