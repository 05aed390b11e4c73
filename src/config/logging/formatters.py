"""Formatter JSON dos logs do relay.

Cada linha emitida é um objeto JSON com os campos base abaixo, mais
qualquer campo passado via `extra` (uid, response, error, ...).
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Campos presentes em toda linha de log
REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

# Nomes publicados no JSON (Cloud Logging entende "level")
FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}

ISO_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"


def create_json_formatter() -> JsonFormatter:
    """Cria o formatter JSON com os campos base renomeados.

    Exemplo de output:
        {"asctime": "2026-10-19T10:30:00+0000", "level": "INFO",
         "logger": "app.use_cases.accounts.sync_account_created",
         "message": "account_sync_succeeded", "correlation_id": "evt-1",
         "service": "account_sync_relay", "uid": "u1", "response": {"id": "abc"}}
    """
    return JsonFormatter(
        " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS),
        rename_fields=FIELD_RENAME_MAP,
        datefmt=ISO_DATE_FORMAT,
        json_ensure_ascii=False,
    )
