"""Modelos de resultado compartilhados entre protocolos."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from utils.errors import AccountSyncError, DownstreamStatusError


@dataclass(frozen=True, slots=True)
class JsonPostResult:
    """Resultado de um POST JSON: documento parseado ou erro classificado.

    Attributes:
        success: True quando a API respondeu 2xx
        document: Documento da resposta (apenas em sucesso)
        error: Erro classificado (apenas em falha)
        status_code: Status HTTP, quando houve resposta
        fallback_used: True quando o corpo 2xx não era JSON e veio em {"raw": ...}
    """

    success: bool
    document: dict[str, Any] | None = None
    error: AccountSyncError | None = None
    status_code: int | None = None
    fallback_used: bool = False

    @classmethod
    def ok(
        cls,
        document: dict[str, Any],
        status_code: int,
        fallback_used: bool = False,
    ) -> JsonPostResult:
        return cls(
            success=True,
            document=document,
            status_code=status_code,
            fallback_used=fallback_used,
        )

    @classmethod
    def failed(cls, error: AccountSyncError) -> JsonPostResult:
        status_code = error.status_code if isinstance(error, DownstreamStatusError) else None
        return cls(success=False, error=error, status_code=status_code)
