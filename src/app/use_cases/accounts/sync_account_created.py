"""Use case: sincronizar conta recém-criada com a API downstream.

Fluxo por invocação:
    Received → Extracted → TargetResolved → PayloadBuilt → Sent
    → Succeeded | FailedAbsorbed

Os dois estados finais completam normalmente. O trigger de origem trata
exceção como pedido de retry, e retry de criação de conta não é desejado:
falhas ficam visíveis apenas nos logs (`account_sync_failed`).
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from app.domain.account import SyncPayload
from app.observability import get_correlation_id, record_latency

if TYPE_CHECKING:
    from app.domain.account import AccountCreatedEvent
    from app.protocols.http_client import JsonHttpClientProtocol
    from app.protocols.models import JsonPostResult
    from config.settings import AccountSyncSettings

logger = logging.getLogger(__name__)

COMPONENT = "account_sync"


class SyncAccountCreatedUseCase:
    """Encaminha uma conta criada para POST <base>/api/auth/sync-user."""

    def __init__(
        self,
        settings: AccountSyncSettings,
        client: JsonHttpClientProtocol,
    ) -> None:
        """Inicializa o use case.

        Args:
            settings: Destino da sincronização (URL base já resolvida)
            client: Cliente HTTP JSON

        Raises:
            ValueError: Se a URL base configurada for inválida.
        """
        errors = settings.validate()
        if errors:
            raise ValueError("; ".join(errors))
        self._endpoint = settings.sync_endpoint
        self._client = client

    @property
    def endpoint(self) -> str:
        """URL completa usada em todas as invocações."""
        return self._endpoint

    async def on_account_created(self, event: AccountCreatedEvent) -> None:
        """Sincroniza a conta; nunca levanta exceção para o chamador."""
        uid = event.uid
        logger.info(
            "account_created_received",
            extra={
                "uid": uid,
                "email": event.email,
                "display_name": event.display_name,
            },
        )

        payload = SyncPayload.from_event(event)
        started_at = time.perf_counter()
        try:
            result = await self._client.send(self._endpoint, payload.to_wire())
        except Exception as exc:
            logger.exception(
                "account_sync_failed",
                extra={
                    "uid": uid,
                    "error": str(exc),
                    "error_type": type(exc).__name__,
                },
            )
            self._record_latency(uid, started_at, "failed")
            return

        if result.success:
            self._log_success(uid, result)
        else:
            self._log_failure(uid, result)
        self._record_latency(uid, started_at, "succeeded" if result.success else "failed")

    def _log_success(self, uid: str, result: JsonPostResult) -> None:
        logger.info(
            "account_sync_succeeded",
            extra={
                "uid": uid,
                "response": result.document,
                "status_code": result.status_code,
                "fallback_used": result.fallback_used,
            },
        )

    def _log_failure(self, uid: str, result: JsonPostResult) -> None:
        error = result.error
        logger.error(
            "account_sync_failed",
            extra={
                "uid": uid,
                "error": str(error),
                "error_type": type(error).__name__,
                "status_code": result.status_code,
            },
        )

    def _record_latency(self, uid: str, started_at: float, outcome: str) -> None:
        record_latency(
            COMPONENT,
            "sync_user",
            (time.perf_counter() - started_at) * 1000,
            correlation_id=get_correlation_id() or None,
            outcome=outcome,
            metadata={"uid": uid},
        )
