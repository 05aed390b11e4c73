"""Exceções da sincronização de contas com a API downstream."""

from __future__ import annotations


class AccountSyncError(RuntimeError):
    """Base para falhas classificadas de sincronização."""


class DownstreamStatusError(AccountSyncError):
    """API downstream respondeu com status fora de 2xx.

    Carrega o status e o corpo bruto da resposta, sem reinterpretação.
    """

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"API responded with status {status_code}: {body}")
        self.status_code = status_code
        self.body = body


class TransportError(AccountSyncError):
    """Falha de rede (DNS, conexão recusada, reset, timeout).

    A mensagem é a do erro subjacente, inalterada.
    """

    def __init__(self, cause: Exception) -> None:
        super().__init__(str(cause) or type(cause).__name__)
        self.cause = cause
