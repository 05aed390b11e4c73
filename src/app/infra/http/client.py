"""Cliente HTTP para POST de documentos JSON.

Uma tentativa por chamada, sem retry e sem timeout próprio: quem precisa
de latência limitada configura `timeout_seconds` ou envolve a chamada.

Classificação da resposta:
- 2xx: corpo parseado como JSON; se não for um objeto JSON, o documento
  vira {"raw": <texto>} e `fallback_used` fica True
- outro status: DownstreamStatusError(status, corpo)
- falha de rede ou de leitura do corpo: TransportError(erro original)
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any
from urllib.parse import urlsplit

import httpx

from app.protocols.models import JsonPostResult
from config.logging import log_fallback
from utils.errors import AccountSyncError, DownstreamStatusError, TransportError

logger = logging.getLogger(__name__)

ALLOWED_SCHEMES = frozenset({"http", "https"})

# Chave do documento de fallback para corpo 2xx não-JSON
RAW_BODY_FIELD = "raw"


@dataclass(frozen=True)
class HttpClientConfig:
    """Configuração do cliente HTTP.

    `timeout_seconds=None` mantém o timeout padrão do httpx.
    """

    timeout_seconds: float | None = None
    verify_ssl: bool = True


class JsonHttpClient:
    """POST de JSON com resultado classificado."""

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config or HttpClientConfig()
        self._transport = transport

    async def send(self, url: str, payload: dict[str, Any]) -> JsonPostResult:
        """Envia o payload e devolve sucesso ou erro classificado, sem levantar.

        Raises:
            ValueError: Se a URL não for http(s) absoluta.
        """
        try:
            return await self._post(url, payload)
        except AccountSyncError as exc:
            return JsonPostResult.failed(exc)

    async def post_json(self, url: str, payload: dict[str, Any]) -> dict[str, Any]:
        """Variante que levanta o erro classificado em vez de devolvê-lo.

        Raises:
            ValueError: Se a URL não for http(s) absoluta.
            DownstreamStatusError: Se a API responder fora de 2xx.
            TransportError: Se a requisição falhar na rede.
        """
        result = await self._post(url, payload)
        return result.document or {}

    async def _post(self, url: str, payload: dict[str, Any]) -> JsonPostResult:
        _ensure_absolute_http_url(url)
        body = encode_json_body(payload)
        headers = {
            "Content-Type": "application/json",
            "Content-Length": str(len(body)),
        }

        try:
            async with httpx.AsyncClient(**self._client_kwargs()) as client:
                response = await client.post(url, content=body, headers=headers)
        except httpx.RequestError as exc:
            logger.debug(
                "json_post_transport_error",
                extra={"url": url, "error_type": type(exc).__name__},
            )
            raise TransportError(exc) from exc

        text = response.text
        if not 200 <= response.status_code < 300:
            raise DownstreamStatusError(response.status_code, text)

        document = _parse_document(text)
        if document is None:
            log_fallback(
                logger,
                "json_http_client",
                reason="invalid_json_body",
                url=url,
                status_code=response.status_code,
            )
            return JsonPostResult.ok(
                {RAW_BODY_FIELD: text},
                status_code=response.status_code,
                fallback_used=True,
            )

        logger.debug(
            "json_post_completed",
            extra={"url": url, "status_code": response.status_code},
        )
        return JsonPostResult.ok(document, status_code=response.status_code)

    def _client_kwargs(self) -> dict[str, Any]:
        kwargs: dict[str, Any] = {"verify": self._config.verify_ssl}
        if self._config.timeout_seconds is not None:
            kwargs["timeout"] = httpx.Timeout(self._config.timeout_seconds)
        if self._transport is not None:
            kwargs["transport"] = self._transport
        return kwargs


def encode_json_body(payload: dict[str, Any]) -> bytes:
    """Serializa o payload como JSON compacto em UTF-8."""
    return json.dumps(payload, ensure_ascii=False, separators=(",", ":")).encode("utf-8")


def _ensure_absolute_http_url(url: str) -> None:
    parts = urlsplit(url)
    if parts.scheme not in ALLOWED_SCHEMES or not parts.hostname:
        raise ValueError(f"URL deve ser http(s) absoluta: {url!r}")


def _parse_document(text: str) -> dict[str, Any] | None:
    try:
        parsed = json.loads(text)
    except (json.JSONDecodeError, RecursionError):
        return None
    return parsed if isinstance(parsed, dict) else None
