"""Cliente HTTP JSON usado para falar com a API downstream."""

from app.infra.http.client import (
    RAW_BODY_FIELD,
    HttpClientConfig,
    JsonHttpClient,
    encode_json_body,
)

__all__ = [
    "RAW_BODY_FIELD",
    "HttpClientConfig",
    "JsonHttpClient",
    "encode_json_body",
]
