"""Testes para config.logging.

Cobre: configure_logging, get_logger, log_fallback,
CorrelationIdFilter, create_json_formatter.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from unittest.mock import MagicMock

import pytest

from config.logging import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    CorrelationIdFilter,
    configure_logging,
    create_json_formatter,
    get_logger,
    log_fallback,
)
from config.logging.config import DEFAULT_SERVICE_NAME, VALID_LOG_LEVELS


def _record(msg: str = "message", level: int = logging.INFO) -> logging.LogRecord:
    return logging.LogRecord(
        name="test.logger",
        level=level,
        pathname="",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )


@pytest.fixture(autouse=True)
def _restore_root_logger() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


class TestConfigureLogging:
    """Testes para configure_logging."""

    @pytest.mark.parametrize(
        ("level", "expected"),
        [
            ("INFO", logging.INFO),
            ("DEBUG", logging.DEBUG),
            ("warning", logging.WARNING),
            ("ERROR", logging.ERROR),
            ("CRITICAL", logging.CRITICAL),
        ],
    )
    def test_sets_root_level(self, level: str, expected: int) -> None:
        configure_logging(level=level)
        assert logging.getLogger().level == expected

    def test_invalid_level_raises(self) -> None:
        with pytest.raises(ValueError, match="Nível de log inválido"):
            configure_logging(level="INVALID")

    def test_replaces_handlers(self) -> None:
        root = logging.getLogger()
        root.handlers = [logging.NullHandler(), logging.NullHandler()]
        configure_logging()
        assert len(root.handlers) == 1

    def test_installs_correlation_filter(self) -> None:
        configure_logging(correlation_id_getter=lambda: "evt-1")
        handler = logging.getLogger().handlers[0]
        assert any(isinstance(f, CorrelationIdFilter) for f in handler.filters)

    def test_constants(self) -> None:
        assert {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"} == VALID_LOG_LEVELS
        assert DEFAULT_SERVICE_NAME == "account_sync_relay"


class TestGetLogger:
    """Testes para get_logger."""

    def test_returns_named_logger(self) -> None:
        logger = get_logger("test.module")
        assert isinstance(logger, logging.Logger)
        assert logger.name == "test.module"
        assert get_logger("test.module") is logger


class TestLogFallback:
    """Testes para log_fallback."""

    def test_basic(self) -> None:
        logger = MagicMock(spec=logging.Logger)
        log_fallback(logger, "json_http_client")
        call_args = logger.warning.call_args
        assert call_args[0] == ("Fallback applied for %s", "json_http_client")
        extra = call_args[1]["extra"]
        assert extra == {"fallback_used": True, "component": "json_http_client"}

    def test_with_reason_elapsed_and_context(self) -> None:
        logger = MagicMock(spec=logging.Logger)
        log_fallback(
            logger,
            "json_http_client",
            reason="invalid_json_body",
            elapsed_ms=12.5,
            status_code=200,
        )
        extra = logger.warning.call_args[1]["extra"]
        assert extra["reason"] == "invalid_json_body"
        assert extra["elapsed_ms"] == 12.5
        assert extra["status_code"] == 200


class TestCorrelationIdFilter:
    """Testes para CorrelationIdFilter."""

    def test_adds_correlation_id_and_service(self) -> None:
        record = _record()
        assert CorrelationIdFilter("relay", lambda: "evt-123").filter(record) is True
        assert record.correlation_id == "evt-123"
        assert record.service == "relay"

    def test_preserves_explicit_correlation_id(self) -> None:
        record = _record()
        record.correlation_id = "explicit-id"
        CorrelationIdFilter("relay", lambda: "from-getter").filter(record)
        assert record.correlation_id == "explicit-id"

    def test_empty_string_without_getter(self) -> None:
        record = _record()
        CorrelationIdFilter("relay").filter(record)
        assert record.correlation_id == ""


class TestCreateJsonFormatter:
    """Testes para create_json_formatter e constantes."""

    def test_constants(self) -> None:
        assert set(REQUIRED_LOG_FIELDS) == {
            "asctime",
            "levelname",
            "name",
            "message",
            "correlation_id",
            "service",
        }
        assert FIELD_RENAME_MAP == {"levelname": "level", "name": "logger"}

    def test_formats_record_as_json_with_extras(self) -> None:
        record = _record("account_sync_succeeded")
        record.correlation_id = "evt-1"
        record.service = "relay"
        record.uid = "uid-001"
        record.response = {"id": "abc", "name": "João"}

        output = json.loads(create_json_formatter().format(record))

        assert output["message"] == "account_sync_succeeded"
        assert output["level"] == "INFO"
        assert output["logger"] == "test.logger"
        assert output["correlation_id"] == "evt-1"
        assert output["uid"] == "uid-001"
        assert output["response"] == {"id": "abc", "name": "João"}

    def test_keeps_non_ascii_readable(self) -> None:
        record = _record("Olá")
        record.correlation_id = ""
        record.service = "relay"
        assert "Olá" in create_json_formatter().format(record)
