"""Testes da aplicação FastAPI montada (rotas registradas)."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from api.routes.auth_events import user_created
from app.app import create_app
from app.bootstrap.dependencies import get_account_sync_handler
from app.domain.account import AccountCreatedEvent
from config.settings import get_account_sync_settings, get_base_settings


class RecordingHandler:
    def __init__(self) -> None:
        self.events: list[AccountCreatedEvent] = []

    async def on_account_created(self, event: AccountCreatedEvent) -> None:
        self.events.append(event)


@pytest.fixture
def client() -> TestClient:
    # Sem `with`: o lifespan (validação de settings) não roda nestes testes
    return TestClient(create_app())


def test_health_route_is_registered(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_user_created_route_is_registered(
    client: TestClient, monkeypatch: pytest.MonkeyPatch
) -> None:
    handler = RecordingHandler()
    monkeypatch.setattr(user_created, "get_account_sync_handler", lambda: handler)

    response = client.post(
        "/events/auth/user-created",
        json={"uid": "uid-001", "displayName": "Ana"},
        headers={"ce-id": "evt-1"},
    )

    assert response.status_code == 200
    assert response.json() == {"status": "processed"}
    assert handler.events[0].display_name == "Ana"


@pytest.fixture
def fresh_settings_cache() -> Iterator[None]:
    get_base_settings.cache_clear()
    get_account_sync_settings.cache_clear()
    get_account_sync_handler.cache_clear()
    yield
    get_base_settings.cache_clear()
    get_account_sync_settings.cache_clear()
    get_account_sync_handler.cache_clear()


def test_development_boots_with_invalid_base_url(
    monkeypatch: pytest.MonkeyPatch,
    caplog: pytest.LogCaptureFixture,
    fresh_settings_cache: None,
) -> None:
    caplog.set_level(logging.WARNING)
    monkeypatch.setenv("ENVIRONMENT", "development")
    monkeypatch.setenv("SONA_API_BASE_URL", "not-a-url")

    with TestClient(create_app()) as running:
        health = running.get("/health")
        response = running.post(
            "/events/auth/user-created",
            json={"uid": "uid-001"},
            headers={"ce-id": "evt-2"},
        )

    assert health.status_code == 200
    assert response.status_code == 200
    assert response.json() == {"status": "ignored", "reason": "handler_unavailable"}
    messages = [record.getMessage() for record in caplog.records]
    assert "settings_validation_failed" in messages
    assert messages.count("account_sync_handler_unavailable") == 2


def test_production_refuses_to_boot_with_invalid_base_url(
    monkeypatch: pytest.MonkeyPatch, fresh_settings_cache: None
) -> None:
    monkeypatch.setenv("ENVIRONMENT", "production")
    monkeypatch.setenv("SONA_API_BASE_URL", "not-a-url")

    with pytest.raises(RuntimeError, match="Configuração inválida para production"):
        with TestClient(create_app()):
            pass
