"""Testes do parse do evento "user created"."""

from __future__ import annotations

import json

import pytest

from api.connectors.firebase_auth import (
    USER_CREATED_EVENT_TYPE,
    InvalidEventError,
    InvalidJsonError,
    parse_user_created_request,
)

USER_RECORD = {
    "uid": "uid-001",
    "email": "ana@example.com",
    "displayName": "Ana",
    "metadata": {"createTime": "2026-10-19T10:00:00Z"},
}


def test_binary_mode_reads_body_and_ce_headers() -> None:
    received = parse_user_created_request(
        json.dumps(USER_RECORD).encode(),
        {"Ce-Id": "evt-1", "Ce-Type": USER_CREATED_EVENT_TYPE},
    )

    assert received.event.uid == "uid-001"
    assert received.event.email == "ana@example.com"
    assert received.event.display_name == "Ana"
    assert received.event_id == "evt-1"
    assert received.event_type == USER_CREATED_EVENT_TYPE


def test_binary_mode_without_headers() -> None:
    received = parse_user_created_request(json.dumps({"uid": "uid-002"}).encode(), {})

    assert received.event.uid == "uid-002"
    assert received.event.email is None
    assert received.event_id is None


def test_structured_mode_reads_data() -> None:
    body = {
        "specversion": "1.0",
        "id": "evt-9",
        "type": USER_CREATED_EVENT_TYPE,
        "source": "//firebaseauth.googleapis.com/projects/demo",
        "data": USER_RECORD,
    }

    received = parse_user_created_request(json.dumps(body).encode(), {})

    assert received.event.uid == "uid-001"
    assert received.event_id == "evt-9"


def test_structured_mode_requires_object_data() -> None:
    body = {"specversion": "1.0", "id": "evt-9", "data": "uid-001"}

    with pytest.raises(InvalidEventError, match="cloudevent_data_not_object"):
        parse_user_created_request(json.dumps(body).encode(), {})


def test_rejects_other_event_types() -> None:
    with pytest.raises(InvalidEventError, match="unexpected_event_type"):
        parse_user_created_request(
            json.dumps(USER_RECORD).encode(),
            {"ce-type": "google.firebase.auth.user.v1.deleted"},
        )


@pytest.mark.parametrize("record", [{}, {"uid": ""}, {"email": "ana@example.com"}])
def test_rejects_record_without_uid(record: dict) -> None:
    with pytest.raises(InvalidEventError, match="invalid_user_record"):
        parse_user_created_request(json.dumps(record).encode(), {})


def test_rejects_invalid_json() -> None:
    with pytest.raises(InvalidJsonError, match="invalid_json"):
        parse_user_created_request(b"{not json", {})


def test_rejects_non_object_json() -> None:
    with pytest.raises(InvalidJsonError, match="payload_not_object"):
        parse_user_created_request(b"[1, 2]", {})
