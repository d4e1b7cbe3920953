"""
Name: Envelope, Middleware and Error Handling Tests

Responsibilities:
  - First-validation-error message rendering
  - Unexpected failures answer the generic 500 envelope and log the location
  - Body limit answers a 413 envelope
  - Request id propagation and health check
"""

import logging

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from workdesk import container
from workdesk.api.exception_handlers import register_exception_handlers
from workdesk.api.main import app
from workdesk.crosscutting.envelope import field_label, first_validation_message
from workdesk.crosscutting.exceptions import DatabaseError
from workdesk.crosscutting.middleware import BodyLimitMiddleware

pytestmark = [pytest.mark.unit, pytest.mark.api]


class TestValidationMessage:
    def test_field_label(self):
        assert field_label(("body", "start_date_time")) == "Start Date Time"
        assert field_label(("body",)) == "Body"
        assert field_label(("body", "items", 0)) == "Items"

    def test_missing(self):
        errors = [{"loc": ("body", "title"), "type": "missing", "msg": "Field required"}]
        assert first_validation_message(errors) == "Title is required."

    def test_value_error_keeps_custom_message(self):
        errors = [
            {
                "loc": ("body", "otp"),
                "type": "value_error",
                "msg": "Value error, OTP must be 6 digits.",
            }
        ]
        assert first_validation_message(errors) == "OTP must be 6 digits."

    def test_other_types_are_prefixed_with_label(self):
        errors = [
            {
                "loc": ("body", "id"),
                "type": "int_parsing",
                "msg": "Input should be a valid integer",
            },
            {"loc": ("body", "title"), "type": "missing", "msg": "Field required"},
        ]
        assert first_validation_message(errors) == "Id: Input should be a valid integer."

    def test_empty(self):
        assert first_validation_message([]) == "Invalid request."


class _BrokenListNotes:
    def execute(self, user_id):
        raise RuntimeError("kaboom")


class _DbDownListNotes:
    def execute(self, user_id):
        raise DatabaseError("connection lost")


def test_unexpected_error_is_generic_500(auth_headers, caplog):
    app.dependency_overrides[container.get_list_notes_use_case] = _BrokenListNotes
    try:
        client = TestClient(app, raise_server_exceptions=False)
        with caplog.at_level(logging.ERROR):
            res = client.post("/api/v1/note", headers=auth_headers)
    finally:
        app.dependency_overrides.clear()

    assert res.status_code == 200
    assert res.json() == {
        "status_code": 500,
        "message": "Something went wrong",
        "data": None,
    }
    record = next(r for r in caplog.records if r.getMessage() == "Unhandled exception")
    assert record.method == "list_notes"
    assert record.error["message"] == "kaboom"
    assert record.error["file"].endswith("test_envelope_and_errors.py")
    assert record.error["line"] > 0
    assert record.created_at


def test_database_error_is_generic_500(auth_headers):
    app.dependency_overrides[container.get_list_notes_use_case] = _DbDownListNotes
    try:
        res = TestClient(app).post("/api/v1/note", headers=auth_headers)
    finally:
        app.dependency_overrides.clear()

    assert res.json()["status_code"] == 500
    assert res.json()["message"] == "Something went wrong"


def test_unknown_route_is_enveloped(client):
    body = client.post("/api/v1/does-not-exist").json()
    assert body["status_code"] == 404


def test_body_limit_answers_413_envelope():
    small = FastAPI()
    register_exception_handlers(small)
    small.add_middleware(BodyLimitMiddleware, max_bytes=16)

    @small.post("/echo")
    async def echo(payload: dict):
        return payload

    res = TestClient(small).post("/echo", json={"text": "x" * 64})

    assert res.status_code == 200
    body = res.json()
    assert body["status_code"] == 413
    assert "16 bytes" in body["message"]


def test_request_id_is_echoed(client):
    res = client.get("/healthz", headers={"X-Request-Id": "req-123"})

    assert res.headers["X-Request-Id"] == "req-123"
    assert res.json() == {"ok": True, "db": "skipped", "request_id": "req-123"}
