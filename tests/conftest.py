"""Shared fixtures: settings, stand-in Turnstile/Resend services and a test client."""

from __future__ import annotations

import json
from typing import Any, Callable

import httpx
import pytest
from fastapi.testclient import TestClient

from contact_relay.core.config import Settings
from contact_relay.main import create_app

ORIGIN = "https://test.local"


def make_settings(**overrides: Any) -> Settings:
    values: dict[str, Any] = {
        "resend_api_key": "test-api-key",
        "from_email": "contact@example.com",
        "to_email": "owner@example.com",
        "turnstile_secret": "test-secret",
        "allowed_origins": ORIGIN,
        "site_name": "Test WANYA",
        "resend_disabled": False,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


class FakeServices:
    """Answers Turnstile and Resend calls and records every request."""

    def __init__(self) -> None:
        self.turnstile_status = 200
        self.turnstile_body: Any = {"success": True}
        self.resend_status = 200
        self.resend_body = '{"id": "email-123"}'
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if "turnstile" in request.url.path:
            return httpx.Response(self.turnstile_status, content=json.dumps(self.turnstile_body))
        if request.url.host == "api.resend.com":
            return httpx.Response(self.resend_status, text=self.resend_body)
        raise AssertionError(f"Unexpected request target: {request.url}")

    def calls_to(self, host: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.host == host]


@pytest.fixture
def valid_payload() -> dict[str, str]:
    return {
        "name": "テストユーザー",
        "email": "user@example.com",
        "phone": "",
        "subject": "テスト送信",
        "budget": "under_10000",
        "deadline": "ASAP",
        "message": "これはローカルテストです。よろしくお願いします。",
        "turnstileToken": "1x0000000000000000000000000000000AA",
    }


@pytest.fixture
def services() -> FakeServices:
    return FakeServices()


@pytest.fixture
def client_factory(services: FakeServices) -> Callable[..., TestClient]:
    def _build(**overrides: Any) -> TestClient:
        raise_server_exceptions = overrides.pop("raise_server_exceptions", True)
        app = create_app(make_settings(**overrides), transport=httpx.MockTransport(services))
        return TestClient(app, raise_server_exceptions=raise_server_exceptions)

    return _build


@pytest.fixture
def client(client_factory: Callable[..., TestClient]) -> TestClient:
    return client_factory()


@pytest.fixture
def settings_factory() -> Callable[..., Settings]:
    return make_settings
