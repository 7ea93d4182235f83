"""Shared fixtures for the battlenet-oauth test suite."""
from __future__ import annotations

import httpx
import pytest

from battlenet_oauth.config import Config, Settings


class RecordingTransport(httpx.MockTransport):
    """MockTransport answering every request with one canned response, keeping the requests."""

    def __init__(self, payload=None, status_code: int = 200, content: bytes | None = None) -> None:
        self.requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            if content is not None:
                return httpx.Response(status_code, content=content)
            return httpx.Response(status_code, json=payload)

        super().__init__(handler)


@pytest.fixture
def token_payload() -> dict:
    return {"access_token": "abc", "token_type": "bearer", "expires_in": 3600}


@pytest.fixture
def check_token_payload() -> dict:
    return {
        "scope": ["sc1", "sc2"],
        "exp": 1700000000,
        "authorities": [{"authority": "ROLE_USER"}],
        "client_id": "my-client",
    }


@pytest.fixture
def make_transport():
    """Factory for RecordingTransport instances."""
    return RecordingTransport


@pytest.fixture
def fake_settings() -> Settings:
    return Settings(
        client_id="test-client-id",
        client_secret="test-client-secret",
        region="eu",
    )


@pytest.fixture
def fake_config(fake_settings) -> Config:
    return Config(settings=fake_settings, region_hosts={"kr": "kr.example.test"})
