"""Shared fixtures: a mocked provider session and a relay wired to it.

No test touches the network. ``provider_session.post`` is a MagicMock whose
return value is set per test with the ``make_response`` fixture.
"""

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from healthbot.api.dependencies import get_relay
from healthbot.api.main import app
from healthbot.relay.provider import GeminiClient, ProviderConfig
from healthbot.relay.relay import AnswerRelay


def _make_response(status_code=200, json_body=None, text=""):
    """Build a stand-in for ``requests.Response``."""
    response = MagicMock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 400
    response.text = text
    response.json.return_value = json_body
    return response


def _gemini_reply(text):
    return {"candidates": [{"content": {"parts": [{"text": text}], "role": "model"}}]}


@pytest.fixture(autouse=True)
def _api_key(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "test-key")


@pytest.fixture
def provider_session():
    session = MagicMock()
    session.post.return_value = _make_response(json_body=_gemini_reply("Drink water."))
    return session


@pytest.fixture
def relay(provider_session):
    return AnswerRelay(client=GeminiClient(ProviderConfig(), session=provider_session))


@pytest.fixture
def client(relay):
    """TestClient for the real app with the relay dependency overridden."""
    app.dependency_overrides[get_relay] = lambda: relay
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_response():
    """Factory fixture: build a fake provider/relay HTTP response."""
    return _make_response


@pytest.fixture
def gemini_reply():
    """Factory fixture: a generateContent body carrying one text candidate."""
    return _gemini_reply
