"""Shared fixtures for the Zoom client tests."""

import json
from unittest.mock import MagicMock

import pytest

from zoom_meetings.auth import REQUIRED_SCOPES, AccessTokenStrategy
from zoom_meetings.cache import InMemoryCache
from zoom_meetings.clients import ZoomClient
from zoom_meetings.models import AccessToken


class StaticTokenStrategy(AccessTokenStrategy):
    """Hands out a fixed token and counts how often it was asked."""

    def __init__(self, token: str = "test-token", expires_at=None):
        self.token = token
        self.expires_at = expires_at
        self.calls = 0

    def create_token(self) -> AccessToken:
        self.calls += 1
        return AccessToken(self.token, frozenset(REQUIRED_SCOPES), self.expires_at)


def make_response(status_code=200, payload=None, text=None):
    """Build a fake requests.Response."""
    response = MagicMock()
    response.status_code = status_code
    if payload is not None:
        response.json.return_value = payload
        response.text = json.dumps(payload)
    else:
        response.json.side_effect = ValueError("Expecting value: line 1 column 1 (char 0)")
        response.text = text or ""
    return response


def page(items, next_page_token=""):
    return make_response(payload={"meetings": items, "next_page_token": next_page_token})


@pytest.fixture
def session(monkeypatch):
    """Fake requests.Session handed to ZoomClient."""
    fake = MagicMock()
    fake.headers = {}
    monkeypatch.setattr("zoom_meetings.clients.zoom_client.requests.Session", lambda: fake)
    return fake


@pytest.fixture
def token_strategy():
    return StaticTokenStrategy()


@pytest.fixture
def cache():
    return InMemoryCache()


@pytest.fixture
def client(token_strategy, cache, session):
    return ZoomClient(token_strategy, cache=cache)
