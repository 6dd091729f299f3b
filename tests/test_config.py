"""Tests for configuration and Secret Manager loading."""

from unittest.mock import MagicMock

import pytest
from google.api_core import exceptions

from zoom_meetings.config import Config
from zoom_meetings.gcp.secret_manager import SecretManagerClient


@pytest.fixture
def oauth_config(monkeypatch):
    monkeypatch.setattr(Config, "ZOOM_AUTH_MODE", "oauth")
    monkeypatch.setattr(Config, "ZOOM_ACCOUNT_ID", "account")
    monkeypatch.setattr(Config, "ZOOM_CLIENT_ID", "client")
    monkeypatch.setattr(Config, "ZOOM_CLIENT_SECRET", "")
    monkeypatch.setattr(Config, "CACHE_BACKEND", "memory")
    return Config


def test_validate_reports_missing_oauth_values(oauth_config):
    assert oauth_config.validate() == ["ZOOM_CLIENT_SECRET"]


def test_validate_jwt_mode(monkeypatch):
    monkeypatch.setattr(Config, "ZOOM_AUTH_MODE", "jwt")
    monkeypatch.setattr(Config, "ZOOM_API_KEY", "key")
    monkeypatch.setattr(Config, "ZOOM_API_SECRET", "")
    monkeypatch.setattr(Config, "CACHE_BACKEND", "firestore")
    monkeypatch.setattr(Config, "GCP_PROJECT_ID", "")

    assert Config.validate() == ["ZOOM_API_SECRET", "GCP_PROJECT_ID"]


def test_auth_settings_shape(oauth_config):
    auth = oauth_config.auth_settings()["auth"]

    assert auth["mode"] == "oauth"
    assert auth["accountId"] == "account"
    assert auth["clientId"] == "client"
    assert auth["clientSecret"] == ""


def test_load_secrets_overlays_found_values(oauth_config):
    secret_client = MagicMock()
    secret_client.get_zoom_credentials.return_value = {
        "ZOOM_CLIENT_SECRET": "from-secret-manager",
        "ZOOM_ACCOUNT_ID": None,
    }

    oauth_config.load_secrets(secret_client)

    assert Config.ZOOM_CLIENT_SECRET == "from-secret-manager"
    assert Config.ZOOM_ACCOUNT_ID == "account", "Missing secrets must keep the environment value"


def _secret_response(value: str):
    response = MagicMock()
    response.payload.data = value.encode("UTF-8")
    return response


def test_secret_manager_reads_latest_version():
    service = MagicMock()
    service.access_secret_version.return_value = _secret_response("s3cret")

    value = SecretManagerClient("project", client=service).get_secret("zoom-client-secret")

    assert value == "s3cret"
    service.access_secret_version.assert_called_once_with(
        name="projects/project/secrets/zoom-client-secret/versions/latest"
    )


def test_secret_manager_missing_secret_returns_none():
    service = MagicMock()
    service.access_secret_version.side_effect = exceptions.NotFound("no such secret")

    assert SecretManagerClient("project", client=service).get_secret("zoom-api-key") is None


def test_get_zoom_credentials_maps_config_attributes():
    service = MagicMock()

    def access(name):
        if "zoom-account-id" in name:
            return _secret_response("account-from-sm")
        raise exceptions.NotFound(name)

    service.access_secret_version.side_effect = access

    credentials = SecretManagerClient("project", client=service).get_zoom_credentials()

    assert credentials["ZOOM_ACCOUNT_ID"] == "account-from-sm"
    assert credentials["ZOOM_CLIENT_SECRET"] is None
    assert set(credentials) == {
        "ZOOM_ACCOUNT_ID",
        "ZOOM_CLIENT_ID",
        "ZOOM_CLIENT_SECRET",
        "ZOOM_API_KEY",
        "ZOOM_API_SECRET",
    }
