"""Access token strategies for the Zoom API.

Two authentication schemes are supported:

- ``oauth``: Server-to-Server OAuth. Account credentials are exchanged for a
  bearer token at the Zoom identity endpoint and the granted scopes are
  checked.
- ``jwt``: legacy JWT apps. A short-lived token is signed locally with the
  API secret; no network call is made.
"""

import base64
import logging
import re
import time
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
import requests

from zoom_meetings.exceptions import (
    AuthenticationError,
    ConfigurationError,
    ScopeError,
)
from zoom_meetings.models import AccessToken

logger = logging.getLogger(__name__)

OAUTH_BASE_URL = "https://zoom.us"
REQUIRED_SCOPES = ("user:read:admin", "recording:read:admin", "meeting:read:admin")

# Refresh cached tokens this long before Zoom expires them
EXPIRY_BUFFER = timedelta(minutes=5)


class AccessTokenStrategy:
    """Produces access tokens for the Zoom data client."""

    def create_token(self) -> AccessToken:
        raise NotImplementedError


class AccountCredentialsStrategy(AccessTokenStrategy):
    """Server-to-Server OAuth using the account_credentials grant."""

    def __init__(
        self,
        account_id: str,
        client_id: str,
        client_secret: str,
        base_url: str = OAUTH_BASE_URL,
        timeout: int = 30,
    ):
        if not account_id or not client_id or not client_secret:
            raise ConfigurationError(
                "Please set a Zoom account id, client id and secret to be able to authenticate."
            )

        self.account_id = account_id
        self.client_id = client_id
        self.client_secret = client_secret
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._token: Optional[AccessToken] = None

    def _auth_headers(self) -> dict:
        credentials = f"{self.client_id}:{self.client_secret}"
        encoded_credentials = base64.b64encode(credentials.encode()).decode()
        return {
            "Authorization": f"Basic {encoded_credentials}",
            "Content-Type": "application/x-www-form-urlencoded",
        }

    def create_token(self) -> AccessToken:
        """
        Get OAuth access token for Zoom API using Server-to-Server OAuth.

        Returns:
            Access token with the granted scopes
        """
        # Check if we have a valid cached token
        if self._token and not self._token.is_expired(EXPIRY_BUFFER):
            return self._token

        url = f"{self.base_url}/oauth/token"
        data = {
            "grant_type": "account_credentials",
            "account_id": self.account_id,
        }

        try:
            response = requests.post(url, headers=self._auth_headers(), data=data, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logger.error(f"Network error getting Zoom access token: {e}")
            raise AuthenticationError(f"Could not reach the Zoom identity endpoint: {e}") from e

        if response.status_code != 200:
            logger.error(f"Failed to get Zoom access token: {response.status_code}")
            if response.text:
                logger.error(f"Response: {response.text[:200]}")
            raise AuthenticationError(
                "Could not fetch Zoom access token. Please check the settings for account ID, "
                "client ID and client secret, as well as your Zoom app.",
                status_code=response.status_code,
            )

        try:
            payload = response.json()
            access_token = payload["access_token"]
            scope = payload.get("scope") or ""
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            raise AuthenticationError(f"Malformed Zoom access token response: {e}") from e

        scopes = frozenset(s for s in re.split(r"[,\s]+", scope) if s)
        missing = [s for s in REQUIRED_SCOPES if s not in scopes]
        if missing:
            logger.error(f"Zoom app is missing scopes: {', '.join(missing)}")
            raise ScopeError(
                f"Please ensure your Zoom app has the following scopes: {', '.join(REQUIRED_SCOPES)}"
            )

        expires_at = None
        if payload.get("expires_in"):
            expires_at = datetime.now(timezone.utc) + timedelta(seconds=int(payload["expires_in"]))

        self._token = AccessToken(access_token, scopes, expires_at)
        logger.info("Successfully obtained Zoom access token")
        return self._token


class SignedTokenStrategy(AccessTokenStrategy):
    """Locally signed HS256 token for legacy Zoom JWT apps."""

    def __init__(self, api_key: str, api_secret: str, lifetime: int = 60):
        if not api_key or not api_secret:
            raise ConfigurationError(
                "Please set a Zoom API key and secret to be able to authenticate."
            )

        self.api_key = api_key
        self.api_secret = api_secret
        self.lifetime = lifetime

    def create_token(self) -> AccessToken:
        expires = int(time.time()) + self.lifetime
        token = jwt.encode({"iss": self.api_key, "exp": expires}, self.api_secret, algorithm="HS256")
        return AccessToken(token, frozenset(), datetime.fromtimestamp(expires, tz=timezone.utc))


def resolve(account_id: str, client_id: str, client_secret: str, **kwargs) -> AccessToken:
    """Exchange account credentials for an access token in one call."""
    return AccountCredentialsStrategy(account_id, client_id, client_secret, **kwargs).create_token()


def create_token_strategy(
    settings: dict,
    oauth_base_url: str = OAUTH_BASE_URL,
    timeout: int = 30,
) -> AccessTokenStrategy:
    """
    Select the token strategy described by the settings.

    Args:
        settings: Mapping of the form {"auth": {"mode": ..., "accountId": ..., ...}}
        oauth_base_url: Zoom identity host for the OAuth strategy
        timeout: Request timeout in seconds

    Returns:
        Configured token strategy
    """
    auth = settings.get("auth") or {}
    mode = (auth.get("mode") or "oauth").lower()

    if mode == "oauth":
        return AccountCredentialsStrategy(
            auth.get("accountId", ""),
            auth.get("clientId", ""),
            auth.get("clientSecret", ""),
            base_url=oauth_base_url,
            timeout=timeout,
        )
    if mode == "jwt":
        return SignedTokenStrategy(auth.get("apiKey", ""), auth.get("apiSecret", ""))

    raise ConfigurationError(f"Unknown Zoom auth mode: {mode}")
