"""Secret Manager client for Zoom credential storage."""

import logging
from typing import Optional

from google.api_core import exceptions
from google.cloud import secretmanager

logger = logging.getLogger(__name__)

# Config attribute -> secret id
ZOOM_SECRET_IDS = {
    "ZOOM_ACCOUNT_ID": "zoom-account-id",
    "ZOOM_CLIENT_ID": "zoom-client-id",
    "ZOOM_CLIENT_SECRET": "zoom-client-secret",
    "ZOOM_API_KEY": "zoom-api-key",
    "ZOOM_API_SECRET": "zoom-api-secret",
}


class SecretManagerClient:
    """Client for reading secrets from Google Secret Manager."""

    def __init__(self, project_id: str, client=None):
        """Initialize Secret Manager client.

        Args:
            project_id: GCP project ID
            client: Optional preconfigured SecretManagerServiceClient
        """
        self.client = client or secretmanager.SecretManagerServiceClient()
        self.project_id = project_id

    def _version_path(self, secret_id: str, version: str = "latest") -> str:
        """Get the full path for a secret version."""
        return f"projects/{self.project_id}/secrets/{secret_id}/versions/{version}"

    def get_secret(self, secret_id: str) -> Optional[str]:
        """Get the latest version of a secret.

        Args:
            secret_id: Secret identifier

        Returns:
            Secret value or None if not found
        """
        try:
            response = self.client.access_secret_version(
                name=self._version_path(secret_id)
            )
            return response.payload.data.decode("UTF-8")
        except exceptions.NotFound:
            logger.warning(f"Secret not found: {secret_id}")
            return None
        except exceptions.PermissionDenied:
            logger.error(f"Permission denied for secret: {secret_id}")
            return None

    def get_zoom_credentials(self) -> dict:
        """Get all Zoom credentials, keyed by Config attribute name."""
        return {
            attribute: self.get_secret(secret_id)
            for attribute, secret_id in ZOOM_SECRET_IDS.items()
        }
