"""Configuration management for the Zoom API client."""

import logging
import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

logger = logging.getLogger(__name__)


class Config:
    """Central configuration for Zoom credentials and client settings."""

    # Zoom authentication ("oauth" for Server-to-Server OAuth, "jwt" for API key/secret)
    ZOOM_AUTH_MODE: str = os.getenv("ZOOM_AUTH_MODE", "oauth").lower()

    # Server-to-Server OAuth
    ZOOM_ACCOUNT_ID: str = os.getenv("ZOOM_ACCOUNT_ID", "")
    ZOOM_CLIENT_ID: str = os.getenv("ZOOM_CLIENT_ID", "")
    ZOOM_CLIENT_SECRET: str = os.getenv("ZOOM_CLIENT_SECRET", "")

    # Legacy JWT app
    ZOOM_API_KEY: str = os.getenv("ZOOM_API_KEY", "")
    ZOOM_API_SECRET: str = os.getenv("ZOOM_API_SECRET", "")

    # HTTP settings
    ZOOM_API_BASE_URL: str = os.getenv("ZOOM_API_BASE_URL", "https://api.zoom.us/v2")
    ZOOM_OAUTH_BASE_URL: str = os.getenv("ZOOM_OAUTH_BASE_URL", "https://zoom.us")
    ZOOM_REQUEST_TIMEOUT: int = int(os.getenv("ZOOM_REQUEST_TIMEOUT", "30"))
    ZOOM_PAGE_SIZE: int = int(os.getenv("ZOOM_PAGE_SIZE", "300"))

    # Cache ("memory", "firestore" or "none")
    CACHE_BACKEND: str = os.getenv("CACHE_BACKEND", "memory").lower()
    CACHE_TTL_SECONDS: int = int(os.getenv("CACHE_TTL_SECONDS", "0"))  # 0 disables expiry
    CACHE_MAX_ENTRIES: int = int(os.getenv("CACHE_MAX_ENTRIES", "256"))
    FIRESTORE_CACHE_COLLECTION: str = os.getenv("FIRESTORE_CACHE_COLLECTION", "zoom_api_cache")

    # GCP
    GCP_PROJECT_ID: str = os.getenv("GCP_PROJECT_ID", "")
    USE_SECRET_MANAGER: bool = os.getenv("USE_SECRET_MANAGER", "false").lower() == "true"

    # HTTP API
    API_SECRET: str = os.getenv("API_SECRET", "")

    # Runtime settings
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    @classmethod
    def validate(cls) -> list[str]:
        """Validate required configuration values are present."""
        missing = []

        if cls.ZOOM_AUTH_MODE == "jwt":
            if not cls.ZOOM_API_KEY:
                missing.append("ZOOM_API_KEY")
            if not cls.ZOOM_API_SECRET:
                missing.append("ZOOM_API_SECRET")
        else:
            if not cls.ZOOM_ACCOUNT_ID:
                missing.append("ZOOM_ACCOUNT_ID")
            if not cls.ZOOM_CLIENT_ID:
                missing.append("ZOOM_CLIENT_ID")
            if not cls.ZOOM_CLIENT_SECRET:
                missing.append("ZOOM_CLIENT_SECRET")

        if cls.CACHE_BACKEND == "firestore" and not cls.GCP_PROJECT_ID:
            missing.append("GCP_PROJECT_ID")

        return missing

    @classmethod
    def auth_settings(cls) -> dict:
        """Credential settings in the shape expected by create_token_strategy."""
        return {
            "auth": {
                "mode": cls.ZOOM_AUTH_MODE,
                "accountId": cls.ZOOM_ACCOUNT_ID,
                "clientId": cls.ZOOM_CLIENT_ID,
                "clientSecret": cls.ZOOM_CLIENT_SECRET,
                "apiKey": cls.ZOOM_API_KEY,
                "apiSecret": cls.ZOOM_API_SECRET,
            }
        }

    @classmethod
    def load_secrets(cls, secret_client) -> None:
        """
        Overlay Zoom credentials stored in Secret Manager.

        Secrets that are not found keep their environment value.

        Args:
            secret_client: SecretManagerClient instance
        """
        credentials = secret_client.get_zoom_credentials()
        for attribute, value in credentials.items():
            if value:
                setattr(cls, attribute, value)
                logger.info(f"Loaded {attribute} from Secret Manager")
