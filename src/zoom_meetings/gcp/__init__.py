"""GCP service clients for Firestore caching and Secret Manager."""

from .firestore_cache import FirestoreCache
from .secret_manager import SecretManagerClient

__all__ = ["FirestoreCache", "SecretManagerClient"]
