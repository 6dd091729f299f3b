"""Cache-backed client for the Zoom meetings and cloud recordings API."""

from .clients import ZoomClient
from .config import Config
from .helper import ZoomApiHelper

__all__ = ["Config", "ZoomApiHelper", "ZoomClient"]
