"""Zoom API clients."""

from .zoom_client import ZoomClient

__all__ = ["ZoomClient"]
