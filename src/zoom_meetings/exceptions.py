"""Exceptions raised by the Zoom API client."""

from typing import Optional


class ZoomApiError(Exception):
    """Base class for all Zoom API client errors."""

    code = "zoom_api_error"


class ConfigurationError(ZoomApiError):
    """Credentials or settings are missing or invalid."""

    code = "configuration_error"


class AuthenticationError(ZoomApiError):
    """The credential exchange with the Zoom identity endpoint failed."""

    code = "authentication_error"

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ScopeError(ZoomApiError):
    """The access token was granted without the scopes we need."""

    code = "scope_error"


class InvalidArgumentError(ZoomApiError, ValueError):
    """A caller supplied an unusable argument, e.g. an inverted date range."""

    code = "invalid_argument"


class UpstreamDataError(ZoomApiError):
    """The Zoom API answered with an error status or unusable data."""

    code = "upstream_data_error"

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class CacheError(ZoomApiError):
    """A cache backend operation failed."""

    code = "cache_error"


class CacheReadError(CacheError):
    code = "cache_read_error"


class CacheWriteError(CacheError):
    code = "cache_write_error"
