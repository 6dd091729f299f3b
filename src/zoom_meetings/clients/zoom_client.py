"""Zoom API client for fetching upcoming meetings and cloud recordings."""

import copy
import logging
from datetime import timedelta
from typing import Any, Dict, List, Optional

import requests

from zoom_meetings.auth import AccessTokenStrategy, create_token_strategy
from zoom_meetings.cache import CacheBackend, create_cache
from zoom_meetings.config import Config
from zoom_meetings.exceptions import UpstreamDataError
from zoom_meetings.models import AccessToken, DateRange
from zoom_meetings.utils.dates import DateInput, format_date, month_chunks

logger = logging.getLogger(__name__)

API_BASE_URL = "https://api.zoom.us/v2"
PAGE_SIZE = 300

# Longest repr of already fetched data included in error messages
SNAPSHOT_LIMIT = 500

# Replace the session this long before its token expires
SESSION_EXPIRY_BUFFER = timedelta(seconds=5)


class ZoomClient:
    """Client for reading meetings and recordings from the Zoom API."""

    UPCOMING_MEETINGS_CACHE_KEY = "upcomingMeetings"

    def __init__(
        self,
        token_strategy: AccessTokenStrategy,
        cache: Optional[CacheBackend] = None,
        base_url: str = API_BASE_URL,
        timeout: int = 30,
        page_size: int = PAGE_SIZE,
    ):
        """
        Initialize Zoom client.

        Args:
            token_strategy: Produces the bearer token for API requests
            cache: Optional cache backend for aggregated responses
            base_url: Zoom API base URL
            timeout: Request timeout in seconds
            page_size: Number of results requested per page
        """
        self.token_strategy = token_strategy
        self.cache = cache
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.page_size = page_size
        self.session: Optional[requests.Session] = None
        self.access_token: Optional[AccessToken] = None

    @classmethod
    def from_config(cls, config=Config, cache: Optional[CacheBackend] = None) -> "ZoomClient":
        """
        Build a client from configuration.

        Args:
            config: Config class (or object with the same attributes)
            cache: Cache backend; created from config when omitted

        Returns:
            Configured ZoomClient
        """
        strategy = create_token_strategy(
            config.auth_settings(),
            oauth_base_url=config.ZOOM_OAUTH_BASE_URL,
            timeout=config.ZOOM_REQUEST_TIMEOUT,
        )
        return cls(
            strategy,
            cache=cache if cache is not None else create_cache(config),
            base_url=config.ZOOM_API_BASE_URL,
            timeout=config.ZOOM_REQUEST_TIMEOUT,
            page_size=config.ZOOM_PAGE_SIZE,
        )

    def _get_session(self) -> requests.Session:
        """Return an authenticated session, creating one when needed."""
        if self.session is not None and not self.access_token.is_expired(SESSION_EXPIRY_BUFFER):
            return self.session

        access_token = self.token_strategy.create_token()

        session = requests.Session()
        session.headers.update({
            "Authorization": f"Bearer {access_token.token}",
            "Content-Type": "application/json",
        })

        if self.session is not None:
            self.session.close()
        self.session = session
        self.access_token = access_token
        logger.debug("Initialized Zoom API session")
        return session

    def _cache_get(self, key: str) -> Optional[Any]:
        if self.cache is None:
            return None
        try:
            cached = self.cache.get(key)
        except Exception as e:
            logger.warning(f"Could not read {key} from cache, fetching from Zoom: {e}")
            return None
        # Each caller gets its own copy of the cached entry
        return copy.deepcopy(cached)

    def _cache_set(self, key: str, value: Any) -> None:
        if self.cache is None:
            return
        try:
            self.cache.set(key, copy.deepcopy(value))
        except Exception as e:
            # The fetched data is still returned to the caller
            logger.error(f"Could not write {key} to cache: {e}")

    def get_upcoming_meetings(self, skip_cache: bool = False) -> List[Dict[str, Any]]:
        """
        Get all upcoming meetings of the authenticated user.

        Args:
            skip_cache: Ignore cached data and fetch from the API

        Returns:
            List of meeting objects
        """
        key = self.UPCOMING_MEETINGS_CACHE_KEY

        if not skip_cache:
            cached = self._cache_get(key)
            if cached is not None:
                logger.debug(f"Cache hit for {key}")
                return cached

        meetings = self._fetch_all("/users/me/meetings", "meetings", {"type": "upcoming"})
        logger.info(f"Retrieved {len(meetings)} upcoming meetings")

        self._cache_set(key, meetings)
        return meetings

    def get_recordings(
        self, from_date: DateInput, to_date: DateInput, skip_cache: bool = False
    ) -> List[Dict[str, Any]]:
        """
        Get cloud recordings of the authenticated user in a date range.

        Ranges longer than one month are fetched in monthly chunks, most
        recent first.

        Args:
            from_date: First day of the range (date, datetime or date string)
            to_date: Last day of the range (date, datetime or date string)
            skip_cache: Ignore cached data and fetch from the API

        Returns:
            List of recording objects
        """
        date_range = DateRange.from_inputs(from_date, to_date)
        key = date_range.cache_key

        if not skip_cache:
            cached = self._cache_get(key)
            if cached is not None:
                logger.debug(f"Cache hit for {key}")
                return cached

        recordings = self._fetch_date_range(date_range)
        logger.info(
            f"Retrieved {len(recordings)} recordings between "
            f"{format_date(date_range.start)} and {format_date(date_range.end)}"
        )

        self._cache_set(key, recordings)
        return recordings

    def _fetch_date_range(self, date_range: DateRange) -> List[Dict[str, Any]]:
        aggregated = []
        for chunk_start, chunk_end in month_chunks(date_range.start, date_range.end):
            aggregated.extend(self._fetch_all(
                "/users/me/recordings",
                "meetings",
                {"from": format_date(chunk_start), "to": format_date(chunk_end)},
            ))
        return aggregated

    def _fetch_all(
        self, endpoint: str, items_key: str, params: Optional[Dict[str, Any]] = None
    ) -> List[Dict[str, Any]]:
        """
        Fetch every page of a paginated endpoint.

        Args:
            endpoint: API endpoint (without base URL)
            items_key: Response key holding the page items
            params: Additional query parameters

        Returns:
            Items of all pages in arrival order
        """
        session = self._get_session()
        url = f"{self.base_url}{endpoint}"

        aggregated = []
        next_page_token = ""
        seen_tokens = set()

        while True:
            page_params = {
                **(params or {}),
                "next_page_token": next_page_token,
                "page_size": self.page_size,
            }

            try:
                response = session.get(url, params=page_params, timeout=self.timeout)
            except requests.exceptions.RequestException as e:
                logger.error(f"Error making Zoom API request to {endpoint}: {e}")
                raise UpstreamDataError(f"Request to {endpoint} failed while fetching '{items_key}': {e}") from e

            if response.status_code != 200:
                logger.error(f"Zoom API returned {response.status_code} for {endpoint}")
                raise UpstreamDataError(
                    f"Zoom API returned status {response.status_code} while fetching '{items_key}'",
                    status_code=response.status_code,
                )

            try:
                data = response.json()
            except ValueError as e:
                raise UpstreamDataError(
                    f"Could not decode Zoom API response while fetching '{items_key}'. "
                    f"Data fetched so far: {self._snapshot(aggregated)}",
                    status_code=response.status_code,
                ) from e

            if not isinstance(data, dict) or items_key not in data:
                raise UpstreamDataError(
                    f"Could not find key '{items_key}'. Data fetched so far: {self._snapshot(aggregated)}",
                    status_code=response.status_code,
                )

            aggregated.extend(data[items_key] or [])

            next_page_token = data.get("next_page_token") or ""
            if not next_page_token:
                break
            if next_page_token in seen_tokens:
                logger.warning(f"Zoom API repeated page token for {endpoint}, stopping pagination")
                break
            seen_tokens.add(next_page_token)

        return aggregated

    @staticmethod
    def _snapshot(data: List[Dict[str, Any]]) -> str:
        text = repr(data)
        if len(text) > SNAPSHOT_LIMIT:
            return f"{text[:SNAPSHOT_LIMIT]}..."
        return text

    def test_connection(self) -> bool:
        """
        Test Zoom API connection and credentials.

        Returns:
            True if connection successful
        """
        try:
            session = self._get_session()
            response = session.get(f"{self.base_url}/users/me", timeout=self.timeout)
            response.raise_for_status()
            logger.info("✓ Zoom API connection successful")
            return True
        except Exception as e:
            logger.error(f"✗ Zoom API connection failed: {e}")
            return False
