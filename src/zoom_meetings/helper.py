"""Template-facing helper around ZoomClient.

Page templates cannot handle exceptions, so every failure is logged and
turned into ``False``.
"""

import logging
import traceback
from typing import Any, Dict, List, Union

from zoom_meetings.clients import ZoomClient
from zoom_meetings.utils.dates import DateInput

logger = logging.getLogger(__name__)


class ZoomApiHelper:
    """Exposes the read operations of ZoomClient to templates."""

    def __init__(self, client: ZoomClient):
        self.client = client

    def _log_failure(self, action: str, error: Exception) -> None:
        code = getattr(error, "code", type(error).__name__)
        logger.error(
            f'Could not get {action}, exception with code "{code}" thrown: "{error}"',
            extra={"code": code, "trace": traceback.format_exc()},
        )

    def get_recordings(self, from_date: DateInput, to_date: DateInput) -> Union[List[Dict[str, Any]], bool]:
        """Recordings in the range, or False if anything goes wrong."""
        try:
            return self.client.get_recordings(from_date, to_date)
        except Exception as e:
            self._log_failure("Zoom recordings", e)
            return False

    def get_upcoming_meetings(self) -> Union[List[Dict[str, Any]], bool]:
        """Upcoming meetings, or False if anything goes wrong."""
        try:
            return self.client.get_upcoming_meetings()
        except Exception as e:
            self._log_failure("upcoming Zoom meetings", e)
            return False
