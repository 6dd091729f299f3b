"""Tests for the template helper."""

import logging
from unittest.mock import MagicMock

from zoom_meetings.exceptions import InvalidArgumentError, UpstreamDataError
from zoom_meetings.helper import ZoomApiHelper


def test_get_recordings_passes_through():
    client = MagicMock()
    client.get_recordings.return_value = ["meeting1"]

    assert ZoomApiHelper(client).get_recordings("2023-01-01", "2023-01-02") == ["meeting1"]
    client.get_recordings.assert_called_once_with("2023-01-01", "2023-01-02")


def test_get_recordings_failure_returns_false(caplog):
    client = MagicMock()
    client.get_recordings.side_effect = InvalidArgumentError("The from date must be after the to date")

    with caplog.at_level(logging.ERROR):
        result = ZoomApiHelper(client).get_recordings("2023-01-02", "2023-01-01")

    assert result is False
    record = caplog.records[-1]
    assert 'exception with code "invalid_argument"' in record.getMessage()
    assert record.code == "invalid_argument"
    assert "InvalidArgumentError" in record.trace


def test_get_upcoming_meetings_failure_returns_false(caplog):
    client = MagicMock()
    client.get_upcoming_meetings.side_effect = UpstreamDataError("Zoom API returned status 500")

    with caplog.at_level(logging.ERROR):
        result = ZoomApiHelper(client).get_upcoming_meetings()

    assert result is False
    assert "Could not get upcoming Zoom meetings" in caplog.text


def test_unexpected_errors_are_also_caught():
    client = MagicMock()
    client.get_upcoming_meetings.side_effect = RuntimeError("boom")

    assert ZoomApiHelper(client).get_upcoming_meetings() is False
