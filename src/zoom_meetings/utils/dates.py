"""Date helpers for Zoom recording queries.

The recordings endpoint only accepts ranges of up to one month, so longer
ranges are split into month-sized chunks walked backward from the end date.
"""

from datetime import date, datetime, timedelta
from typing import List, Tuple, Union

from dateutil import parser
from dateutil.relativedelta import relativedelta

from zoom_meetings.exceptions import InvalidArgumentError

DATE_FORMAT = "%Y-%m-%d"

DateInput = Union[date, datetime, str]


def to_date(value: DateInput) -> date:
    """
    Normalize a date, datetime or date string to a calendar date.

    Args:
        value: Date object, datetime object or parseable date string

    Returns:
        Calendar date
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return parser.parse(value).date()
        except (ValueError, OverflowError) as e:
            raise InvalidArgumentError(f"Could not parse date '{value}': {e}") from e
    raise InvalidArgumentError(f"Unsupported date value: {value!r}")


def format_date(value: date) -> str:
    return value.strftime(DATE_FORMAT)


def whole_months_between(start: date, end: date) -> int:
    """Number of complete months elapsed from start to end."""
    delta = relativedelta(end, start)
    return delta.years * 12 + delta.months


def month_chunks(start: date, end: date) -> List[Tuple[date, date]]:
    """
    Split a date range into chunks of at most one month.

    Chunks are ordered from the most recent to the oldest. Each chunk after
    the first ends the day before the previous chunk starts, so boundary
    days are covered exactly once.

    Args:
        start: First day of the range
        end: Last day of the range

    Returns:
        List of (from, to) date pairs
    """
    if start > end:
        raise InvalidArgumentError("The from date must be after the to date")

    chunks = []
    upper = end

    while True:
        if whole_months_between(start, upper) > 0:
            lower = max(upper - relativedelta(months=1), start)
        else:
            lower = start

        chunk_end = upper if not chunks else upper - timedelta(days=1)
        if chunk_end < lower:
            break

        chunks.append((lower, chunk_end))

        if lower == start:
            break
        upper = lower

    return chunks
