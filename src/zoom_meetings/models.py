"""Value objects shared by the credential and data clients."""

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta, timezone
from typing import FrozenSet, Iterable, Optional

from zoom_meetings.exceptions import InvalidArgumentError
from zoom_meetings.utils.dates import DateInput, format_date, to_date


@dataclass(frozen=True)
class AccessToken:
    """Short-lived bearer token for the Zoom API."""

    token: str
    scopes: FrozenSet[str] = field(default_factory=frozenset)
    expires_at: Optional[datetime] = None

    def has_scopes(self, required: Iterable[str]) -> bool:
        return all(scope in self.scopes for scope in required)

    def is_expired(self, buffer: timedelta = timedelta(0)) -> bool:
        """Tokens without a known expiry never count as expired."""
        if self.expires_at is None:
            return False
        return datetime.now(timezone.utc) >= self.expires_at - buffer


@dataclass(frozen=True)
class DateRange:
    """Inclusive range of calendar days for a recordings query."""

    start: date
    end: date

    def __post_init__(self):
        if self.start > self.end:
            raise InvalidArgumentError("The from date must be after the to date")

    @classmethod
    def from_inputs(cls, from_date: DateInput, to_date_value: DateInput) -> "DateRange":
        return cls(to_date(from_date), to_date(to_date_value))

    @property
    def cache_key(self) -> str:
        return f"recordings_{format_date(self.start)}_{format_date(self.end)}"
