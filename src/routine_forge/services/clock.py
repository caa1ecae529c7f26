"""Minute-of-day arithmetic and fixed-offset calendar helpers.

Every "now" in the service is computed from one hardcoded UTC offset (IST by
default). There is no DST and no per-user timezone.
"""

from dataclasses import dataclass
from datetime import UTC, date, datetime, timedelta
from typing import Protocol

from routine_forge.config import IST_OFFSET_MINUTES

MINUTES_PER_DAY = 1440


class Clock(Protocol):
    """Source of the current instant."""

    def now(self) -> datetime:
        """Return the current timezone-aware instant."""


@dataclass
class SystemClock(Clock):
    """Clock backed by the host wall clock."""

    def now(self) -> datetime:
        """Return the current UTC instant."""
        return datetime.now(tz=UTC)


def to_minutes(hhmm: str) -> int:
    """Parse ``HH:MM`` into minutes since midnight without range checks."""
    hours, minutes = hhmm.split(":", maxsplit=1)
    return int(hours) * 60 + int(minutes)


def to_time(minutes: int) -> str:
    """Format minutes as ``HH:MM`` after wrapping into a single day."""
    wrapped = ((minutes % MINUTES_PER_DAY) + MINUTES_PER_DAY) % MINUTES_PER_DAY
    return f"{wrapped // 60:02d}:{wrapped % 60:02d}"


def clamp(value: int, lo: int, hi: int) -> int:
    """Saturate value into [lo, hi]; lo wins when the bounds cross."""
    return max(lo, min(hi, value))


def now_minutes_in_tz(now: datetime, offset_minutes: int = IST_OFFSET_MINUTES) -> int:
    """Return the minute of day at the fixed offset."""
    local = _shift(now, offset_minutes)
    return local.hour * 60 + local.minute


def today_date_in_tz(now: datetime, offset_minutes: int = IST_OFFSET_MINUTES) -> str:
    """Return the ``YYYY-MM-DD`` calendar date at the fixed offset."""
    return _shift(now, offset_minutes).date().isoformat()


def previous_date(day: str) -> str:
    """Return the calendar day before ``day``."""
    return shift_date(day, -1)


def shift_date(day: str, days: int) -> str:
    """Move a ``YYYY-MM-DD`` string by a number of days."""
    return (date.fromisoformat(day) + timedelta(days=days)).isoformat()


def _shift(now: datetime, offset_minutes: int) -> datetime:
    if now.tzinfo is None:
        now = now.replace(tzinfo=UTC)
    return now.astimezone(UTC) + timedelta(minutes=offset_minutes)
