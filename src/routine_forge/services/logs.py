"""Daily metric logging."""

import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date
from typing import Protocol

from routine_forge.config import IST_OFFSET_MINUTES, normalize_email
from routine_forge.domain.logs import DailyLog
from routine_forge.services.clock import Clock, today_date_in_tz
from routine_forge.services.errors import InvalidRequestError

DEFAULT_MOOD = 3
MOOD_RANGE = range(1, 6)

_logger = logging.getLogger(__name__)


class DailyLogRepository(Protocol):
    """Persistence interface for daily logs, unique per (user, date)."""

    def get_log(self, user_email: str, day: str) -> DailyLog | None:
        """Return the log for a user and date."""

    def upsert_log(self, log: DailyLog) -> DailyLog:
        """Insert or replace the log for its (user, date) pair."""

    def list_logs_since(
        self, user_email: str, from_date: str, limit: int
    ) -> list[DailyLog]:
        """Return logs dated on or after ``from_date``, newest first."""

    def list_all_logs(self, user_email: str) -> list[DailyLog]:
        """Return every log for the user, newest first."""

    def delete_logs(self, user_email: str) -> None:
        """Delete every log for the user."""


def to_number_or_none(value: object) -> float | None:
    """Coerce numbers and numeric strings; anything else becomes None."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None


def parse_mood(value: object) -> int:
    """Return a 1..5 mood score, defaulting to 3."""
    number = to_number_or_none(value)
    if number is None or not number.is_integer() or int(number) not in MOOD_RANGE:
        return DEFAULT_MOOD
    return int(number)


def parse_meals_pct(value: object, legacy_flag: object = None) -> float:
    """Resolve the meals-followed percentage into [0, 100].

    Older clients send a boolean ``meals_followed`` instead of a percentage.
    """
    if value is None and isinstance(legacy_flag, bool):
        return 100.0 if legacy_flag else 0.0
    number = to_number_or_none(value)
    if number is None:
        return 0.0
    return max(0.0, min(100.0, number))


def log_from_record(record: Mapping[str, object]) -> DailyLog:
    """Build a log from an untyped row or payload."""
    notes = record.get("notes")
    return DailyLog(
        user_email=normalize_email(record.get("user_email")),
        date=str(record.get("date") or ""),
        weight_kg=to_number_or_none(record.get("weight_kg")),
        water_liters=to_number_or_none(record.get("water_liters")),
        sleep_hours=to_number_or_none(record.get("sleep_hours")),
        steps=to_number_or_none(record.get("steps")),
        workout_done=bool(record.get("workout_done")),
        meals_followed_pct=parse_meals_pct(
            record.get("meals_followed_pct"), record.get("meals_followed")
        ),
        mood=parse_mood(record.get("mood", DEFAULT_MOOD)),
        notes=notes if isinstance(notes, str) else "",
    )


def is_iso_date(value: object) -> bool:
    """Return True for ``YYYY-MM-DD`` strings naming a real day."""
    if not isinstance(value, str) or len(value) != len("YYYY-MM-DD"):
        return False
    try:
        date.fromisoformat(value)
    except ValueError:
        return False
    return True


@dataclass
class DailyLogService:
    """Service for the daily tracker."""

    repository: DailyLogRepository
    clock: Clock
    offset_minutes: int = IST_OFFSET_MINUTES

    def save_log(self, payload: Mapping[str, object]) -> DailyLog:
        """Normalize a tracker payload and upsert it for its day."""
        email = normalize_email(payload.get("user_email"))
        if not email:
            raise InvalidRequestError("Missing userEmail")
        raw_date = payload.get("date")
        day = (
            raw_date.strip()
            if isinstance(raw_date, str) and is_iso_date(raw_date.strip())
            else today_date_in_tz(self.clock.now(), self.offset_minutes)
        )
        log = log_from_record({**payload, "user_email": email, "date": day})
        saved = self.repository.upsert_log(log)
        _logger.info("Daily log saved: user=%s date=%s", email, day)
        return saved

    def get_log(self, user_email: str, day: str) -> DailyLog | None:
        """Return the stored log for one day."""
        email = normalize_email(user_email)
        if not email or not day.strip():
            raise InvalidRequestError("Missing email or date")
        return self.repository.get_log(email, day.strip())
