"""Streak computation and report summaries over daily logs."""

import math
from collections.abc import Iterable
from dataclasses import dataclass

from routine_forge.config import IST_OFFSET_MINUTES, normalize_email
from routine_forge.domain.logs import DailyLog, Report, ReportSummary
from routine_forge.services.clock import (
    Clock,
    clamp,
    previous_date,
    shift_date,
    today_date_in_tz,
)
from routine_forge.services.errors import InvalidRequestError
from routine_forge.services.logs import DailyLogRepository

MIN_REPORT_DAYS = 7
MAX_REPORT_DAYS = 90


def compute_streak(log_dates: Iterable[str], today: str) -> int:
    """Count consecutive logged days ending today.

    Today must be logged; a log only for yesterday does not start a streak.
    """
    dates = set(log_dates)
    streak = 0
    day = today
    while day in dates:
        streak += 1
        day = previous_date(day)
    return streak


def summarize_logs(logs: list[DailyLog], today: str) -> ReportSummary:
    """Aggregate logs ordered newest first."""
    if not logs:
        return ReportSummary(
            days_logged=0,
            current_streak=0,
            workouts_done=0,
            avg_meals_pct=0,
            avg_sleep=None,
            avg_water=None,
            latest_weight=None,
        )
    meals_pct = sum(log.meals_followed_pct for log in logs) / len(logs)
    return ReportSummary(
        days_logged=len(logs),
        current_streak=compute_streak((log.date for log in logs), today),
        workouts_done=sum(1 for log in logs if log.workout_done),
        avg_meals_pct=math.floor(meals_pct + 0.5),
        avg_sleep=_mean_one_decimal(log.sleep_hours for log in logs),
        avg_water=_mean_one_decimal(log.water_liters for log in logs),
        latest_weight=next(
            (log.weight_kg for log in logs if log.weight_kg is not None), None
        ),
    )


@dataclass
class ReportService:
    """Service for the reports page."""

    repository: DailyLogRepository
    clock: Clock
    offset_minutes: int = IST_OFFSET_MINUTES
    default_days: int = 30

    def get_report(self, user_email: str, days: float | None = None) -> Report:
        """Return logs for the last ``days`` calendar days with a summary.

        Fractional values round half-up and non-finite ones use the default
        before clamping into [7, 90].
        """
        email = normalize_email(user_email)
        if not email:
            raise InvalidRequestError("Missing email")
        window = clamp(
            (
                math.floor(days + 0.5)
                if days is not None and math.isfinite(days)
                else self.default_days
            ),
            MIN_REPORT_DAYS,
            MAX_REPORT_DAYS,
        )
        today = today_date_in_tz(self.clock.now(), self.offset_minutes)
        logs = self.repository.list_logs_since(
            email, shift_date(today, -(window - 1)), limit=MAX_REPORT_DAYS
        )
        return Report(logs=logs, summary=summarize_logs(logs, today))

    def current_streak(self, user_email: str, today: str, lookback_days: int) -> int:
        """Return the streak ending at ``today`` from logs in the lookback window."""
        logs = self.repository.list_logs_since(
            normalize_email(user_email),
            shift_date(today, -(lookback_days - 1)),
            limit=lookback_days,
        )
        return compute_streak((log.date for log in logs), today)


def _mean_one_decimal(values: Iterable[float | None]) -> float | None:
    present = [value for value in values if value is not None]
    if not present:
        return None
    return math.floor(sum(present) / len(present) * 10 + 0.5) / 10
