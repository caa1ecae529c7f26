"""Domain models for daily logs and reports."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DailyLog:
    """Metrics logged by a user for one calendar day."""

    user_email: str
    date: str
    weight_kg: float | None
    water_liters: float | None
    sleep_hours: float | None
    steps: float | None
    workout_done: bool
    meals_followed_pct: float
    mood: int
    notes: str


@dataclass(frozen=True)
class ReportSummary:
    """Aggregates over a window of daily logs."""

    days_logged: int
    current_streak: int
    workouts_done: int
    avg_meals_pct: int
    avg_sleep: float | None
    avg_water: float | None
    latest_weight: float | None


@dataclass(frozen=True)
class Report:
    """Logs in the window, newest first, with their summary."""

    logs: list[DailyLog]
    summary: ReportSummary
