"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import UTC, datetime

import pytest

from routine_forge.config import Settings
from routine_forge.containers import AppContainer, build_services
from routine_forge.domain.logs import DailyLog
from routine_forge.services.clock import Clock
from routine_forge.services.logs import DailyLogRepository, DailyLogService
from routine_forge.services.profiles import ProfileRepository, ProfileService

# 04:30 UTC is 10:00 in the fixed +05:30 offset.
FIXED_NOW = datetime(2026, 1, 15, 4, 30, tzinfo=UTC)
TODAY = "2026-01-15"

# Shaped like a Supabase JWT so client construction accepts it.
FAKE_SERVICE_KEY = (
    "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9."
    "eyJyb2xlIjoic2VydmljZV9yb2xlIn0."
    "c2lnbmF0dXJlLXBsYWNlaG9sZGVy"
)

EXAMPLE_PROFILE: dict[str, object] = {
    "work_start": "10:30",
    "work_end": "20:00",
    "diet_preference": "veg",
    "goal": "muscle_gain",
    "experience": "beginner",
    "workout_location": "home",
    "workout_minutes_per_day": "35",
    "meals_per_day": "3",
}


@dataclass
class FixedClock(Clock):
    """Clock frozen at a given instant."""

    instant: datetime = FIXED_NOW

    def now(self) -> datetime:
        return self.instant


@dataclass
class InMemoryProfileRepository(ProfileRepository):
    """In-memory profile repository for tests."""

    profiles: dict[str, dict[str, object]] = field(default_factory=dict)

    def get_profile(self, user_email: str) -> dict[str, object] | None:
        row = self.profiles.get(user_email)
        return dict(row) if row is not None else None

    def upsert_profile(
        self, user_email: str, fields: dict[str, object]
    ) -> dict[str, object]:
        row = {**self.profiles.get(user_email, {}), **fields}
        row["user_email"] = user_email
        self.profiles[user_email] = row
        return dict(row)

    def delete_profile(self, user_email: str) -> None:
        self.profiles.pop(user_email, None)


@dataclass
class InMemoryDailyLogRepository(DailyLogRepository):
    """In-memory daily log repository for tests."""

    logs: dict[tuple[str, str], DailyLog] = field(default_factory=dict)

    def add(self, log: DailyLog) -> None:
        self.logs[(log.user_email, log.date)] = log

    def get_log(self, user_email: str, day: str) -> DailyLog | None:
        return self.logs.get((user_email, day))

    def upsert_log(self, log: DailyLog) -> DailyLog:
        self.add(log)
        return log

    def list_logs_since(
        self, user_email: str, from_date: str, limit: int
    ) -> list[DailyLog]:
        rows = [
            log
            for (email, day), log in self.logs.items()
            if email == user_email and day >= from_date
        ]
        return sorted(rows, key=lambda log: log.date, reverse=True)[:limit]

    def list_all_logs(self, user_email: str) -> list[DailyLog]:
        rows = [log for (email, _), log in self.logs.items() if email == user_email]
        return sorted(rows, key=lambda log: log.date, reverse=True)

    def delete_logs(self, user_email: str) -> None:
        for key in [key for key in self.logs if key[0] == user_email]:
            del self.logs[key]


def make_log(  # noqa: PLR0913
    day: str,
    user_email: str = "asha@example.com",
    *,
    weight_kg: float | None = None,
    water_liters: float | None = None,
    sleep_hours: float | None = None,
    workout_done: bool = False,
    meals_followed_pct: float = 0.0,
    mood: int = 3,
) -> DailyLog:
    return DailyLog(
        user_email=user_email,
        date=day,
        weight_kg=weight_kg,
        water_liters=water_liters,
        sleep_hours=sleep_hours,
        steps=None,
        workout_done=workout_done,
        meals_followed_pct=meals_followed_pct,
        mood=mood,
        notes="",
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key=FAKE_SERVICE_KEY,
    )


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def profile_repository() -> InMemoryProfileRepository:
    return InMemoryProfileRepository()


@pytest.fixture
def log_repository() -> InMemoryDailyLogRepository:
    return InMemoryDailyLogRepository()


@pytest.fixture
def container(
    settings: Settings,
    clock: FixedClock,
    profile_repository: InMemoryProfileRepository,
    log_repository: InMemoryDailyLogRepository,
) -> AppContainer:
    profile_service = ProfileService(profile_repository)
    log_service = DailyLogService(
        repository=log_repository,
        clock=clock,
        offset_minutes=settings.timezone_offset_minutes,
    )
    plan_service, report_service, account_service = build_services(
        settings, profile_service, log_service, clock
    )
    return AppContainer(
        settings=settings,
        clock=clock,
        profile_service=profile_service,
        plan_service=plan_service,
        log_service=log_service,
        report_service=report_service,
        account_service=account_service,
    )
