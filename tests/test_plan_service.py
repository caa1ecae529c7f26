"""Tests for plan assembly."""

from datetime import UTC, datetime

import pytest

from routine_forge.containers import AppContainer
from routine_forge.services.errors import ProfileNotFoundError
from routine_forge.services.plans import greeting_for
from tests.conftest import (
    EXAMPLE_PROFILE,
    FixedClock,
    InMemoryDailyLogRepository,
    InMemoryProfileRepository,
    make_log,
)


@pytest.mark.parametrize(
    ("minutes", "expected"),
    [
        (0, "Good morning"),
        (719, "Good morning"),
        (720, "Good afternoon"),
        (1019, "Good afternoon"),
        (1020, "Good evening"),
        (1439, "Good evening"),
    ],
)
def test_greeting_for(minutes: int, expected: str) -> None:
    assert greeting_for(minutes) == expected


def test_plan_requires_profile(container: AppContainer) -> None:
    with pytest.raises(ProfileNotFoundError):
        container.plan_service.get_today_plan("asha@example.com")


def test_plan_for_example_profile(
    container: AppContainer,
    profile_repository: InMemoryProfileRepository,
    log_repository: InMemoryDailyLogRepository,
) -> None:
    profile_repository.profiles["asha@example.com"] = dict(EXAMPLE_PROFILE)
    log_repository.add(make_log("2026-01-15"))
    log_repository.add(make_log("2026-01-14"))
    log_repository.add(make_log("2026-01-12"))

    plan = container.plan_service.get_today_plan(" Asha@Example.com ")

    assert plan.user_email == "asha@example.com"
    assert plan.greeting == "Good morning"
    assert plan.greeting_name == "asha"
    assert plan.current_block.title == "Morning Work Block"
    assert plan.current_block.time == "10:30 - 14:20"
    assert plan.streak_days == 2
    assert plan.kcal_total == 2400
    assert [meal.kcal for meal in plan.meals] == [600, 960, 840]
    assert plan.workout.title == "Home Workout"
    assert plan.workout.duration_min == 35
    assert len(plan.routine_blocks) == 11
    assert plan.routine[0].title == "Wake Up & Morning Routine"


def test_plan_is_deterministic_for_fixed_clock(
    container: AppContainer, profile_repository: InMemoryProfileRepository
) -> None:
    profile_repository.profiles["asha@example.com"] = dict(EXAMPLE_PROFILE)

    first = container.plan_service.get_today_plan("asha@example.com")
    second = container.plan_service.get_today_plan("asha@example.com")

    assert first == second


def test_plan_tracks_the_clock(
    container: AppContainer,
    profile_repository: InMemoryProfileRepository,
    clock: FixedClock,
) -> None:
    profile_repository.profiles["asha@example.com"] = dict(EXAMPLE_PROFILE)
    # 18:00 UTC is 23:30 at +05:30.
    clock.instant = datetime(2026, 1, 15, 18, 0, tzinfo=UTC)

    plan = container.plan_service.get_today_plan("asha@example.com")

    assert plan.greeting == "Good evening"
    assert plan.current_block.title == "Wind Down"
