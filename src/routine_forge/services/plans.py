"""Assembly of the daily plan from a stored profile."""

import logging
from dataclasses import dataclass

from routine_forge.config import IST_OFFSET_MINUTES, normalize_email
from routine_forge.domain.plan import DailyPlan
from routine_forge.services.clock import (
    Clock,
    now_minutes_in_tz,
    to_minutes,
    today_date_in_tz,
)
from routine_forge.services.meal_planner import plan_meals
from routine_forge.services.profiles import ProfileService
from routine_forge.services.reports import ReportService
from routine_forge.services.routine import (
    build_routine_summary,
    build_timeline,
    resolve_current_block,
)
from routine_forge.services.workouts import plan_workout

NOON = 12 * 60
EVENING = 17 * 60

_logger = logging.getLogger(__name__)


def greeting_for(now_minutes: int) -> str:
    """Return the salutation for a minute of day."""
    if now_minutes < NOON:
        return "Good morning"
    if now_minutes < EVENING:
        return "Good afternoon"
    return "Good evening"


@dataclass
class PlanService:
    """Builds today's plan for a user."""

    profile_service: ProfileService
    report_service: ReportService
    clock: Clock
    offset_minutes: int = IST_OFFSET_MINUTES
    streak_lookback_days: int = 90

    def get_today_plan(self, user_email: str) -> DailyPlan:
        """Return the plan for the current instant.

        Raises ProfileNotFoundError when the user has not onboarded yet.
        """
        profile = self.profile_service.get_normalized(user_email)
        email = normalize_email(user_email)
        now = self.clock.now()
        now_minutes = now_minutes_in_tz(now, self.offset_minutes)
        today = today_date_in_tz(now, self.offset_minutes)

        meals, kcal_total = plan_meals(
            profile.diet, profile.goal, profile.meals_per_day
        )
        workout = plan_workout(
            profile.goal,
            profile.experience,
            profile.location,
            profile.workout_minutes,
        )
        blocks = build_timeline(
            to_minutes(profile.work_start),
            to_minutes(profile.work_end),
            profile.workout_minutes,
            diet=profile.diet,
            goal=profile.goal,
        )
        streak = self.report_service.current_streak(
            email, today, self.streak_lookback_days
        )
        _logger.info(
            "Plan built: user=%s blocks=%s meals=%s", email, len(blocks), len(meals)
        )
        return DailyPlan(
            user_email=email,
            greeting=greeting_for(now_minutes),
            greeting_name=email.split("@")[0],
            current_block=resolve_current_block(blocks, now_minutes),
            streak_days=streak,
            routine=build_routine_summary(blocks),
            meals=meals,
            kcal_total=kcal_total,
            workout=workout,
            routine_blocks=blocks,
        )
