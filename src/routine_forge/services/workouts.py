"""Workout template selection."""

import math

from routine_forge.domain.plan import Exercise, WorkoutItem
from routine_forge.domain.profile import Experience, Goal, WorkoutLocation
from routine_forge.services.clock import clamp

DEFAULT_WORKOUT_MINUTES = 35
MIN_WORKOUT_MINUTES = 20
MAX_WORKOUT_MINUTES = 90


def workout_duration(requested_minutes: float | None) -> int:
    """Round half-up and clamp into [20, 90]; missing means 35."""
    if requested_minutes is None or not math.isfinite(requested_minutes):
        return DEFAULT_WORKOUT_MINUTES
    return clamp(
        math.floor(requested_minutes + 0.5), MIN_WORKOUT_MINUTES, MAX_WORKOUT_MINUTES
    )


def plan_workout(
    goal: Goal,
    experience: Experience,
    location: WorkoutLocation,
    requested_minutes: float | None,
) -> WorkoutItem:
    """Build the day's workout for the goal, level and location."""
    push_ups = Exercise(
        "Push-ups", "3 × 8" if experience is Experience.BEGINNER else "3 × 12"
    )
    if goal is Goal.FAT_LOSS:
        items = [
            Exercise("Jumping jacks", "3 × 45s"),
            Exercise("Bodyweight squats", "3 × 12"),
            push_ups,
            Exercise("Plank", "3 × 45s"),
        ]
        focus = "Fat loss focus"
    else:
        items = [
            push_ups,
            Exercise("Rows (band/dumbbell)", "3 × 10"),
            Exercise("Squats", "3 × 12"),
            Exercise("Overhead press", "3 × 10"),
        ]
        focus = "Strength focus"

    return WorkoutItem(
        title="Gym Workout" if location is WorkoutLocation.GYM else "Home Workout",
        subtitle=f"{focus} • {experience.value.capitalize()}",
        duration_min=workout_duration(requested_minutes),
        items=items,
    )
