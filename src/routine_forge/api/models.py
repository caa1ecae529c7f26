"""Pydantic models for inbound JSON payloads.

Field values are left untyped on purpose: the services resolve malformed
values to defaults instead of rejecting the request.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class DailyLogPayload(_CamelModel):
    """Tracker submission for one day."""

    user_email: Any = None
    date: Any = None
    weight_kg: Any = None
    water_liters: Any = None
    sleep_hours: Any = None
    steps: Any = None
    workout_done: Any = None
    meals_followed_pct: Any = None
    meals_followed: Any = None
    mood: Any = None
    notes: Any = None


class ProfilePayload(_CamelModel):
    """Onboarding answers."""

    user_email: Any = None
    height_cm: Any = None
    weight_kg: Any = None
    age: Any = None
    gender: Any = None
    profession: Any = None
    work_start: Any = None
    work_end: Any = None
    activity_level: Any = None
    diet_preference: Any = None
    allergies: Any = None
    meals_per_day: Any = None
    goal: Any = None
    experience: Any = None
    workout_location: Any = None
    workout_minutes_per_day: Any = None


class SettingsUpdatePayload(_CamelModel):
    """Partial settings update; absent fields are left unchanged."""

    email: Any = None
    weight_kg: Any = None
    height_cm: Any = None
    goal: Any = None
    diet_preference: Any = None
    workout_location: Any = None
    workout_minutes_per_day: Any = None
    experience: Any = None
    dark_mode: Any = None
    daily_reminder: Any = None
    workout_reminder: Any = None
    meal_reminder: Any = None


class AccountDeletePayload(_CamelModel):
    """Account deletion request."""

    email: Any = None
