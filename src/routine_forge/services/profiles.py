"""Profile normalization and storage."""

import logging
import math
import re
from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import Protocol, TypeVar

from routine_forge.config import normalize_email
from routine_forge.domain.profile import (
    MEALS_PER_DAY_CHOICES,
    DietPreference,
    Experience,
    Goal,
    NormalizedProfile,
    Preferences,
    SettingsView,
    WorkoutLocation,
)
from routine_forge.services.errors import InvalidRequestError, ProfileNotFoundError

DEFAULT_WORK_START = "10:30"
DEFAULT_WORK_END = "20:00"
DEFAULT_MEALS_PER_DAY = 3

PROFILE_FIELDS = (
    "height_cm",
    "weight_kg",
    "age",
    "gender",
    "profession",
    "work_start",
    "work_end",
    "activity_level",
    "diet_preference",
    "allergies",
    "meals_per_day",
    "goal",
    "experience",
    "workout_location",
    "workout_minutes_per_day",
)

SETTINGS_PROFILE_FIELDS = (
    "weight_kg",
    "height_cm",
    "goal",
    "diet_preference",
    "workout_location",
    "workout_minutes_per_day",
    "experience",
)

PREFERENCE_COLUMNS = {
    "dark_mode": "pref_dark_mode",
    "daily_reminder": "pref_daily_reminder",
    "workout_reminder": "pref_workout_reminder",
    "meal_reminder": "pref_meal_reminder",
}

_TIME_PATTERN = re.compile(r"^\d{1,2}:\d{2}$")

_logger = logging.getLogger(__name__)

_E = TypeVar("_E", bound=StrEnum)


class ProfileRepository(Protocol):
    """Persistence interface for profile rows."""

    def get_profile(self, user_email: str) -> dict[str, object] | None:
        """Return the stored profile row, if any."""

    def upsert_profile(
        self, user_email: str, fields: dict[str, object]
    ) -> dict[str, object]:
        """Insert or update the profile row and return it."""

    def delete_profile(self, user_email: str) -> None:
        """Delete the profile row, if any."""


def normalize_profile(raw: object) -> NormalizedProfile:
    """Resolve an untyped profile row into closed vocabularies.

    Never raises: anything missing, mistyped or unrecognized falls back to
    veg / muscle_gain / beginner / home / 3 meals and the default work hours.
    """
    record: Mapping[str, object] = raw if isinstance(raw, Mapping) else {}
    return NormalizedProfile(
        work_start=parse_work_time(record.get("work_start"), DEFAULT_WORK_START),
        work_end=parse_work_time(record.get("work_end"), DEFAULT_WORK_END),
        diet=parse_choice(
            record.get("diet_preference"), DietPreference, DietPreference.VEG
        ),
        goal=parse_choice(record.get("goal"), Goal, Goal.MUSCLE_GAIN),
        experience=parse_choice(
            record.get("experience"), Experience, Experience.BEGINNER
        ),
        location=parse_choice(
            record.get("workout_location"), WorkoutLocation, WorkoutLocation.HOME
        ),
        workout_minutes=parse_workout_minutes(record.get("workout_minutes_per_day")),
        meals_per_day=parse_meals_per_day(record.get("meals_per_day")),
    )


def parse_choice(value: object, choices: type[_E], default: _E) -> _E:
    """Return the enum member for an exact literal, else the default."""
    if not isinstance(value, str):
        return default
    try:
        return choices(value)
    except ValueError:
        return default


def parse_work_time(value: object, default: str) -> str:
    """Accept ``H:MM`` or ``HH:MM`` strings; range is not checked."""
    if isinstance(value, str) and _TIME_PATTERN.match(value.strip()):
        return value.strip()
    return default


def parse_workout_minutes(value: object) -> int | None:
    """Parse a minute count, rounding half-up; None when unusable."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        number = value
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    if not math.isfinite(number):
        return None
    return math.floor(number + 0.5)


def parse_meals_per_day(value: object) -> int:
    """Map ``"3" | "4" | "5"`` (or the ints) to a meal count."""
    if isinstance(value, bool):
        return DEFAULT_MEALS_PER_DAY
    if isinstance(value, int) and value in MEALS_PER_DAY_CHOICES:
        return value
    if isinstance(value, str) and value.strip() in {
        str(choice) for choice in MEALS_PER_DAY_CHOICES
    }:
        return int(value.strip())
    return DEFAULT_MEALS_PER_DAY


def parse_preferences(record: Mapping[str, object]) -> Preferences:
    """Read preference flags, keeping defaults for non-boolean values."""
    defaults = Preferences()
    values = {
        name: _parse_bool(record.get(column), getattr(defaults, name))
        for name, column in PREFERENCE_COLUMNS.items()
    }
    return Preferences(**values)


@dataclass
class ProfileService:
    """Application service for profile reads and writes."""

    repository: ProfileRepository

    def get_normalized(self, user_email: str) -> NormalizedProfile:
        """Return the normalized profile or signal that onboarding is missing."""
        email = _require_email(user_email)
        row = self.repository.get_profile(email)
        if row is None:
            raise ProfileNotFoundError(email)
        return normalize_profile(row)

    def get_raw(self, user_email: str) -> dict[str, object] | None:
        """Return the stored row as-is."""
        return self.repository.get_profile(_require_email(user_email))

    def delete_profile(self, user_email: str) -> None:
        """Remove the stored profile row."""
        self.repository.delete_profile(_require_email(user_email))

    def save_profile(
        self, user_email: str, fields: Mapping[str, object]
    ) -> dict[str, object]:
        """Upsert onboarding answers; unknown keys are ignored."""
        email = _require_email(user_email)
        payload = {
            key: value
            for key, value in fields.items()
            if key in PROFILE_FIELDS and value is not None
        }
        _logger.info("Saving profile: user=%s fields=%s", email, sorted(payload))
        return self.repository.upsert_profile(email, payload)

    def get_settings(self, user_email: str) -> SettingsView:
        """Return the settings view, with defaults when no profile exists."""
        email = _require_email(user_email)
        row = self.repository.get_profile(email) or {}
        profile = normalize_profile(row)
        return SettingsView(
            name=email.split("@")[0],
            email=email,
            weight_kg=_parse_text(row.get("weight_kg"), ""),
            height_cm=_parse_text(row.get("height_cm"), ""),
            goal=profile.goal,
            diet_preference=profile.diet,
            workout_location=profile.location,
            workout_minutes_per_day=_parse_text(
                row.get("workout_minutes_per_day"), "30"
            ),
            experience=profile.experience,
            preferences=parse_preferences(row),
        )

    def update_settings(
        self, user_email: str, changes: Mapping[str, object]
    ) -> dict[str, object]:
        """Write only the settings present in ``changes`` with the right type."""
        email = _require_email(user_email)
        payload: dict[str, object] = {}
        for key in SETTINGS_PROFILE_FIELDS:
            value = changes.get(key)
            if isinstance(value, str):
                payload[key] = value
        for name, column in PREFERENCE_COLUMNS.items():
            value = changes.get(name)
            if isinstance(value, bool):
                payload[column] = value
        return self.repository.upsert_profile(email, payload)


def _require_email(user_email: str) -> str:
    email = normalize_email(user_email)
    if not email:
        raise InvalidRequestError("Missing email")
    return email


def _parse_bool(value: object, default: bool) -> bool:
    return value if isinstance(value, bool) else default


def _parse_text(value: object, default: str) -> str:
    if isinstance(value, str) and value.strip():
        return value
    return default
