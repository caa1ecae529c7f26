"""Domain models for user profiles."""

from dataclasses import dataclass
from enum import StrEnum


class DietPreference(StrEnum):
    """Dietary preference chosen at onboarding."""

    VEG = "veg"
    NONVEG = "nonveg"
    EGGETARIAN = "eggetarian"
    VEGAN = "vegan"


class Goal(StrEnum):
    """Fitness goal."""

    MUSCLE_GAIN = "muscle_gain"
    WEIGHT_GAIN = "weight_gain"
    FAT_LOSS = "fat_loss"
    MAINTENANCE = "maintenance"


class Experience(StrEnum):
    """Training experience level."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class WorkoutLocation(StrEnum):
    """Where the user trains."""

    HOME = "home"
    GYM = "gym"


MEALS_PER_DAY_CHOICES = (3, 4, 5)


@dataclass(frozen=True)
class NormalizedProfile:
    """Profile fields resolved into closed vocabularies."""

    work_start: str
    work_end: str
    diet: DietPreference
    goal: Goal
    experience: Experience
    location: WorkoutLocation
    workout_minutes: int | None
    meals_per_day: int

    def to_record(self) -> dict[str, object]:
        """Return the profile in its persisted row shape."""
        return {
            "work_start": self.work_start,
            "work_end": self.work_end,
            "diet_preference": self.diet.value,
            "goal": self.goal.value,
            "experience": self.experience.value,
            "workout_location": self.location.value,
            "workout_minutes_per_day": (
                str(self.workout_minutes) if self.workout_minutes is not None else ""
            ),
            "meals_per_day": str(self.meals_per_day),
        }


@dataclass(frozen=True)
class Preferences:
    """Reminder and display preferences stored with the profile."""

    dark_mode: bool = False
    daily_reminder: bool = True
    workout_reminder: bool = True
    meal_reminder: bool = True


@dataclass(frozen=True)
class SettingsView:
    """Account, profile subset and preferences shown on the settings page."""

    name: str
    email: str
    weight_kg: str
    height_cm: str
    goal: Goal
    diet_preference: DietPreference
    workout_location: WorkoutLocation
    workout_minutes_per_day: str
    experience: Experience
    preferences: Preferences
