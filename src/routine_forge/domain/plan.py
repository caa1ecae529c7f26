"""Domain models for generated daily plans."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class RoutineBlock:
    """A named interval in the daily timeline."""

    key: str
    start: str
    end: str
    icon: str
    title: str
    bullets: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class RoutineItem:
    """Compact timeline entry shown on the dashboard."""

    time: str
    title: str
    icon: str


@dataclass(frozen=True)
class CurrentBlock:
    """The block active now, or the next one."""

    title: str
    time: str


@dataclass(frozen=True)
class MealItem:
    """A meal slot with its calorie share."""

    name: str
    desc: str
    kcal: int


@dataclass(frozen=True)
class Exercise:
    """Single exercise prescription."""

    name: str
    sets_reps: str


@dataclass(frozen=True)
class WorkoutItem:
    """Workout template for the day."""

    title: str
    subtitle: str
    duration_min: int
    items: list[Exercise]


@dataclass(frozen=True)
class DailyPlan:
    """Everything the dashboard needs for today."""

    user_email: str
    greeting: str
    greeting_name: str
    current_block: CurrentBlock
    streak_days: int
    routine: list[RoutineItem]
    meals: list[MealItem]
    kcal_total: int
    workout: WorkoutItem
    routine_blocks: list[RoutineBlock]
