"""Daily timeline synthesis and current-block resolution.

The timeline is computed in absolute minutes (values may run past midnight)
and only wrapped into ``HH:MM`` when a block is emitted.
"""

from dataclasses import dataclass

from routine_forge.domain.plan import CurrentBlock, RoutineBlock, RoutineItem
from routine_forge.domain.profile import DietPreference, Goal
from routine_forge.services.clock import MINUTES_PER_DAY, clamp, to_minutes, to_time
from routine_forge.services.workouts import workout_duration

LUNCH_EARLIEST = 12 * 60
LUNCH_LATEST = 14 * 60 + 30
WAKE_EARLIEST = 5 * 60 + 30
WAKE_LATEST = 9 * 60

LUNCH_MINUTES = 45
WAKE_MINUTES = 20
MEDITATION_MINUTES = 15
BREAKFAST_MINUTES = 25
SNACK_MINUTES = 25
DINNER_MINUTES = 40
WIND_DOWN_MINUTES = 45
SLEEP_MINUTES = 30

SUMMARY_KEYS = ("wake", "breakfast", "work_morning", "work", "lunch", "workout")


@dataclass(frozen=True)
class _Span:
    key: str
    start: int
    end: int
    icon: str
    title: str
    bullets: tuple[str, ...]


def build_timeline(
    work_start: int,
    work_end: int,
    workout_minutes: float | None = None,
    *,
    diet: DietPreference = DietPreference.VEG,
    goal: Goal = Goal.MUSCLE_GAIN,
) -> list[RoutineBlock]:
    """Lay out the day around the work window.

    Blocks whose end is not after their start are dropped, so callers must not
    rely on a fixed block count.
    """
    is_veg = diet is not DietPreference.NONVEG
    is_fat_loss = goal is Goal.FAT_LOSS
    if work_end < work_start:
        work_end += MINUTES_PER_DAY

    lunch_start = clamp(
        _midpoint(work_start, work_end), LUNCH_EARLIEST, LUNCH_LATEST
    )
    lunch_end = lunch_start + LUNCH_MINUTES

    wake_start = clamp(work_start - 150, WAKE_EARLIEST, WAKE_LATEST)
    wake_end = wake_start + WAKE_MINUTES
    meditation_end = wake_end + MEDITATION_MINUTES
    breakfast_start = clamp(work_start - 75, meditation_end, work_start - 30)

    spans = [
        _Span(
            "wake",
            wake_start,
            wake_end,
            "☀️",
            "Wake Up & Morning Routine",
            ("Wake up", "Drink water", "Light stretching"),
        ),
        _Span(
            "meditation",
            wake_end,
            meditation_end,
            "🧘",
            "Morning Meditation",
            ("10 min meditation", "Deep breathing", "Set daily intentions"),
        ),
        _Span(
            "breakfast",
            breakfast_start,
            breakfast_start + BREAKFAST_MINUTES,
            "☕",
            "Breakfast",
            (
                "Oats / poha / upma + protein" if is_veg else "Eggs + oats / fruit",
                "Vitamins (optional)",
                "Plan the day",
            ),
        ),
    ]

    if lunch_start > work_start:
        spans += [
            _Span(
                "work_morning",
                work_start,
                max(work_start + 60, lunch_start - 10),
                "💼",
                "Morning Work Block",
                ("Focus work", "Deep work tasks", "Avoid distractions"),
            ),
            _Span(
                "lunch",
                lunch_start,
                lunch_end,
                "🍽️",
                "Lunch Break",
                (
                    "Light healthy lunch" if is_fat_loss else "Balanced lunch",
                    "Short walk",
                    "Rest & recharge",
                ),
            ),
            _Span(
                "work_afternoon",
                min(lunch_end + 10, work_end - 20),
                work_end,
                "🧳",
                "Afternoon Work Block",
                ("Meetings", "Collaboration", "Task completion"),
            ),
        ]
    else:
        spans.append(
            _Span(
                "work",
                work_start,
                work_end,
                "💼",
                "Work Block",
                ("Focus work", "Meetings", "Task completion"),
            )
        )

    duration = workout_duration(workout_minutes)
    workout_start = work_end + 30
    workout_end = workout_start + duration
    dinner_start = workout_end + 60
    dinner_end = dinner_start + DINNER_MINUTES
    wind_down_start = dinner_end + 30
    wind_down_end = wind_down_start + WIND_DOWN_MINUTES
    sleep_start = wind_down_end + 30

    spans += [
        _Span(
            "snack",
            work_end,
            work_end + SNACK_MINUTES,
            "🍵",
            "Evening Snack",
            ("Light snack", "Hydrate", "Prepare for workout"),
        ),
        _Span(
            "workout",
            workout_start,
            workout_end,
            "🏋️",
            "Evening Workout",
            (f"{duration} min workout", "Stretch", "Cool down"),
        ),
        _Span(
            "dinner",
            dinner_start,
            dinner_end,
            "🍲",
            "Dinner",
            (
                "Dal + roti + veggies" if is_veg else "Lean protein + veggies",
                "Light conversation",
                "Avoid heavy food late",
            ),
        ),
        _Span(
            "wind_down",
            wind_down_start,
            wind_down_end,
            "📖",
            "Wind Down",
            ("Reading", "Relaxation", "Screen-free time"),
        ),
        _Span(
            "sleep",
            sleep_start,
            sleep_start + SLEEP_MINUTES,
            "🛏️",
            "Sleep",
            ("7-8 hours sleep", "Dark room", "Comfortable temperature"),
        ),
    ]

    return [
        RoutineBlock(
            key=span.key,
            start=to_time(span.start),
            end=to_time(span.end),
            icon=span.icon,
            title=span.title,
            bullets=list(span.bullets),
        )
        for span in spans
        if span.end > span.start
    ]


def build_routine_summary(blocks: list[RoutineBlock]) -> list[RoutineItem]:
    """Pick the dashboard highlights out of a full timeline."""
    return [
        RoutineItem(time=block.start, title=block.title, icon=block.icon)
        for block in blocks
        if block.key in SUMMARY_KEYS
    ]


def resolve_current_block(
    blocks: list[RoutineBlock], now_minutes: int
) -> CurrentBlock:
    """Return the active block, else the next one, else the last of the day."""
    if not blocks:
        raise ValueError("resolve_current_block needs at least one block")

    for block in blocks:
        start = to_minutes(block.start)
        end = to_minutes(block.end)
        if end < start:
            active = now_minutes >= start or now_minutes < end
        else:
            active = start <= now_minutes < end
        if active:
            return _as_current(block)

    upcoming = [block for block in blocks if to_minutes(block.start) > now_minutes]
    if upcoming:
        return _as_current(min(upcoming, key=lambda block: to_minutes(block.start)))
    return _as_current(max(blocks, key=lambda block: to_minutes(block.start)))


def _as_current(block: RoutineBlock) -> CurrentBlock:
    return CurrentBlock(title=block.title, time=f"{block.start} - {block.end}")


def _midpoint(start: int, end: int) -> int:
    # Half-up rounding of (start + end) / 2 for non-negative integers.
    return (start + end + 1) // 2
