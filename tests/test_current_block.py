"""Tests for resolving the block shown as "now"."""

import pytest

from routine_forge.domain.plan import RoutineBlock
from routine_forge.services.clock import MINUTES_PER_DAY, to_minutes
from routine_forge.services.routine import build_timeline, resolve_current_block


def _block(key: str, start: str, end: str) -> RoutineBlock:
    return RoutineBlock(
        key=key, start=start, end=end, icon="•", title=key.title(), bullets=[]
    )


@pytest.fixture
def timeline() -> list[RoutineBlock]:
    return build_timeline(to_minutes("10:30"), to_minutes("20:00"), 35)


def test_upcoming_block_before_work(timeline: list[RoutineBlock]) -> None:
    current = resolve_current_block(timeline, to_minutes("10:00"))

    assert current.title == "Morning Work Block"
    assert current.time == "10:30 - 14:20"


def test_active_block_wins(timeline: list[RoutineBlock]) -> None:
    current = resolve_current_block(timeline, to_minutes("14:45"))

    assert current.title == "Lunch Break"
    assert current.time == "14:30 - 15:15"


def test_block_end_is_exclusive(timeline: list[RoutineBlock]) -> None:
    assert resolve_current_block(timeline, to_minutes("08:20")).title == (
        "Morning Meditation"
    )


def test_block_wrapping_midnight_is_active_late(
    timeline: list[RoutineBlock],
) -> None:
    current = resolve_current_block(timeline, to_minutes("23:30"))

    assert current.title == "Wind Down"
    assert current.time == "23:15 - 00:00"


def test_block_after_midnight_is_active(timeline: list[RoutineBlock]) -> None:
    assert resolve_current_block(timeline, to_minutes("00:45")).title == "Sleep"


def test_small_hours_point_to_next_morning(timeline: list[RoutineBlock]) -> None:
    current = resolve_current_block(timeline, to_minutes("03:00"))

    assert current.title == "Wake Up & Morning Routine"


def test_falls_back_to_latest_start_when_nothing_is_left() -> None:
    blocks = [_block("first", "08:00", "09:00"), _block("second", "10:00", "11:00")]

    current = resolve_current_block(blocks, to_minutes("12:00"))

    assert current.title == "Second"
    assert current.time == "10:00 - 11:00"


def test_wrapping_block_active_before_its_end() -> None:
    blocks = [_block("night", "22:00", "02:00"), _block("day", "09:00", "17:00")]

    assert resolve_current_block(blocks, to_minutes("01:00")).title == "Night"
    assert resolve_current_block(blocks, to_minutes("02:00")).title == "Day"


def test_empty_timeline_is_rejected() -> None:
    with pytest.raises(ValueError):
        resolve_current_block([], 600)


def test_every_minute_resolves_to_a_block(timeline: list[RoutineBlock]) -> None:
    titles = {block.title for block in timeline}

    for minute in range(MINUTES_PER_DAY):
        assert resolve_current_block(timeline, minute).title in titles
