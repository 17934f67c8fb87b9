from __future__ import annotations

from dataclasses import replace
from datetime import date, time

from src.timeclock_system.timeclock_system.common.datetime_utils import minutes_between
from src.timeclock_system.timeclock_system.core.enums import Direction
from src.timeclock_system.timeclock_system.workday.intervals import (
    Pause,
    build_intervals,
    closed_minutes,
    select_primary_pause,
)
from tests.fakes import at, make_entries

DAY = date(2025, 3, 3)


def _build(*times, minimum=60, tolerance=0, ideal=None):
    return build_intervals(
        make_entries(DAY, *times),
        minimum_break_minutes=minimum,
        tolerance_minutes=tolerance,
        ideal_break_start=ideal,
    )


def test_no_entries_gives_no_intervals():
    assert _build() == []


def test_single_in_gives_one_open_interval():
    intervals = _build("08:00")
    assert len(intervals) == 1
    assert intervals[0].open
    assert intervals[0].duration_minutes is None


def test_durations_equal_elapsed_minus_pauses_without_tolerance():
    times = ("07:58", "11:47", "12:51", "15:02", "15:20", "18:09")
    intervals = _build(*times)

    elapsed = minutes_between(at(DAY, times[0]), at(DAY, times[-1]))
    pauses = sum(i.pause_before_minutes for i in intervals if i.pause_before_minutes is not None)
    assert closed_minutes(intervals) == elapsed - pauses


def test_durations_equal_elapsed_minus_considered_pauses_with_tolerance():
    times = ("08:00", "12:00", "13:10", "17:22")
    intervals = _build(*times, tolerance=15)

    elapsed = minutes_between(at(DAY, times[0]), at(DAY, times[-1]))
    considered = sum(i.pause_considered_minutes for i in intervals if i.pause_considered_minutes is not None)
    assert considered == 60
    assert closed_minutes(intervals) == elapsed - considered == 502


def test_tolerance_credits_the_following_interval():
    intervals = _build("08:00", "12:00", "13:10", "17:22", tolerance=15)

    assert intervals[0].duration_minutes == 240
    assert intervals[1].pause_before_minutes == 70
    assert intervals[1].pause_considered_minutes == 60
    assert intervals[1].duration_minutes == 262
    assert intervals[1].effective_start == at(DAY, "13:00")


def test_pause_above_tolerance_window_is_not_reduced():
    intervals = _build("08:00", "12:00", "13:20", "17:00", tolerance=15)
    assert intervals[1].is_primary_pause
    assert intervals[1].pause_considered_minutes == 80


def test_tolerance_applies_to_at_most_one_pause():
    # Two pauses inside [60, 75]; only the primary one is reduced.
    intervals = _build("07:00", "10:00", "11:10", "13:00", "14:10", "17:00", tolerance=15)

    reduced = [i for i in intervals if i.tolerance_discount_minutes > 0]
    assert len(reduced) == 1
    assert sum(1 for i in intervals if i.is_primary_pause) == 1


def test_primary_pause_is_closest_to_ideal_break_start():
    intervals = _build(
        "07:00", "10:00", "11:10", "13:00", "14:10", "17:00", tolerance=15, ideal=time(13, 0)
    )
    assert not intervals[1].is_primary_pause
    assert intervals[2].is_primary_pause
    assert intervals[2].pause_considered_minutes == 60
    assert intervals[1].pause_considered_minutes == 70


def test_pause_below_minimum_is_never_primary():
    intervals = _build("08:00", "12:00", "12:50", "17:12", tolerance=15)
    assert not any(i.is_primary_pause for i in intervals)
    assert intervals[1].pause_considered_minutes == 50


def test_primary_pause_ties_go_to_the_earliest():
    pauses = [
        Pause(start=at(DAY, "11:00"), end=at(DAY, "12:00"), raw_minutes=60),
        Pause(start=at(DAY, "13:00"), end=at(DAY, "14:00"), raw_minutes=60),
    ]
    assert select_primary_pause(pauses, 60, time(12, 0)) == 0
    assert select_primary_pause(pauses, 90) is None


def test_non_alternating_entries_are_paired_positionally():
    entries = make_entries(DAY, "08:00", "09:00", "10:00", "11:00")
    # Pairing does not look at directions.
    entries[1] = replace(entries[1], direction=Direction.IN)
    intervals = build_intervals(entries, minimum_break_minutes=60, tolerance_minutes=0)
    assert [i.duration_minutes for i in intervals] == [60, 60]


def test_seconds_are_truncated():
    entries = make_entries(DAY, "08:00:00", "08:59:59")
    intervals = build_intervals(entries, minimum_break_minutes=60, tolerance_minutes=0)
    assert intervals[0].duration_minutes == 59
