from __future__ import annotations

from datetime import date
from typing import Sequence

from ..core.enums import DayStatus, Direction
from ..entries.model import TimeEntry
from .intervals import WorkInterval, longest_pause_interval, primary_pause_interval

# status -> (label, is_consistent)
STATUS_INFO: dict[DayStatus, tuple[str, bool]] = {
    DayStatus.NO_RECORDS: ("No records", False),
    DayStatus.EXCESS_ENTRIES: ("Too many entries", False),
    DayStatus.IN_PROGRESS: ("In progress", True),
    DayStatus.INCOMPLETE: ("Incomplete", False),
    DayStatus.SEQUENCE_INVALID: ("Invalid sequence", False),
    DayStatus.OVERTIME_EXCEEDED: ("Daily limit exceeded", False),
    DayStatus.INSUFFICIENT_BREAK: ("Insufficient break", False),
    DayStatus.COMPLETE_NO_BREAK: ("Complete without break", True),
    DayStatus.COMPLETE: ("Complete", True),
}

# Statuses whose worked minutes are not derivable.
UNDEFINED_WORK = {DayStatus.EXCESS_ENTRIES, DayStatus.INCOMPLETE, DayStatus.SEQUENCE_INVALID}


def is_consistent(status: DayStatus) -> bool:
    return STATUS_INFO[status][1]


def status_label(status: DayStatus) -> str:
    return STATUS_INFO[status][0]


def is_sequence_valid(entries: Sequence[TimeEntry]) -> bool:
    """True when directions strictly alternate starting with IN."""
    return all(
        e.direction == (Direction.IN if i % 2 == 0 else Direction.OUT)
        for i, e in enumerate(entries)
    )


def resolve_day_status(
    *,
    entries: Sequence[TimeEntry],
    intervals: Sequence[WorkInterval],
    work_date: date,
    today: date,
    worked_minutes: int,
    max_daily_minutes: int,
    minimum_break_minutes: int,
    zeroed: bool,
    max_entries: int,
    break_leniency_minutes: int,
) -> DayStatus:
    """Ordered state machine; the first matching rule wins."""
    count = len(entries)
    if count == 0:
        return DayStatus.NO_RECORDS
    if count > max_entries:
        return DayStatus.EXCESS_ENTRIES
    if count % 2 == 1:
        if count == 1 and entries[0].direction == Direction.IN and work_date == today:
            return DayStatus.IN_PROGRESS
        return DayStatus.INCOMPLETE
    if not is_sequence_valid(entries):
        return DayStatus.SEQUENCE_INVALID
    if worked_minutes > max_daily_minutes:
        return DayStatus.OVERTIME_EXCEEDED
    if count >= 4 and not zeroed:
        pause = primary_pause_interval(intervals) or longest_pause_interval(intervals)
        if pause is not None and pause.pause_considered_minutes < minimum_break_minutes - break_leniency_minutes:
            return DayStatus.INSUFFICIENT_BREAK
    if count == 2:
        return DayStatus.COMPLETE_NO_BREAK
    return DayStatus.COMPLETE
