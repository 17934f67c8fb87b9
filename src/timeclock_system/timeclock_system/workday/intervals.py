"""Pairing of a day's entries into work intervals and pauses.

Exactly one pause per day (the primary pause, conceptually lunch) may
receive the break tolerance: when its raw length lies within
[minimum break, minimum break + tolerance] it is considered to be exactly the
minimum break, and the difference is credited to the work interval that
follows it.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, time, timedelta
from typing import Iterable, Optional, Sequence

from ..common.datetime_utils import minutes_between
from ..entries.model import TimeEntry, sort_entries


@dataclass(frozen=True)
class WorkInterval:
    entry_in: TimeEntry
    entry_out: Optional[TimeEntry]
    duration_minutes: Optional[int]
    pause_before_minutes: Optional[int] = None
    pause_considered_minutes: Optional[int] = None
    is_primary_pause: bool = False

    @property
    def open(self) -> bool:
        return self.entry_out is None

    @property
    def tolerance_discount_minutes(self) -> int:
        if self.pause_before_minutes is None or self.pause_considered_minutes is None:
            return 0
        return self.pause_before_minutes - self.pause_considered_minutes

    @property
    def effective_start(self) -> datetime:
        return self.entry_in.timestamp - timedelta(minutes=self.tolerance_discount_minutes)


@dataclass(frozen=True)
class Pause:
    start: datetime
    end: datetime
    raw_minutes: int


def is_tolerance_eligible(raw_minutes: int, minimum_break_minutes: int, tolerance_minutes: int) -> bool:
    return minimum_break_minutes <= raw_minutes <= minimum_break_minutes + tolerance_minutes


def select_primary_pause(
    pauses: Sequence[Pause],
    minimum_break_minutes: int,
    ideal_break_start: Optional[time] = None,
) -> Optional[int]:
    """Index of the primary pause, or None when no pause reaches the minimum.

    Among pauses of at least the minimum break, the one starting closest to
    the ideal break start wins (earliest on ties); without an ideal time the
    first qualifying pause wins.
    """
    candidates = [i for i, p in enumerate(pauses) if p.raw_minutes >= minimum_break_minutes]
    if not candidates:
        return None
    if ideal_break_start is None:
        return candidates[0]

    def distance(i: int) -> float:
        start = pauses[i].start
        ideal = datetime.combine(start.date(), ideal_break_start, tzinfo=start.tzinfo)
        return abs((start - ideal).total_seconds())

    return min(candidates, key=lambda i: (distance(i), i))


def pair_entries(entries: Iterable[TimeEntry]) -> list[tuple[TimeEntry, Optional[TimeEntry]]]:
    """Positional pairing (0,1), (2,3), ...; a trailing entry pairs with None."""
    ordered = sort_entries(entries)
    return [
        (ordered[i], ordered[i + 1] if i + 1 < len(ordered) else None)
        for i in range(0, len(ordered), 2)
    ]


def build_intervals(
    entries: Iterable[TimeEntry],
    *,
    minimum_break_minutes: int,
    tolerance_minutes: int,
    ideal_break_start: Optional[time] = None,
) -> list[WorkInterval]:
    pairs = pair_entries(entries)
    if not pairs:
        return []

    # pairs[k - 1] always has an OUT when pairs[k] exists.
    pauses = [
        Pause(start=pairs[k - 1][1].timestamp, end=pairs[k][0].timestamp,
              raw_minutes=minutes_between(pairs[k - 1][1].timestamp, pairs[k][0].timestamp))
        for k in range(1, len(pairs))
    ]
    primary = select_primary_pause(pauses, minimum_break_minutes, ideal_break_start)

    intervals: list[WorkInterval] = []
    for k, (entry_in, entry_out) in enumerate(pairs):
        pause_raw: Optional[int] = None
        pause_considered: Optional[int] = None
        is_primary = False
        if k > 0:
            pause_index = k - 1
            pause_raw = pauses[pause_index].raw_minutes
            pause_considered = pause_raw
            is_primary = pause_index == primary
            if is_primary and is_tolerance_eligible(pause_raw, minimum_break_minutes, tolerance_minutes):
                pause_considered = minimum_break_minutes

        duration: Optional[int] = None
        if entry_out is not None:
            discount = (pause_raw - pause_considered) if pause_raw is not None else 0
            duration = minutes_between(entry_in.timestamp, entry_out.timestamp) + discount

        intervals.append(
            WorkInterval(
                entry_in=entry_in,
                entry_out=entry_out,
                duration_minutes=duration,
                pause_before_minutes=pause_raw,
                pause_considered_minutes=pause_considered,
                is_primary_pause=is_primary,
            )
        )
    return intervals


def closed_minutes(intervals: Iterable[WorkInterval]) -> int:
    return sum(i.duration_minutes for i in intervals if i.duration_minutes is not None)


def primary_pause_interval(intervals: Iterable[WorkInterval]) -> Optional[WorkInterval]:
    return next((i for i in intervals if i.is_primary_pause), None)


def longest_pause_interval(intervals: Iterable[WorkInterval]) -> Optional[WorkInterval]:
    with_pause = [i for i in intervals if i.pause_before_minutes is not None]
    if not with_pause:
        return None
    return max(with_pause, key=lambda i: i.pause_before_minutes)
