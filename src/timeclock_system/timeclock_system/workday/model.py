from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import DayStatus, DayType
from .intervals import WorkInterval


@dataclass(frozen=True)
class DaySummary:
    """Derived view of one workday. Never persisted.

    worked_minutes and balance_minutes are None when they cannot be derived
    (odd or out-of-sequence entries), never 0.
    """

    work_date: date
    day_type: DayType
    status: DayStatus
    entry_count: int
    worked_minutes: Optional[int]
    expected_minutes: int
    expected_minutes_effective: int
    excused_minutes: int
    balance_minutes: Optional[int]
    break_minutes: int
    intervals: tuple[WorkInterval, ...] = ()
    in_progress_minutes: Optional[int] = None
    provisional_balance_minutes: Optional[int] = None

    @property
    def zeroed(self) -> bool:
        return self.expected_minutes_effective == 0 and self.expected_minutes > 0
