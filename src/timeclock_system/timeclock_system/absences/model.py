from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Optional

from ..core.enums import AbsenceType


@dataclass(frozen=True)
class Absence:
    """Special-day marker (holiday, vacation, medical declaration, ...).

    A marker carrying a time sub-range (start_time/end_time) is a partial-day
    marker: it excuses part of the day instead of classifying the whole day.
    """

    absence_id: int
    workspace_id: int
    absence_type: AbsenceType
    start_date: date
    end_date: date
    start_time: Optional[time] = None
    end_time: Optional[time] = None
    excused_minutes: Optional[int] = None
    acquisition_period: Optional[str] = None
    attachment: Optional[str] = None
    note: Optional[str] = None

    @property
    def is_partial(self) -> bool:
        return self.start_time is not None and self.end_time is not None

    def covers(self, day: date) -> bool:
        return self.start_date <= day <= self.end_date

    def overlaps(self, start: date, end: date) -> bool:
        return self.start_date <= end and start <= self.end_date

    @property
    def range_minutes(self) -> int:
        if not self.is_partial:
            return 0
        start = datetime.combine(self.start_date, self.start_time)
        end = datetime.combine(self.start_date, self.end_time)
        return max(int((end - start).total_seconds() // 60), 0)

    @property
    def partial_excused_minutes(self) -> int:
        if not self.is_partial:
            return 0
        if self.excused_minutes is not None:
            return int(self.excused_minutes)
        return self.range_minutes
