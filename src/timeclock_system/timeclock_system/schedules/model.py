from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, time
from typing import Mapping, Optional

from ..core import constants


@dataclass(frozen=True)
class DayScheduleConfig:
    """Expected parameters of one weekday (0 = Monday ... 6 = Sunday)."""

    weekday: int
    active: bool = True
    expected_minutes: int = constants.DEFAULT_EXPECTED_MINUTES
    minimum_break_minutes: int = constants.DEFAULT_MINIMUM_BREAK_MINUTES
    tolerance_minutes: int = constants.DEFAULT_TOLERANCE_MINUTES
    ideal_in: Optional[time] = None
    ideal_break_out: Optional[time] = None
    ideal_break_return: Optional[time] = None
    ideal_out: Optional[time] = None

    @property
    def effective_expected_minutes(self) -> int:
        return self.expected_minutes if self.active else 0

    @classmethod
    def default_for(cls, weekday: int) -> "DayScheduleConfig":
        workday = weekday < 5
        return cls(
            weekday=weekday,
            active=workday,
            expected_minutes=constants.DEFAULT_EXPECTED_MINUTES if workday else 0,
        )


def default_week() -> dict[int, DayScheduleConfig]:
    return {wd: DayScheduleConfig.default_for(wd) for wd in range(7)}


@dataclass(frozen=True)
class ScheduleVersion:
    """Effective-dated block of day configurations for one workspace."""

    version_id: int
    workspace_id: int
    start_date: date
    end_date: Optional[date] = None
    sequence: int = 1
    max_daily_minutes: int = constants.DEFAULT_MAX_DAILY_MINUTES
    min_rest_between_shifts_minutes: int = constants.DEFAULT_MIN_REST_MINUTES
    description: Optional[str] = None
    days: Mapping[int, DayScheduleConfig] = field(default_factory=default_week)
    created_at: Optional[datetime] = None

    @property
    def is_open(self) -> bool:
        return self.end_date is None

    def contains(self, day: date) -> bool:
        return self.start_date <= day and (self.end_date is None or day <= self.end_date)

    def day_config(self, day: date) -> DayScheduleConfig:
        return self.days.get(day.weekday()) or DayScheduleConfig.default_for(day.weekday())
