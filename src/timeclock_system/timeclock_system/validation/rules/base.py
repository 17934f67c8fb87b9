from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Iterable, Optional

from ...absences.policy import NORMAL_DAY, DayClassification
from ...core.settings import EngineSettings
from ...entries.model import TimeEntry
from ...schedules.model import DayScheduleConfig
from ...workday.intervals import WorkInterval
from ..model import Inconsistency


@dataclass(frozen=True)
class ValidationContext:
    """Everything a rule may look at for one workday.

    entries is the full, ordered list of the day (including a simulated new
    entry when target is set).
    """

    work_date: date
    entries: tuple[TimeEntry, ...]
    now: datetime
    day_config: DayScheduleConfig
    intervals: tuple[WorkInterval, ...] = ()
    max_daily_minutes: int = 600
    min_rest_minutes: int = 660
    previous_last_out: Optional[datetime] = None
    settings: EngineSettings = field(default_factory=EngineSettings)
    target: Optional[TimeEntry] = None
    classification: DayClassification = NORMAL_DAY

    @property
    def for_new_entry(self) -> bool:
        return self.target is not None

    @property
    def subjects(self) -> tuple[TimeEntry, ...]:
        """Entries the per-entry rules report on."""
        return (self.target,) if self.target is not None else self.entries

    def is_subject(self, entry: TimeEntry) -> bool:
        return any(entry is s for s in self.subjects)

    def index_of(self, entry: TimeEntry) -> int:
        return next(i for i, e in enumerate(self.entries) if e is entry)

    @property
    def is_past_day(self) -> bool:
        return self.work_date < self.now.date()


class ConsistencyRule(ABC):
    """Strategy Pattern: one stateless consistency check."""

    # Day-level rules judge a finished day and are skipped while a new
    # entry is being registered.
    day_level = False

    @abstractmethod
    def check(self, context: ValidationContext) -> Iterable[Inconsistency]:
        raise NotImplementedError
