from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Optional

from ..absences.policy import NORMAL_DAY, DayClassification, classify
from ..absences.repository import AbsenceRepository
from ..core.enums import Direction
from ..core.settings import EngineSettings
from ..entries.model import TimeEntry, sort_entries
from ..entries.repository import EntryRepository
from ..schedules.repository import ScheduleRepository
from ..schedules.timeline import ScheduleTimeline
from .model import ValidationResult
from .validator import ConsistencyValidator


class ValidationService:
    def __init__(
        self,
        entries: EntryRepository,
        schedules: ScheduleRepository,
        absences: AbsenceRepository | None = None,
        *,
        settings: EngineSettings | None = None,
        validator: ConsistencyValidator | None = None,
    ):
        self._entries = entries
        self._schedules = schedules
        self._absences = absences
        self._validator = validator or ConsistencyValidator(settings=settings)

    def _previous_last_out(self, workspace_id: int, work_date: date) -> Optional[datetime]:
        previous = self._entries.list_for_date(workspace_id=workspace_id, work_date=work_date - timedelta(days=1))
        outs = [e for e in sort_entries(previous) if e.direction == Direction.OUT]
        return outs[-1].timestamp if outs else None

    def _schedule_kwargs(self, workspace_id: int, work_date: date) -> dict:
        version = ScheduleTimeline(self._schedules.list_versions(workspace_id=workspace_id)).resolve(work_date)
        return {
            "day_config": version.day_config(work_date),
            "max_daily_minutes": version.max_daily_minutes,
            "min_rest_minutes": version.min_rest_between_shifts_minutes,
            "previous_last_out": self._previous_last_out(workspace_id, work_date),
        }

    def _classification(self, workspace_id: int, work_date: date) -> DayClassification:
        if self._absences is None:
            return NORMAL_DAY
        absences = self._absences.list_for_range(workspace_id=workspace_id, start=work_date, end=work_date)
        return classify(work_date, absences)

    def validate_entries(self, workspace_id: int, work_date: date, *, now: datetime | None = None) -> ValidationResult:
        now = now or datetime.now()
        workspace_id = int(workspace_id)
        entries = self._entries.list_for_date(workspace_id=workspace_id, work_date=work_date)
        return self._validator.validate_day(
            entries,
            work_date=work_date,
            now=now,
            classification=self._classification(workspace_id, work_date),
            **self._schedule_kwargs(workspace_id, work_date),
        )

    def validate_new_entry(self, entry: TimeEntry, *, now: datetime | None = None) -> ValidationResult:
        now = now or datetime.now()
        existing = self._entries.list_for_date(workspace_id=entry.workspace_id, work_date=entry.work_date)
        return self._validator.validate_new_entry(
            entry, existing, now=now, **self._schedule_kwargs(entry.workspace_id, entry.work_date)
        )
