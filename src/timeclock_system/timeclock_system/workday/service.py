from __future__ import annotations

from collections import defaultdict
from datetime import date, datetime

from ..absences.policy import classify
from ..absences.repository import AbsenceRepository
from ..common.datetime_utils import iter_days
from ..core.settings import EngineSettings
from ..entries.repository import EntryRepository
from ..schedules.repository import ScheduleRepository
from ..schedules.timeline import ScheduleTimeline
from .calculator import compute_day_summary, compute_day_summary_with_in_progress
from .model import DaySummary


class WorkdayService:
    """Loads a workspace's data and delegates to the pure calculator."""

    def __init__(
        self,
        entries: EntryRepository,
        schedules: ScheduleRepository,
        absences: AbsenceRepository,
        *,
        settings: EngineSettings | None = None,
    ):
        self._entries = entries
        self._schedules = schedules
        self._absences = absences
        self._settings = settings or EngineSettings()

    def _context(self, workspace_id: int, day: date, timeline: ScheduleTimeline | None = None, absences=None):
        timeline = timeline or ScheduleTimeline(self._schedules.list_versions(workspace_id=workspace_id))
        version = timeline.resolve(day)
        if absences is None:
            absences = self._absences.list_for_range(workspace_id=workspace_id, start=day, end=day)
        return {
            "day_config": version.day_config(day),
            "classification": classify(day, absences),
            "max_daily_minutes": version.max_daily_minutes,
            "settings": self._settings,
        }

    def compute_day_summary(self, workspace_id: int, work_date: date, *, today: date | None = None) -> DaySummary:
        today = today or datetime.now().date()
        workspace_id = int(workspace_id)
        entries = self._entries.list_for_date(workspace_id=workspace_id, work_date=work_date)
        return compute_day_summary(
            entries, work_date=work_date, today=today, **self._context(workspace_id, work_date)
        )

    def compute_day_summary_with_in_progress(
        self, workspace_id: int, work_date: date, *, now: datetime | None = None
    ) -> DaySummary:
        now = now or datetime.now()
        workspace_id = int(workspace_id)
        entries = self._entries.list_for_date(workspace_id=workspace_id, work_date=work_date)
        return compute_day_summary_with_in_progress(
            entries, work_date=work_date, now=now, **self._context(workspace_id, work_date)
        )

    def summaries_for_range(self, workspace_id: int, start: date, end: date, *, today: date) -> list[DaySummary]:
        """One summary per calendar date in [start, end], loading each source once."""
        workspace_id = int(workspace_id)
        if end < start:
            return []
        timeline = ScheduleTimeline(self._schedules.list_versions(workspace_id=workspace_id))
        markers = self._absences.list_for_range(workspace_id=workspace_id, start=start, end=end)

        by_date = defaultdict(list)
        for entry in self._entries.list_for_range(workspace_id=workspace_id, start=start, end=end):
            by_date[entry.work_date].append(entry)

        return [
            compute_day_summary(
                by_date.get(day, []),
                work_date=day,
                today=today,
                **self._context(workspace_id, day, timeline=timeline, absences=markers),
            )
            for day in iter_days(start, end)
        ]
