"""In-memory repositories used across the test suite."""

from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime, time
from typing import Optional

from src.timeclock_system.timeclock_system.absences.model import Absence
from src.timeclock_system.timeclock_system.balance.model import ManualAdjustment, PeriodClosing
from src.timeclock_system.timeclock_system.core.enums import Direction
from src.timeclock_system.timeclock_system.core.exceptions import ConfigurationError
from src.timeclock_system.timeclock_system.entries.model import EntryAudit, TimeEntry
from src.timeclock_system.timeclock_system.schedules.model import ScheduleVersion

IN = Direction.IN
OUT = Direction.OUT


def at(day: date, hhmm: str) -> datetime:
    return datetime.combine(day, time.fromisoformat(hhmm))


def make_entries(day: date, *times: str, workspace_id: int = 1, first_id: int = 1) -> list[TimeEntry]:
    """Alternating IN/OUT entries at the given HH:MM times."""
    return [
        TimeEntry(
            entry_id=first_id + i,
            workspace_id=workspace_id,
            timestamp=at(day, t),
            direction=IN if i % 2 == 0 else OUT,
        )
        for i, t in enumerate(times)
    ]


class InMemoryEntries:
    def __init__(self, entries=()):
        self._rows: dict[int, TimeEntry] = {}
        self._next_id = 1
        for e in entries:
            self._rows[e.entry_id] = e
            self._next_id = max(self._next_id, e.entry_id + 1)

    def add_day(self, day: date, *times: str, workspace_id: int = 1) -> list[TimeEntry]:
        created = make_entries(day, *times, workspace_id=workspace_id, first_id=self._next_id)
        for e in created:
            self._rows[e.entry_id] = e
        self._next_id += len(created)
        return created

    def get_by_id(self, entry_id: int) -> Optional[TimeEntry]:
        return self._rows.get(int(entry_id))

    def list_for_date(self, *, workspace_id: int, work_date: date):
        return self.list_for_range(workspace_id=workspace_id, start=work_date, end=work_date)

    def list_for_range(self, *, workspace_id: int, start: date, end: date):
        rows = [e for e in self._rows.values() if e.workspace_id == workspace_id and start <= e.work_date <= end]
        return sorted(rows, key=lambda e: (e.timestamp, e.entry_id))

    def first_entry_date(self, *, workspace_id: int) -> Optional[date]:
        dates = [e.work_date for e in self._rows.values() if e.workspace_id == workspace_id]
        return min(dates) if dates else None

    def create(self, *, workspace_id, timestamp, direction, manually_edited=False, note=None, location=None,
               created_at=None) -> int:
        entry_id = self._next_id
        self._next_id += 1
        self._rows[entry_id] = TimeEntry(
            entry_id=entry_id,
            workspace_id=workspace_id,
            timestamp=timestamp,
            direction=direction,
            manually_edited=manually_edited,
            note=note,
            location=location,
            created_at=created_at,
        )
        return entry_id

    def update(self, *, entry_id, timestamp, direction, note=None) -> bool:
        current = self._rows.get(int(entry_id))
        if not current:
            return False
        self._rows[current.entry_id] = replace(
            current, timestamp=timestamp, direction=direction, note=note, manually_edited=True
        )
        return True

    def delete(self, *, entry_id) -> bool:
        return self._rows.pop(int(entry_id), None) is not None


class InMemoryAudits:
    def __init__(self):
        self.rows: list[EntryAudit] = []

    def record(self, *, entry_id, workspace_id, action, reason, detail, previous_timestamp, new_timestamp,
               recorded_at) -> int:
        audit = EntryAudit(
            audit_id=len(self.rows) + 1,
            entry_id=entry_id,
            workspace_id=workspace_id,
            action=action,
            reason=reason,
            detail=detail,
            previous_timestamp=previous_timestamp,
            new_timestamp=new_timestamp,
            recorded_at=recorded_at,
        )
        self.rows.append(audit)
        return audit.audit_id

    def list_for_entry(self, *, entry_id):
        return [a for a in self.rows if a.entry_id == entry_id]


class InMemorySchedules:
    def __init__(self, versions=()):
        self.versions: list[ScheduleVersion] = list(versions)

    def list_versions(self, *, workspace_id):
        return [v for v in self.versions if v.workspace_id == workspace_id]

    def create_version(self, *, workspace_id, start_date, sequence, max_daily_minutes,
                       min_rest_between_shifts_minutes, days, description=None, close_version_id=None,
                       close_end_date=None) -> int:
        version_id = len(self.versions) + 1
        created = ScheduleVersion(
            version_id=version_id,
            workspace_id=workspace_id,
            start_date=start_date,
            sequence=sequence,
            max_daily_minutes=max_daily_minutes,
            min_rest_between_shifts_minutes=min_rest_between_shifts_minutes,
            description=description,
            days=dict(days),
        )
        versions = [
            replace(v, end_date=close_end_date) if v.version_id == close_version_id else v
            for v in self.versions
        ]
        self.versions = versions + [created]
        return version_id


class InMemoryAbsences:
    def __init__(self, absences=()):
        self.rows: list[Absence] = list(absences)

    def list_for_range(self, *, workspace_id, start, end):
        return [a for a in self.rows if a.workspace_id == workspace_id and a.overlaps(start, end)]

    def create(self, *, workspace_id, absence_type, start_date, end_date, start_time=None, end_time=None,
               excused_minutes=None, acquisition_period=None, attachment=None, note=None) -> int:
        absence_id = len(self.rows) + 1
        self.rows.append(
            Absence(
                absence_id=absence_id,
                workspace_id=workspace_id,
                absence_type=absence_type,
                start_date=start_date,
                end_date=end_date,
                start_time=start_time,
                end_time=end_time,
                excused_minutes=excused_minutes,
                acquisition_period=acquisition_period,
                attachment=attachment,
                note=note,
            )
        )
        return absence_id

    def delete(self, *, absence_id) -> bool:
        before = len(self.rows)
        self.rows = [a for a in self.rows if a.absence_id != absence_id]
        return len(self.rows) < before


class InMemoryAdjustments:
    def __init__(self):
        self.rows: dict[int, ManualAdjustment] = {}

    def get_by_id(self, adjustment_id):
        return self.rows.get(int(adjustment_id))

    def list_for_range(self, *, workspace_id, start, end):
        return [a for a in self.rows.values() if a.workspace_id == workspace_id and start <= a.adjustment_date <= end]

    def first_adjustment_date(self, *, workspace_id):
        dates = [a.adjustment_date for a in self.rows.values() if a.workspace_id == workspace_id]
        return min(dates) if dates else None

    def create(self, *, workspace_id, adjustment_date, minutes, justification) -> int:
        adjustment_id = len(self.rows) + 1
        self.rows[adjustment_id] = ManualAdjustment(
            adjustment_id=adjustment_id,
            workspace_id=workspace_id,
            adjustment_date=adjustment_date,
            minutes=minutes,
            justification=justification,
        )
        return adjustment_id

    def delete(self, *, adjustment_id) -> bool:
        return self.rows.pop(int(adjustment_id), None) is not None


class InMemoryClosings:
    def __init__(self):
        self.rows: list[PeriodClosing] = []

    def get_last(self, *, workspace_id, closing_type):
        matching = self.list_for_workspace(workspace_id=workspace_id, closing_type=closing_type)
        return matching[-1] if matching else None

    def list_for_workspace(self, *, workspace_id, closing_type=None):
        rows = [
            c for c in self.rows
            if c.workspace_id == workspace_id and (closing_type is None or c.closing_type == closing_type)
        ]
        return sorted(rows, key=lambda c: c.period_end)

    def create(self, *, workspace_id, closing_type, closing_date, period_start, period_end, prior_balance_minutes,
               note=None, carry_forward=True) -> int:
        last = self.get_last(workspace_id=workspace_id, closing_type=closing_type)
        if last is not None and last.period_end >= period_start:
            raise ConfigurationError(f"{closing_type.value} period already closed up to {last.period_end}")
        closing_id = len(self.rows) + 1
        self.rows.append(
            PeriodClosing(
                closing_id=closing_id,
                workspace_id=workspace_id,
                closing_type=closing_type,
                closing_date=closing_date,
                period_start=period_start,
                period_end=period_end,
                prior_balance_minutes=prior_balance_minutes,
                note=note,
                carry_forward=carry_forward,
            )
        )
        return closing_id
