from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import AuditAction, Direction, EditReason


@dataclass(frozen=True)
class TimeEntry:
    """A single clock event (point) of a workspace."""

    entry_id: int
    workspace_id: int
    timestamp: datetime
    direction: Direction
    manually_edited: bool = False
    note: Optional[str] = None
    location: Optional[str] = None
    created_at: Optional[datetime] = None

    @property
    def work_date(self) -> date:
        return self.timestamp.date()


@dataclass(frozen=True)
class EntryAudit:
    """Audit trail row written for every edit/delete (and overridden creation)."""

    audit_id: int
    entry_id: int
    workspace_id: int
    action: AuditAction
    reason: Optional[EditReason]
    detail: Optional[str]
    previous_timestamp: Optional[datetime]
    new_timestamp: Optional[datetime]
    recorded_at: datetime


def sort_entries(entries) -> list[TimeEntry]:
    """Entries ordered by timestamp (id breaks ties so ordering is stable)."""
    return sorted(entries, key=lambda e: (e.timestamp, e.entry_id))


def next_direction(entries) -> Direction:
    """Direction the next point of the day is expected to have."""
    return Direction.IN if len(list(entries)) % 2 == 0 else Direction.OUT
