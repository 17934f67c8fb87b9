from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import AuditAction, Direction, EditReason
from .model import EntryAudit, TimeEntry


class EntryRepository(Protocol):
    def get_by_id(self, entry_id: int) -> Optional[TimeEntry]:
        raise NotImplementedError

    def list_for_date(self, *, workspace_id: int, work_date: date) -> Sequence[TimeEntry]:
        """Entries of one day, ordered by timestamp."""

        raise NotImplementedError

    def list_for_range(self, *, workspace_id: int, start: date, end: date) -> Sequence[TimeEntry]:
        """Entries with start <= work date <= end, ordered by timestamp."""

        raise NotImplementedError

    def first_entry_date(self, *, workspace_id: int) -> Optional[date]:
        raise NotImplementedError

    def create(
        self,
        *,
        workspace_id: int,
        timestamp: datetime,
        direction: Direction,
        manually_edited: bool = False,
        note: Optional[str] = None,
        location: Optional[str] = None,
        created_at: Optional[datetime] = None,
    ) -> int:
        raise NotImplementedError

    def update(self, *, entry_id: int, timestamp: datetime, direction: Direction, note: Optional[str] = None) -> bool:
        """Update an entry and flag it as manually edited."""

        raise NotImplementedError

    def delete(self, *, entry_id: int) -> bool:
        raise NotImplementedError


class AuditRepository(Protocol):
    def record(
        self,
        *,
        entry_id: int,
        workspace_id: int,
        action: AuditAction,
        reason: Optional[EditReason],
        detail: Optional[str],
        previous_timestamp: Optional[datetime],
        new_timestamp: Optional[datetime],
        recorded_at: datetime,
    ) -> int:
        raise NotImplementedError

    def list_for_entry(self, *, entry_id: int) -> Sequence[EntryAudit]:
        raise NotImplementedError
