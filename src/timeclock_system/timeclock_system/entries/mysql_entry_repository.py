from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Sequence

from ..core.enums import AuditAction, Direction, EditReason
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_bool, as_date, db_cursor, fetchall, fetchone
from .model import EntryAudit, TimeEntry
from .repository import AuditRepository, EntryRepository

_ENTRY_COLUMNS = "entry_id, workspace_id, entry_ts, direction, manually_edited, note, location, created_at"


def _to_entry(r: dict) -> TimeEntry:
    return TimeEntry(
        entry_id=int(r["entry_id"]),
        workspace_id=int(r["workspace_id"]),
        timestamp=r["entry_ts"],
        direction=Direction(r["direction"]),
        manually_edited=as_bool(r.get("manually_edited")),
        note=r.get("note"),
        location=r.get("location"),
        created_at=r.get("created_at"),
    )


class MySQLEntryRepository(EntryRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, entry_id: int) -> Optional[TimeEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_ENTRY_COLUMNS} FROM time_entries WHERE entry_id=%s", (int(entry_id),))
            r = fetchone(cur)
            return _to_entry(r) if r else None

    def list_for_date(self, *, workspace_id: int, work_date: date) -> Sequence[TimeEntry]:
        return self.list_for_range(workspace_id=workspace_id, start=work_date, end=work_date)

    def list_for_range(self, *, workspace_id: int, start: date, end: date) -> Sequence[TimeEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_ENTRY_COLUMNS}
                FROM time_entries
                WHERE workspace_id=%s AND work_date BETWEEN %s AND %s
                ORDER BY entry_ts ASC, entry_id ASC
                """,
                (int(workspace_id), start, end),
            )
            return [_to_entry(r) for r in fetchall(cur)]

    def first_entry_date(self, *, workspace_id: int) -> Optional[date]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT MIN(work_date) AS first_date FROM time_entries WHERE workspace_id=%s", (int(workspace_id),))
            r = fetchone(cur)
            return as_date(r["first_date"]) if r else None

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
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO time_entries(workspace_id, entry_ts, work_date, direction, manually_edited, note, location, created_at)
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    int(workspace_id),
                    timestamp,
                    timestamp.date(),
                    direction.value,
                    1 if manually_edited else 0,
                    note,
                    location,
                    created_at or datetime.now(),
                ),
            )
            return int(cur.lastrowid)

    def update(self, *, entry_id: int, timestamp: datetime, direction: Direction, note: Optional[str] = None) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE time_entries
                SET entry_ts=%s, work_date=%s, direction=%s, note=%s, manually_edited=1
                WHERE entry_id=%s
                """,
                (timestamp, timestamp.date(), direction.value, note, int(entry_id)),
            )
            return cur.rowcount > 0

    def delete(self, *, entry_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM time_entries WHERE entry_id=%s", (int(entry_id),))
            return cur.rowcount > 0


class MySQLAuditRepository(AuditRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

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
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO entry_audits(entry_id, workspace_id, action, reason, detail, previous_ts, new_ts, recorded_at)
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    int(entry_id),
                    int(workspace_id),
                    action.value,
                    reason.value if reason else None,
                    detail,
                    previous_timestamp,
                    new_timestamp,
                    recorded_at,
                ),
            )
            return int(cur.lastrowid)

    def list_for_entry(self, *, entry_id: int) -> Sequence[EntryAudit]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT audit_id, entry_id, workspace_id, action, reason, detail, previous_ts, new_ts, recorded_at
                FROM entry_audits
                WHERE entry_id=%s
                ORDER BY recorded_at ASC, audit_id ASC
                """,
                (int(entry_id),),
            )
            return [
                EntryAudit(
                    audit_id=int(r["audit_id"]),
                    entry_id=int(r["entry_id"]),
                    workspace_id=int(r["workspace_id"]),
                    action=AuditAction(r["action"]),
                    reason=EditReason(r["reason"]) if r.get("reason") else None,
                    detail=r.get("detail"),
                    previous_timestamp=r.get("previous_ts"),
                    new_timestamp=r.get("new_ts"),
                    recorded_at=r["recorded_at"],
                )
                for r in fetchall(cur)
            ]
