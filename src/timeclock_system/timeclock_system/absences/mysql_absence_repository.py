from __future__ import annotations

from datetime import date, time
from typing import Optional, Sequence

from ..core.enums import AbsenceType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, normalize_mysql_time
from .model import Absence
from .repository import AbsenceRepository


class MySQLAbsenceRepository(AbsenceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_range(self, *, workspace_id: int, start: date, end: date) -> Sequence[Absence]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT absence_id, workspace_id, absence_type, start_date, end_date, start_time, end_time,
                       excused_minutes, acquisition_period, attachment, note
                FROM absences
                WHERE workspace_id=%s AND start_date <= %s AND end_date >= %s
                ORDER BY start_date ASC, absence_id ASC
                """,
                (int(workspace_id), end, start),
            )
            return [
                Absence(
                    absence_id=int(r["absence_id"]),
                    workspace_id=int(r["workspace_id"]),
                    absence_type=AbsenceType(r["absence_type"]),
                    start_date=r["start_date"],
                    end_date=r["end_date"],
                    start_time=normalize_mysql_time(r.get("start_time")),
                    end_time=normalize_mysql_time(r.get("end_time")),
                    excused_minutes=int(r["excused_minutes"]) if r.get("excused_minutes") is not None else None,
                    acquisition_period=r.get("acquisition_period"),
                    attachment=r.get("attachment"),
                    note=r.get("note"),
                )
                for r in fetchall(cur)
            ]

    def create(
        self,
        *,
        workspace_id: int,
        absence_type: AbsenceType,
        start_date: date,
        end_date: date,
        start_time: Optional[time] = None,
        end_time: Optional[time] = None,
        excused_minutes: Optional[int] = None,
        acquisition_period: Optional[str] = None,
        attachment: Optional[str] = None,
        note: Optional[str] = None,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO absences(workspace_id, absence_type, start_date, end_date, start_time, end_time,
                                     excused_minutes, acquisition_period, attachment, note)
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (int(workspace_id), absence_type.value, start_date, end_date, start_time, end_time,
                 excused_minutes, acquisition_period, attachment, note),
            )
            return int(cur.lastrowid)

    def delete(self, *, absence_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM absences WHERE absence_id=%s", (int(absence_id),))
            return cur.rowcount > 0
