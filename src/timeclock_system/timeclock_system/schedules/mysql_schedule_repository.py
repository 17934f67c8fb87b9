from __future__ import annotations

from collections import defaultdict
from datetime import date
from typing import Mapping, Optional, Sequence

from ..core.exceptions import ConfigurationError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_bool, db_cursor, fetchall, normalize_mysql_time
from .model import DayScheduleConfig, ScheduleVersion, default_week
from .repository import ScheduleRepository


class MySQLScheduleRepository(ScheduleRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_versions(self, *, workspace_id: int) -> Sequence[ScheduleVersion]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT version_id, workspace_id, start_date, end_date, sequence,
                       max_daily_minutes, min_rest_minutes, description, created_at
                FROM schedule_versions
                WHERE workspace_id=%s
                ORDER BY start_date ASC
                """,
                (int(workspace_id),),
            )
            versions = fetchall(cur)

            cur.execute(
                """
                SELECT d.version_id, d.weekday, d.active, d.expected_minutes, d.minimum_break_minutes,
                       d.tolerance_minutes, d.ideal_in, d.ideal_break_out, d.ideal_break_return, d.ideal_out
                FROM schedule_days d
                JOIN schedule_versions v ON v.version_id = d.version_id
                WHERE v.workspace_id=%s
                """,
                (int(workspace_id),),
            )
            days: dict[int, dict[int, DayScheduleConfig]] = defaultdict(dict)
            for r in fetchall(cur):
                days[int(r["version_id"])][int(r["weekday"])] = DayScheduleConfig(
                    weekday=int(r["weekday"]),
                    active=as_bool(r["active"]),
                    expected_minutes=int(r["expected_minutes"]),
                    minimum_break_minutes=int(r["minimum_break_minutes"]),
                    tolerance_minutes=int(r["tolerance_minutes"]),
                    ideal_in=normalize_mysql_time(r.get("ideal_in")),
                    ideal_break_out=normalize_mysql_time(r.get("ideal_break_out")),
                    ideal_break_return=normalize_mysql_time(r.get("ideal_break_return")),
                    ideal_out=normalize_mysql_time(r.get("ideal_out")),
                )

            return [
                ScheduleVersion(
                    version_id=int(r["version_id"]),
                    workspace_id=int(r["workspace_id"]),
                    start_date=r["start_date"],
                    end_date=r.get("end_date"),
                    sequence=int(r["sequence"]),
                    max_daily_minutes=int(r["max_daily_minutes"]),
                    min_rest_between_shifts_minutes=int(r["min_rest_minutes"]),
                    description=r.get("description"),
                    days={**default_week(), **days.get(int(r["version_id"]), {})},
                    created_at=r.get("created_at"),
                )
                for r in versions
            ]

    def create_version(
        self,
        *,
        workspace_id: int,
        start_date: date,
        sequence: int,
        max_daily_minutes: int,
        min_rest_between_shifts_minutes: int,
        days: Mapping[int, DayScheduleConfig],
        description: Optional[str] = None,
        close_version_id: Optional[int] = None,
        close_end_date: Optional[date] = None,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            if close_version_id is not None:
                cur.execute(
                    "UPDATE schedule_versions SET end_date=%s WHERE version_id=%s AND end_date IS NULL",
                    (close_end_date, int(close_version_id)),
                )
                if cur.rowcount == 0:
                    raise ConfigurationError(f"Schedule version {close_version_id} is no longer open")

            cur.execute(
                """
                INSERT INTO schedule_versions(workspace_id, start_date, sequence, max_daily_minutes, min_rest_minutes, description)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (int(workspace_id), start_date, int(sequence), int(max_daily_minutes),
                 int(min_rest_between_shifts_minutes), description),
            )
            version_id = int(cur.lastrowid)
            cur.executemany(
                """
                INSERT INTO schedule_days(version_id, weekday, active, expected_minutes, minimum_break_minutes,
                                          tolerance_minutes, ideal_in, ideal_break_out, ideal_break_return, ideal_out)
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                [
                    (version_id, cfg.weekday, 1 if cfg.active else 0, cfg.expected_minutes, cfg.minimum_break_minutes,
                     cfg.tolerance_minutes, cfg.ideal_in, cfg.ideal_break_out, cfg.ideal_break_return, cfg.ideal_out)
                    for cfg in days.values()
                ],
            )
            return version_id
