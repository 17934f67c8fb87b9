from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.enums import ClosingType
from ..core.exceptions import ConfigurationError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_bool, as_date, db_cursor, fetchall, fetchone
from .model import ManualAdjustment, PeriodClosing
from .repository import AdjustmentRepository, ClosingRepository

_ADJUSTMENT_COLUMNS = "adjustment_id, workspace_id, adjustment_date, minutes, justification, created_at"
_CLOSING_COLUMNS = (
    "closing_id, workspace_id, closing_type, closing_date, period_start, period_end, "
    "prior_balance_minutes, note, carry_forward, created_at"
)


def _to_adjustment(r: dict) -> ManualAdjustment:
    return ManualAdjustment(
        adjustment_id=int(r["adjustment_id"]),
        workspace_id=int(r["workspace_id"]),
        adjustment_date=r["adjustment_date"],
        minutes=int(r["minutes"]),
        justification=r["justification"],
        created_at=r.get("created_at"),
    )


def _to_closing(r: dict) -> PeriodClosing:
    return PeriodClosing(
        closing_id=int(r["closing_id"]),
        workspace_id=int(r["workspace_id"]),
        closing_type=ClosingType(r["closing_type"]),
        closing_date=r["closing_date"],
        period_start=r["period_start"],
        period_end=r["period_end"],
        prior_balance_minutes=int(r["prior_balance_minutes"]),
        note=r.get("note"),
        carry_forward=as_bool(r.get("carry_forward")),
        created_at=r.get("created_at"),
    )


class MySQLAdjustmentRepository(AdjustmentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, adjustment_id: int) -> Optional[ManualAdjustment]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_ADJUSTMENT_COLUMNS} FROM balance_adjustments WHERE adjustment_id=%s", (int(adjustment_id),)
            )
            r = fetchone(cur)
            return _to_adjustment(r) if r else None

    def list_for_range(self, *, workspace_id: int, start: date, end: date) -> Sequence[ManualAdjustment]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_ADJUSTMENT_COLUMNS}
                FROM balance_adjustments
                WHERE workspace_id=%s AND adjustment_date BETWEEN %s AND %s
                ORDER BY adjustment_date ASC, adjustment_id ASC
                """,
                (int(workspace_id), start, end),
            )
            return [_to_adjustment(r) for r in fetchall(cur)]

    def first_adjustment_date(self, *, workspace_id: int) -> Optional[date]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT MIN(adjustment_date) AS first_date FROM balance_adjustments WHERE workspace_id=%s",
                (int(workspace_id),),
            )
            r = fetchone(cur)
            return as_date(r["first_date"]) if r else None

    def create(self, *, workspace_id: int, adjustment_date: date, minutes: int, justification: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO balance_adjustments(workspace_id, adjustment_date, minutes, justification)
                VALUES(%s,%s,%s,%s)
                """,
                (int(workspace_id), adjustment_date, int(minutes), justification),
            )
            return int(cur.lastrowid)

    def delete(self, *, adjustment_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM balance_adjustments WHERE adjustment_id=%s", (int(adjustment_id),))
            return cur.rowcount > 0


class MySQLClosingRepository(ClosingRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_last(self, *, workspace_id: int, closing_type: ClosingType) -> Optional[PeriodClosing]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_CLOSING_COLUMNS}
                FROM period_closings
                WHERE workspace_id=%s AND closing_type=%s
                ORDER BY period_end DESC
                LIMIT 1
                """,
                (int(workspace_id), closing_type.value),
            )
            r = fetchone(cur)
            return _to_closing(r) if r else None

    def list_for_workspace(
        self, *, workspace_id: int, closing_type: Optional[ClosingType] = None
    ) -> Sequence[PeriodClosing]:
        clauses = ["workspace_id=%s"]
        params: list[object] = [int(workspace_id)]
        if closing_type is not None:
            clauses.append("closing_type=%s")
            params.append(closing_type.value)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_CLOSING_COLUMNS}
                FROM period_closings
                WHERE {" AND ".join(clauses)}
                ORDER BY period_end ASC, closing_id ASC
                """,
                tuple(params),
            )
            return [_to_closing(r) for r in fetchall(cur)]

    def create(
        self,
        *,
        workspace_id: int,
        closing_type: ClosingType,
        closing_date: date,
        period_start: date,
        period_end: date,
        prior_balance_minutes: int,
        note: Optional[str] = None,
        carry_forward: bool = True,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            # Locks the workspace's closings of that type until the insert commits.
            cur.execute(
                """
                SELECT MAX(period_end) AS last_end
                FROM period_closings
                WHERE workspace_id=%s AND closing_type=%s
                FOR UPDATE
                """,
                (int(workspace_id), closing_type.value),
            )
            r = fetchone(cur)
            last_end = as_date(r["last_end"]) if r else None
            if last_end is not None and last_end >= period_start:
                raise ConfigurationError(
                    f"{closing_type.value} period already closed up to {last_end.isoformat()}"
                )

            cur.execute(
                """
                INSERT INTO period_closings(workspace_id, closing_type, closing_date, period_start, period_end,
                                            prior_balance_minutes, note, carry_forward)
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (int(workspace_id), closing_type.value, closing_date, period_start, period_end,
                 int(prior_balance_minutes), note, 1 if carry_forward else 0),
            )
            return int(cur.lastrowid)
