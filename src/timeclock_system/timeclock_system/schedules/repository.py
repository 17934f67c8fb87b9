from __future__ import annotations

from datetime import date
from typing import Mapping, Optional, Protocol, Sequence

from .model import DayScheduleConfig, ScheduleVersion


class ScheduleRepository(Protocol):
    def list_versions(self, *, workspace_id: int) -> Sequence[ScheduleVersion]:
        """All versions of a workspace, with their day configurations."""

        raise NotImplementedError

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
        """Persist an open-ended version. Returns version_id.

        When close_version_id is given, that open version is ended at
        close_end_date in the same transaction as the insert.
        """

        raise NotImplementedError
