from __future__ import annotations

from datetime import date, time
from typing import Optional, Protocol, Sequence

from ..core.enums import AbsenceType
from .model import Absence


class AbsenceRepository(Protocol):
    def list_for_range(self, *, workspace_id: int, start: date, end: date) -> Sequence[Absence]:
        """Markers whose date range intersects [start, end]."""

        raise NotImplementedError

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
        raise NotImplementedError

    def delete(self, *, absence_id: int) -> bool:
        raise NotImplementedError
