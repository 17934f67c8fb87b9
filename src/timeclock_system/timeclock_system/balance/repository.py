from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import ClosingType
from .model import ManualAdjustment, PeriodClosing


class AdjustmentRepository(Protocol):
    def get_by_id(self, adjustment_id: int) -> Optional[ManualAdjustment]:
        raise NotImplementedError

    def list_for_range(self, *, workspace_id: int, start: date, end: date) -> Sequence[ManualAdjustment]:
        raise NotImplementedError

    def first_adjustment_date(self, *, workspace_id: int) -> Optional[date]:
        raise NotImplementedError

    def create(self, *, workspace_id: int, adjustment_date: date, minutes: int, justification: str) -> int:
        raise NotImplementedError

    def delete(self, *, adjustment_id: int) -> bool:
        raise NotImplementedError


class ClosingRepository(Protocol):
    def get_last(self, *, workspace_id: int, closing_type: ClosingType) -> Optional[PeriodClosing]:
        """Closing of that type with the latest period_end."""

        raise NotImplementedError

    def list_for_workspace(
        self, *, workspace_id: int, closing_type: Optional[ClosingType] = None
    ) -> Sequence[PeriodClosing]:
        raise NotImplementedError

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
        """Insert a closing; raises ConfigurationError when one of the same
        type already reaches period_start. Check and insert are atomic."""

        raise NotImplementedError
