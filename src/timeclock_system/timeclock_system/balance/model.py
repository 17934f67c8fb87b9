from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import format_minutes
from ..core.enums import ClosingType


@dataclass(frozen=True)
class ManualAdjustment:
    """Signed correction of the bank of hours. Immutable: edit = delete + recreate."""

    adjustment_id: int
    workspace_id: int
    adjustment_date: date
    minutes: int
    justification: str
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class PeriodClosing:
    """Frozen snapshot of a balance at the end of a period."""

    closing_id: int
    workspace_id: int
    closing_type: ClosingType
    closing_date: date
    period_start: date
    period_end: date
    prior_balance_minutes: int
    note: Optional[str] = None
    carry_forward: bool = True
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class BankBalance:
    window_start: Optional[date]
    window_end: date
    day_minutes: int = 0
    adjustment_minutes: int = 0
    carried_minutes: int = 0
    counted_days: int = 0
    undefined_days: tuple[date, ...] = ()

    @property
    def total_minutes(self) -> int:
        return self.day_minutes + self.adjustment_minutes + self.carried_minutes

    @property
    def formatted(self) -> str:
        return format_minutes(self.total_minutes, signed=True)

    def to_dict(self) -> dict:
        return {
            "window_start": self.window_start.isoformat() if self.window_start else None,
            "window_end": self.window_end.isoformat(),
            "day_minutes": self.day_minutes,
            "adjustment_minutes": self.adjustment_minutes,
            "carried_minutes": self.carried_minutes,
            "total_minutes": self.total_minutes,
            "formatted": self.formatted,
            "undefined_days": [d.isoformat() for d in self.undefined_days],
        }
