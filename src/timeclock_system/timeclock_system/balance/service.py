from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..common.validators import require_non_empty
from ..core.enums import ClosingType
from ..core.exceptions import NotFoundError, ValidationError
from ..core.settings import EngineSettings
from ..entries.repository import EntryRepository
from ..workday.service import WorkdayService
from .accumulator import accumulate, period_bounds, window_start
from .model import BankBalance
from .repository import AdjustmentRepository, ClosingRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PeriodBalance:
    closing_type: ClosingType
    period_start: date
    period_end: date
    balance: BankBalance


class BalanceService:
    def __init__(
        self,
        workdays: WorkdayService,
        entries: EntryRepository,
        adjustments: AdjustmentRepository,
        closings: ClosingRepository,
        *,
        settings: EngineSettings | None = None,
    ):
        self._workdays = workdays
        self._entries = entries
        self._adjustments = adjustments
        self._closings = closings
        self._settings = settings or EngineSettings()

    def balance_between(
        self, workspace_id: int, start: Optional[date], end: date, *, today: date, closing=None
    ) -> BankBalance:
        """Sum of day balances and adjustments in [start, end] plus the closing carry."""
        if start is None or end < start:
            return accumulate([], [], closing, today=today, start=start, end=end)
        summaries = self._workdays.summaries_for_range(workspace_id, start, end, today=today)
        adjustments = self._adjustments.list_for_range(workspace_id=workspace_id, start=start, end=end)
        return accumulate(summaries, adjustments, closing, today=today, start=start, end=end)

    def bank_window_start(self, workspace_id: int, closing_type: ClosingType = ClosingType.BANK_OF_HOURS):
        last = self._closings.get_last(workspace_id=workspace_id, closing_type=closing_type)
        start = window_start(
            last,
            self._entries.first_entry_date(workspace_id=workspace_id),
            self._adjustments.first_adjustment_date(workspace_id=workspace_id),
        )
        return last, start

    def compute_bank_balance(self, workspace_id: int, *, as_of: date | None = None) -> BankBalance:
        today = as_of or datetime.now().date()
        workspace_id = int(workspace_id)
        last, start = self.bank_window_start(workspace_id)
        return self.balance_between(workspace_id, start, today, today=today, closing=last)

    def compute_period_balance(
        self, workspace_id: int, closing_type: ClosingType, *, as_of: date | None = None
    ) -> PeriodBalance:
        """Balance of the week or month containing as_of, up to as_of."""
        today = as_of or datetime.now().date()
        start, end = period_bounds(
            closing_type,
            today,
            week_start=self._settings.week_start,
            month_start_day=self._settings.month_start_day,
        )
        balance = self.balance_between(int(workspace_id), start, min(end, today), today=today)
        return PeriodBalance(closing_type=closing_type, period_start=start, period_end=end, balance=balance)

    def add_adjustment(self, *, workspace_id: int, adjustment_date: date, minutes: int, justification: str) -> int:
        justification = require_non_empty(justification, "Justification")
        if int(minutes) == 0:
            raise ValidationError("Adjustment must not be zero")

        last = self._closings.get_last(workspace_id=int(workspace_id), closing_type=ClosingType.BANK_OF_HOURS)
        if last is not None and adjustment_date <= last.period_end:
            raise ValidationError(f"Period up to {last.period_end.isoformat()} is closed")

        adjustment_id = self._adjustments.create(
            workspace_id=int(workspace_id),
            adjustment_date=adjustment_date,
            minutes=int(minutes),
            justification=justification,
        )
        logger.info(
            "balance adjustment added",
            extra={"workspace_id": workspace_id, "adjustment_id": adjustment_id, "minutes": int(minutes)},
        )
        return adjustment_id

    def delete_adjustment(self, *, adjustment_id: int) -> None:
        adjustment = self._adjustments.get_by_id(int(adjustment_id))
        if adjustment is None:
            raise NotFoundError(f"Adjustment {adjustment_id} not found")
        self._adjustments.delete(adjustment_id=adjustment.adjustment_id)
        logger.info(
            "balance adjustment deleted",
            extra={"workspace_id": adjustment.workspace_id, "adjustment_id": adjustment.adjustment_id},
        )
