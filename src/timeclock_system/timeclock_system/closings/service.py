from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Optional

from ..balance.model import PeriodClosing
from ..balance.repository import ClosingRepository
from ..balance.service import BalanceService
from ..core.enums import ClosingType
from ..core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class PeriodClosingService:
    """Freezes the balance accumulated strictly before a date."""

    def __init__(self, balances: BalanceService, closings: ClosingRepository):
        self._balances = balances
        self._closings = closings

    def close_period(
        self,
        *,
        workspace_id: int,
        closing_type: ClosingType,
        as_of: date,
        note: Optional[str] = None,
        carry_forward: bool = True,
    ) -> PeriodClosing:
        workspace_id = int(workspace_id)
        period_end = as_of - timedelta(days=1)

        last, start = self._balances.bank_window_start(workspace_id, closing_type)
        if last is not None and last.period_end >= period_end:
            raise ConfigurationError(
                f"{closing_type.value} period already closed up to {last.period_end.isoformat()}"
            )
        if start is None or start > period_end:
            raise ConfigurationError("Nothing to close before " + as_of.isoformat())

        balance = self._balances.balance_between(workspace_id, start, period_end, today=as_of, closing=last)
        note = note.strip() if note else None
        closing_id = self._closings.create(
            workspace_id=workspace_id,
            closing_type=closing_type,
            closing_date=as_of,
            period_start=start,
            period_end=period_end,
            prior_balance_minutes=balance.total_minutes,
            note=note,
            carry_forward=carry_forward,
        )
        logger.info(
            "period closed",
            extra={
                "workspace_id": workspace_id,
                "closing_id": closing_id,
                "closing_type": closing_type.value,
                "period_end": period_end.isoformat(),
                "prior_balance_minutes": balance.total_minutes,
            },
        )
        return PeriodClosing(
            closing_id=closing_id,
            workspace_id=workspace_id,
            closing_type=closing_type,
            closing_date=as_of,
            period_start=start,
            period_end=period_end,
            prior_balance_minutes=balance.total_minutes,
            note=note,
            carry_forward=carry_forward,
        )
