"""Bank-of-hours accumulation.

The balance is always recomputed as a plain sum over the window; nothing is
carried between calls except what a closing snapshot holds.
"""

from __future__ import annotations

import calendar
from datetime import date, timedelta
from typing import Iterable, Optional

from ..core.enums import ClosingType, DayStatus
from ..core.exceptions import ValidationError
from ..workday.model import DaySummary
from .model import BankBalance, ManualAdjustment, PeriodClosing


def window_start(
    last_closing: Optional[PeriodClosing],
    *candidates: Optional[date],
) -> Optional[date]:
    """Day after the last closing, else the earliest known date (entries, adjustments)."""
    if last_closing is not None:
        return last_closing.period_end + timedelta(days=1)
    known = [d for d in candidates if d is not None]
    return min(known) if known else None


def day_contribution(summary: DaySummary, today: date) -> Optional[int]:
    """Minutes a day adds to the bank, or None when its balance is undefined."""
    if summary.status == DayStatus.NO_RECORDS and summary.work_date >= today:
        return 0
    return summary.balance_minutes


def accumulate(
    summaries: Iterable[DaySummary],
    adjustments: Iterable[ManualAdjustment],
    closing: Optional[PeriodClosing] = None,
    *,
    today: date,
    start: Optional[date],
    end: date,
) -> BankBalance:
    day_minutes = 0
    counted = 0
    undefined: list[date] = []
    for summary in summaries:
        if start is not None and not start <= summary.work_date <= end:
            continue
        minutes = day_contribution(summary, today)
        if minutes is None:
            if summary.status != DayStatus.IN_PROGRESS:
                undefined.append(summary.work_date)
            continue
        day_minutes += minutes
        counted += 1

    adjustment_minutes = sum(
        a.minutes for a in adjustments if start is None or start <= a.adjustment_date <= end
    )
    carried = closing.prior_balance_minutes if closing is not None and closing.carry_forward else 0

    return BankBalance(
        window_start=start,
        window_end=end,
        day_minutes=day_minutes,
        adjustment_minutes=adjustment_minutes,
        carried_minutes=carried,
        counted_days=counted,
        undefined_days=tuple(sorted(undefined)),
    )


def period_bounds(
    closing_type: ClosingType,
    day: date,
    *,
    week_start: int = 0,
    month_start_day: int = 1,
) -> tuple[date, date]:
    """Weekly or monthly period containing day."""
    if closing_type == ClosingType.WEEKLY:
        if not 0 <= week_start <= 6:
            raise ValidationError("Week start must be a weekday number between 0 and 6")
        start = day - timedelta(days=(day.weekday() - week_start) % 7)
        return start, start + timedelta(days=6)

    if closing_type == ClosingType.MONTHLY:
        if not 1 <= month_start_day <= 28:
            raise ValidationError("Month start day must be between 1 and 28")
        if day.day >= month_start_day:
            start = day.replace(day=month_start_day)
        else:
            year, month = (day.year, day.month - 1) if day.month > 1 else (day.year - 1, 12)
            start = date(year, month, month_start_day)
        days_in_month = calendar.monthrange(start.year, start.month)[1]
        return start, start + timedelta(days=days_in_month - 1)

    raise ValidationError(f"{closing_type.value} has no calendar period")
