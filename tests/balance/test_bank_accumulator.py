from __future__ import annotations

from datetime import date, timedelta

import pytest

from src.timeclock_system.timeclock_system.balance.accumulator import (
    accumulate,
    day_contribution,
    period_bounds,
    window_start,
)
from src.timeclock_system.timeclock_system.balance.model import ManualAdjustment, PeriodClosing
from src.timeclock_system.timeclock_system.core.enums import ClosingType, DayStatus, DayType
from src.timeclock_system.timeclock_system.core.exceptions import ValidationError
from src.timeclock_system.timeclock_system.workday.model import DaySummary

MONDAY = date(2025, 3, 3)


def _summary(day: date, status: DayStatus, balance):
    worked = None if balance is None else 492 + balance
    return DaySummary(
        work_date=day,
        day_type=DayType.NORMAL,
        status=status,
        entry_count=0 if status == DayStatus.NO_RECORDS else 4,
        worked_minutes=worked,
        expected_minutes=492,
        expected_minutes_effective=492,
        excused_minutes=0,
        balance_minutes=balance,
        break_minutes=60,
    )


def _closing(period_end: date, prior: int, carry_forward: bool = True) -> PeriodClosing:
    return PeriodClosing(
        closing_id=1,
        workspace_id=1,
        closing_type=ClosingType.BANK_OF_HOURS,
        closing_date=period_end + timedelta(days=1),
        period_start=period_end - timedelta(days=30),
        period_end=period_end,
        prior_balance_minutes=prior,
        carry_forward=carry_forward,
    )


def test_window_starts_after_the_last_closing():
    assert window_start(_closing(MONDAY, 0), date(2024, 1, 1)) == MONDAY + timedelta(days=1)


def test_window_starts_at_the_earliest_known_date():
    assert window_start(None, date(2025, 2, 1), None, date(2025, 1, 15)) == date(2025, 1, 15)
    assert window_start(None, None, None) is None


def test_missed_day_counts_only_once_it_is_over():
    missed = _summary(MONDAY, DayStatus.NO_RECORDS, -492)
    assert day_contribution(missed, today=MONDAY) == 0
    assert day_contribution(missed, today=MONDAY + timedelta(days=1)) == -492


def test_accumulate_sums_days_adjustments_and_carry():
    summaries = [
        _summary(MONDAY, DayStatus.COMPLETE, 60),
        _summary(MONDAY + timedelta(days=1), DayStatus.COMPLETE, -15),
    ]
    adjustments = [
        ManualAdjustment(adjustment_id=1, workspace_id=1, adjustment_date=MONDAY, minutes=30, justification="x"),
        ManualAdjustment(
            adjustment_id=2, workspace_id=1, adjustment_date=MONDAY - timedelta(days=3), minutes=999,
            justification="outside the window",
        ),
    ]
    balance = accumulate(
        summaries,
        adjustments,
        _closing(MONDAY - timedelta(days=1), 120),
        today=MONDAY + timedelta(days=2),
        start=MONDAY,
        end=MONDAY + timedelta(days=2),
    )

    assert balance.day_minutes == 45
    assert balance.adjustment_minutes == 30
    assert balance.carried_minutes == 120
    assert balance.total_minutes == 195
    assert balance.formatted == "+03:15"
    assert balance.counted_days == 2


def test_closing_without_carry_forward_adds_nothing():
    balance = accumulate([], [], _closing(MONDAY, 300, carry_forward=False), today=MONDAY, start=MONDAY, end=MONDAY)
    assert balance.total_minutes == 0


def test_undefined_days_are_listed_not_counted():
    summaries = [
        _summary(MONDAY, DayStatus.INCOMPLETE, None),
        _summary(MONDAY + timedelta(days=1), DayStatus.IN_PROGRESS, None),
        _summary(MONDAY + timedelta(days=2), DayStatus.COMPLETE, -30),
    ]
    balance = accumulate(summaries, [], today=MONDAY + timedelta(days=1), start=MONDAY, end=MONDAY + timedelta(days=2))

    assert balance.total_minutes == -30
    assert balance.undefined_days == (MONDAY,)
    assert balance.to_dict()["formatted"] == "-00:30"


def test_weekly_period_bounds():
    wednesday = MONDAY + timedelta(days=2)
    assert period_bounds(ClosingType.WEEKLY, wednesday) == (MONDAY, MONDAY + timedelta(days=6))
    assert period_bounds(ClosingType.WEEKLY, wednesday, week_start=6) == (
        MONDAY - timedelta(days=1),
        MONDAY + timedelta(days=5),
    )


def test_monthly_period_bounds():
    assert period_bounds(ClosingType.MONTHLY, date(2025, 2, 14)) == (date(2025, 2, 1), date(2025, 2, 28))
    assert period_bounds(ClosingType.MONTHLY, date(2025, 1, 10), month_start_day=21) == (
        date(2024, 12, 21),
        date(2025, 1, 20),
    )


@pytest.mark.parametrize(
    "closing_type, kwargs",
    [
        (ClosingType.BANK_OF_HOURS, {}),
        (ClosingType.WEEKLY, {"week_start": 7}),
        (ClosingType.MONTHLY, {"month_start_day": 29}),
    ],
)
def test_invalid_period_bounds(closing_type, kwargs):
    with pytest.raises(ValidationError):
        period_bounds(closing_type, MONDAY, **kwargs)
