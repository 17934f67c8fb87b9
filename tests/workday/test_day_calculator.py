from __future__ import annotations

from dataclasses import replace
from datetime import date, timedelta

from src.timeclock_system.timeclock_system.absences.policy import DayClassification
from src.timeclock_system.timeclock_system.core.enums import DayStatus, DayType, Direction
from src.timeclock_system.timeclock_system.schedules.model import DayScheduleConfig
from src.timeclock_system.timeclock_system.workday.calculator import (
    compute_day_summary,
    compute_day_summary_with_in_progress,
)
from tests.fakes import at, make_entries

MONDAY = date(2025, 3, 3)
CONFIG = DayScheduleConfig(weekday=0, expected_minutes=492, minimum_break_minutes=60, tolerance_minutes=15)
HOLIDAY = DayClassification(day_type=DayType.HOLIDAY, zeroes_expected_workload=True)


def _summary(*times, day=MONDAY, today=MONDAY, config=CONFIG, **kwargs):
    return compute_day_summary(
        make_entries(day, *times), work_date=day, today=today, day_config=config, **kwargs
    )


def test_regular_day_with_exact_minimum_break_is_complete():
    s = _summary("08:00", "12:00", "13:00", "17:12")

    assert s.worked_minutes == 492
    assert s.balance_minutes == 0
    assert s.status == DayStatus.COMPLETE
    assert s.intervals[1].pause_considered_minutes == 60


def test_short_break_gets_no_tolerance_and_raises_worked_minutes():
    s = _summary("08:00", "12:00", "12:50", "17:12")

    assert s.intervals[1].pause_considered_minutes == 50
    assert s.worked_minutes == 502
    assert s.balance_minutes == 10
    # 50 is not below minimum (60) minus leniency (10).
    assert s.status == DayStatus.COMPLETE


def test_single_in_today_is_in_progress():
    s = _summary("08:00")
    assert s.status == DayStatus.IN_PROGRESS
    assert s.balance_minutes is None


def test_single_in_yesterday_is_incomplete():
    s = _summary("08:00", today=MONDAY + timedelta(days=1))
    assert s.status == DayStatus.INCOMPLETE
    assert s.worked_minutes is None
    assert s.balance_minutes is None


def test_holiday_without_entries_is_zeroed_with_no_records():
    s = _summary(classification=HOLIDAY)

    assert s.status == DayStatus.NO_RECORDS
    assert s.expected_minutes_effective == 0
    assert s.worked_minutes == 0
    assert s.balance_minutes == 0
    assert s.day_type == DayType.HOLIDAY


def test_work_on_a_holiday_is_all_surplus():
    s = _summary("09:00", "12:00", classification=HOLIDAY)
    assert s.balance_minutes == 180
    assert s.status == DayStatus.COMPLETE_NO_BREAK


def test_unjustified_absence_keeps_the_workload():
    s = _summary(classification=DayClassification(day_type=DayType.UNJUSTIFIED_ABSENCE, zeroes_expected_workload=False))
    assert s.expected_minutes_effective == 492
    assert s.balance_minutes == -492


def test_partial_day_excused_minutes_reduce_the_deficit():
    partial = DayClassification(day_type=DayType.NORMAL, zeroes_expected_workload=False, excused_minutes=120)
    s = _summary("08:00", "12:00", "13:00", "15:12", classification=partial)

    assert s.worked_minutes == 372
    assert s.excused_minutes == 120
    assert s.balance_minutes == 0


def test_inactive_weekday_has_no_expected_minutes():
    saturday = MONDAY + timedelta(days=5)
    s = _summary("09:00", "11:00", day=saturday, today=saturday, config=DayScheduleConfig.default_for(5))
    assert s.expected_minutes_effective == 0
    assert s.balance_minutes == 120


def test_short_primary_break_is_insufficient():
    s = _summary("08:00", "12:00", "12:30", "17:00")
    assert s.status == DayStatus.INSUFFICIENT_BREAK
    assert s.worked_minutes == 510


def test_insufficient_break_is_not_reported_on_zeroed_days():
    s = _summary("08:00", "12:00", "12:30", "17:00", classification=HOLIDAY)
    assert s.status == DayStatus.COMPLETE


def test_two_entries_complete_without_break():
    s = _summary("08:00", "14:00")
    assert s.status == DayStatus.COMPLETE_NO_BREAK
    assert s.worked_minutes == 360


def test_daily_limit_is_reported_before_break_checks():
    s = _summary("07:00", "19:00")
    assert s.status == DayStatus.OVERTIME_EXCEEDED
    assert s.worked_minutes == 720


def test_too_many_entries_leave_worked_undefined():
    times = [f"{h:02d}:00" for h in range(6, 18)]
    s = _summary(*times)
    assert s.status == DayStatus.EXCESS_ENTRIES
    assert s.worked_minutes is None
    assert s.balance_minutes is None


def test_invalid_sequence_leaves_worked_undefined():
    entries = make_entries(MONDAY, "08:00", "12:00")
    entries = [replace(entries[0], direction=Direction.OUT), replace(entries[1], direction=Direction.IN)]
    s = compute_day_summary(entries, work_date=MONDAY, today=MONDAY, day_config=CONFIG)
    assert s.status == DayStatus.SEQUENCE_INVALID
    assert s.worked_minutes is None


def test_summary_is_idempotent():
    entries = make_entries(MONDAY, "08:00", "12:00", "13:05", "17:30")
    first = compute_day_summary(entries, work_date=MONDAY, today=MONDAY, day_config=CONFIG)
    second = compute_day_summary(entries, work_date=MONDAY, today=MONDAY, day_config=CONFIG)
    assert first == second


def test_entry_order_does_not_matter():
    entries = make_entries(MONDAY, "08:00", "12:00", "13:05", "17:30")
    forward = compute_day_summary(entries, work_date=MONDAY, today=MONDAY, day_config=CONFIG)
    backward = compute_day_summary(list(reversed(entries)), work_date=MONDAY, today=MONDAY, day_config=CONFIG)
    assert forward == backward


def test_in_progress_minutes_use_the_explicit_now():
    s = compute_day_summary_with_in_progress(
        make_entries(MONDAY, "08:00"), work_date=MONDAY, now=at(MONDAY, "10:30"), day_config=CONFIG
    )
    assert s.status == DayStatus.IN_PROGRESS
    assert s.in_progress_minutes == 150
    assert s.provisional_balance_minutes == 150 - 492
    assert s.balance_minutes is None


def test_in_progress_after_break_counts_closed_intervals_and_tolerance():
    s = compute_day_summary_with_in_progress(
        make_entries(MONDAY, "08:00", "12:00", "13:10"), work_date=MONDAY, now=at(MONDAY, "14:10"), day_config=CONFIG
    )
    # 240 closed + 60 open + 10 tolerance credited to the open interval.
    assert s.in_progress_minutes == 310
    assert s.worked_minutes is None


def test_in_progress_is_not_reported_for_other_days():
    s = compute_day_summary_with_in_progress(
        make_entries(MONDAY, "08:00"), work_date=MONDAY, now=at(MONDAY + timedelta(days=1), "09:00"), day_config=CONFIG
    )
    assert s.status == DayStatus.INCOMPLETE
    assert s.in_progress_minutes is None
