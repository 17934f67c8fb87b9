from __future__ import annotations

from datetime import date, timedelta

import pytest

from src.timeclock_system.timeclock_system.absences.model import Absence
from src.timeclock_system.timeclock_system.core.enums import AbsenceType, DayStatus, DayType
from src.timeclock_system.timeclock_system.core.exceptions import ConfigurationError
from src.timeclock_system.timeclock_system.schedules.model import ScheduleVersion
from src.timeclock_system.timeclock_system.workday.service import WorkdayService
from tests.fakes import InMemoryAbsences, InMemoryEntries, InMemorySchedules, at

MONDAY = date(2025, 3, 3)


def _service(entries=None, absences=(), versions=None):
    versions = versions if versions is not None else [
        ScheduleVersion(version_id=1, workspace_id=1, start_date=date(2025, 1, 1))
    ]
    return WorkdayService(entries or InMemoryEntries(), InMemorySchedules(versions), InMemoryAbsences(absences))


def test_summary_uses_the_version_covering_the_date():
    entries = InMemoryEntries()
    entries.add_day(MONDAY, "08:00", "12:00", "13:00", "17:12")

    s = _service(entries).compute_day_summary(1, MONDAY, today=MONDAY)
    assert s.status == DayStatus.COMPLETE
    assert s.balance_minutes == 0


def test_date_before_first_version_is_a_configuration_error():
    with pytest.raises(ConfigurationError):
        _service().compute_day_summary(1, date(2024, 12, 31), today=MONDAY)


def test_vacation_marker_zeroes_the_day():
    vacation = Absence(
        absence_id=1,
        workspace_id=1,
        absence_type=AbsenceType.VACATION,
        start_date=MONDAY,
        end_date=MONDAY + timedelta(days=4),
    )
    s = _service(absences=[vacation]).compute_day_summary(1, MONDAY + timedelta(days=2), today=MONDAY)
    assert s.day_type == DayType.VACATION
    assert s.expected_minutes_effective == 0
    assert s.balance_minutes == 0


def test_overlapping_full_day_markers_are_rejected():
    markers = [
        Absence(absence_id=1, workspace_id=1, absence_type=AbsenceType.VACATION, start_date=MONDAY, end_date=MONDAY),
        Absence(absence_id=2, workspace_id=1, absence_type=AbsenceType.HOLIDAY, start_date=MONDAY, end_date=MONDAY),
    ]
    with pytest.raises(ConfigurationError):
        _service(absences=markers).compute_day_summary(1, MONDAY, today=MONDAY)


def test_in_progress_summary_for_today():
    entries = InMemoryEntries()
    entries.add_day(MONDAY, "08:00")

    s = _service(entries).compute_day_summary_with_in_progress(1, MONDAY, now=at(MONDAY, "09:15"))
    assert s.status == DayStatus.IN_PROGRESS
    assert s.in_progress_minutes == 75


def test_range_has_one_summary_per_date():
    entries = InMemoryEntries()
    entries.add_day(MONDAY, "08:00", "12:00", "13:00", "17:12")
    entries.add_day(MONDAY + timedelta(days=1), "08:00", "12:00", "13:00", "18:12")

    summaries = _service(entries).summaries_for_range(1, MONDAY, MONDAY + timedelta(days=2), today=date(2025, 3, 10))
    assert [s.work_date for s in summaries] == [MONDAY + timedelta(days=i) for i in range(3)]
    assert [s.balance_minutes for s in summaries] == [0, 60, -492]
    assert summaries[2].status == DayStatus.NO_RECORDS
