from __future__ import annotations

from datetime import date, time

import pytest

from src.timeclock_system.timeclock_system.absences.model import Absence
from src.timeclock_system.timeclock_system.absences.policy import NORMAL_DAY, ZEROES_WORKLOAD, classify, conflicts
from src.timeclock_system.timeclock_system.core.enums import AbsenceType, DayType
from src.timeclock_system.timeclock_system.core.exceptions import ConfigurationError

DAY = date(2025, 5, 5)


def _absence(absence_id, kind, start=DAY, end=DAY, start_time=None, end_time=None, excused=None):
    return Absence(
        absence_id=absence_id,
        workspace_id=1,
        absence_type=kind,
        start_date=start,
        end_date=end,
        start_time=start_time,
        end_time=end_time,
        excused_minutes=excused,
    )


def test_day_without_markers_is_normal():
    assert classify(DAY, []) == NORMAL_DAY


@pytest.mark.parametrize("kind", [k for k, zeroes in ZEROES_WORKLOAD.items() if zeroes])
def test_full_day_markers_zero_the_workload(kind):
    c = classify(DAY, [_absence(1, kind)])
    assert c.zeroes_expected_workload
    assert c.day_type == DayType(kind.value)


def test_unjustified_absence_does_not_zero():
    c = classify(DAY, [_absence(1, AbsenceType.UNJUSTIFIED_ABSENCE)])
    assert c.day_type == DayType.UNJUSTIFIED_ABSENCE
    assert not c.zeroes_expected_workload


def test_partial_day_marker_adds_excused_minutes():
    c = classify(DAY, [_absence(1, AbsenceType.MEDICAL_DECLARATION, start_time=time(8), end_time=time(10, 30))])
    assert c.day_type == DayType.NORMAL
    assert not c.zeroes_expected_workload
    assert c.excused_minutes == 150


def test_explicit_excused_minutes_win_over_the_range():
    c = classify(
        DAY, [_absence(1, AbsenceType.JUSTIFIED_ABSENCE, start_time=time(8), end_time=time(12), excused=90)]
    )
    assert c.excused_minutes == 90


def test_two_full_day_markers_are_ambiguous():
    with pytest.raises(ConfigurationError):
        classify(DAY, [_absence(1, AbsenceType.VACATION), _absence(2, AbsenceType.HOLIDAY)])


def test_full_day_with_partial_marker_is_ambiguous():
    markers = [
        _absence(1, AbsenceType.HOLIDAY),
        _absence(2, AbsenceType.MEDICAL_DECLARATION, start_time=time(8), end_time=time(9)),
    ]
    with pytest.raises(ConfigurationError):
        classify(DAY, markers)


def test_marker_outside_the_date_is_ignored():
    marker = _absence(1, AbsenceType.VACATION, start=date(2025, 5, 6), end=date(2025, 5, 9))
    assert classify(DAY, [marker]) == NORMAL_DAY


def test_partial_markers_conflict_only_when_times_overlap():
    morning = _absence(1, AbsenceType.MEDICAL_DECLARATION, start_time=time(8), end_time=time(10))
    afternoon = _absence(0, AbsenceType.MEDICAL_DECLARATION, start_time=time(14), end_time=time(16))
    overlapping = _absence(0, AbsenceType.JUSTIFIED_ABSENCE, start_time=time(9), end_time=time(11))

    assert conflicts(afternoon, [morning]) == []
    assert conflicts(overlapping, [morning]) == [morning]


def test_full_day_conflicts_with_any_overlapping_range():
    vacation = _absence(1, AbsenceType.VACATION, start=date(2025, 5, 1), end=date(2025, 5, 10))
    holiday = _absence(0, AbsenceType.HOLIDAY)
    assert conflicts(holiday, [vacation]) == [vacation]
