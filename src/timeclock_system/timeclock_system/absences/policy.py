"""Special-day policy: how absence markers change the expected workload.

Behavior lives in lookup tables keyed by the marker type so the enums stay
plain data.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, Optional

from ..core.enums import AbsenceType, DayType
from ..core.exceptions import ConfigurationError
from .model import Absence

ZEROES_WORKLOAD: dict[AbsenceType, bool] = {
    AbsenceType.HOLIDAY: True,
    AbsenceType.BRIDGE: True,
    AbsenceType.OFFICIAL_NON_WORK: True,
    AbsenceType.VACATION: True,
    AbsenceType.MEDICAL_DECLARATION: True,
    AbsenceType.JUSTIFIED_ABSENCE: True,
    AbsenceType.DAY_OFF: True,
    AbsenceType.UNJUSTIFIED_ABSENCE: False,
}

DAY_TYPE: dict[AbsenceType, DayType] = {
    AbsenceType.HOLIDAY: DayType.HOLIDAY,
    AbsenceType.BRIDGE: DayType.BRIDGE,
    AbsenceType.OFFICIAL_NON_WORK: DayType.OFFICIAL_NON_WORK,
    AbsenceType.VACATION: DayType.VACATION,
    AbsenceType.MEDICAL_DECLARATION: DayType.MEDICAL_DECLARATION,
    AbsenceType.JUSTIFIED_ABSENCE: DayType.JUSTIFIED_ABSENCE,
    AbsenceType.DAY_OFF: DayType.DAY_OFF,
    AbsenceType.UNJUSTIFIED_ABSENCE: DayType.UNJUSTIFIED_ABSENCE,
}

LABELS: dict[DayType, str] = {
    DayType.NORMAL: "Normal day",
    DayType.HOLIDAY: "Holiday",
    DayType.BRIDGE: "Bridge day",
    DayType.OFFICIAL_NON_WORK: "Official non-working day",
    DayType.VACATION: "Vacation",
    DayType.MEDICAL_DECLARATION: "Medical declaration",
    DayType.JUSTIFIED_ABSENCE: "Justified absence",
    DayType.DAY_OFF: "Day off",
    DayType.UNJUSTIFIED_ABSENCE: "Unjustified absence",
}

# Partial-day declarations only make sense for these types.
PARTIAL_ALLOWED = {AbsenceType.MEDICAL_DECLARATION, AbsenceType.JUSTIFIED_ABSENCE}


@dataclass(frozen=True)
class DayClassification:
    day_type: DayType
    zeroes_expected_workload: bool
    excused_minutes: int = 0
    marker: Optional[Absence] = None


NORMAL_DAY = DayClassification(day_type=DayType.NORMAL, zeroes_expected_workload=False)


def classify(day: date, absences: Iterable[Absence]) -> DayClassification:
    """Classify a date given the workspace's absence markers.

    At most one full-day marker may govern a date; partial-day markers only
    add excused minutes and cannot be combined with a full-day marker.
    """
    covering = [a for a in absences if a.covers(day)]
    if not covering:
        return NORMAL_DAY

    full_day = [a for a in covering if not a.is_partial]
    partial = [a for a in covering if a.is_partial]

    if len(full_day) > 1 or (full_day and partial):
        ids = ", ".join(str(a.absence_id) for a in covering)
        raise ConfigurationError(f"Ambiguous special-day markers on {day.isoformat()}: {ids}")

    if full_day:
        marker = full_day[0]
        return DayClassification(
            day_type=DAY_TYPE[marker.absence_type],
            zeroes_expected_workload=ZEROES_WORKLOAD[marker.absence_type],
            marker=marker,
        )

    return DayClassification(
        day_type=DayType.NORMAL,
        zeroes_expected_workload=False,
        excused_minutes=sum(a.partial_excused_minutes for a in partial),
        marker=partial[0] if len(partial) == 1 else None,
    )


def conflicts(candidate: Absence, existing: Iterable[Absence]) -> list[Absence]:
    """Existing markers that could not coexist with candidate on some date."""
    found: list[Absence] = []
    for other in existing:
        if other.absence_id == candidate.absence_id:
            continue
        if not other.overlaps(candidate.start_date, candidate.end_date):
            continue
        if candidate.is_partial and other.is_partial:
            if candidate.start_time < other.end_time and other.start_time < candidate.end_time:
                found.append(other)
            continue
        found.append(other)
    return found
