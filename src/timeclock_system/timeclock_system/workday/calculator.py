"""Pure day summary computation.

Every function here is a deterministic function of its arguments: entries,
the day's schedule configuration, the special-day classification and an
explicit reference date/instant.
"""

from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime
from typing import Iterable

from ..absences.policy import NORMAL_DAY, DayClassification
from ..common.datetime_utils import minutes_between
from ..core import constants
from ..core.enums import DayStatus
from ..core.settings import EngineSettings
from ..entries.model import TimeEntry, sort_entries
from ..schedules.model import DayScheduleConfig
from .intervals import build_intervals, closed_minutes
from .model import DaySummary
from .status import UNDEFINED_WORK, resolve_day_status


def compute_day_summary(
    entries: Iterable[TimeEntry],
    *,
    work_date: date,
    today: date,
    day_config: DayScheduleConfig,
    classification: DayClassification = NORMAL_DAY,
    max_daily_minutes: int = constants.DEFAULT_MAX_DAILY_MINUTES,
    settings: EngineSettings | None = None,
) -> DaySummary:
    settings = settings or EngineSettings()
    ordered = sort_entries(entries)

    intervals = build_intervals(
        ordered,
        minimum_break_minutes=day_config.minimum_break_minutes,
        tolerance_minutes=day_config.tolerance_minutes,
        ideal_break_start=day_config.ideal_break_out,
    )
    worked = closed_minutes(intervals)

    expected = day_config.expected_minutes
    zeroed = classification.zeroes_expected_workload
    expected_effective = 0 if zeroed else day_config.effective_expected_minutes
    excused = classification.excused_minutes

    status = resolve_day_status(
        entries=ordered,
        intervals=intervals,
        work_date=work_date,
        today=today,
        worked_minutes=worked,
        max_daily_minutes=max_daily_minutes,
        minimum_break_minutes=day_config.minimum_break_minutes,
        zeroed=zeroed,
        max_entries=settings.max_entries_per_day,
        break_leniency_minutes=settings.break_leniency_minutes,
    )

    worked_minutes = None if status in UNDEFINED_WORK else worked
    if worked_minutes is None or status == DayStatus.IN_PROGRESS:
        balance = None
    else:
        balance = worked_minutes + excused - expected_effective

    return DaySummary(
        work_date=work_date,
        day_type=classification.day_type,
        status=status,
        entry_count=len(ordered),
        worked_minutes=worked_minutes,
        expected_minutes=expected,
        expected_minutes_effective=expected_effective,
        excused_minutes=excused,
        balance_minutes=balance,
        break_minutes=sum(i.pause_considered_minutes or 0 for i in intervals),
        intervals=tuple(intervals),
    )


def compute_day_summary_with_in_progress(
    entries: Iterable[TimeEntry],
    *,
    work_date: date,
    now: datetime,
    day_config: DayScheduleConfig,
    classification: DayClassification = NORMAL_DAY,
    max_daily_minutes: int = constants.DEFAULT_MAX_DAILY_MINUTES,
    settings: EngineSettings | None = None,
) -> DaySummary:
    """Day summary plus the elapsed time of an open interval up to now.

    The in-progress figures are reported separately and never replace
    worked_minutes/balance_minutes.
    """
    summary = compute_day_summary(
        entries,
        work_date=work_date,
        today=now.date(),
        day_config=day_config,
        classification=classification,
        max_daily_minutes=max_daily_minutes,
        settings=settings,
    )
    if not summary.intervals or not summary.intervals[-1].open or work_date != now.date():
        return summary

    open_interval = summary.intervals[-1]
    elapsed = max(minutes_between(open_interval.effective_start, now), 0)
    in_progress = closed_minutes(summary.intervals) + elapsed
    return replace(
        summary,
        in_progress_minutes=in_progress,
        provisional_balance_minutes=in_progress + summary.excused_minutes - summary.expected_minutes_effective,
    )
