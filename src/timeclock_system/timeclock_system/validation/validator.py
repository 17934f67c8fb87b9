from __future__ import annotations

from datetime import date, datetime
from typing import Iterable, Optional, Sequence

from ..absences.policy import NORMAL_DAY, DayClassification
from ..core import constants
from ..core.settings import EngineSettings
from ..entries.model import TimeEntry, sort_entries
from ..schedules.model import DayScheduleConfig
from ..workday.intervals import build_intervals
from .model import ValidationResult
from .rules import ConsistencyRule, ValidationContext, default_rules


class ConsistencyValidator:
    """Runs every rule over a day and collects the findings in rule order."""

    def __init__(self, rules: Optional[Sequence[ConsistencyRule]] = None, *, settings: EngineSettings | None = None):
        self._rules = list(rules) if rules is not None else default_rules()
        self._settings = settings or EngineSettings()

    def _context(
        self,
        entries: list[TimeEntry],
        *,
        work_date: date,
        now: datetime,
        day_config: DayScheduleConfig,
        max_daily_minutes: int,
        min_rest_minutes: int,
        previous_last_out: Optional[datetime],
        target: Optional[TimeEntry] = None,
        classification: DayClassification = NORMAL_DAY,
    ) -> ValidationContext:
        intervals = build_intervals(
            entries,
            minimum_break_minutes=day_config.minimum_break_minutes,
            tolerance_minutes=day_config.tolerance_minutes,
            ideal_break_start=day_config.ideal_break_out,
        )
        return ValidationContext(
            work_date=work_date,
            entries=tuple(entries),
            now=now,
            day_config=day_config,
            intervals=tuple(intervals),
            max_daily_minutes=max_daily_minutes,
            min_rest_minutes=min_rest_minutes,
            previous_last_out=previous_last_out,
            settings=self._settings,
            target=target,
            classification=classification,
        )

    def _run(self, context: ValidationContext) -> ValidationResult:
        found = []
        for rule in self._rules:
            if rule.day_level and context.for_new_entry:
                continue
            found.extend(rule.check(context))
        return ValidationResult(inconsistencies=tuple(found))

    def validate_day(
        self,
        entries: Iterable[TimeEntry],
        *,
        work_date: date,
        now: datetime,
        day_config: DayScheduleConfig,
        max_daily_minutes: int = constants.DEFAULT_MAX_DAILY_MINUTES,
        min_rest_minutes: int = constants.DEFAULT_MIN_REST_MINUTES,
        previous_last_out: Optional[datetime] = None,
        classification: DayClassification = NORMAL_DAY,
    ) -> ValidationResult:
        context = self._context(
            sort_entries(entries),
            work_date=work_date,
            now=now,
            day_config=day_config,
            max_daily_minutes=max_daily_minutes,
            min_rest_minutes=min_rest_minutes,
            previous_last_out=previous_last_out,
            classification=classification,
        )
        return self._run(context)

    def validate_new_entry(
        self,
        entry: TimeEntry,
        existing: Iterable[TimeEntry],
        *,
        now: datetime,
        day_config: DayScheduleConfig,
        max_daily_minutes: int = constants.DEFAULT_MAX_DAILY_MINUTES,
        min_rest_minutes: int = constants.DEFAULT_MIN_REST_MINUTES,
        previous_last_out: Optional[datetime] = None,
    ) -> ValidationResult:
        """Simulate inserting entry into existing and check it against its neighbours."""
        others = [e for e in existing if e.entry_id != entry.entry_id or entry.entry_id == 0]
        context = self._context(
            sort_entries([*others, entry]),
            work_date=entry.work_date,
            now=now,
            day_config=day_config,
            max_daily_minutes=max_daily_minutes,
            min_rest_minutes=min_rest_minutes,
            previous_last_out=previous_last_out,
            target=entry,
        )
        return self._run(context)
