from __future__ import annotations

from datetime import datetime
from typing import Iterable, Optional

from ...common.datetime_utils import minutes_between
from ...core.enums import Direction
from ...core.enums import InconsistencyKind as K
from ...entries.model import TimeEntry
from ..catalog import make
from ..model import Inconsistency
from .base import ConsistencyRule, ValidationContext


def _recorded_at(entry: TimeEntry, context: ValidationContext) -> Optional[datetime]:
    """When the point was recorded; a point being registered is recorded now."""
    if entry.created_at is not None:
        return entry.created_at
    return context.now if context.for_new_entry else None


def _days_late(entry: TimeEntry, context: ValidationContext) -> Optional[int]:
    recorded = _recorded_at(entry, context)
    if recorded is None:
        return None
    return (recorded - entry.timestamp).days


class FutureEntryRule(ConsistencyRule):
    def check(self, context: ValidationContext) -> Iterable[Inconsistency]:
        found = []
        for entry in context.subjects:
            ahead = minutes_between(context.now, entry.timestamp)
            if ahead > context.settings.future_tolerance_minutes:
                found.append(make(K.FUTURE_ENTRY, f"Point {ahead} minute(s) in the future", entry.entry_id))
        return found


class StaleEntryRule(ConsistencyRule):
    def check(self, context: ValidationContext) -> Iterable[Inconsistency]:
        found = []
        for entry in context.subjects:
            days = _days_late(entry, context)
            if days is not None and days > context.settings.stale_entry_days:
                found.append(make(K.STALE_ENTRY, f"Point recorded {days} day(s) late", entry.entry_id))
        return found


class BackfilledEntryRule(ConsistencyRule):
    def check(self, context: ValidationContext) -> Iterable[Inconsistency]:
        found = []
        settings = context.settings
        for entry in context.subjects:
            days = _days_late(entry, context)
            if days is not None and settings.backfill_days < days <= settings.stale_entry_days:
                found.append(make(K.BACKFILLED_ENTRY, f"Point from {days} day(s) ago", entry.entry_id))
        return found


class OutsideExpectedHoursRule(ConsistencyRule):
    """Compares entries with the ideal in/return times and exits with the ideal break-out/out times."""

    def check(self, context: ValidationContext) -> Iterable[Inconsistency]:
        cfg = context.day_config
        found = []
        for entry in context.subjects:
            if entry.direction == Direction.IN:
                ideals = [t for t in (cfg.ideal_in, cfg.ideal_break_return) if t is not None]
            else:
                ideals = [t for t in (cfg.ideal_break_out, cfg.ideal_out) if t is not None]
            if not ideals:
                continue
            distance = min(
                abs(minutes_between(datetime.combine(entry.work_date, t, tzinfo=entry.timestamp.tzinfo), entry.timestamp))
                for t in ideals
            )
            if distance > context.settings.expected_hours_tolerance_minutes:
                found.append(
                    make(K.OUTSIDE_EXPECTED_HOURS, f"{distance} min away from the expected time", entry.entry_id)
                )
        return found


class MissingLocationRule(ConsistencyRule):
    def check(self, context: ValidationContext) -> Iterable[Inconsistency]:
        if not context.settings.location_required:
            return []
        return [make(K.MISSING_LOCATION, entry_id=e.entry_id) for e in context.subjects if not e.location]


class ManualEditRule(ConsistencyRule):
    def check(self, context: ValidationContext) -> Iterable[Inconsistency]:
        return [make(K.MANUAL_EDIT, entry_id=e.entry_id) for e in context.subjects if e.manually_edited]
