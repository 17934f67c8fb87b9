from __future__ import annotations

from typing import Iterable

from ...common.datetime_utils import minutes_between
from ...core.enums import Direction
from ...core.enums import InconsistencyKind as K
from ...workday.intervals import WorkInterval, closed_minutes, primary_pause_interval
from ..catalog import make
from ..model import Inconsistency
from .base import ConsistencyRule, ValidationContext


def _pause_touches_subject(interval: WorkInterval, context: ValidationContext) -> bool:
    """A pause is bounded by the previous exit and interval.entry_in."""
    if not context.for_new_entry:
        return True
    idx = context.index_of(interval.entry_in)
    return context.is_subject(interval.entry_in) or (idx > 0 and context.is_subject(context.entries[idx - 1]))


class InsufficientBreakRule(ConsistencyRule):
    """A long shift needs a pause of at least the minimum break."""

    def check(self, context: ValidationContext) -> Iterable[Inconsistency]:
        minimum = context.day_config.minimum_break_minutes
        if minimum <= 0:
            return []
        if context.for_new_entry and context.target.direction != Direction.OUT:
            return []
        worked = closed_minutes(context.intervals)
        if worked <= context.settings.long_shift_minutes:
            return []
        longest = max((i.pause_before_minutes or 0 for i in context.intervals), default=0)
        if longest < minimum:
            return [
                make(
                    K.INSUFFICIENT_BREAK,
                    f"{worked} min worked requires a {minimum} min break, longest was {longest} min",
                )
            ]
        return []


class DailyLimitRule(ConsistencyRule):
    def check(self, context: ValidationContext) -> Iterable[Inconsistency]:
        worked = closed_minutes(context.intervals)
        if worked > context.max_daily_minutes:
            return [make(K.DAILY_LIMIT_EXCEEDED, f"{worked} min worked, limit {context.max_daily_minutes} min")]
        return []


class InsufficientRestRule(ConsistencyRule):
    """Rest between the previous day's last exit and the first entry of this day."""

    def check(self, context: ValidationContext) -> Iterable[Inconsistency]:
        if context.previous_last_out is None or not context.entries:
            return []
        first = context.entries[0]
        if first.direction != Direction.IN or not context.is_subject(first):
            return []
        rest = minutes_between(context.previous_last_out, first.timestamp)
        if rest < context.min_rest_minutes:
            return [
                make(K.INSUFFICIENT_REST, f"Rest of {rest} min, minimum {context.min_rest_minutes} min", first.entry_id)
            ]
        return []


class BreakTooShortRule(ConsistencyRule):
    def check(self, context: ValidationContext) -> Iterable[Inconsistency]:
        return [
            make(K.BREAK_TOO_SHORT, f"Break of {i.pause_before_minutes} min", i.entry_in.entry_id)
            for i in context.intervals
            if i.pause_before_minutes is not None
            and i.pause_before_minutes < context.settings.short_break_minutes
            and _pause_touches_subject(i, context)
        ]


class BreakTooLongRule(ConsistencyRule):
    """Primary pause above minimum break plus tolerance (only with a tolerance set)."""

    def check(self, context: ValidationContext) -> Iterable[Inconsistency]:
        cfg = context.day_config
        if cfg.tolerance_minutes <= 0:
            return []
        pause = primary_pause_interval(context.intervals)
        if pause is None or not _pause_touches_subject(pause, context):
            return []
        limit = cfg.minimum_break_minutes + cfg.tolerance_minutes
        if pause.pause_before_minutes > limit:
            return [
                make(K.BREAK_TOO_LONG, f"Break of {pause.pause_before_minutes} min, allowed {limit} min",
                     pause.entry_in.entry_id)
            ]
        return []
