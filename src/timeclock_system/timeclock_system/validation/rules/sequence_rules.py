from __future__ import annotations

from typing import Iterable

from ...core.enums import Direction
from ...core.enums import InconsistencyKind as K
from ..catalog import make
from ..model import Inconsistency
from .base import ConsistencyRule, ValidationContext


class OutWithoutInRule(ConsistencyRule):
    """The first point of a day is an exit."""

    def check(self, context: ValidationContext) -> Iterable[Inconsistency]:
        if not context.entries:
            return []
        first = context.entries[0]
        if first.direction == Direction.OUT and context.is_subject(first):
            return [make(K.OUT_WITHOUT_IN, "Exit recorded before any entry", first.entry_id)]
        return []


class DuplicateDirectionRule(ConsistencyRule):
    """Two consecutive points with the same direction."""

    def check(self, context: ValidationContext) -> Iterable[Inconsistency]:
        found = []
        entries = context.entries
        for prev, cur in zip(entries, entries[1:]):
            if prev.direction != cur.direction:
                continue
            if not (context.is_subject(cur) or context.is_subject(prev)):
                continue
            kind = K.DUPLICATE_IN if cur.direction == Direction.IN else K.DUPLICATE_OUT
            other = prev if context.is_subject(cur) else cur
            subject = cur if context.is_subject(cur) else prev
            found.append(
                make(kind, f"Another {cur.direction.value} at {other.timestamp:%H:%M}", subject.entry_id)
            )
        return found


class OpenEntryRule(ConsistencyRule):
    day_level = True

    def check(self, context: ValidationContext) -> Iterable[Inconsistency]:
        if context.is_past_day and context.entries and context.entries[-1].direction == Direction.IN:
            last = context.entries[-1]
            return [make(K.OPEN_ENTRY, f"Day ended with an entry at {last.timestamp:%H:%M}", last.entry_id)]
        return []


class OddEntryCountRule(ConsistencyRule):
    day_level = True

    def check(self, context: ValidationContext) -> Iterable[Inconsistency]:
        count = len(context.entries)
        if context.is_past_day and count % 2 == 1:
            return [make(K.ODD_ENTRY_COUNT, f"{count} points recorded")]
        return []


class MissingWorkdayRule(ConsistencyRule):
    """A past active workday with no points and no absence excusing it."""

    day_level = True

    def check(self, context: ValidationContext) -> Iterable[Inconsistency]:
        cfg = context.day_config
        if context.entries or not context.is_past_day:
            return []
        if not cfg.active or cfg.expected_minutes <= 0:
            return []
        classification = context.classification
        if classification.zeroes_expected_workload or classification.excused_minutes > 0:
            return []
        return [make(K.MISSING_WORKDAY, f"No points recorded on {context.work_date.isoformat()}")]
