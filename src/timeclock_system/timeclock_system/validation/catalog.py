"""Severity and description of every inconsistency kind."""

from __future__ import annotations

from typing import Optional

from ..core.enums import InconsistencyKind as K
from ..core.enums import Severity
from .model import Inconsistency

CATALOG: dict[K, tuple[Severity, str]] = {
    K.OUT_WITHOUT_IN: (Severity.HIGH, "Exit without a matching entry"),
    K.DUPLICATE_IN: (Severity.HIGH, "Two consecutive entries"),
    K.DUPLICATE_OUT: (Severity.HIGH, "Two consecutive exits"),
    K.OPEN_ENTRY: (Severity.HIGH, "Past day left open"),
    K.ODD_ENTRY_COUNT: (Severity.HIGH, "Odd number of points on a past day"),
    K.MISSING_WORKDAY: (Severity.HIGH, "Past workday without points or absence"),
    K.FUTURE_ENTRY: (Severity.HIGH, "Point in the future"),
    K.INSUFFICIENT_BREAK: (Severity.HIGH, "Break shorter than required for a long shift"),
    K.INSUFFICIENT_REST: (Severity.HIGH, "Rest between shifts shorter than required"),
    K.STALE_ENTRY: (Severity.MEDIUM, "Point recorded long after it happened"),
    K.OUTSIDE_EXPECTED_HOURS: (Severity.MEDIUM, "Point far from the expected time"),
    K.DAILY_LIMIT_EXCEEDED: (Severity.MEDIUM, "Daily working limit exceeded"),
    K.BREAK_TOO_LONG: (Severity.MEDIUM, "Break longer than allowed"),
    K.BREAK_TOO_SHORT: (Severity.LOW, "Very short break"),
    K.MISSING_LOCATION: (Severity.LOW, "Location not captured"),
    K.MANUAL_EDIT: (Severity.LOW, "Point edited manually"),
    K.BACKFILLED_ENTRY: (Severity.LOW, "Retroactive point"),
}


def severity_of(kind: K) -> Severity:
    return CATALOG[kind][0]


def description_of(kind: K) -> str:
    return CATALOG[kind][1]


def is_blocking(kind: K) -> bool:
    return severity_of(kind) == Severity.HIGH


def make(kind: K, detail: Optional[str] = None, entry_id: Optional[int] = None) -> Inconsistency:
    return Inconsistency(
        kind=kind,
        severity=severity_of(kind),
        detail=detail or description_of(kind),
        entry_id=entry_id,
    )
