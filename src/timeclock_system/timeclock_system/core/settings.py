from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping

from . import constants


@dataclass(frozen=True)
class EngineSettings:
    """Limits used by the day summary engine and the consistency validator."""

    max_entries_per_day: int = constants.DEFAULT_MAX_ENTRIES_PER_DAY
    break_leniency_minutes: int = constants.DEFAULT_BREAK_LENIENCY_MINUTES
    future_tolerance_minutes: int = constants.DEFAULT_FUTURE_TOLERANCE_MINUTES
    backfill_days: int = constants.DEFAULT_BACKFILL_DAYS
    stale_entry_days: int = constants.DEFAULT_STALE_ENTRY_DAYS
    long_shift_minutes: int = constants.DEFAULT_LONG_SHIFT_MINUTES
    short_break_minutes: int = constants.DEFAULT_SHORT_BREAK_MINUTES
    expected_hours_tolerance_minutes: int = constants.DEFAULT_EXPECTED_HOURS_TOLERANCE_MINUTES
    location_required: bool = False
    week_start: int = constants.DEFAULT_WEEK_START
    month_start_day: int = constants.DEFAULT_MONTH_START_DAY

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any] | None) -> "EngineSettings":
        if not values:
            return cls()
        known = {f.name: f.type for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in values.items():
            name = str(key).lower()
            if name not in known:
                continue
            kwargs[name] = bool(value) if name == "location_required" else int(value)
        return cls(**kwargs)
