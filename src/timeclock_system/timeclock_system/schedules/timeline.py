from __future__ import annotations

from bisect import bisect_right
from dataclasses import replace
from datetime import date, timedelta
from typing import Iterable, Optional

from ..core.exceptions import ConfigurationError
from .model import ScheduleVersion


class ScheduleTimeline:
    """Sorted, non-overlapping schedule versions of one workspace.

    Overlaps and a second open-ended version are rejected when the timeline
    is built, so lookups never have to choose between candidates.
    """

    def __init__(self, versions: Iterable[ScheduleVersion]):
        self._versions = sorted(versions, key=lambda v: v.start_date)
        self._starts = [v.start_date for v in self._versions]
        self._check()

    def _check(self) -> None:
        open_versions = [v for v in self._versions if v.is_open]
        if len(open_versions) > 1:
            raise ConfigurationError("More than one open-ended schedule version")

        for v in self._versions:
            if v.end_date is not None and v.end_date < v.start_date:
                raise ConfigurationError(f"Schedule version {v.version_id} ends before it starts")

        for prev, cur in zip(self._versions, self._versions[1:]):
            if prev.end_date is None or prev.end_date >= cur.start_date:
                raise ConfigurationError(
                    f"Schedule versions {prev.version_id} and {cur.version_id} overlap"
                )

    @property
    def versions(self) -> list[ScheduleVersion]:
        return list(self._versions)

    def find(self, day: date) -> Optional[ScheduleVersion]:
        idx = bisect_right(self._starts, day) - 1
        if idx < 0:
            return None
        candidate = self._versions[idx]
        return candidate if candidate.contains(day) else None

    def resolve(self, day: date) -> ScheduleVersion:
        version = self.find(day)
        if version is None:
            raise ConfigurationError(f"No schedule version covers {day.isoformat()}")
        return version

    def plan_new_version(self, start_date: date) -> tuple[Optional[ScheduleVersion], int]:
        """Validate a new open-ended version starting at start_date.

        Returns the currently open version closed at (start_date - 1 day), or
        None if there is nothing to close, and the sequence number for the
        new version.
        """
        if self._versions and start_date <= self._versions[-1].start_date:
            raise ConfigurationError("A new schedule version must start after the latest one")

        last = self._versions[-1] if self._versions else None
        sequence = (last.sequence + 1) if last else 1
        if last is None:
            return None, sequence
        if last.end_date is not None:
            if last.end_date >= start_date:
                raise ConfigurationError("New schedule version overlaps the latest one")
            return None, sequence
        return replace(last, end_date=start_date - timedelta(days=1)), sequence
