from __future__ import annotations

import logging
from datetime import date
from typing import Mapping, Optional

from ..core import constants
from ..core.exceptions import ValidationError
from .model import DayScheduleConfig, ScheduleVersion, default_week
from .repository import ScheduleRepository
from .timeline import ScheduleTimeline

logger = logging.getLogger(__name__)


class ScheduleService:
    def __init__(self, schedules: ScheduleRepository):
        self._schedules = schedules

    def timeline(self, workspace_id: int) -> ScheduleTimeline:
        return ScheduleTimeline(self._schedules.list_versions(workspace_id=int(workspace_id)))

    def resolve(self, workspace_id: int, day: date) -> tuple[ScheduleVersion, DayScheduleConfig]:
        """The version whose range contains day, and its config for that weekday."""
        version = self.timeline(workspace_id).resolve(day)
        return version, version.day_config(day)

    def add_version(
        self,
        *,
        workspace_id: int,
        start_date: date,
        days: Optional[Mapping[int, DayScheduleConfig]] = None,
        max_daily_minutes: int = constants.DEFAULT_MAX_DAILY_MINUTES,
        min_rest_between_shifts_minutes: int = constants.DEFAULT_MIN_REST_MINUTES,
        description: Optional[str] = None,
    ) -> int:
        days = dict(days) if days else default_week()
        for weekday, cfg in days.items():
            if weekday != cfg.weekday or not 0 <= weekday <= 6:
                raise ValidationError(f"Invalid weekday configuration: {weekday}")
            if cfg.expected_minutes < 0 or cfg.minimum_break_minutes < 0 or cfg.tolerance_minutes < 0:
                raise ValidationError("Schedule minutes must not be negative")
        if int(max_daily_minutes) <= 0:
            raise ValidationError("Maximum daily minutes must be positive")

        closed, sequence = self.timeline(workspace_id).plan_new_version(start_date)
        version_id = self._schedules.create_version(
            workspace_id=int(workspace_id),
            start_date=start_date,
            sequence=sequence,
            max_daily_minutes=int(max_daily_minutes),
            min_rest_between_shifts_minutes=int(min_rest_between_shifts_minutes),
            days=days,
            description=description.strip() if description else None,
            close_version_id=closed.version_id if closed is not None else None,
            close_end_date=closed.end_date if closed is not None else None,
        )
        if closed is not None:
            logger.info(
                "schedule version closed",
                extra={"workspace_id": workspace_id, "version_id": closed.version_id, "end_date": closed.end_date},
            )
        logger.info(
            "schedule version created",
            extra={"workspace_id": workspace_id, "version_id": version_id, "start_date": start_date},
        )
        return version_id
