from __future__ import annotations

import logging
from datetime import date, time
from typing import Optional

from ..core.enums import AbsenceType
from ..core.exceptions import ConfigurationError, NotFoundError, ValidationError
from .model import Absence
from .policy import PARTIAL_ALLOWED, DayClassification, classify, conflicts
from .repository import AbsenceRepository

logger = logging.getLogger(__name__)


class AbsenceService:
    def __init__(self, absences: AbsenceRepository):
        self._absences = absences

    def classify_day(self, workspace_id: int, day: date) -> DayClassification:
        markers = self._absences.list_for_range(workspace_id=int(workspace_id), start=day, end=day)
        return classify(day, markers)

    def create(
        self,
        *,
        workspace_id: int,
        absence_type: AbsenceType,
        start_date: date,
        end_date: Optional[date] = None,
        start_time: Optional[time] = None,
        end_time: Optional[time] = None,
        excused_minutes: Optional[int] = None,
        acquisition_period: Optional[str] = None,
        attachment: Optional[str] = None,
        note: Optional[str] = None,
    ) -> int:
        end_date = end_date or start_date
        if end_date < start_date:
            raise ValidationError("Absence end date is before its start date")

        if (start_time is None) != (end_time is None):
            raise ValidationError("A partial-day absence needs both start and end time")

        candidate = Absence(
            absence_id=0,
            workspace_id=int(workspace_id),
            absence_type=absence_type,
            start_date=start_date,
            end_date=end_date,
            start_time=start_time,
            end_time=end_time,
            excused_minutes=excused_minutes,
            acquisition_period=(acquisition_period or "").strip() or None,
            attachment=attachment,
            note=(note or "").strip() or None,
        )

        if candidate.is_partial:
            if absence_type not in PARTIAL_ALLOWED:
                raise ValidationError(f"{absence_type.value} cannot be a partial-day absence")
            if start_date != end_date:
                raise ValidationError("A partial-day absence must cover a single date")
            if end_time <= start_time:
                raise ValidationError("Partial-day absence must end after it starts")
            if excused_minutes is not None and not 0 <= int(excused_minutes) <= candidate.range_minutes:
                raise ValidationError("Excused minutes must fit inside the declared time range")
        elif excused_minutes is not None:
            raise ValidationError("Excused minutes only apply to partial-day absences")

        existing = self._absences.list_for_range(workspace_id=int(workspace_id), start=start_date, end=end_date)
        clashing = conflicts(candidate, existing)
        if clashing:
            ids = ", ".join(str(a.absence_id) for a in clashing)
            raise ConfigurationError(f"Absence overlaps existing markers: {ids}")

        absence_id = self._absences.create(
            workspace_id=candidate.workspace_id,
            absence_type=candidate.absence_type,
            start_date=candidate.start_date,
            end_date=candidate.end_date,
            start_time=candidate.start_time,
            end_time=candidate.end_time,
            excused_minutes=candidate.excused_minutes,
            acquisition_period=candidate.acquisition_period,
            attachment=candidate.attachment,
            note=candidate.note,
        )
        logger.info(
            "absence created",
            extra={"workspace_id": workspace_id, "absence_id": absence_id, "type": absence_type.value},
        )
        return absence_id

    def delete(self, *, absence_id: int) -> None:
        if not self._absences.delete(absence_id=int(absence_id)):
            raise NotFoundError(f"Absence {absence_id} not found")
