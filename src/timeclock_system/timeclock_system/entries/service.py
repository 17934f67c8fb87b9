from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import naive_local
from ..common.validators import require_edit_reason, require_non_empty
from ..core.enums import AuditAction, Direction, EditReason
from ..core.exceptions import BlockingInconsistencyError, NotFoundError
from ..validation.model import Inconsistency, ValidationResult
from ..validation.service import ValidationService
from .model import EntryAudit, TimeEntry, next_direction, sort_entries
from .repository import AuditRepository, EntryRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RegisterResult:
    entry_id: int
    warnings: list[Inconsistency] = field(default_factory=list)
    overridden: list[Inconsistency] = field(default_factory=list)


class EntryService:
    def __init__(self, entries: EntryRepository, audits: AuditRepository, validation: ValidationService):
        self._entries = entries
        self._audits = audits
        self._validation = validation

    def list_for_date(self, workspace_id: int, work_date: date) -> list[TimeEntry]:
        return sort_entries(self._entries.list_for_date(workspace_id=int(workspace_id), work_date=work_date))

    def history(self, entry_id: int) -> list[EntryAudit]:
        return list(self._audits.list_for_entry(entry_id=int(entry_id)))

    def _check(self, result: ValidationResult, override_justification: Optional[str]) -> Optional[str]:
        """Raise on blocking findings unless a justification overrides them."""
        if not result.blocking:
            return None
        if not override_justification or not override_justification.strip():
            raise BlockingInconsistencyError(result.blocking)
        return require_non_empty(override_justification, "Override justification")

    def register(
        self,
        *,
        workspace_id: int,
        timestamp: datetime,
        direction: Optional[Direction] = None,
        note: Optional[str] = None,
        location: Optional[str] = None,
        manual: bool = False,
        now: datetime | None = None,
        override_justification: Optional[str] = None,
    ) -> RegisterResult:
        now = now or datetime.now()
        timestamp = naive_local(timestamp)
        workspace_id = int(workspace_id)
        if direction is None:
            day = self._entries.list_for_date(workspace_id=workspace_id, work_date=timestamp.date())
            direction = next_direction(e for e in day if e.timestamp <= timestamp)

        candidate = TimeEntry(
            entry_id=0,
            workspace_id=workspace_id,
            timestamp=timestamp,
            direction=direction,
            manually_edited=manual,
            note=(note or "").strip() or None,
            location=(location or "").strip() or None,
            created_at=now,
        )
        result = self._validation.validate_new_entry(candidate, now=now)
        justification = self._check(result, override_justification)

        entry_id = self._entries.create(
            workspace_id=workspace_id,
            timestamp=candidate.timestamp,
            direction=candidate.direction,
            manually_edited=candidate.manually_edited,
            note=candidate.note,
            location=candidate.location,
            created_at=now,
        )
        if justification:
            self._audits.record(
                entry_id=entry_id,
                workspace_id=workspace_id,
                action=AuditAction.CREATE,
                reason=EditReason.AUTHORIZED_ADJUSTMENT,
                detail=justification,
                previous_timestamp=None,
                new_timestamp=timestamp,
                recorded_at=now,
            )
            logger.warning(
                "blocking inconsistencies overridden",
                extra={
                    "workspace_id": workspace_id,
                    "entry_id": entry_id,
                    "kinds": [i.kind.value for i in result.blocking],
                },
            )
        logger.info(
            "entry registered",
            extra={"workspace_id": workspace_id, "entry_id": entry_id, "direction": direction.value},
        )
        return RegisterResult(
            entry_id=entry_id,
            warnings=result.warnings,
            overridden=result.blocking if justification else [],
        )

    def _get(self, entry_id: int) -> TimeEntry:
        entry = self._entries.get_by_id(int(entry_id))
        if not entry:
            raise NotFoundError(f"Entry {entry_id} not found")
        return entry

    def edit(
        self,
        entry_id: int,
        *,
        reason: Optional[EditReason],
        detail: Optional[str] = None,
        timestamp: Optional[datetime] = None,
        direction: Optional[Direction] = None,
        note: Optional[str] = None,
        now: datetime | None = None,
        override_justification: Optional[str] = None,
    ) -> RegisterResult:
        now = now or datetime.now()
        timestamp = naive_local(timestamp) if timestamp is not None else None
        detail = require_edit_reason(reason, detail)
        current = self._get(entry_id)

        edited = replace(
            current,
            timestamp=timestamp or current.timestamp,
            direction=direction or current.direction,
            note=(note.strip() or None) if note is not None else current.note,
            manually_edited=True,
        )
        result = self._validation.validate_new_entry(edited, now=now)
        justification = self._check(result, override_justification)
        if justification:
            detail = f"{detail}; override: {justification}" if detail else f"Override: {justification}"

        self._entries.update(
            entry_id=current.entry_id,
            timestamp=edited.timestamp,
            direction=edited.direction,
            note=edited.note,
        )
        self._audits.record(
            entry_id=current.entry_id,
            workspace_id=current.workspace_id,
            action=AuditAction.UPDATE,
            reason=reason,
            detail=detail,
            previous_timestamp=current.timestamp,
            new_timestamp=edited.timestamp,
            recorded_at=now,
        )
        if result.blocking:
            logger.warning(
                "blocking inconsistencies overridden",
                extra={
                    "workspace_id": current.workspace_id,
                    "entry_id": current.entry_id,
                    "kinds": [i.kind.value for i in result.blocking],
                },
            )
        logger.info(
            "entry edited",
            extra={"workspace_id": current.workspace_id, "entry_id": current.entry_id, "reason": reason.value},
        )
        return RegisterResult(entry_id=current.entry_id, warnings=result.warnings, overridden=result.blocking)

    def delete(
        self,
        entry_id: int,
        *,
        reason: Optional[EditReason],
        detail: Optional[str] = None,
        now: datetime | None = None,
    ) -> None:
        now = now or datetime.now()
        detail = require_edit_reason(reason, detail)
        current = self._get(entry_id)

        self._audits.record(
            entry_id=current.entry_id,
            workspace_id=current.workspace_id,
            action=AuditAction.DELETE,
            reason=reason,
            detail=detail,
            previous_timestamp=current.timestamp,
            new_timestamp=None,
            recorded_at=now,
        )
        self._entries.delete(entry_id=current.entry_id)
        logger.info(
            "entry deleted",
            extra={"workspace_id": current.workspace_id, "entry_id": current.entry_id, "reason": reason.value},
        )
