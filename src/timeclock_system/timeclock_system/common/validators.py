from __future__ import annotations

from typing import Optional

from ..core.enums import EditReason
from ..core.exceptions import ValidationError


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} must not be empty")
    return value.strip()


def require_edit_reason(reason: Optional[EditReason], detail: Optional[str]) -> Optional[str]:
    """Validate an edit/delete reason code; returns the normalized detail."""
    if reason is None:
        raise ValidationError("A reason code is required to edit or delete an entry")
    detail = detail.strip() if detail else None
    if reason == EditReason.OTHER and not detail:
        raise ValidationError("Reason OTHER requires a detail text")
    return detail
