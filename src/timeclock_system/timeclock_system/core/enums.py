from __future__ import annotations

from enum import Enum


class Direction(str, Enum):
    """Direction of a clock event."""

    IN = "IN"
    OUT = "OUT"


class DayType(str, Enum):
    """Classification of a calendar day for workload purposes."""

    NORMAL = "NORMAL"
    HOLIDAY = "HOLIDAY"
    BRIDGE = "BRIDGE"
    OFFICIAL_NON_WORK = "OFFICIAL_NON_WORK"
    VACATION = "VACATION"
    MEDICAL_DECLARATION = "MEDICAL_DECLARATION"
    JUSTIFIED_ABSENCE = "JUSTIFIED_ABSENCE"
    DAY_OFF = "DAY_OFF"
    UNJUSTIFIED_ABSENCE = "UNJUSTIFIED_ABSENCE"


class AbsenceType(str, Enum):
    """Special-day marker types recorded by the user."""

    HOLIDAY = "HOLIDAY"
    BRIDGE = "BRIDGE"
    OFFICIAL_NON_WORK = "OFFICIAL_NON_WORK"
    VACATION = "VACATION"
    MEDICAL_DECLARATION = "MEDICAL_DECLARATION"
    JUSTIFIED_ABSENCE = "JUSTIFIED_ABSENCE"
    DAY_OFF = "DAY_OFF"
    UNJUSTIFIED_ABSENCE = "UNJUSTIFIED_ABSENCE"


class DayStatus(str, Enum):
    """Consistency status of a workday."""

    NO_RECORDS = "NO_RECORDS"
    EXCESS_ENTRIES = "EXCESS_ENTRIES"
    IN_PROGRESS = "IN_PROGRESS"
    INCOMPLETE = "INCOMPLETE"
    SEQUENCE_INVALID = "SEQUENCE_INVALID"
    OVERTIME_EXCEEDED = "OVERTIME_EXCEEDED"
    INSUFFICIENT_BREAK = "INSUFFICIENT_BREAK"
    COMPLETE_NO_BREAK = "COMPLETE_NO_BREAK"
    COMPLETE = "COMPLETE"


class Severity(str, Enum):
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


class InconsistencyKind(str, Enum):
    """Inconsistency kinds produced by the consistency validator."""

    OUT_WITHOUT_IN = "OUT_WITHOUT_IN"
    DUPLICATE_IN = "DUPLICATE_IN"
    DUPLICATE_OUT = "DUPLICATE_OUT"
    OPEN_ENTRY = "OPEN_ENTRY"
    ODD_ENTRY_COUNT = "ODD_ENTRY_COUNT"
    MISSING_WORKDAY = "MISSING_WORKDAY"
    FUTURE_ENTRY = "FUTURE_ENTRY"
    INSUFFICIENT_BREAK = "INSUFFICIENT_BREAK"
    INSUFFICIENT_REST = "INSUFFICIENT_REST"
    STALE_ENTRY = "STALE_ENTRY"
    OUTSIDE_EXPECTED_HOURS = "OUTSIDE_EXPECTED_HOURS"
    DAILY_LIMIT_EXCEEDED = "DAILY_LIMIT_EXCEEDED"
    BREAK_TOO_LONG = "BREAK_TOO_LONG"
    BREAK_TOO_SHORT = "BREAK_TOO_SHORT"
    MISSING_LOCATION = "MISSING_LOCATION"
    MANUAL_EDIT = "MANUAL_EDIT"
    BACKFILLED_ENTRY = "BACKFILLED_ENTRY"


class ClosingType(str, Enum):
    WEEKLY = "WEEKLY"
    MONTHLY = "MONTHLY"
    BANK_OF_HOURS = "BANK_OF_HOURS"


class EditReason(str, Enum):
    """Mandatory reason code for editing or deleting an entry (audit)."""

    FORGOT_TO_CLOCK = "FORGOT_TO_CLOCK"
    WRONG_TIME = "WRONG_TIME"
    SYSTEM_UNAVAILABLE = "SYSTEM_UNAVAILABLE"
    AUTHORIZED_ADJUSTMENT = "AUTHORIZED_ADJUSTMENT"
    EXTERNAL_WORK = "EXTERNAL_WORK"
    FLEX_COMPENSATION = "FLEX_COMPENSATION"
    JUSTIFIED_ABSENCE = "JUSTIFIED_ABSENCE"
    MEDICAL_CERTIFICATE = "MEDICAL_CERTIFICATE"
    OTHER = "OTHER"


class AuditAction(str, Enum):
    CREATE = "CREATE"
    UPDATE = "UPDATE"
    DELETE = "DELETE"
