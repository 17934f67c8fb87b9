from __future__ import annotations

from .base import ConsistencyRule, ValidationContext
from .sequence_rules import (
    DuplicateDirectionRule,
    MissingWorkdayRule,
    OddEntryCountRule,
    OpenEntryRule,
    OutWithoutInRule,
)
from .timing_rules import (
    BackfilledEntryRule,
    FutureEntryRule,
    ManualEditRule,
    MissingLocationRule,
    OutsideExpectedHoursRule,
    StaleEntryRule,
)
from .workday_rules import (
    BreakTooLongRule,
    BreakTooShortRule,
    DailyLimitRule,
    InsufficientBreakRule,
    InsufficientRestRule,
)


def default_rules() -> list[ConsistencyRule]:
    return [
        OutWithoutInRule(),
        DuplicateDirectionRule(),
        OpenEntryRule(),
        OddEntryCountRule(),
        MissingWorkdayRule(),
        FutureEntryRule(),
        InsufficientBreakRule(),
        InsufficientRestRule(),
        StaleEntryRule(),
        OutsideExpectedHoursRule(),
        DailyLimitRule(),
        BreakTooLongRule(),
        BreakTooShortRule(),
        MissingLocationRule(),
        ManualEditRule(),
        BackfilledEntryRule(),
    ]


__all__ = ["ConsistencyRule", "ValidationContext", "default_rules"]
