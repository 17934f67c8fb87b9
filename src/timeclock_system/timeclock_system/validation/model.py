from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import InconsistencyKind, Severity


@dataclass(frozen=True)
class Inconsistency:
    kind: InconsistencyKind
    severity: Severity
    detail: str
    entry_id: Optional[int] = None

    @property
    def blocking(self) -> bool:
        return self.severity == Severity.HIGH

    def to_dict(self) -> dict:
        return {
            "kind": self.kind.value,
            "severity": self.severity.value,
            "detail": self.detail,
            "entry_id": self.entry_id,
        }


@dataclass(frozen=True)
class ValidationResult:
    inconsistencies: tuple[Inconsistency, ...] = ()

    @property
    def blocking(self) -> list[Inconsistency]:
        return [i for i in self.inconsistencies if i.blocking]

    @property
    def warnings(self) -> list[Inconsistency]:
        return [i for i in self.inconsistencies if not i.blocking]

    @property
    def is_valid(self) -> bool:
        return not self.blocking

    def kinds(self) -> set[InconsistencyKind]:
        return {i.kind for i in self.inconsistencies}
