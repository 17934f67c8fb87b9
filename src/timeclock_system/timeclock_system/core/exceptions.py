from __future__ import annotations


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a referenced record does not exist."""


class ConfigurationError(DomainError):
    """Raised on inconsistent configuration data.

    Overlapping schedule versions, ambiguous special-day markers and
    overlapping period closings end up here. These are never resolved by
    picking a default.
    """


class BlockingInconsistencyError(DomainError):
    """Raised when a new entry triggers HIGH severity inconsistencies."""

    def __init__(self, inconsistencies):
        self.inconsistencies = list(inconsistencies)
        codes = ", ".join(i.kind.value for i in self.inconsistencies)
        super().__init__(f"Entry refused: {codes}")
