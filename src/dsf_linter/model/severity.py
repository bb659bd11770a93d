"""Severity levels for lint and validation findings."""

from __future__ import annotations

from enum import StrEnum

_RANKS = {"ERROR": 0, "WARN": 1, "INFO": 2, "SUCCESS": 3}


class Severity(StrEnum):
    """Base for the two severity families.

    Members are declared most severe first. ``rank`` exposes that order so
    reports can sort and gate on it; plain string comparison would be
    alphabetical.
    """

    @property
    def rank(self) -> int:
        return _RANKS[self.value]

    def is_at_least(self, threshold: Severity | str) -> bool:
        """True when this severity is as severe as *threshold* or worse."""
        key = str(threshold).upper()
        if key not in _RANKS:
            raise ValueError(f"Unknown severity: {threshold!r}")
        return self.rank <= _RANKS[key]


class LintSeverity(Severity):
    """Severity vocabulary of advisory lint findings."""

    ERROR = "ERROR"
    WARN = "WARN"
    INFO = "INFO"
    SUCCESS = "SUCCESS"


class ValidationSeverity(Severity):
    """Severity vocabulary of build-gating validation findings."""

    ERROR = "ERROR"
    WARN = "WARN"
    INFO = "INFO"
    SUCCESS = "SUCCESS"


class ProcessingLevel(StrEnum):
    """Granularity a check operates at."""

    FILE = "FILE"


def severity_names() -> list[str]:
    """Severity names, most severe first."""
    return list(_RANKS)
