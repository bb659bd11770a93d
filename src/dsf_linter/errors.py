"""Errors raised by the linter tooling itself.

Problems found in the analyzed artifacts are never exceptions; they are
diagnostic items. These classes cover failures of the tool around them.
"""

from __future__ import annotations


class DsfLinterError(Exception):
    """Base class for tool-level failures."""


class ReportError(DsfLinterError):
    """Raised when a persisted report cannot be read or rebuilt."""

    def __init__(self, reason: str, path: str | None = None) -> None:
        self.reason = reason
        self.path = path
        super().__init__(f"{path}: {reason}" if path else reason)


class ModeMismatchError(DsfLinterError, ValueError):
    """Raised when an item of one analysis mode reaches a sink of the other."""

    def __init__(self, expected: str, variant: str) -> None:
        self.expected = expected
        self.variant = variant
        super().__init__(f"{variant} does not belong to {expected} mode")
