"""Analysis mode tag shared by every diagnostic item."""

from __future__ import annotations

from enum import StrEnum

from dsf_linter.model.finding_type import FindingType, LintType, ValidationType
from dsf_linter.model.severity import LintSeverity, Severity, ValidationSeverity


class AnalysisMode(StrEnum):
    """Advisory linting or build-gating validation."""

    LINT = "lint"
    VALIDATION = "validation"

    @property
    def severities(self) -> type[Severity]:
        return LintSeverity if self is AnalysisMode.LINT else ValidationSeverity

    @property
    def finding_types(self) -> type[FindingType]:
        return LintType if self is AnalysisMode.LINT else ValidationType

    def coerce_severity(self, value: Severity | str) -> Severity:
        """Map *value* onto this mode's severity family by name."""
        try:
            return self.severities[str(value).upper()]
        except KeyError:
            raise ValueError(f"Unknown {self.value} severity: {value!r}") from None

    def owns(self, severity: Severity) -> bool:
        return isinstance(severity, self.severities)
