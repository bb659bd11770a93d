"""DSF Linter: diagnostic model for BPMN and FHIR process plugin checks."""
from __future__ import annotations

__version__ = "0.1.0"

from dsf_linter.errors import DsfLinterError, ModeMismatchError, ReportError  # noqa: E402
from dsf_linter.model import (  # noqa: E402
    AnalysisMode,
    DiagnosticItem,
    LintSeverity,
    LintType,
    ValidationSeverity,
    ValidationType,
)

__all__ = [
    "__version__",
    "DsfLinterError",
    "ReportError",
    "ModeMismatchError",
    "AnalysisMode",
    "DiagnosticItem",
    "LintSeverity",
    "ValidationSeverity",
    "LintType",
    "ValidationType",
]
