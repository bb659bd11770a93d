"""DSF Linter model layer -- public type re-exports."""

from dsf_linter.model.finding_type import FindingType, LintType, ValidationType
from dsf_linter.model.item import (
    BpmnFinding,
    BpmnLintItem,
    BpmnValidationItem,
    DiagnosticItem,
    FhirFinding,
    FhirLintItem,
    FhirValidationItem,
    PluginFinding,
    PluginLintItem,
    PluginValidationItem,
    restore,
    variant_registry,
)
from dsf_linter.model.location import (
    UNKNOWN_BPMN_FILE,
    UNKNOWN_FHIR_FILE,
    BpmnLocation,
    FhirLocation,
    Location,
    PluginLocation,
    resolve_file_name,
)
from dsf_linter.model.mode import AnalysisMode
from dsf_linter.model.render import render
from dsf_linter.model.severity import LintSeverity, ProcessingLevel, Severity, ValidationSeverity

__all__ = [
    # severity
    "Severity",
    "LintSeverity",
    "ValidationSeverity",
    "ProcessingLevel",
    # mode
    "AnalysisMode",
    # finding type
    "FindingType",
    "LintType",
    "ValidationType",
    # location
    "UNKNOWN_BPMN_FILE",
    "UNKNOWN_FHIR_FILE",
    "BpmnLocation",
    "FhirLocation",
    "PluginLocation",
    "Location",
    "resolve_file_name",
    # item
    "DiagnosticItem",
    "BpmnFinding",
    "FhirFinding",
    "PluginFinding",
    "BpmnLintItem",
    "BpmnValidationItem",
    "FhirLintItem",
    "FhirValidationItem",
    "PluginLintItem",
    "PluginValidationItem",
    "variant_registry",
    "restore",
    # render
    "render",
]
