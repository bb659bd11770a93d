"""Validation findings about plugin packaging."""

from __future__ import annotations

from dsf_linter.items.common import MissingReferenceFinding, OutsideExpectedRootFinding
from dsf_linter.model.finding_type import ValidationType
from dsf_linter.model.item import PluginValidationItem
from dsf_linter.model.location import FileHandle
from dsf_linter.model.severity import ValidationSeverity


class PluginDefinitionValidationItemSuccess(PluginValidationItem):
    finding_type = ValidationType.SUCCESS
    default_severity = ValidationSeverity.SUCCESS
    default_message = "Plugin definition validation passed"


class PluginDefinitionBpmnFileReferencedButNotFoundValidationItem(MissingReferenceFinding, PluginValidationItem):
    finding_type = ValidationType.PLUGIN_DEFINITION_BPMN_FILE_REFERENCED_BUT_NOT_FOUND
    default_severity = ValidationSeverity.ERROR
    default_message = "BPMN file '{reference}' is referenced by the plugin but was not found"


class PluginDefinitionFhirFileReferencedButNotFoundValidationItem(MissingReferenceFinding, PluginValidationItem):
    finding_type = ValidationType.PLUGIN_DEFINITION_FHIR_FILE_REFERENCED_BUT_NOT_FOUND
    default_severity = ValidationSeverity.ERROR
    default_message = "FHIR file '{reference}' is referenced by the plugin but was not found"


class PluginDefinitionBpmnFileReferencedFoundOutsideExpectedRootValidationItem(OutsideExpectedRootFinding, PluginValidationItem):
    finding_type = ValidationType.PLUGIN_DEFINITION_BPMN_FILE_OUTSIDE_EXPECTED_ROOT
    default_severity = ValidationSeverity.ERROR
    default_message = (
        "BPMN file '{reference}' referenced by plugin but found outside expected resource root "
        "(expected root: {expected_root}, actual location: {actual_location})"
    )


class PluginDefinitionFhirFileReferencedFoundOutsideExpectedRootValidationItem(OutsideExpectedRootFinding, PluginValidationItem):
    finding_type = ValidationType.PLUGIN_DEFINITION_FHIR_FILE_OUTSIDE_EXPECTED_ROOT
    default_severity = ValidationSeverity.ERROR
    default_message = (
        "FHIR file '{reference}' referenced by plugin but found outside expected resource root "
        "(expected root: {expected_root}, actual location: {actual_location})"
    )


class PluginDefinitionProcessPluginResourceNotLoadedValidationItem(PluginValidationItem):
    """Blank custom messages fall back to the default text."""

    finding_type = ValidationType.PLUGIN_DEFINITION_RESOURCE_NOT_LOADED
    default_severity = ValidationSeverity.WARN
    default_message = "Resource exists but is not referenced by ProcessPluginDefinition (not loaded)"

    def __init__(self, file: FileHandle, location: str | None, message: str | None = None) -> None:
        super().__init__(file, location, message if message and message.strip() else None)
