"""Lint findings about plugin packaging."""

from __future__ import annotations

from dsf_linter.items.common import MissingReferenceFinding, OutsideExpectedRootFinding
from dsf_linter.model.finding_type import LintType
from dsf_linter.model.item import PluginLintItem
from dsf_linter.model.severity import LintSeverity


class PluginDefinitionLintItemSuccess(PluginLintItem):
    finding_type = LintType.SUCCESS
    default_severity = LintSeverity.SUCCESS
    default_message = "Plugin definition check passed"


class PluginDefinitionMissingLintItem(PluginLintItem):
    finding_type = LintType.PLUGIN_DEFINITION_MISSING
    default_severity = LintSeverity.ERROR
    default_message = "No ProcessPluginDefinition implementation found"


class PluginDefinitionBpmnFileReferencedButNotFoundLintItem(MissingReferenceFinding, PluginLintItem):
    finding_type = LintType.PLUGIN_DEFINITION_BPMN_FILE_REFERENCED_BUT_NOT_FOUND
    default_severity = LintSeverity.ERROR
    default_message = "BPMN file '{reference}' is referenced by the plugin but was not found"


class PluginDefinitionFhirFileReferencedButNotFoundLintItem(MissingReferenceFinding, PluginLintItem):
    finding_type = LintType.PLUGIN_DEFINITION_FHIR_FILE_REFERENCED_BUT_NOT_FOUND
    default_severity = LintSeverity.ERROR
    default_message = "FHIR file '{reference}' is referenced by the plugin but was not found"


class PluginDefinitionBpmnFileReferencedFoundOutsideExpectedRootLintItem(OutsideExpectedRootFinding, PluginLintItem):
    """Usually a broken project layout or classpath pollution."""

    finding_type = LintType.PLUGIN_DEFINITION_BPMN_FILE_OUTSIDE_EXPECTED_ROOT
    default_severity = LintSeverity.ERROR
    default_message = (
        "BPMN file '{reference}' referenced by plugin but found outside expected resource root "
        "(expected root: {expected_root}, actual location: {actual_location})"
    )


class PluginDefinitionFhirFileReferencedFoundOutsideExpectedRootLintItem(OutsideExpectedRootFinding, PluginLintItem):
    finding_type = LintType.PLUGIN_DEFINITION_FHIR_FILE_OUTSIDE_EXPECTED_ROOT
    default_severity = LintSeverity.ERROR
    default_message = (
        "FHIR file '{reference}' referenced by plugin but found outside expected resource root "
        "(expected root: {expected_root}, actual location: {actual_location})"
    )


class PluginDefinitionProcessPluginResourceNotLoadedLintItem(PluginLintItem):
    """A resource file ships with the plugin but nothing references it."""

    finding_type = LintType.PLUGIN_DEFINITION_RESOURCE_NOT_LOADED
    default_severity = LintSeverity.WARN
    default_message = "Resource exists but is not referenced by ProcessPluginDefinition (not loaded)"
