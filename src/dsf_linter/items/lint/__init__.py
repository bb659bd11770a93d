"""Advisory lint variants."""

from dsf_linter.items.lint import bpmn, fhir, plugin

__all__ = ["bpmn", "fhir", "plugin"]
