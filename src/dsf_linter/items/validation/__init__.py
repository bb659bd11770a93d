"""Build-gating validation variants."""

from dsf_linter.items.validation import bpmn, fhir, plugin

__all__ = ["bpmn", "fhir", "plugin"]
