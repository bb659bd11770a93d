"""Canonical single-line rendering of diagnostic items.

Format::

    [SEVERITY] VariantName (key=value, ...) : message[, key=value ...]

The parenthesized context depends on the location kind; trailing pairs are
the details a variant lists in ``rendered_details``. Most variants list none
and keep their parameters for JSON only. Log scrapers parse this line, so the
layout must stay stable.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from dsf_linter.model.location import BpmnLocation, FhirLocation, PluginLocation

if TYPE_CHECKING:
    from dsf_linter.model.item import DiagnosticItem

ContextFields = Callable[[object], list[tuple[str, object]]]

_CONTEXT: dict[type, ContextFields] = {
    BpmnLocation: lambda loc: [
        ("elementId", loc.element_id),
        ("processId", loc.process_id),
        ("file", loc.bpmn_file),
    ],
    FhirLocation: lambda loc: [
        ("fhirReference", loc.fhir_reference),
        ("file", loc.resource_file),
    ],
    PluginLocation: lambda loc: [
        ("file", loc.file_name),
        ("location", loc.location),
    ],
}


def context_fields(location: object) -> list[tuple[str, object]]:
    """Return the ordered ``(key, value)`` context pairs for *location*."""
    return _CONTEXT[type(location)](location)


def _text(value: object) -> str:
    return "null" if value is None else str(value)


def render(item: DiagnosticItem) -> str:
    """Render *item* in the canonical report format."""
    context = ", ".join(f"{key}={_text(value)}" for key, value in context_fields(item.location))
    line = f"[{item.severity.value}] {type(item).__name__} ({context}) : {item.message}"
    for key, value in item.details:
        if key in item.rendered_details:
            line += f", {key}={_text(value)}"
    return line
