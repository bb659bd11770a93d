"""Diagnostic items: one immutable record per finding.

Every finding is a :class:`DiagnosticItem`. Its concrete class names the rule
that fired and fixes the item's analysis mode, finding type and default
severity; the instance carries the location and the message.

The hierarchy is shallow on purpose::

    DiagnosticItem
      BpmnFinding    -> BpmnLintItem, BpmnValidationItem
      FhirFinding    -> FhirLintItem, FhirValidationItem
      PluginFinding  -> PluginLintItem, PluginValidationItem

Concrete variants live in :mod:`dsf_linter.items` and only declare class
attributes, plus a constructor when the rule takes extra parameters.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, ClassVar, Mapping

from dsf_linter.errors import ReportError
from dsf_linter.model.finding_type import FindingType
from dsf_linter.model.location import (
    UNKNOWN_BPMN_FILE,
    UNKNOWN_FHIR_FILE,
    BpmnLocation,
    FhirLocation,
    FileHandle,
    Location,
    PluginLocation,
    resolve_file_name,
)
from dsf_linter.model.mode import AnalysisMode
from dsf_linter.model.render import render
from dsf_linter.model.severity import ProcessingLevel, Severity

_VARIANTS: dict[str, type[DiagnosticItem]] = {}


def _detail_pairs(details: Mapping[str, Any]) -> tuple[tuple[str, str | None], ...]:
    return tuple((str(key), None if value is None else str(value)) for key, value in details.items())


@dataclass(frozen=True)
class DiagnosticItem:
    """A single finding produced by a lint or validation rule."""

    severity: Severity
    message: str
    location: Location
    details: tuple[tuple[str, str | None], ...] = ()

    mode: ClassVar[AnalysisMode]
    finding_type: ClassVar[FindingType]
    default_severity: ClassVar[Severity]
    default_message: ClassVar[str] = ""
    rendered_details: ClassVar[tuple[str, ...]] = ()
    processing_level: ClassVar[ProcessingLevel] = ProcessingLevel.FILE
    location_type: ClassVar[type]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if "finding_type" not in vars(cls):
            return
        if not isinstance(cls.finding_type, cls.mode.finding_types):
            raise TypeError(f"{cls.__name__}: {cls.finding_type!r} is not a {cls.mode.value} finding type")
        if not cls.mode.owns(cls.default_severity):
            raise TypeError(f"{cls.__name__}: {cls.default_severity!r} is not a {cls.mode.value} severity")
        if cls.__name__ in _VARIANTS:
            raise TypeError(f"Duplicate diagnostic variant: {cls.__name__}")
        _VARIANTS[cls.__name__] = cls

    # --- accessors ------------------------------------------------------------

    @property
    def type(self) -> FindingType:
        return self.finding_type

    @property
    def description(self) -> str:
        return self.message

    @property
    def variant(self) -> str:
        return type(self).__name__

    def detail(self, key: str) -> str | None:
        """Return the detail stored under *key*, or ``None``."""
        for name, value in self.details:
            if name == key:
                return value
        return None

    def render(self) -> str:
        return render(self)

    def __str__(self) -> str:
        return render(self)

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready representation; :func:`restore` reverses it."""
        data: dict[str, Any] = {
            "variant": self.variant,
            "mode": self.mode.value,
            "severity": self.severity.value,
            "type": self.finding_type.value,
            "processingLevel": self.processing_level.value,
            "description": self.message,
        }
        data.update(self.location.to_dict())
        data["details"] = dict(self.details)
        return data

    # --- construction helpers -------------------------------------------------

    @classmethod
    def compose_message(cls, message: str | None, **values: Any) -> str:
        """Return *message*, or the default message filled in with *values*."""
        if message is not None:
            return message
        if values:
            return cls.default_message.format(**values)
        return cls.default_message

    def _assign(
        self,
        location: Location,
        message: str | None,
        severity: Severity | str | None,
        details: Mapping[str, Any] | None,
    ) -> None:
        chosen = self.default_severity if severity is None else severity
        DiagnosticItem.__init__(
            self,
            severity=self.mode.coerce_severity(chosen),
            message=self.compose_message(message),
            location=location,
            details=_detail_pairs(details or {}),
        )


# ---------------------------------------------------------------------------
# Domains
# ---------------------------------------------------------------------------


class BpmnFinding(DiagnosticItem):
    """Finding about an element of a BPMN process model."""

    location_type = BpmnLocation

    def __init__(
        self,
        element_id: str | None,
        bpmn_file: FileHandle,
        process_id: str | None,
        message: str | None = None,
        *,
        severity: Severity | str | None = None,
        details: Mapping[str, Any] | None = None,
    ) -> None:
        location = BpmnLocation(
            bpmn_file=resolve_file_name(bpmn_file, UNKNOWN_BPMN_FILE),
            element_id=element_id,
            process_id=process_id,
        )
        self._assign(location, message, severity, details)

    @property
    def element_id(self) -> str | None:
        return self.location.element_id

    @property
    def process_id(self) -> str | None:
        return self.location.process_id

    @property
    def bpmn_file(self) -> str:
        return self.location.bpmn_file


class FhirFinding(DiagnosticItem):
    """Finding about a FHIR resource file."""

    location_type = FhirLocation

    def __init__(
        self,
        resource_file: FileHandle,
        fhir_reference: str | None,
        message: str | None = None,
        *,
        severity: Severity | str | None = None,
        details: Mapping[str, Any] | None = None,
    ) -> None:
        location = FhirLocation(
            resource_file=resolve_file_name(resource_file, UNKNOWN_FHIR_FILE),
            fhir_reference=fhir_reference,
        )
        self._assign(location, message, severity, details)

    @property
    def resource_file(self) -> str:
        return self.location.resource_file

    @property
    def fhir_reference(self) -> str | None:
        return self.location.fhir_reference

    @property
    def resource_id(self) -> str:
        return self.location.resource_id


class PluginFinding(DiagnosticItem):
    """Finding about plugin packaging: definitions, resource roots, leftovers."""

    location_type = PluginLocation

    def __init__(
        self,
        file: FileHandle,
        location: str | None,
        message: str | None = None,
        *,
        severity: Severity | str | None = None,
        details: Mapping[str, Any] | None = None,
    ) -> None:
        path = None if file is None else os.fspath(file)
        self._assign(PluginLocation(file=path, location=location), message, severity, details)

    @property
    def file_name(self) -> str:
        return self.location.file_name


# ---------------------------------------------------------------------------
# Mode tags
# ---------------------------------------------------------------------------


class BpmnLintItem(BpmnFinding):
    mode = AnalysisMode.LINT


class BpmnValidationItem(BpmnFinding):
    mode = AnalysisMode.VALIDATION


class FhirLintItem(FhirFinding):
    mode = AnalysisMode.LINT


class FhirValidationItem(FhirFinding):
    mode = AnalysisMode.VALIDATION


class PluginLintItem(PluginFinding):
    mode = AnalysisMode.LINT


class PluginValidationItem(PluginFinding):
    mode = AnalysisMode.VALIDATION


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------


def variant_registry() -> dict[str, type[DiagnosticItem]]:
    """Concrete variants defined so far, keyed by class name.

    Import :mod:`dsf_linter.items` first to see the full catalogue.
    """
    return dict(_VARIANTS)


def restore(data: Mapping[str, Any]) -> DiagnosticItem:
    """Rebuild an item from :meth:`DiagnosticItem.to_dict` output."""
    name = data.get("variant")
    cls = _VARIANTS.get(name) if isinstance(name, str) else None
    if cls is None:
        raise ReportError(f"unknown diagnostic variant {name!r}")
    if data.get("mode") != cls.mode.value:
        raise ReportError(f"{name} is a {cls.mode.value} item, got mode {data.get('mode')!r}")
    try:
        severity = cls.mode.coerce_severity(data["severity"])
    except (KeyError, ValueError) as exc:
        raise ReportError(f"{name}: invalid severity ({exc})") from exc
    details = data.get("details") or {}
    if not isinstance(details, Mapping):
        raise ReportError(f"{name}: details must be an object")

    item = cls.__new__(cls)
    DiagnosticItem.__init__(
        item,
        severity=severity,
        message=str(data.get("description", "")),
        location=cls.location_type.from_dict(data),
        details=_detail_pairs(details),
    )
    return item
