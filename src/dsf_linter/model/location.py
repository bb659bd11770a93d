"""Location descriptors pointing a finding at the offending artifact."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import PureWindowsPath
from typing import Any

UNKNOWN_BPMN_FILE = "unknown.bpmn"
UNKNOWN_FHIR_FILE = "unknown.xml"
UNKNOWN_PLUGIN_FILE = "unknown"
UNKNOWN_RESOURCE_ID = "unknown_resource"
UNKNOWN_PROCESS_ID = "unknown_process"

FileHandle = str | os.PathLike[str] | None

_BUILD_ROOTS = ("target/classes", "build/resources/main", "build/classes/java/main")
_TEMP_PREFIX = "dsf-validator-"


def resolve_file_name(handle: FileHandle, sentinel: str) -> str:
    """Return the short file name of *handle*, or *sentinel* when there is none.

    Both ``/`` and ``\\`` are treated as separators so reports never carry a
    full path, whichever platform produced it.
    """
    if handle is None:
        return sentinel
    name = PureWindowsPath(os.fspath(handle)).name
    return name or sentinel


def plugin_file_label(path: str | None) -> str:
    """Shorten a plugin artifact path to its build-root relative form."""
    if not path:
        return UNKNOWN_PLUGIN_FILE
    normalized = path.replace("\\", "/").replace(_TEMP_PREFIX, "")
    for root in _BUILD_ROOTS:
        index = normalized.find(root)
        if index != -1:
            return normalized[index:]
    return resolve_file_name(path, UNKNOWN_PLUGIN_FILE)


def derive_resource_id(reference: str | None) -> str:
    """Extract the resource id from a canonical URL or local reference.

    ``http://dsf.dev/fhir/Task/foo|1.0`` yields ``foo`` and
    ``Questionnaire#item-1`` yields ``item-1``.
    """
    if reference is None or not reference.strip():
        return UNKNOWN_RESOURCE_ID
    value = reference.split("|", 1)[0]
    value = value.rstrip("/").rsplit("/", 1)[-1]
    value = value.rsplit("#", 1)[-1]
    return value if value.strip() else UNKNOWN_RESOURCE_ID


# ---------------------------------------------------------------------------
# Descriptors
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class BpmnLocation:
    """A BPMN element inside a process model file."""

    bpmn_file: str
    element_id: str | None
    process_id: str | None

    def to_dict(self) -> dict[str, Any]:
        return {
            "bpmnFile": self.bpmn_file,
            "elementId": self.element_id,
            "processId": self.process_id,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> BpmnLocation:
        return cls(
            bpmn_file=data.get("bpmnFile") or UNKNOWN_BPMN_FILE,
            element_id=data.get("elementId"),
            process_id=data.get("processId"),
        )


@dataclass(frozen=True)
class FhirLocation:
    """A FHIR resource file plus the reference under inspection."""

    resource_file: str
    fhir_reference: str | None

    @property
    def resource_id(self) -> str:
        return derive_resource_id(self.fhir_reference)

    def to_dict(self) -> dict[str, Any]:
        return {
            "resourceFile": self.resource_file,
            "fhirReference": self.fhir_reference,
            "resourceId": self.resource_id,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> FhirLocation:
        return cls(
            resource_file=data.get("resourceFile") or UNKNOWN_FHIR_FILE,
            fhir_reference=data.get("fhirReference"),
        )


@dataclass(frozen=True)
class PluginLocation:
    """A plugin packaging artifact and a free-form logical location."""

    file: str | None
    location: str | None

    @property
    def file_name(self) -> str:
        return plugin_file_label(self.file)

    def to_dict(self) -> dict[str, Any]:
        return {"file": self.file, "location": self.location}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PluginLocation:
        return cls(file=data.get("file"), location=data.get("location"))


Location = BpmnLocation | FhirLocation | PluginLocation
