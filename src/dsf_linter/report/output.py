"""Immutable, sorted result of one lint or validation run."""

from __future__ import annotations

from typing import Iterable

from dsf_linter.errors import ModeMismatchError
from dsf_linter.model.item import BpmnFinding, DiagnosticItem, FhirFinding, PluginFinding
from dsf_linter.model.location import UNKNOWN_PROCESS_ID
from dsf_linter.model.mode import AnalysisMode
from dsf_linter.model.severity import Severity

DOMAINS: tuple[tuple[str, type[DiagnosticItem]], ...] = (
    ("BPMN", BpmnFinding),
    ("FHIR", FhirFinding),
    ("Plugin", PluginFinding),
)


def _sort_key(item: DiagnosticItem) -> tuple[int, str]:
    return item.severity.rank, item.render()


class DiagnosticOutput:
    """Findings of one run, most severe first."""

    def __init__(self, mode: AnalysisMode, items: Iterable[DiagnosticItem] = ()) -> None:
        collected = list(items)
        for item in collected:
            if item.mode is not mode:
                raise ModeMismatchError(mode.value, item.variant)
        self.mode = mode
        self.items: tuple[DiagnosticItem, ...] = tuple(sorted(collected, key=_sort_key))

    @classmethod
    def empty(cls, mode: AnalysisMode) -> DiagnosticOutput:
        return cls(mode)

    def merge(self, other: DiagnosticOutput) -> DiagnosticOutput:
        """Combine two outputs of the same mode into a new one."""
        if other.mode is not self.mode:
            raise ModeMismatchError(self.mode.value, f"{other.mode.value} output")
        return DiagnosticOutput(self.mode, self.items + other.items)

    # --- counts ---------------------------------------------------------------

    def _count(self, name: str) -> int:
        return sum(1 for item in self.items if item.severity.value == name)

    @property
    def error_count(self) -> int:
        return self._count("ERROR")

    @property
    def warning_count(self) -> int:
        return self._count("WARN")

    @property
    def info_count(self) -> int:
        return self._count("INFO")

    @property
    def success_count(self) -> int:
        return self._count("SUCCESS")

    @property
    def total(self) -> int:
        return len(self.items)

    @property
    def has_errors(self) -> bool:
        return self.error_count > 0

    # --- views ----------------------------------------------------------------

    def issues(self) -> list[DiagnosticItem]:
        """Every item except SUCCESS markers."""
        return [item for item in self.items if item.severity.value != "SUCCESS"]

    def filter(self, min_severity: Severity | str) -> list[DiagnosticItem]:
        """Items at *min_severity* or worse."""
        return [item for item in self.items if item.severity.is_at_least(min_severity)]

    def by_domain(self) -> dict[str, list[DiagnosticItem]]:
        """Items grouped as BPMN, FHIR and Plugin, in that order."""
        return {
            label: [item for item in self.items if isinstance(item, base)]
            for label, base in DOMAINS
        }

    def by_severity(self) -> dict[str, list[DiagnosticItem]]:
        grouped: dict[str, list[DiagnosticItem]] = {member.value: [] for member in self.mode.severities}
        for item in self.items:
            grouped[item.severity.value].append(item)
        return grouped

    def process_id(self) -> str:
        """Process id of the first BPMN finding that has one."""
        for item in self.items:
            if isinstance(item, BpmnFinding) and item.process_id:
                return item.process_id
        return UNKNOWN_PROCESS_ID

    # --- gate -----------------------------------------------------------------

    def should_fail(self, fail_on: Severity | str | None = None) -> bool:
        """Exit-code policy for this output.

        Without a threshold, validation fails on any ERROR and lint never
        fails. With one, any item at or above it fails the run.
        """
        if fail_on is None:
            return self.mode is AnalysisMode.VALIDATION and self.has_errors
        return any(item.severity.is_at_least(fail_on) for item in self.issues())

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def __repr__(self) -> str:
        return (
            f"DiagnosticOutput(mode={self.mode.value!r}, errors={self.error_count}, "
            f"warnings={self.warning_count}, infos={self.info_count}, total={self.total})"
        )
