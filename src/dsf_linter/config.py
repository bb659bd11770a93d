"""Run configuration, filled from CLI options and DSF_LINTER_* variables."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from dsf_linter.model.mode import AnalysisMode
from dsf_linter.model.severity import Severity


@dataclass(frozen=True)
class LinterConfig:
    mode: AnalysisMode = AnalysisMode.LINT
    fail_on: str | None = None  # e.g., "WARN"; None keeps the mode's default gate
    min_severity: str = "INFO"
    show_success: bool = False
    color: bool = True
    gate: bool = True
    report_dir: str | None = None  # None disables the JSON export
    json_report_name: str = "dsf-linter-report.json"

    def fail_threshold(self) -> Severity | None:
        """The configured gate threshold in this mode's severity family."""
        if self.fail_on is None:
            return None
        return self.mode.coerce_severity(self.fail_on)

    def report_path(self) -> Path | None:
        if self.report_dir is None:
            return None
        return Path(self.report_dir) / self.json_report_name
