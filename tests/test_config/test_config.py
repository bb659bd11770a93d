"""Tests for LinterConfig."""

from pathlib import Path

import pytest

from dsf_linter.config import LinterConfig
from dsf_linter.model.mode import AnalysisMode
from dsf_linter.model.severity import LintSeverity, ValidationSeverity


class TestLinterConfig:
    def test_defaults(self):
        config = LinterConfig()
        assert config.mode is AnalysisMode.LINT
        assert config.fail_threshold() is None
        assert config.gate
        assert config.report_path() is None

    def test_report_path(self):
        config = LinterConfig(report_dir="out", json_report_name="lint.json")
        assert config.report_path() == Path("out") / "lint.json"
        assert LinterConfig(report_dir="out").report_path() == Path("out") / "dsf-linter-report.json"

    def test_threshold_uses_mode_family(self):
        assert LinterConfig(fail_on="WARN").fail_threshold() is LintSeverity.WARN
        config = LinterConfig(mode=AnalysisMode.VALIDATION, fail_on="info")
        assert config.fail_threshold() is ValidationSeverity.INFO

    def test_unknown_threshold(self):
        with pytest.raises(ValueError):
            LinterConfig(fail_on="FATAL").fail_threshold()

    def test_frozen(self):
        with pytest.raises(AttributeError):
            LinterConfig().color = False
