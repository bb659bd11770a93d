"""Tests for the dsf-linter command line interface."""

from click.testing import CliRunner

from dsf_linter import __version__
from dsf_linter.cli.main import cli
from dsf_linter.items.lint.bpmn import BpmnEventNameEmptyLintItem
from dsf_linter.items.validation.fhir import (
    FhirTaskMissingRequesterValidationItem,
    FhirValueSetVersionNoPlaceholderValidationItem,
)
from dsf_linter.model.mode import AnalysisMode
from dsf_linter.report.json_report import load_json_report, write_json_report
from dsf_linter.report.output import DiagnosticOutput


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _validation_report(tmp_path, *items):
    return str(write_json_report(DiagnosticOutput(AnalysisMode.VALIDATION, items), tmp_path / "v.json"))


def _lint_report(tmp_path):
    output = DiagnosticOutput(AnalysisMode.LINT, [BpmnEventNameEmptyLintItem("StartEvent_1", None, "proc_1")])
    return str(write_json_report(output, tmp_path / "l.json"))


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------


class TestGroup:
    def test_version(self):
        result = CliRunner().invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_help_lists_commands(self):
        result = CliRunner().invoke(cli, ["--help"])
        assert result.exit_code == 0
        for name in ("taxonomy", "report", "render"):
            assert name in result.output


class TestTaxonomy:
    def test_lint_types(self):
        result = CliRunner().invoke(cli, ["taxonomy"])
        assert result.exit_code == 0
        assert "BPMN_EVENT_NAME_EMPTY: " in result.output

    def test_validation_variants(self):
        result = CliRunner().invoke(cli, ["taxonomy", "--mode", "validation", "--variants"])
        assert result.exit_code == 0
        assert "FhirTaskMissingRequesterValidationItem [ERROR] FHIR_TASK_MISSING_REQUESTER" in result.output
        assert "LintItem" not in result.output


class TestReport:
    def test_validation_error_fails_gate(self, tmp_path):
        path = _validation_report(tmp_path, FhirTaskMissingRequesterValidationItem("t.xml", "Task/1"))
        result = CliRunner().invoke(cli, ["report", path, "--no-color"])
        assert result.exit_code == 1
        assert "Found 1 FHIR issue(s): (1 errors, 0 warnings, 0 infos)" in result.output

    def test_no_fail(self, tmp_path):
        path = _validation_report(tmp_path, FhirTaskMissingRequesterValidationItem("t.xml", "Task/1"))
        result = CliRunner().invoke(cli, ["report", path, "--no-fail", "--no-color"])
        assert result.exit_code == 0

    def test_lint_passes_without_threshold(self, tmp_path):
        result = CliRunner().invoke(cli, ["report", _lint_report(tmp_path), "--no-color"])
        assert result.exit_code == 0
        assert "file=unknown.bpmn" in result.output

    def test_fail_on_warn(self, tmp_path):
        path = _validation_report(tmp_path, FhirValueSetVersionNoPlaceholderValidationItem("v.xml", "ValueSet/v"))
        assert CliRunner().invoke(cli, ["report", path, "--no-color"]).exit_code == 0
        assert CliRunner().invoke(cli, ["report", path, "--fail-on", "warn", "--no-color"]).exit_code == 1

    def test_fail_on_from_environment(self, tmp_path):
        path = _validation_report(tmp_path, FhirValueSetVersionNoPlaceholderValidationItem("v.xml", "ValueSet/v"))
        result = CliRunner().invoke(cli, ["report", path, "--no-color"], env={"DSF_LINTER_FAIL_ON": "WARN"})
        assert result.exit_code == 1

    def test_min_severity_hides_warnings(self, tmp_path):
        path = _validation_report(tmp_path, FhirValueSetVersionNoPlaceholderValidationItem("v.xml", "ValueSet/v"))
        result = CliRunner().invoke(cli, ["report", path, "--min-severity", "ERROR", "--no-color"])
        assert "No FHIR issues found." in result.output

    def test_unreadable_report_exits_2(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{", encoding="utf-8")
        result = CliRunner().invoke(cli, ["report", str(path)])
        assert result.exit_code == 2
        assert "invalid JSON" in result.output


    def test_exports_filtered_report(self, tmp_path):
        path = _validation_report(
            tmp_path,
            FhirTaskMissingRequesterValidationItem("t.xml", "Task/1"),
            FhirValueSetVersionNoPlaceholderValidationItem("v.xml", "ValueSet/v"),
        )
        out_dir = tmp_path / "out"
        result = CliRunner().invoke(
            cli,
            ["report", path, "--min-severity", "ERROR", "--no-fail", "--no-color",
             "--report-dir", str(out_dir), "--report-name", "errors.json"],
        )
        assert result.exit_code == 0
        assert f"Report written to {out_dir / 'errors.json'}" in result.output
        exported = load_json_report(out_dir / "errors.json")
        assert [item.variant for item in exported] == ["FhirTaskMissingRequesterValidationItem"]

    def test_report_dir_from_environment(self, tmp_path):
        path = _lint_report(tmp_path)
        out_dir = tmp_path / "env-out"
        result = CliRunner().invoke(cli, ["report", path, "--no-color"], env={"DSF_LINTER_REPORT_DIR": str(out_dir)})
        assert result.exit_code == 0
        assert (out_dir / "dsf-linter-report.json").exists()

    def test_no_export_by_default(self, tmp_path):
        result = CliRunner().invoke(cli, ["report", _lint_report(tmp_path), "--no-color"])
        assert "Report written" not in result.output


class TestRender:
    def test_render_lines(self, tmp_path):
        result = CliRunner().invoke(cli, ["render", _lint_report(tmp_path)])
        assert result.exit_code == 0
        assert result.output.strip() == (
            "[WARN] BpmnEventNameEmptyLintItem "
            "(elementId=StartEvent_1, processId=proc_1, file=unknown.bpmn) : Event name is empty"
        )
