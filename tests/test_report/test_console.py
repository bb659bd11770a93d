"""Tests for the console printer."""

import click

from dsf_linter.items.lint.bpmn import BpmnElementLintItemSuccess, BpmnEventNameEmptyLintItem
from dsf_linter.items.lint.fhir import FhirTaskMissingRequesterLintItem
from dsf_linter.model.mode import AnalysisMode
from dsf_linter.report.console import ConsolePrinter
from dsf_linter.report.output import DiagnosticOutput


def _capture(printer_kwargs, output):
    lines: list[str] = []
    ConsolePrinter(out=lines.append, **printer_kwargs).print(output)
    return lines


def _output():
    return DiagnosticOutput(
        AnalysisMode.LINT,
        [
            BpmnEventNameEmptyLintItem("E", "p.bpmn", "proc"),
            BpmnElementLintItemSuccess("P", "p.bpmn", "proc"),
            FhirTaskMissingRequesterLintItem("t.xml", "Task/1"),
        ],
    )


class TestConsolePrinter:
    def test_sections_in_domain_order(self):
        lines = _capture({"color": False}, _output())
        assert lines[0] == "Found 1 BPMN issue(s): (0 errors, 1 warnings, 0 infos)"
        assert lines[1].startswith("[WARN] BpmnEventNameEmptyLintItem")
        assert lines[2] == "Found 1 FHIR issue(s): (1 errors, 0 warnings, 0 infos)"
        assert lines[4] == "No Plugin issues found."
        assert lines[-1] == "Summary: 1 error(s), 1 warning(s), 0 info(s), 1 success(es)"

    def test_success_hidden_by_default(self):
        lines = _capture({"color": False}, _output())
        assert not any("LintItemSuccess" in line for line in lines)

    def test_show_success(self):
        lines = _capture({"color": False, "show_success": True}, _output())
        assert any(line.startswith("[SUCCESS] BpmnElementLintItemSuccess") for line in lines)

    def test_empty_output(self):
        lines = _capture({"color": False}, DiagnosticOutput.empty(AnalysisMode.VALIDATION))
        assert lines[:3] == ["No BPMN issues found.", "No FHIR issues found.", "No Plugin issues found."]

    def test_color(self):
        lines = _capture({"color": True}, _output())
        expected = click.style(BpmnEventNameEmptyLintItem("E", "p.bpmn", "proc").render(), fg="yellow")
        assert expected in lines
        assert click.unstyle(lines[1]).startswith("[WARN]")
