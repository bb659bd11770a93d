"""Tests for DiagnosticOutput ordering, views and exit policy."""

import pytest

from dsf_linter.errors import ModeMismatchError
from dsf_linter.items.lint.bpmn import (
    BpmnElementLintItemSuccess,
    BpmnEventNameEmptyLintItem,
    BpmnProcessIdEmptyLintItem,
)
from dsf_linter.items.lint.fhir import FhirTaskMissingRequesterLintItem
from dsf_linter.items.lint.plugin import PluginDefinitionMissingLintItem
from dsf_linter.items.validation.bpmn import BpmnElementValidationItemSuccess
from dsf_linter.items.validation.fhir import (
    FhirTaskMissingIdValidationItem,
    FhirTaskMissingRequesterValidationItem,
    FhirValueSetVersionNoPlaceholderValidationItem,
)
from dsf_linter.model.mode import AnalysisMode
from dsf_linter.report.output import DiagnosticOutput


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _lint_output() -> DiagnosticOutput:
    return DiagnosticOutput(
        AnalysisMode.LINT,
        [
            BpmnElementLintItemSuccess("P", "p.bpmn", "proc_a"),
            BpmnEventNameEmptyLintItem("E", "p.bpmn", "proc_a"),
            FhirTaskMissingRequesterLintItem("t.xml", "Task/1"),
            PluginDefinitionMissingLintItem(None, "plugin"),
            BpmnProcessIdEmptyLintItem("P", "p.bpmn", None),
        ],
    )


def _validation_output(*items) -> DiagnosticOutput:
    return DiagnosticOutput(AnalysisMode.VALIDATION, items)


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------


class TestOrdering:
    def test_sorted_by_severity_then_render(self):
        output = _lint_output()
        ranks = [item.severity.rank for item in output]
        assert ranks == sorted(ranks)
        errors = [item.render() for item in output if item.severity.value == "ERROR"]
        assert errors == sorted(errors)
        assert output.items[-1].severity.value == "SUCCESS"

    def test_insertion_order_irrelevant(self):
        output = _lint_output()
        reversed_output = DiagnosticOutput(AnalysisMode.LINT, reversed(output.items))
        assert reversed_output.items == output.items


class TestCounts:
    def test_counts(self):
        output = _lint_output()
        assert output.error_count == 3
        assert output.warning_count == 1
        assert output.info_count == 0
        assert output.success_count == 1
        assert output.total == len(output) == 5
        assert output.has_errors

    def test_empty(self):
        output = DiagnosticOutput.empty(AnalysisMode.VALIDATION)
        assert output.total == 0
        assert not output.has_errors
        assert output.process_id() == "unknown_process"


class TestViews:
    def test_issues_excludes_success(self):
        assert all(item.severity.value != "SUCCESS" for item in _lint_output().issues())
        assert len(_lint_output().issues()) == 4

    def test_filter(self):
        assert len(_lint_output().filter("WARN")) == 4
        assert len(_lint_output().filter("ERROR")) == 3

    def test_by_domain(self):
        grouped = _lint_output().by_domain()
        assert list(grouped) == ["BPMN", "FHIR", "Plugin"]
        assert len(grouped["BPMN"]) == 3
        assert len(grouped["FHIR"]) == 1
        assert len(grouped["Plugin"]) == 1

    def test_by_severity(self):
        grouped = _lint_output().by_severity()
        assert list(grouped) == ["ERROR", "WARN", "INFO", "SUCCESS"]
        assert len(grouped["ERROR"]) == 3

    def test_process_id_skips_missing(self):
        assert _lint_output().process_id() == "proc_a"

    def test_merge(self):
        first = _validation_output(FhirTaskMissingIdValidationItem("t.xml", "Task/1"))
        second = _validation_output(FhirTaskMissingRequesterValidationItem("t.xml", "Task/1"))
        merged = first.merge(second)
        assert merged.total == 2
        assert merged.items[0].severity.value == "ERROR"

    def test_merge_rejects_other_mode(self):
        with pytest.raises(ModeMismatchError):
            _lint_output().merge(DiagnosticOutput.empty(AnalysisMode.VALIDATION))

    def test_construction_rejects_other_mode(self):
        with pytest.raises(ModeMismatchError):
            DiagnosticOutput(AnalysisMode.VALIDATION, [BpmnEventNameEmptyLintItem("E", "p.bpmn", "proc")])


class TestShouldFail:
    def test_lint_never_fails_by_default(self):
        assert _lint_output().has_errors
        assert not _lint_output().should_fail()

    def test_validation_fails_on_error(self):
        assert _validation_output(FhirTaskMissingRequesterValidationItem("t.xml", "Task/1")).should_fail()

    def test_validation_passes_on_warnings(self):
        output = _validation_output(
            FhirValueSetVersionNoPlaceholderValidationItem("v.xml", "ValueSet/v"),
            BpmnElementValidationItemSuccess("P", "p.bpmn", "proc"),
        )
        assert not output.should_fail()

    def test_explicit_threshold(self):
        output = _validation_output(FhirValueSetVersionNoPlaceholderValidationItem("v.xml", "ValueSet/v"))
        assert output.should_fail("WARN")
        assert not output.should_fail("ERROR")
        assert _lint_output().should_fail("ERROR")

    def test_success_never_fails(self):
        output = _validation_output(BpmnElementValidationItemSuccess("P", "p.bpmn", "proc"))
        assert not output.should_fail("SUCCESS")
