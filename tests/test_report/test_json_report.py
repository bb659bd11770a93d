"""Tests for JSON report persistence."""

import json
from datetime import datetime

import pytest

from dsf_linter.errors import ReportError
from dsf_linter.items.lint.bpmn import BpmnExecutionListenerClassNotFoundLintItem
from dsf_linter.items.lint.fhir import FhirTaskInputInstanceCountBelowMinLintItem
from dsf_linter.items.validation.plugin import PluginDefinitionFhirFileReferencedButNotFoundValidationItem
from dsf_linter.model.mode import AnalysisMode
from dsf_linter.report.json_report import load_json_report, report_document, write_json_report
from dsf_linter.report.output import DiagnosticOutput


def _output() -> DiagnosticOutput:
    return DiagnosticOutput(
        AnalysisMode.LINT,
        [
            BpmnExecutionListenerClassNotFoundLintItem("Task_5", "p.bpmn", "proc_2", "com.example.Missing"),
            FhirTaskInputInstanceCountBelowMinLintItem("t.xml", "Task/123", 1, 2),
        ],
    )


class TestReportDocument:
    def test_shape(self):
        doc = report_document(_output(), plugin_name="hello", now=datetime(2024, 5, 1, 9, 30, 0))
        assert doc["timestamp"] == "2024-05-01 09:30:00"
        assert doc["mode"] == "lint"
        assert doc["pluginName"] == "hello"
        assert doc["summary"] == {
            "errorCount": 2,
            "warningCount": 0,
            "infoCount": 0,
            "successCount": 0,
            "totalItems": 2,
        }
        assert [entry["variant"] for entry in doc["items"]] == [item.variant for item in _output()]


class TestWriteAndLoad:
    def test_round_trip(self, tmp_path):
        path = write_json_report(_output(), tmp_path / "report" / "lint.json")
        assert path.exists()
        loaded = load_json_report(path)
        assert loaded.mode is AnalysisMode.LINT
        assert loaded.items == _output().items

    def test_written_json_is_indented(self, tmp_path):
        path = write_json_report(_output(), tmp_path / "r.json")
        text = path.read_text(encoding="utf-8")
        assert text.startswith("{\n  ")
        assert json.loads(text)["summary"]["totalItems"] == 2

    def test_validation_round_trip(self, tmp_path):
        output = DiagnosticOutput(
            AnalysisMode.VALIDATION,
            [PluginDefinitionFhirFileReferencedButNotFoundValidationItem("/w/Plugin.java", "hello", "fhir/Task/t.xml")],
        )
        loaded = load_json_report(write_json_report(output, tmp_path / "v.json"))
        assert loaded.items[0].reference == "fhir/Task/t.xml"


    def test_unwritable_target(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        with pytest.raises(ReportError, match="cannot write report"):
            write_json_report(_output(), blocker / "r.json")


class TestLoadErrors:
    def test_missing_file(self, tmp_path):
        with pytest.raises(ReportError, match="cannot read report"):
            load_json_report(tmp_path / "absent.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ReportError, match="invalid JSON") as excinfo:
            load_json_report(path)
        assert excinfo.value.path == str(path)

    def test_not_an_object(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text("[]", encoding="utf-8")
        with pytest.raises(ReportError, match="must be a JSON object"):
            load_json_report(path)

    def test_unknown_mode(self, tmp_path):
        path = tmp_path / "mode.json"
        path.write_text(json.dumps({"mode": "audit", "items": []}), encoding="utf-8")
        with pytest.raises(ReportError, match="unknown mode"):
            load_json_report(path)

    def test_items_not_a_list(self, tmp_path):
        path = tmp_path / "items.json"
        path.write_text(json.dumps({"mode": "lint", "items": {}}), encoding="utf-8")
        with pytest.raises(ReportError, match="must be a list"):
            load_json_report(path)

    def test_item_from_other_mode(self, tmp_path):
        doc = report_document(_output())
        doc["mode"] = "validation"
        path = tmp_path / "mixed.json"
        path.write_text(json.dumps(doc), encoding="utf-8")
        with pytest.raises(ReportError):
            load_json_report(path)
