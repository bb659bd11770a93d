"""Tests for diagnostic items: construction, rendering, persistence."""

from pathlib import Path

import pytest

import dsf_linter.items  # noqa: F401
from dsf_linter.errors import ReportError
from dsf_linter.items.lint.bpmn import (
    BpmnEventNameEmptyLintItem,
    BpmnExecutionListenerClassNotFoundLintItem,
    BpmnFloatingElementLintItem,
    BpmnPractitionerRoleHasNoValueOrNullLintItem,
    BpmnUserTaskListenerNotExtendingOrImplementingRequiredClassLintItem,
)
from dsf_linter.items.lint.fhir import (
    FhirNoExtensionProcessAuthorizationFoundLintItem,
    FhirTaskInputInstanceCountBelowMinLintItem,
    FhirTaskMissingRequesterLintItem,
)
from dsf_linter.items.lint.plugin import PluginDefinitionBpmnFileReferencedFoundOutsideExpectedRootLintItem
from dsf_linter.items.common import FloatingElementType
from dsf_linter.items.validation.bpmn import BpmnFloatingElementValidationItem
from dsf_linter.items.validation.fhir import (
    FhirTaskMissingRequesterValidationItem,
    FhirTaskRequesterIdNoPlaceholderValidationItem,
)
from dsf_linter.items.validation.plugin import PluginDefinitionProcessPluginResourceNotLoadedValidationItem
from dsf_linter.model.finding_type import LintType, ValidationType
from dsf_linter.model.item import BpmnLintItem, restore
from dsf_linter.model.mode import AnalysisMode
from dsf_linter.model.severity import LintSeverity, ValidationSeverity


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _task_file() -> Path:
    return Path("/home/dev/plugin/src/main/resources/fhir/Task/task-hello.xml")


# ---------------------------------------------------------------------------
# Reference scenarios
# ---------------------------------------------------------------------------


class TestEventNameEmpty:
    def test_defaults(self):
        item = BpmnEventNameEmptyLintItem("StartEvent_1", None, "proc_1")
        assert item.severity is LintSeverity.WARN
        assert item.message == "Event name is empty"
        assert item.type is LintType.BPMN_EVENT_NAME_EMPTY
        assert item.mode is AnalysisMode.LINT

    def test_render(self):
        line = BpmnEventNameEmptyLintItem("StartEvent_1", None, "proc_1").render()
        assert line == (
            "[WARN] BpmnEventNameEmptyLintItem "
            "(elementId=StartEvent_1, processId=proc_1, file=unknown.bpmn) : Event name is empty"
        )

    def test_explicit_message(self):
        item = BpmnEventNameEmptyLintItem("StartEvent_1", "p.bpmn", "proc_1", "custom text")
        assert item.message == "custom text"
        assert item.description == "custom text"


class TestTaskInputBelowMin:
    def test_message_and_severity(self):
        item = FhirTaskInputInstanceCountBelowMinLintItem(_task_file(), "Task/123", 1, 2)
        assert item.severity is LintSeverity.ERROR
        assert item.message == "Task contains 1 input(s), but at least 2 required."

    def test_render_shows_short_file_name(self):
        line = FhirTaskInputInstanceCountBelowMinLintItem(_task_file(), "Task/123", 1, 2).render()
        assert "file=task-hello.xml" in line
        assert "/home/dev" not in line
        assert "fhirReference=Task/123" in line
        assert line.endswith(": Task contains 1 input(s), but at least 2 required.")

    def test_parameters_kept_as_details_only(self):
        item = FhirTaskInputInstanceCountBelowMinLintItem(_task_file(), "Task/123", 1, 2)
        assert "actualCount" not in item.render()
        assert item.detail("actualCount") == "1"
        assert item.detail("minimum") == "2"

    def test_missing_file_uses_xml_sentinel(self):
        line = FhirTaskInputInstanceCountBelowMinLintItem(None, "Task/123", 1, 2).render()
        assert "(fhirReference=Task/123, file=unknown.xml)" in line


class TestExecutionListenerClassNotFound:
    def test_class_name(self):
        item = BpmnExecutionListenerClassNotFoundLintItem(
            "Task_5", Path("bpe/p.bpmn"), "proc_2", "com.example.Missing"
        )
        assert item.class_name == "com.example.Missing"
        assert item.severity is LintSeverity.ERROR

    def test_render_ends_with_class_name(self):
        item = BpmnExecutionListenerClassNotFoundLintItem(
            "Task_5", Path("bpe/p.bpmn"), "proc_2", "com.example.Missing"
        )
        assert item.render().endswith(", className=com.example.Missing")
        assert "com.example.Missing" in item.message


# ---------------------------------------------------------------------------
# Properties
# ---------------------------------------------------------------------------


class TestRendering:
    def test_idempotent(self):
        item = FhirTaskInputInstanceCountBelowMinLintItem(_task_file(), "Task/123", 1, 2)
        assert item.render() == item.render()
        assert str(item) == item.render()

    def test_variants_render_differently(self):
        lint = FhirTaskMissingRequesterLintItem("t.xml", "Task/1")
        validation = FhirTaskMissingRequesterValidationItem("t.xml", "Task/1")
        assert lint.render() != validation.render()

    def test_default_and_explicit_default_render_the_same(self):
        implicit = BpmnEventNameEmptyLintItem("E1", "p.bpmn", "proc")
        explicit = BpmnEventNameEmptyLintItem("E1", "p.bpmn", "proc", "Event name is empty")
        assert implicit.render() == explicit.render()
        assert implicit == explicit

    def test_none_context_renders_null(self):
        line = BpmnEventNameEmptyLintItem(None, None, None).render()
        assert "(elementId=null, processId=null, file=unknown.bpmn)" in line

    def test_fhir_item_without_file(self):
        item = FhirTaskMissingRequesterLintItem(None, "Task/1")
        assert item.resource_file == "unknown.xml"
        assert item.render() == (
            "[ERROR] FhirTaskMissingRequesterLintItem (fhirReference=Task/1, file=unknown.xml) "
            ": Task.requester element is missing."
        )

    def test_multiple_details_in_order(self):
        item = BpmnUserTaskListenerNotExtendingOrImplementingRequiredClassLintItem(
            "UT_1", "p.bpmn", "proc", "com.x.L", "TaskListener"
        )
        assert item.render().endswith(", className=com.x.L, requiredType=TaskListener")
        assert item.required_type == "TaskListener"

    def test_plugin_render(self):
        item = PluginDefinitionBpmnFileReferencedFoundOutsideExpectedRootLintItem(
            "/w/target/classes/bpe/p.bpmn", "hello-plugin", "bpe/p.bpmn", "target/classes", "lib/x.jar"
        )
        line = item.render()
        assert "(file=target/classes/bpe/p.bpmn, location=hello-plugin)" in line
        assert line.endswith("(expected root: target/classes, actual location: lib/x.jar)")
        assert "expectedRoot=" not in line
        assert item.expected_root == "target/classes"
        assert item.actual_location == "lib/x.jar"


class TestSeverityFamilies:
    def test_override_is_coerced_into_own_family(self):
        item = BpmnPractitionerRoleHasNoValueOrNullLintItem("UT", "p.bpmn", "proc", None, ValidationSeverity.ERROR)
        assert isinstance(item.severity, LintSeverity)
        assert item.severity is LintSeverity.ERROR

    def test_validation_item_uses_validation_family(self):
        item = FhirTaskRequesterIdNoPlaceholderValidationItem("t.xml", "Task/1")
        assert isinstance(item.severity, ValidationSeverity)
        assert item.severity is ValidationSeverity.WARN
        assert item.type is ValidationType.FHIR_TASK_REQUESTER_ID_NO_PLACEHOLDER

    def test_floating_element_severity_override(self):
        item = BpmnFloatingElementValidationItem(
            "Gw_1", "p.bpmn", "proc", FloatingElementType.TIMER_TYPE_IS_EMPTY, "Timer type is empty", "ERROR"
        )
        assert item.severity is ValidationSeverity.ERROR
        assert item.floating_element_type is FloatingElementType.TIMER_TYPE_IS_EMPTY

    def test_unknown_override_rejected(self):
        with pytest.raises(ValueError):
            BpmnFloatingElementLintItem("E", "p.bpmn", "proc", "X", "msg", "FATAL")

    def test_variant_with_foreign_severity_cannot_be_declared(self):
        with pytest.raises(TypeError, match="not a lint severity"):

            class BrokenLintItem(BpmnLintItem):
                finding_type = LintType.UNKNOWN
                default_severity = ValidationSeverity.ERROR

    def test_variant_with_foreign_type_cannot_be_declared(self):
        with pytest.raises(TypeError, match="not a lint finding type"):

            class BrokenTypeLintItem(BpmnLintItem):
                finding_type = ValidationType.UNKNOWN
                default_severity = LintSeverity.ERROR


class TestMessages:
    def test_no_authorization_names_file(self):
        item = FhirNoExtensionProcessAuthorizationFoundLintItem(_task_file(), None)
        assert item.message.endswith("task-hello.xml")

    def test_blank_custom_message_falls_back(self):
        item = PluginDefinitionProcessPluginResourceNotLoadedValidationItem("x.xml", "plugin", "   ")
        assert item.message == PluginDefinitionProcessPluginResourceNotLoadedValidationItem.default_message

    def test_item_is_frozen(self):
        item = BpmnEventNameEmptyLintItem("E", "p.bpmn", "proc")
        with pytest.raises(AttributeError):
            item.message = "other"


# ---------------------------------------------------------------------------
# Persistence
# ---------------------------------------------------------------------------


class TestRestore:
    def test_round_trip(self):
        item = BpmnExecutionListenerClassNotFoundLintItem("Task_5", "p.bpmn", "proc_2", "com.example.Missing")
        restored = restore(item.to_dict())
        assert restored == item
        assert type(restored) is BpmnExecutionListenerClassNotFoundLintItem
        assert restored.class_name == "com.example.Missing"

    def test_to_dict_shape(self):
        data = FhirTaskInputInstanceCountBelowMinLintItem("t.xml", "Task/123", 1, 2).to_dict()
        assert data["variant"] == "FhirTaskInputInstanceCountBelowMinLintItem"
        assert data["mode"] == "lint"
        assert data["severity"] == "ERROR"
        assert data["resourceId"] == "123"
        assert data["details"] == {"actualCount": "1", "minimum": "2"}

    def test_unknown_variant(self):
        with pytest.raises(ReportError, match="unknown diagnostic variant"):
            restore({"variant": "NopeLintItem", "mode": "lint", "severity": "ERROR"})

    def test_mode_mismatch(self):
        data = BpmnEventNameEmptyLintItem("E", "p.bpmn", "proc").to_dict()
        data["mode"] = "validation"
        with pytest.raises(ReportError, match="is a lint item"):
            restore(data)

    def test_bad_severity(self):
        data = BpmnEventNameEmptyLintItem("E", "p.bpmn", "proc").to_dict()
        data["severity"] = "FATAL"
        with pytest.raises(ReportError, match="invalid severity"):
            restore(data)

    def test_bad_details(self):
        data = BpmnEventNameEmptyLintItem("E", "p.bpmn", "proc").to_dict()
        data["details"] = ["x"]
        with pytest.raises(ReportError, match="details must be an object"):
            restore(data)
