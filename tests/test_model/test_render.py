"""Tests for the canonical render line."""

import dsf_linter.items  # noqa: F401
from dsf_linter.items.lint.bpmn import BpmnExecutionListenerClassNotFoundLintItem, BpmnUnknownFieldInjectionLintItem
from dsf_linter.items.validation.fhir import FhirQuestionnaireInvalidUrlValidationItem
from dsf_linter.model.item import variant_registry
from dsf_linter.model.location import BpmnLocation, FhirLocation, PluginLocation
from dsf_linter.model.render import context_fields, render


class TestContextFields:
    def test_bpmn_order(self):
        loc = BpmnLocation(bpmn_file="p.bpmn", element_id="E", process_id="P")
        assert [key for key, _ in context_fields(loc)] == ["elementId", "processId", "file"]

    def test_fhir_order(self):
        loc = FhirLocation(resource_file="q.xml", fhir_reference="Questionnaire/q")
        assert context_fields(loc) == [("fhirReference", "Questionnaire/q"), ("file", "q.xml")]

    def test_plugin_uses_label(self):
        loc = PluginLocation(file=None, location="hello")
        assert context_fields(loc) == [("file", "unknown"), ("location", "hello")]


class TestRender:
    def test_detail_keys_follow_message(self):
        item = BpmnUnknownFieldInjectionLintItem("ST_1", "p.bpmn", "proc", "foo")
        assert render(item) == (
            "[ERROR] BpmnUnknownFieldInjectionLintItem (elementId=ST_1, processId=proc, file=p.bpmn) "
            ": Unknown field injection encountered: foo, unknownField=foo"
        )
        assert item.field_name == "foo"

    def test_none_detail_renders_as_null(self):
        item = BpmnExecutionListenerClassNotFoundLintItem("L_1", "p.bpmn", "proc", None)
        assert render(item).endswith(", className=null")
        assert item.class_name is None

    def test_fhir_parameters_not_rendered(self):
        item = FhirQuestionnaireInvalidUrlValidationItem("q.xml", None, "http://dsf.dev/fhir/Questionnaire/q", None)
        line = render(item)
        assert "(fhirReference=null, file=q.xml)" in line
        assert line.endswith(": Questionnaire <url> must be 'http://dsf.dev/fhir/Questionnaire/q' (found: 'None').")
        assert item.detail("expectedUrl") == "http://dsf.dev/fhir/Questionnaire/q"
        assert item.detail("actualUrl") is None

    def test_only_bpmn_class_and_field_details_render(self):
        for cls in variant_registry().values():
            if cls.rendered_details:
                assert cls.__name__.startswith("Bpmn")
            assert set(cls.rendered_details) <= {"className", "requiredType", "unknownField"}
