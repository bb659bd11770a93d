"""Tests for location descriptors and file-name resolution."""

from pathlib import Path, PureWindowsPath

import pytest

from dsf_linter.model.location import (
    UNKNOWN_BPMN_FILE,
    UNKNOWN_FHIR_FILE,
    UNKNOWN_RESOURCE_ID,
    BpmnLocation,
    FhirLocation,
    PluginLocation,
    derive_resource_id,
    plugin_file_label,
    resolve_file_name,
)


class TestResolveFileName:
    def test_none_yields_sentinel(self):
        assert resolve_file_name(None, UNKNOWN_BPMN_FILE) == "unknown.bpmn"
        assert resolve_file_name(None, UNKNOWN_FHIR_FILE) == "unknown.xml"

    def test_empty_yields_sentinel(self):
        assert resolve_file_name("", UNKNOWN_FHIR_FILE) == "unknown.xml"

    def test_posix_path(self, tmp_path):
        assert resolve_file_name(tmp_path / "bpe" / "hello.bpmn", UNKNOWN_BPMN_FILE) == "hello.bpmn"

    def test_windows_path(self):
        path = PureWindowsPath(r"C:\work\fhir\Task\task-hello.xml")
        assert resolve_file_name(path, UNKNOWN_FHIR_FILE) == "task-hello.xml"

    def test_string_path(self):
        assert resolve_file_name("src/main/resources/bpe/p.bpmn", UNKNOWN_BPMN_FILE) == "p.bpmn"

    def test_bare_name(self):
        assert resolve_file_name(Path("p.bpmn"), UNKNOWN_BPMN_FILE) == "p.bpmn"


class TestDeriveResourceId:
    @pytest.mark.parametrize(
        "reference, expected",
        [
            ("http://dsf.dev/fhir/Task/task-hello|#{version}", "task-hello"),
            ("Task/123", "123"),
            ("Questionnaire#item-1", "item-1"),
            ("plain", "plain"),
            (None, UNKNOWN_RESOURCE_ID),
            ("   ", UNKNOWN_RESOURCE_ID),
        ],
    )
    def test_derive(self, reference, expected):
        assert derive_resource_id(reference) == expected


class TestPluginFileLabel:
    def test_keeps_build_root_relative_part(self):
        path = "/tmp/dsf-validator-123/project/target/classes/bpe/p.bpmn"
        assert plugin_file_label(path) == "target/classes/bpe/p.bpmn"

    def test_falls_back_to_file_name(self):
        assert plugin_file_label("/opt/plugin/PluginDefinition.java") == "PluginDefinition.java"

    def test_missing(self):
        assert plugin_file_label(None) == "unknown"


class TestDescriptors:
    def test_bpmn_round_trip(self):
        loc = BpmnLocation(bpmn_file="p.bpmn", element_id="Task_1", process_id="proc")
        assert BpmnLocation.from_dict(loc.to_dict()) == loc

    def test_fhir_exposes_resource_id(self):
        loc = FhirLocation(resource_file="t.xml", fhir_reference="Task/abc")
        assert loc.resource_id == "abc"
        assert loc.to_dict()["resourceId"] == "abc"

    def test_fhir_from_dict_defaults_sentinel(self):
        assert FhirLocation.from_dict({}).resource_file == UNKNOWN_FHIR_FILE

    def test_plugin_file_name(self):
        loc = PluginLocation(file="a/b/build/resources/main/fhir/x.xml", location="plugin")
        assert loc.file_name == "build/resources/main/fhir/x.xml"
