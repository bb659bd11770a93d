"""Tests across the whole variant catalogue."""

import inspect

import pytest

import dsf_linter.items  # noqa: F401
from dsf_linter.items.lint import bpmn as lint_bpmn
from dsf_linter.items.lint import fhir as lint_fhir
from dsf_linter.items.lint import plugin as lint_plugin
from dsf_linter.items.validation import bpmn as validation_bpmn
from dsf_linter.items.validation import fhir as validation_fhir
from dsf_linter.items.validation import plugin as validation_plugin
from dsf_linter.model.item import BpmnFinding, DiagnosticItem, FhirFinding, PluginFinding, variant_registry
from dsf_linter.model.mode import AnalysisMode

MODULES = {
    lint_bpmn: (AnalysisMode.LINT, BpmnFinding),
    lint_fhir: (AnalysisMode.LINT, FhirFinding),
    lint_plugin: (AnalysisMode.LINT, PluginFinding),
    validation_bpmn: (AnalysisMode.VALIDATION, BpmnFinding),
    validation_fhir: (AnalysisMode.VALIDATION, FhirFinding),
    validation_plugin: (AnalysisMode.VALIDATION, PluginFinding),
}


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _declared(module) -> list[type[DiagnosticItem]]:
    return [
        obj
        for obj in vars(module).values()
        if inspect.isclass(obj) and obj.__module__ == module.__name__ and "finding_type" in vars(obj)
    ]


def _build(cls: type[DiagnosticItem]) -> DiagnosticItem:
    """Instantiate *cls* with placeholder values for every required argument."""
    args = []
    for param in inspect.signature(cls).parameters.values():
        if param.default is not inspect.Parameter.empty:
            break
        args.append(f"{param.name}-value")
    return cls(*args)


ALL_VARIANTS = [cls for module in MODULES for cls in _declared(module)]


# ---------------------------------------------------------------------------
# Catalogue
# ---------------------------------------------------------------------------


class TestRegistry:
    def test_every_declared_variant_is_registered(self):
        registry = variant_registry()
        for cls in ALL_VARIANTS:
            assert registry[cls.__name__] is cls

    def test_registry_holds_only_declared_variants(self):
        assert set(variant_registry()) >= {cls.__name__ for cls in ALL_VARIANTS}
        assert len(ALL_VARIANTS) == len({cls.__name__ for cls in ALL_VARIANTS})

    @pytest.mark.parametrize("module", list(MODULES), ids=lambda m: m.__name__.split("items.")[-1])
    def test_module_mode_and_domain(self, module):
        mode, domain = MODULES[module]
        declared = _declared(module)
        assert declared
        for cls in declared:
            assert cls.mode is mode
            assert issubclass(cls, domain)
            assert isinstance(cls.finding_type, mode.finding_types)
            assert mode.owns(cls.default_severity)

    def test_variant_names_carry_mode(self):
        for cls in ALL_VARIANTS:
            marker = "LintItem" if cls.mode is AnalysisMode.LINT else "ValidationItem"
            assert marker in cls.__name__

    def test_each_module_has_success_variant(self):
        for module in MODULES:
            assert any(cls.default_severity.value == "SUCCESS" for cls in _declared(module)), module.__name__


class TestConstruction:
    @pytest.mark.parametrize("cls", ALL_VARIANTS, ids=lambda c: c.__name__)
    def test_constructible_with_defaults(self, cls):
        item = _build(cls)
        assert item.severity is cls.default_severity
        assert item.message
        assert item.render().startswith(f"[{cls.default_severity.value}] {cls.__name__} (")

    @pytest.mark.parametrize("cls", ALL_VARIANTS, ids=lambda c: c.__name__)
    def test_default_message_fully_formatted(self, cls):
        item = _build(cls)
        assert "{" not in item.message.replace("#{", "")

    @pytest.mark.parametrize("cls", ALL_VARIANTS, ids=lambda c: c.__name__)
    def test_severity_family(self, cls):
        item = _build(cls)
        assert isinstance(item.severity, cls.mode.severities)
        other = AnalysisMode.VALIDATION if cls.mode is AnalysisMode.LINT else AnalysisMode.LINT
        assert not other.owns(item.severity)
