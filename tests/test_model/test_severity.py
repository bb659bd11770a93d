"""Tests for severity families, analysis modes and finding types."""

import pytest

from dsf_linter.model.finding_type import LintType, ValidationType
from dsf_linter.model.mode import AnalysisMode
from dsf_linter.model.severity import LintSeverity, ValidationSeverity, severity_names


class TestSeverity:
    def test_rank_orders_most_severe_first(self):
        ranks = [member.rank for member in LintSeverity]
        assert ranks == sorted(ranks)
        assert LintSeverity.ERROR.rank < LintSeverity.WARN.rank < LintSeverity.INFO.rank

    def test_is_at_least(self):
        assert ValidationSeverity.ERROR.is_at_least("WARN")
        assert ValidationSeverity.WARN.is_at_least(ValidationSeverity.WARN)
        assert not ValidationSeverity.INFO.is_at_least("warn")

    def test_is_at_least_rejects_unknown_name(self):
        with pytest.raises(ValueError, match="Unknown severity"):
            LintSeverity.ERROR.is_at_least("FATAL")

    def test_families_are_distinct_types(self):
        assert not isinstance(LintSeverity.ERROR, ValidationSeverity)
        assert not isinstance(ValidationSeverity.ERROR, LintSeverity)

    def test_severity_names(self):
        assert severity_names() == ["ERROR", "WARN", "INFO", "SUCCESS"]


class TestAnalysisMode:
    def test_families(self):
        assert AnalysisMode.LINT.severities is LintSeverity
        assert AnalysisMode.VALIDATION.severities is ValidationSeverity
        assert AnalysisMode.LINT.finding_types is LintType
        assert AnalysisMode.VALIDATION.finding_types is ValidationType

    def test_coerce_severity_maps_by_name(self):
        coerced = AnalysisMode.VALIDATION.coerce_severity(LintSeverity.WARN)
        assert coerced is ValidationSeverity.WARN
        assert AnalysisMode.LINT.coerce_severity("info") is LintSeverity.INFO

    def test_coerce_severity_rejects_unknown(self):
        with pytest.raises(ValueError, match="Unknown lint severity"):
            AnalysisMode.LINT.coerce_severity("FATAL")

    def test_owns(self):
        assert AnalysisMode.LINT.owns(LintSeverity.ERROR)
        assert not AnalysisMode.LINT.owns(ValidationSeverity.ERROR)


class TestFindingType:
    def test_members_carry_default_messages(self):
        assert LintType.UNKNOWN.default_message
        assert ValidationType.SUCCESS.default_message == "Check passed"

    def test_value_is_member_name(self):
        for member in LintType:
            assert member.value == member.name
        for member in ValidationType:
            assert member.value == member.name

    def test_taxonomies_are_separate(self):
        assert not isinstance(LintType.SUCCESS, ValidationType)
        assert LintType["SUCCESS"] is not ValidationType["SUCCESS"]

    def test_shared_conditions_use_same_name(self):
        assert "FHIR_TASK_MISSING_REQUESTER" in LintType.__members__
        assert "FHIR_TASK_MISSING_REQUESTER" in ValidationType.__members__
