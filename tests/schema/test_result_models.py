"""Tests for result models."""

from suitegen.categories import TestCategory
from suitegen.schema.models import GenerationResult, ResultSection


class TestResultSection:
    def test_all_fields_optional(self):
        section = ResultSection()
        assert section.title is None
        assert section.code is None
        assert section.count == 0

    def test_integer_count_coerced_to_string(self):
        section = ResultSection.model_validate({"test_count": 7})
        assert section.test_count == "7"
        assert section.count == 7

    def test_non_numeric_count_is_zero(self):
        section = ResultSection(test_count="several")
        assert section.count == 0

    def test_count_uses_leading_integer(self):
        assert ResultSection(test_count="12 tests").count == 12
        assert ResultSection(test_count=" 4").count == 4

    def test_float_count(self):
        section = ResultSection.model_validate({"test_count": 3.0})
        assert section.test_count == "3.0"
        assert section.count == 3

    def test_numeric_title_coerced(self):
        section = ResultSection.model_validate({"title": 42, "summary": ["a", "b"]})
        assert section.title == "42"
        assert section.summary == "a, b"

    def test_code_lines_joined(self):
        section = ResultSection.model_validate({"code": ["import pytest", "", "def test_a():", "    pass"]})
        assert section.code == "import pytest\n\ndef test_a():\n    pass"

    def test_uncoercible_field_dropped(self):
        section = ResultSection.model_validate({"title": {"text": "x"}, "code": "pass"})
        assert section.title is None
        assert section.code == "pass"

    def test_unknown_fields_ignored(self):
        section = ResultSection.model_validate({"title": "T", "language": "python"})
        assert section.title == "T"


class TestGenerationResult:
    def test_empty_result_is_valid(self):
        result = GenerationResult()
        assert result.available_categories() == []
        assert result.total_tests == 0
        assert result.repository_name is None

    def test_section_lookup_by_category(self, full_result):
        section = full_result.section(TestCategory.EDGE_CASE)
        assert section is not None
        assert section.title == "Edge Cases"

    def test_missing_section(self, unit_only_payload):
        result = GenerationResult.model_validate(unit_only_payload)
        assert result.has_section(TestCategory.UNIT)
        assert not result.has_section(TestCategory.E2E)
        assert result.available_categories() == [TestCategory.UNIT]

    def test_total_tests(self, full_result):
        assert full_result.total_tests == 11

    def test_total_tests_skips_bad_counts(self):
        result = GenerationResult.model_validate(
            {
                "unit_tests": {"test_count": "5"},
                "e2e_tests": {"test_count": "n/a"},
                "performance_tests": {},
            }
        )
        assert result.total_tests == 5

    def test_repository_name(self, full_result):
        assert full_result.repository_name == "octo/widgets"

    def test_to_payload_drops_absent_fields(self, unit_only_payload):
        result = GenerationResult.model_validate(unit_only_payload)
        payload = result.to_payload()
        assert "e2e_tests" not in payload
        assert payload["repository_info"] == {"name": "octo/widgets"}
