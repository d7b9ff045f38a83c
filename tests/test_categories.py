"""Tests for test categories."""

import pytest

from suitegen.categories import CATEGORY_ORDER, TestCategory


class TestCategoryOrder:
    def test_canonical_order(self):
        assert [c.value for c in CATEGORY_ORDER] == [
            "unit",
            "integration",
            "e2e",
            "edgeCase",
            "performance",
        ]

    def test_data_keys(self):
        assert TestCategory.EDGE_CASE.data_key == "edge_case_tests"
        assert TestCategory.E2E.data_key == "e2e_tests"

    def test_labels(self):
        assert TestCategory.UNIT.label == "Unit Tests"
        assert TestCategory.EDGE_CASE.label == "Edge Cases"


class TestCategoryParse:
    @pytest.mark.parametrize(
        "text",
        ["edgeCase", "edge_case", "EDGE_CASE", "edge-case", "edge_case_tests"],
    )
    def test_parse_edge_case_spellings(self, text):
        assert TestCategory.parse(text) is TestCategory.EDGE_CASE

    def test_parse_strips_whitespace(self):
        assert TestCategory.parse("  unit ") is TestCategory.UNIT

    def test_parse_unknown_raises(self):
        with pytest.raises(ValueError) as exc_info:
            TestCategory.parse("smoke")
        assert "smoke" in str(exc_info.value)
