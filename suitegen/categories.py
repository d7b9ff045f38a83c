"""Test category definitions."""

from enum import Enum


class TestCategory(str, Enum):
    """Kinds of tests the agent can generate, in canonical order."""

    __test__ = False  # not a pytest class

    UNIT = "unit"
    INTEGRATION = "integration"
    E2E = "e2e"
    EDGE_CASE = "edgeCase"
    PERFORMANCE = "performance"

    @property
    def label(self) -> str:
        """Human-readable label."""
        return _LABELS[self]

    @property
    def data_key(self) -> str:
        """Key of this category's section in the agent payload."""
        return _DATA_KEYS[self]

    @property
    def color(self) -> str:
        """Display color (hex)."""
        return _COLORS[self]

    @classmethod
    def parse(cls, text: str) -> "TestCategory":
        """Look up a category by value, member name or payload key.

        Raises:
            ValueError: If nothing matches.
        """
        needle = text.strip().lower().replace("-", "_")
        for category in cls:
            if needle in (
                category.value.lower(),
                category.name.lower(),
                category.data_key,
            ):
                return category
        raise ValueError(f"Unknown test category: {text!r}")


_LABELS = {
    TestCategory.UNIT: "Unit Tests",
    TestCategory.INTEGRATION: "Integration",
    TestCategory.E2E: "E2E Tests",
    TestCategory.EDGE_CASE: "Edge Cases",
    TestCategory.PERFORMANCE: "Performance",
}

_DATA_KEYS = {
    TestCategory.UNIT: "unit_tests",
    TestCategory.INTEGRATION: "integration_tests",
    TestCategory.E2E: "e2e_tests",
    TestCategory.EDGE_CASE: "edge_case_tests",
    TestCategory.PERFORMANCE: "performance_tests",
}

_COLORS = {
    TestCategory.UNIT: "#a6e22e",
    TestCategory.INTEGRATION: "#66d9ef",
    TestCategory.E2E: "#e6db74",
    TestCategory.EDGE_CASE: "#f92672",
    TestCategory.PERFORMANCE: "#ae81ff",
}

CATEGORY_ORDER: tuple[TestCategory, ...] = tuple(TestCategory)
