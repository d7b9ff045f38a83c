"""Pydantic models for generation results."""

import re
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from ..categories import CATEGORY_ORDER, TestCategory

LEADING_INT_PATTERN = re.compile(r"^\s*(\d+)")


def coerce_text(value: Any, separator: str = ", ") -> str | None:
    """Loosen an agent-supplied scalar into text.

    Numbers become their string form and lists of scalars are joined.
    Anything else that is not text is dropped to None.
    """
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, (bool, int, float)):
        return str(value)
    if isinstance(value, (list, tuple)):
        parts = [coerce_text(item) for item in value]
        return separator.join(p for p in parts if p is not None)
    return None


class ResultSection(BaseModel):
    """Generated tests for one category.

    Every field may be missing from the agent payload.
    """

    model_config = ConfigDict(extra="ignore")

    title: str | None = None
    test_count: str | None = None
    code: str | None = None
    summary: str | None = None

    @field_validator("title", "test_count", "summary", mode="before")
    @classmethod
    def coerce_scalars(cls, value):
        """Agents sometimes send counts as numbers or titles as lists."""
        return coerce_text(value)

    @field_validator("code", mode="before")
    @classmethod
    def coerce_code(cls, value):
        """Code sent as a list of lines is joined back into one text."""
        return coerce_text(value, separator="\n")

    @property
    def count(self) -> int:
        """Leading integer of the test count, 0 when absent or not a number."""
        match = LEADING_INT_PATTERN.match(self.test_count or "")
        return int(match.group(1)) if match else 0


class RepositoryInfo(BaseModel):
    """What the agent learned about the repository."""

    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    languages: str | None = None
    structure_summary: str | None = None

    @field_validator("name", "languages", "structure_summary", mode="before")
    @classmethod
    def coerce_scalars(cls, value):
        return coerce_text(value)


class GenerationResult(BaseModel):
    """Normalized output of one generation run."""

    model_config = ConfigDict(extra="ignore")

    repository_info: RepositoryInfo | None = None
    unit_tests: ResultSection | None = None
    integration_tests: ResultSection | None = None
    e2e_tests: ResultSection | None = None
    edge_case_tests: ResultSection | None = None
    performance_tests: ResultSection | None = None
    overall_summary: str | None = None

    @field_validator("overall_summary", mode="before")
    @classmethod
    def coerce_summary(cls, value):
        return coerce_text(value)

    def section(self, category: TestCategory) -> ResultSection | None:
        """Get the section for a category, or None if absent."""
        return getattr(self, category.data_key)

    def has_section(self, category: TestCategory) -> bool:
        """Check whether the agent returned anything for a category."""
        return self.section(category) is not None

    def available_categories(self) -> list[TestCategory]:
        """Categories present in the result, in canonical order."""
        return [c for c in CATEGORY_ORDER if self.has_section(c)]

    def sections(self) -> list[tuple[TestCategory, ResultSection]]:
        """Present sections paired with their category, in canonical order."""
        return [(c, self.section(c)) for c in self.available_categories()]  # type: ignore[misc]

    @property
    def total_tests(self) -> int:
        """Total number of tests across all sections."""
        return sum(section.count for _, section in self.sections())

    @property
    def repository_name(self) -> str | None:
        """Repository name reported by the agent, if any."""
        if self.repository_info is None:
            return None
        return self.repository_info.name or None

    def to_payload(self) -> dict:
        """Dump to the agent payload shape, dropping absent fields."""
        return self.model_dump(exclude_none=True)
