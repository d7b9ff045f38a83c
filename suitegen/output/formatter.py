"""Output formatting for generation results."""

import json
from collections.abc import Sequence
from typing import Literal

from ..categories import CATEGORY_ORDER, TestCategory
from ..schema.models import GenerationResult, ResultSection

EXPORT_RULE = "// " + "=" * 42


def format_generation_result(
    result: GenerationResult,
    categories: Sequence[TestCategory] = CATEGORY_ORDER,
    active: TestCategory | None = None,
    format: Literal["text", "json"] = "text",
) -> str:
    """Format a generation result for output.

    Args:
        result: The normalized result.
        categories: Categories to show, in display order.
        active: The active category, listed first in text output.
        format: Output format ("text" or "json").

    Returns:
        Formatted string representation.
    """
    if format == "json":
        return _format_json(result, categories, active)
    return _format_text(result, categories, active)


def _format_text(
    result: GenerationResult,
    categories: Sequence[TestCategory],
    active: TestCategory | None,
) -> str:
    """Format result as human-readable text."""
    lines: list[str] = []

    info = result.repository_info
    if info is not None:
        lines.append(f"REPOSITORY: {info.name or '(unknown)'}")
        if info.languages:
            lines.append(f"  Languages: {info.languages}")
        if info.structure_summary:
            lines.append(f"  Structure: {info.structure_summary}")
        lines.append("")

    if result.overall_summary:
        lines.append("SUMMARY:")
        lines.append(f"  {result.overall_summary}")
        lines.append("")

    ordered = list(categories)
    if active in ordered:
        ordered.remove(active)
        ordered.insert(0, active)

    for category in ordered:
        lines.extend(_format_section_text(category, result.section(category), category == active))
        lines.append("")

    lines.append(f"Total: {result.total_tests} test(s)")
    return "\n".join(lines)


def _format_section_text(
    category: TestCategory, section: ResultSection | None, is_active: bool
) -> list[str]:
    """Format a single category section as text."""
    marker = "▶ " if is_active else ""
    if section is None:
        return [f"{marker}{category.label.upper()}:", f"  No results available for {category.label}"]

    lines = [f"{marker}{category.label.upper()}: {section.title or category.label} ({section.test_count or '0'} tests)"]
    if section.summary:
        lines.append(f"  {section.summary}")
    if section.code:
        lines.append("")
        lines.extend(f"    {line}" for line in section.code.splitlines())
    return lines


def _format_json(
    result: GenerationResult,
    categories: Sequence[TestCategory],
    active: TestCategory | None,
) -> str:
    """Format result as JSON."""
    data = result.to_payload()
    shown = {c.data_key for c in categories}
    for category in CATEGORY_ORDER:
        if category.data_key not in shown:
            data.pop(category.data_key, None)
    data["total_tests"] = result.total_tests
    data["active_category"] = active.value if active else None
    return json.dumps(data, indent=2)


def format_export(result: GenerationResult, identifier: str) -> str:
    """Build the plain-text export of every section that has code.

    Args:
        result: The normalized result.
        identifier: Repository used when the result carries no name.

    Returns:
        The export document.
    """
    content = f"// Generated Test Suite\n// Repository: {result.repository_name or identifier}\n\n"
    for category in CATEGORY_ORDER:
        section = result.section(category)
        if section is None or not section.code:
            continue
        content += f"\n{EXPORT_RULE}\n"
        content += f"// {section.title or category.data_key}\n"
        content += f"{EXPORT_RULE}\n\n"
        content += section.code + "\n\n"
    return content


def export_filename(result: GenerationResult, identifier: str) -> str:
    """File name for the export, e.g. test-suite-owner-repo.txt."""
    name = result.repository_name or identifier
    return f"test-suite-{name.replace('/', '-')}.txt"
