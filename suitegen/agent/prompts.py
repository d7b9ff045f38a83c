"""Prompt templates for the test generation agent."""

from collections.abc import Iterable

MANAGER_AGENT_ID = "test-suite-manager"

NO_PRIORITIES_PLACEHOLDER = (
    "No specific priorities - generate tests for all major components"
)

FRAMEWORKS = ("auto", "jest", "pytest", "mocha", "cypress", "playwright")

MANAGER_SYSTEM_PROMPT = """You are a test generation manager coordinating five specialists: unit, integration, e2e, edge case and performance testing. Given a GitHub repository, analyze its structure and produce a test suite for each requested test type.

Respond with a single JSON object and nothing else, shaped EXACTLY as follows:

{
  "repository_info": {"name": "owner/repo", "languages": "...", "structure_summary": "..."},
  "unit_tests": {"title": "...", "test_count": "N", "code": "...", "summary": "..."},
  "integration_tests": {"title": "...", "test_count": "N", "code": "...", "summary": "..."},
  "e2e_tests": {"title": "...", "test_count": "N", "code": "...", "summary": "..."},
  "edge_case_tests": {"title": "...", "test_count": "N", "code": "...", "summary": "..."},
  "performance_tests": {"title": "...", "test_count": "N", "code": "...", "summary": "..."},
  "overall_summary": "..."
}

Important:
- Omit the sections for test types that were not requested
- test_count is a string holding the number of test cases in code
- code is complete, runnable test source in the preferred framework
- When the framework preference is "auto", pick the framework the repository already uses
- summary may use markdown"""

# Agent id -> system prompt
AGENTS = {
    MANAGER_AGENT_ID: MANAGER_SYSTEM_PROMPT,
}


def compose_message(
    identifier: str,
    branch: str,
    priorities: str,
    categories: Iterable[str],
    framework: str,
) -> str:
    """Build the generation request sent to the manager agent.

    Args:
        identifier: Repository in owner/repo form.
        branch: Branch to analyze.
        priorities: Free-text testing priorities, may be empty.
        categories: Names of the requested test categories.
        framework: Framework preference token.

    Returns:
        The prompt string.
    """
    requested = ", ".join(categories)
    return f"""Analyze the GitHub repository "{identifier}" (branch: {branch}) and generate comprehensive test cases.

Testing Priorities: {priorities.strip() or NO_PRIORITIES_PLACEHOLDER}

Test Types Requested: {requested}

Framework Preference: {framework}

Please analyze the repository structure, identify key components, and generate thorough test cases for each requested test type."""
