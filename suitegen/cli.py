"""Command-line interface for suitegen."""

import asyncio
import logging
import sys
from pathlib import Path

import click

from .agent.prompts import FRAMEWORKS
from .categories import CATEGORY_ORDER, TestCategory
from .config import ConfigLoadError, Settings, load_settings
from .orchestration.errors import GenerationError, InvalidIdentifierError, StaleRequestError
from .orchestration.orchestrator import GenerationOrchestrator
from .orchestration.progress import ProgressAnnouncer
from .orchestration.selection import SelectionState
from .orchestration.state import GenerationParams
from .output.formatter import export_filename, format_export, format_generation_result
from .schema.errors import ResponseShapeError
from .schema.models import GenerationResult
from .schema.normalizer import normalize_or_raise

CATEGORY_CHOICES = [c.value for c in CATEGORY_ORDER]


def _parse_categories(ctx, param, values: tuple[str, ...]) -> list[TestCategory]:
    """Click callback turning category names into TestCategory members."""
    try:
        return [TestCategory.parse(v) for v in values]
    except ValueError as e:
        raise click.BadParameter(f"{e}. Choose from: {', '.join(CATEGORY_CHOICES)}")


def _settings(ctx: click.Context, **overrides) -> Settings:
    try:
        return load_settings(ctx.obj.get("config"), **overrides)
    except ConfigLoadError as e:
        click.echo(f"Error loading settings: {e}", err=True)
        sys.exit(2)


def _write_export(result: GenerationResult, identifier: str, export: str | None, export_dir: str | None) -> None:
    if export is None and export_dir is None:
        return
    path = Path(export) if export else Path(export_dir) / export_filename(result, identifier)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(format_export(result, identifier), encoding="utf-8")
    except OSError as e:
        click.echo(f"Error writing export: {e}", err=True)
        sys.exit(2)
    click.echo(f"Exported: {path}", err=True)


@click.group()
@click.version_option(package_name="suitegen")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging")
@click.option(
    "--config",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Settings file (defaults to ./suitegen.yaml when present)",
)
@click.pass_context
def main(ctx: click.Context, verbose: bool, config: str | None):
    """suitegen: AI-generated test suites for GitHub repositories."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj["config"] = config


@main.command()
@click.argument("identifier")
@click.option("--branch", default=None, help="Branch to analyze (default from settings)")
@click.option("--priorities", default="", help="Free-text testing priorities")
@click.option(
    "--only",
    multiple=True,
    callback=_parse_categories,
    help=f"Generate only this category (repeatable): {', '.join(CATEGORY_CHOICES)}",
)
@click.option(
    "--skip",
    multiple=True,
    callback=_parse_categories,
    help="Leave out this category (repeatable)",
)
@click.option(
    "--framework",
    type=click.Choice(FRAMEWORKS),
    default=None,
    help="Preferred test framework (default from settings)",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
@click.option("--export", default=None, help="Write the test suite export to this file")
@click.option("--export-dir", default=None, help="Write the export here as test-suite-<owner>-<repo>.txt")
@click.option(
    "--response-file",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Replay a stored agent response instead of calling the API",
)
@click.option(
    "--api-key",
    envvar="ANTHROPIC_API_KEY",
    help="Anthropic API key (defaults to ANTHROPIC_API_KEY env var)",
)
@click.option("--model", "claude_model", default=None, help="Claude model that plays the agent")
@click.option("-q", "--quiet", is_flag=True, default=False, help="Do not print progress messages")
@click.pass_context
def generate(
    ctx: click.Context,
    identifier: str,
    branch: str | None,
    priorities: str,
    only: list[TestCategory],
    skip: list[TestCategory],
    framework: str | None,
    output_format: str,
    export: str | None,
    export_dir: str | None,
    response_file: str | None,
    api_key: str | None,
    claude_model: str | None,
    quiet: bool,
):
    """Generate a test suite for a GitHub repository.

    IDENTIFIER is the repository in owner/repo form.

    Exit codes:
      0 - Test suite generated
      1 - Generation failed (agent error or unreadable response)
      2 - Usage, settings or identifier error
    """
    from .agent.client import AnthropicAgentClient, ReplayAgentClient
    from .agent.errors import AgentConfigurationError

    if export is not None and export_dir is not None:
        raise click.UsageError("--export and --export-dir cannot be used together")

    settings =_settings(ctx, api_key=api_key, model=claude_model)

    selection = SelectionState(only or None)
    for category in skip:
        if selection[category]:
            selection.toggle(category)
    if not selection.any_selected:
        click.echo("Error: select at least one test category", err=True)
        sys.exit(2)

    try:
        if response_file:
            client = ReplayAgentClient.from_file(response_file)
        else:
            client = AnthropicAgentClient(
                api_key=settings.api_key,
                model=settings.model,
                max_tokens=settings.max_tokens,
            )
    except AgentConfigurationError as e:
        click.echo(f"API key error: {e}", err=True)
        sys.exit(2)

    announcer = ProgressAnnouncer(
        interval=settings.progress_interval,
        on_message=None if quiet else (lambda message: click.echo(f"  {message}", err=True)),
    )
    orchestrator = GenerationOrchestrator(client, announcer=announcer, agent_id=settings.agent_id)

    try:
        orchestrator.connect(identifier)
    except InvalidIdentifierError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(2)

    params = GenerationParams(
        identifier=identifier,
        branch=branch or settings.default_branch,
        priorities=priorities,
        selected=selection,
        framework=framework or settings.default_framework,
    )

    try:
        result = asyncio.run(orchestrator.generate(params))
    except (GenerationError, StaleRequestError) as e:
        click.echo(f"Generation failed: {e}", err=True)
        sys.exit(1)

    click.echo(
        format_generation_result(
            result,
            categories=orchestrator.selection.selected(),
            active=orchestrator.active_category,
            format=output_format,  # type: ignore
        )
    )
    _write_export(result, params.identifier, export, export_dir)
    sys.exit(0)


@main.command()
@click.argument("response_file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
def normalize(response_file: str, output_format: str):
    """Normalize a stored agent response.

    RESPONSE_FILE holds the raw agent result: JSON, or text with a fenced
    JSON block.

    Exit codes:
      0 - Response normalized
      1 - Response has an unexpected format
    """
    raw = Path(response_file).read_text(encoding="utf-8")
    try:
        result = normalize_or_raise(raw)
    except ResponseShapeError as e:
        click.echo(f"Unexpected format: {e}", err=True)
        sys.exit(1)

    click.echo(format_generation_result(result, format=output_format))  # type: ignore
    sys.exit(0)


@main.command()
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
@click.option("--export-dir", default=None, help="Write the sample export into this directory")
def sample(output_format: str, export_dir: str | None):
    """Show the built-in sample result (demo mode, no API call)."""
    from .agent.client import ReplayAgentClient

    orchestrator = GenerationOrchestrator(ReplayAgentClient(""))
    result = orchestrator.load_sample()
    identifier = orchestrator.state.identifier or ""

    click.echo(
        format_generation_result(
            result,
            categories=orchestrator.selection.selected(),
            active=orchestrator.active_category,
            format=output_format,  # type: ignore
        )
    )
    _write_export(result, identifier, None, export_dir)


@main.command()
def categories():
    """List test categories in canonical order."""
    for category in CATEGORY_ORDER:
        click.echo(f"{category.value:<12} {category.label:<12} {category.data_key}")


if __name__ == "__main__":
    main()
