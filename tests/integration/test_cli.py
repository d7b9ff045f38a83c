"""Integration tests for CLI."""

import json

import pytest
from click.testing import CliRunner

from suitegen.cli import main


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def isolated(tmp_path, monkeypatch):
    """Run from an empty directory with no API key in the environment."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)
    return tmp_path


@pytest.fixture
def response_file(isolated, full_payload_json):
    path = isolated / "response.txt"
    path.write_text(f"Here you go:\n```json\n{full_payload_json}\n```\n", encoding="utf-8")
    return path


class TestGenerateCommand:
    def test_generate_from_response_file(self, runner, response_file):
        result = runner.invoke(
            main,
            ["generate", "octo/widgets", "--response-file", str(response_file), "--quiet"],
        )

        assert result.exit_code == 0
        assert "UNIT TESTS" in result.output
        assert "Total: 11 test(s)" in result.output

    def test_generate_json_output(self, runner, response_file):
        result = runner.invoke(
            main,
            [
                "generate",
                "octo/widgets",
                "--response-file",
                str(response_file),
                "--only",
                "unit",
                "--only",
                "edge-case",
                "--format",
                "json",
                "--quiet",
            ],
        )

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["active_category"] == "unit"
        assert set(data) >= {"unit_tests", "edge_case_tests"}
        assert "e2e_tests" not in data

    def test_generate_prints_progress(self, runner, response_file):
        result = runner.invoke(
            main, ["generate", "octo/widgets", "--response-file", str(response_file)]
        )

        assert result.exit_code == 0
        assert "Connecting to repository..." in result.output

    def test_generate_exports(self, runner, response_file, isolated):
        result = runner.invoke(
            main,
            [
                "generate",
                "octo/widgets",
                "--response-file",
                str(response_file),
                "--export-dir",
                str(isolated / "out"),
                "--quiet",
            ],
        )

        assert result.exit_code == 0
        exported = isolated / "out" / "test-suite-octo-widgets.txt"
        assert exported.exists()
        assert exported.read_text().startswith("// Generated Test Suite")

    def test_generate_export_unwritable(self, runner, response_file, isolated):
        blocker = isolated / "blocker"
        blocker.write_text("not a directory", encoding="utf-8")

        result = runner.invoke(
            main,
            [
                "generate",
                "octo/widgets",
                "--response-file",
                str(response_file),
                "--export",
                str(blocker / "suite.txt"),
                "--quiet",
            ],
        )

        assert result.exit_code == 2
        assert "Error writing export" in result.output
        assert "Traceback" not in result.output

    def test_generate_export_options_exclusive(self, runner, response_file, isolated):
        result = runner.invoke(
            main,
            [
                "generate",
                "octo/widgets",
                "--response-file",
                str(response_file),
                "--export",
                str(isolated / "suite.txt"),
                "--export-dir",
                str(isolated / "out"),
            ],
        )

        assert result.exit_code == 2
        assert "cannot be used together" in result.output
        assert not (isolated / "suite.txt").exists()
        assert not (isolated / "out").exists()

    def test_generate_invalid_identifier(self, runner, response_file):
        result = runner.invoke(
            main, ["generate", "not-a-repo", "--response-file", str(response_file)]
        )

        assert result.exit_code == 2
        assert "owner/repo" in result.output

    def test_generate_nothing_selected(self, runner, response_file):
        args = ["generate", "octo/widgets", "--response-file", str(response_file)]
        for category in ("unit", "integration", "e2e", "edgeCase", "performance"):
            args += ["--skip", category]

        result = runner.invoke(main, args)

        assert result.exit_code == 2
        assert "at least one" in result.output

    def test_generate_unknown_category(self, runner, response_file):
        result = runner.invoke(
            main,
            ["generate", "octo/widgets", "--response-file", str(response_file), "--only", "smoke"],
        )

        assert result.exit_code == 2

    def test_generate_unparsable_response(self, runner, isolated):
        path = isolated / "bad.txt"
        path.write_text("not json")

        result = runner.invoke(
            main, ["generate", "octo/widgets", "--response-file", str(path), "--quiet"]
        )

        assert result.exit_code == 1
        assert "unexpected format" in result.output

    def test_generate_without_api_key(self, runner, isolated):
        result = runner.invoke(main, ["generate", "octo/widgets"])

        assert result.exit_code == 2
        assert "API key" in result.output

    def test_generate_bad_settings_file(self, runner, isolated):
        path = isolated / "settings.yaml"
        path.write_text("progress_interval: -1\n")

        result = runner.invoke(main, ["--config", str(path), "generate", "octo/widgets"])

        assert result.exit_code == 2
        assert "progress_interval" in result.output


class TestNormalizeCommand:
    def test_normalize_fenced_response(self, runner, response_file):
        result = runner.invoke(main, ["normalize", str(response_file), "--format", "json"])

        assert result.exit_code == 0
        assert json.loads(result.output)["total_tests"] == 11

    def test_normalize_bad_response(self, runner, isolated):
        path = isolated / "bad.txt"
        path.write_text('{"unit_tests": {')

        result = runner.invoke(main, ["normalize", str(path)])

        assert result.exit_code == 1
        assert "Unexpected format" in result.output


class TestSampleCommand:
    def test_sample_text(self, runner, isolated):
        result = runner.invoke(main, ["sample"])

        assert result.exit_code == 0
        assert "acme/payment-service" in result.output
        assert "Total: 36 test(s)" in result.output

    def test_sample_export(self, runner, isolated):
        result = runner.invoke(main, ["sample", "--export-dir", str(isolated)])

        assert result.exit_code == 0
        assert (isolated / "test-suite-acme-payment-service.txt").exists()


class TestCategoriesCommand:
    def test_lists_in_order(self, runner):
        result = runner.invoke(main, ["categories"])

        assert result.exit_code == 0
        lines = result.output.strip().splitlines()
        assert [line.split()[0] for line in lines] == [
            "unit",
            "integration",
            "e2e",
            "edgeCase",
            "performance",
        ]
