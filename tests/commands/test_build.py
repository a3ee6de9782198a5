"""Tests for the build command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from bsnbundle.cli import cli
from tests.conftest import HEADER, export_entries


@pytest.mark.usefixtures("_isolated_project")
class TestBuildCommand:
    def test_bundle_on_stdout_diagnostics_on_stderr(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["build"])
        assert result.exit_code == 0
        assert result.stdout.startswith(HEADER)
        assert result.stdout.endswith("}));\n")
        assert "Building Native Javascript for Bootstrap 4 v2.0.27 .." in result.stderr
        assert "Unminified Build" in result.stderr
        assert "Included modules:" in result.stderr
        assert "Building" not in result.stdout

    def test_only_with_invalid_name(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["build", "--only", "Button,Bogus"])
        assert result.exit_code == 0
        assert export_entries(result.stdout) == ["Button: Button"]
        assert "WARNING: Bogus is not a valid module name, continuing" in result.stderr
        assert result.stderr.count("WARNING:") == 1

    def test_repeated_only(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["build", "--only", "modal", "--only", "alert"])
        assert result.exit_code == 0
        assert export_entries(result.stdout) == ["Modal: Modal,", "Alert: Alert"]

    def test_ignore(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["build", "--ignore", "Modal"])
        assert result.exit_code == 0
        assert export_entries(result.stdout) == ["Alert: Alert,", "Button: Button"]

    def test_only_and_ignore_conflict(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["build", "--only", "Alert", "--ignore", "Modal"])
        assert result.exit_code == 1
        assert result.stdout == ""
        assert "You cannot specify both --only and --ignore." in result.stderr

    def test_no_valid_modules(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["build", "--only", "Bogus"])
        assert result.exit_code == 1
        assert result.stdout == ""
        assert "No valid module names, aborting" in result.stderr

    def test_warnings_printed_before_fatal_error(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["build", "--only", "Bogus,Nope"])
        assert result.exit_code == 1
        assert result.stdout == ""
        warning = "WARNING: Bogus is not a valid module name, continuing"
        assert warning in result.stderr
        assert "WARNING: Nope is not a valid module name, continuing" in result.stderr
        assert result.stderr.index(warning) < result.stderr.index("No valid module names")

    def test_hyphenated_only(self, cli_runner: CliRunner, module_dir: Path) -> None:
        (module_dir / "scroll-spy-native.js").write_text("var ScrollSpy = function () {};\n")
        result = cli_runner.invoke(cli, ["build", "--only", "scroll-spy"])
        assert result.exit_code == 0
        assert export_entries(result.stdout) == ["ScrollSpy: ScrollSpy"]
        assert "WARNING" not in result.stderr

    def test_minify(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["build", "--minify"])
        assert result.exit_code == 0
        assert result.stdout.startswith(HEADER)
        assert "Minified Build" in result.stderr
        assert "// AMD support" not in result.stdout

    def test_quiet_suppresses_summary(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "build", "--only", "Alert,Bogus"])
        assert result.exit_code == 0
        assert "Included modules" not in result.stderr
        assert "WARNING: Bogus" in result.stderr

    def test_json_summary_on_stderr(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "build", "--only", "Alert"])
        assert result.exit_code == 0
        data = json.loads(result.stderr)
        assert data["ok"] is True
        assert data["data"]["modules"] == ["Alert"]
        assert data["data"]["written"] is True
        assert "bundle" not in data["data"]
        assert result.stdout.startswith(HEADER)

    def test_read_failure(self, cli_runner: CliRunner, project_root: Path) -> None:
        (project_root / "lib" / "V4" / "utils.js").unlink()
        result = cli_runner.invoke(cli, ["build"])
        assert result.exit_code == 1
        assert result.stdout == ""
        assert "utils.js" in result.stderr

    def test_examples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["build", "--examples"])
        assert result.exit_code == 0
        assert "bsnbundle build --minify" in result.stdout


class TestBuildCommandWithConfig:
    def test_config_flag(self, cli_runner: CliRunner, project_root: Path, tmp_path: Path) -> None:
        config = project_root / "bsnbundle.toml"
        config.write_text('[release]\ncopyright = "someone"\n')
        result = cli_runner.invoke(cli, ["-c", str(config), "build", "--only", "Alert"])
        assert result.exit_code == 0
        assert result.stdout.splitlines()[0].endswith("| © someone | MIT-License")
