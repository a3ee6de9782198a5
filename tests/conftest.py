"""Shared pytest fixtures and test helpers for bsnbundle tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from bsnbundle.config.settings import BundleSettings

UTILS_JS = "var BSN = {};\nvar supportTransition = true;\n"
INIT_JS = "initializeDataAPI();\n"

MODULE_SOURCES: dict[str, str] = {
    "alert-native.js": "var Alert = function (element) {\n  this.element = element;\n};\n",
    "button-native.js": "var Button = function (element) {\n  this.element = element;\n};\n",
    "modal-native.js": "var Modal = function (element) {\n  this.element = element;\n};\n",
}

HEADER = "// Native Javascript for Bootstrap 4 v2.0.27 | © dnp_theme | MIT-License\n"


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def project_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Temporary project with a three-module universe (Alert, Button, Modal).

    This is the single source of truth for the module directory layout.
    """
    monkeypatch.delenv("BSNBUNDLE_CONFIG", raising=False)
    module_dir = tmp_path / "lib" / "V4"
    module_dir.mkdir(parents=True)
    for filename, source in MODULE_SOURCES.items():
        (module_dir / filename).write_text(source, encoding="utf-8")
    (module_dir / "utils.js").write_text(UTILS_JS, encoding="utf-8")
    (module_dir / "utils-init.js").write_text(INIT_JS, encoding="utf-8")
    (tmp_path / "package.json").write_text(
        json.dumps({"name": "bootstrap.native", "version": "2.0.27", "license": "MIT"}),
        encoding="utf-8",
    )
    return tmp_path


@pytest.fixture
def module_dir(project_root: Path) -> Path:
    return project_root / "lib" / "V4"


@pytest.fixture
def settings(project_root: Path) -> BundleSettings:
    """Settings rooted at the temporary project."""
    return BundleSettings.from_cli(project_root=project_root)


@pytest.fixture
def _isolated_project(project_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to the temp project so the CLI builds from it.

    Use via ``@pytest.mark.usefixtures("_isolated_project")`` on command
    test classes.
    """
    monkeypatch.chdir(project_root)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def export_entries(bundle: str) -> list[str]:
    """Return the lines of the factory's ``return { ... };`` table."""
    lines = bundle.splitlines()
    start = lines.index("  return {")
    end = lines.index("  };", start)
    return [line.strip() for line in lines[start + 1 : end]]
