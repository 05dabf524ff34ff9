"""Shared fixtures for chromazone tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from chromazone.config import APP_DIR_NAME, STYLES_FILE_NAME

SAMPLE_STYLES = """\
[foo]
"hello" green,bold

[qux]
"world" yellow,underline
"foo" red
"""


@pytest.fixture
def config_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point XDG_CONFIG_HOME at an empty temporary directory."""
    home = tmp_path / "config"
    home.mkdir()
    monkeypatch.delenv("CHROMAZONE_STYLES", raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home))
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    return home


@pytest.fixture
def styles_file(config_home: Path) -> Path:
    """Write SAMPLE_STYLES to the default styles location."""
    path = config_home / APP_DIR_NAME / STYLES_FILE_NAME
    path.parent.mkdir(parents=True)
    path.write_text(SAMPLE_STYLES, encoding="utf-8")
    return path


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI runner for testing commands."""
    return CliRunner()
