"""Fixtures for CLI tests."""

import io
from pathlib import Path
from unittest.mock import patch

import pytest

from coloursum.cli import CLIRunner
from coloursum.config import ConfigManager


@pytest.fixture(autouse=True)
def keep_logging_handlers():
    """Stop the runner from rebuilding log handlers during tests."""
    with patch("coloursum.cli.runner.setup_logging") as mock_setup:
        yield mock_setup


@pytest.fixture
def settings_file(tmp_path: Path) -> Path:
    return tmp_path / "settings.conf"


@pytest.fixture
def make_runner(settings_file: Path):
    """Build a CLIRunner reading stdin_text and writing to a StringIO."""

    def _make(stdin_text: str = "") -> tuple[CLIRunner, io.StringIO]:
        stdout = io.StringIO()
        runner = CLIRunner(
            config_manager=ConfigManager(settings_file),
            stdin=io.StringIO(stdin_text),
            stdout=stdout,
        )
        return runner, stdout

    return _make
