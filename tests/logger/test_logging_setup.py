"""Tests for the logging package."""

import io
import logging
from pathlib import Path
from unittest.mock import patch

import pytest
from pytest import MonkeyPatch

from coloursum.constants import LOG_COLORS
from coloursum.logger import (
    ColoredConsoleFormatter,
    flush_all_handlers,
    get_logger,
    get_state,
    setup_logging,
)
from coloursum.logger.config import default_log_path, load_log_settings
from coloursum.logger.state import LoggingState


@pytest.fixture
def restore_logging():
    """Rebuild the default handlers after a test reconfigures logging."""
    yield
    setup_logging(force=True)


def test_load_log_settings_with_env_var(monkeypatch: MonkeyPatch) -> None:
    monkeypatch.setenv("COLOURSUM_LOG_DIR", "/tmp/pytest-test-logs")

    console_level, file_level, log_path = load_log_settings()

    assert console_level == "WARNING"
    assert file_level == "INFO"
    assert log_path == Path("/tmp/pytest-test-logs") / "coloursum.log"


def test_load_log_settings_without_env_var(monkeypatch: MonkeyPatch) -> None:
    monkeypatch.delenv("COLOURSUM_LOG_DIR", raising=False)

    assert default_log_path() == (
        Path.home() / ".config" / "coloursum" / "logs" / "coloursum.log"
    )


def test_log_dir_expands_tilde(monkeypatch: MonkeyPatch) -> None:
    monkeypatch.setenv("COLOURSUM_LOG_DIR", "~/custom-logs")

    log_path = default_log_path()

    assert log_path == Path.home() / "custom-logs" / "coloursum.log"
    assert "~" not in str(log_path)


def test_colored_formatter_colours_level_only_while_formatting() -> None:
    formatter = ColoredConsoleFormatter("%(levelname)s - %(message)s")
    record = logging.LogRecord(
        "coloursum", logging.ERROR, "", 0, "broken %s", ("pipe",), None
    )

    output = formatter.format(record)

    assert output == f"{LOG_COLORS['ERROR']}ERROR{LOG_COLORS['RESET']} - broken pipe"
    assert record.levelname == "ERROR"


def test_get_logger_returns_child_of_root() -> None:
    logger = get_logger("coloursum.some.module")

    assert logger.name == "coloursum.some.module"
    assert get_state().root_initialized


@pytest.mark.usefixtures("restore_logging")
def test_console_handler_writes_to_stderr() -> None:
    with patch("sys.stderr", new=io.StringIO()) as fake_stderr, patch(
        "sys.stdout", new=io.StringIO()
    ) as fake_stdout:
        setup_logging(force=True)
        get_logger("coloursum.test").warning("diagnostic %d", 42)
        flush_all_handlers()

    assert "diagnostic 42" in fake_stderr.getvalue()
    assert fake_stdout.getvalue() == ""


@pytest.mark.usefixtures("restore_logging")
def test_file_logging(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "coloursum.log"
    logger = setup_logging(
        name="coloursum.test",
        console_level="CRITICAL",
        file_level="DEBUG",
        log_file=log_file,
        enable_file_logging=True,
        force=True,
    )

    logger.debug("written to %s", "file")
    flush_all_handlers()

    assert "written to file" in log_file.read_text(encoding="utf-8")


@pytest.mark.usefixtures("restore_logging")
def test_force_replaces_listener() -> None:
    before = get_state().queue_listener

    setup_logging(force=True)

    assert get_state().queue_listener is not before
    assert len(logging.getLogger("coloursum").handlers) == 1


def test_logging_state_lifecycle() -> None:
    state = LoggingState()
    stream = io.StringIO()
    handler = logging.StreamHandler(stream)

    log_queue = state.start(handler)
    assert state.root_initialized
    log_queue.put(
        logging.LogRecord(
            "coloursum.test", logging.INFO, "", 0, "queued %d", (1,), None
        )
    )
    state.flush()

    assert stream.getvalue() == "queued 1\n"

    state.stop()
    assert not state.root_initialized
    assert state.queue_listener is None
    assert state.log_queue is None


def test_flush_without_listener_is_a_no_op() -> None:
    state = LoggingState()

    state.flush()
    state.stop()

    assert state.queue_listener is None
