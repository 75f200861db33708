"""Tests for the process entry point."""

from unittest.mock import patch

import pytest

from coloursum.main import main


@pytest.fixture
def mock_runner():
    with patch("coloursum.main.CLIRunner") as mock_cls:
        yield mock_cls.return_value


def test_main_exits_with_runner_status(mock_runner) -> None:
    mock_runner.run.return_value = 0

    with pytest.raises(SystemExit) as exc_info:
        main(["--colour", "never"])

    assert exc_info.value.code == 0
    mock_runner.run.assert_called_once_with(["--colour", "never"])


def test_main_passes_through_usage_error(mock_runner) -> None:
    mock_runner.run.return_value = 2

    with pytest.raises(SystemExit) as exc_info:
        main([])

    assert exc_info.value.code == 2


def test_main_interrupt(mock_runner) -> None:
    mock_runner.run.side_effect = KeyboardInterrupt

    with pytest.raises(SystemExit) as exc_info:
        main([])

    assert exc_info.value.code == 130


def test_main_unexpected_error_is_logged(mock_runner, caplog) -> None:
    mock_runner.run.side_effect = RuntimeError("boom")

    with pytest.raises(SystemExit) as exc_info:
        main([])

    assert exc_info.value.code == 1
    assert "Unexpected error" in caplog.text


def test_main_flushes_logs(mock_runner) -> None:
    mock_runner.run.return_value = 0

    with (
        patch("coloursum.main.flush_all_handlers") as mock_flush,
        pytest.raises(SystemExit),
    ):
        main([])

    mock_flush.assert_called_once()
