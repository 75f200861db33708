"""Tests for the INI settings manager."""

import logging
from pathlib import Path

import pytest

from coloursum.config import ConfigManager, LoggingConfig, Paths
from coloursum.config.settings import parse_palette, parse_segment_width
from coloursum.constants import DEFAULT_PALETTE
from coloursum.core.options import (
    ColourChoice,
    ColourScheme,
    DigestEncoding,
    Settings,
)
from coloursum.exceptions import ConfigurationError


@pytest.fixture
def settings_file(tmp_path: Path) -> Path:
    return tmp_path / "settings.conf"


def write(path: Path, body: str) -> ConfigManager:
    path.write_text("[DEFAULT]\n" + body, encoding="utf-8")
    return ConfigManager(path)


def test_missing_file_gives_defaults(settings_file: Path) -> None:
    manager = ConfigManager(settings_file)

    assert manager.load_settings() == Settings()
    assert manager.load_logging_config() == LoggingConfig()
    assert not settings_file.exists()


def test_values_are_read(settings_file: Path) -> None:
    manager = write(
        settings_file,
        "encoding = base64\n"
        "scheme = BYTE  # inline comment\n"
        "colour = never\n"
        "segment_width = 6\n"
        "palette = 1, 2, 3\n",
    )

    assert manager.load_settings() == Settings(
        encoding=DigestEncoding.BASE64,
        scheme=ColourScheme.BYTE,
        colour=ColourChoice.NEVER,
        segment_width=6,
        palette=(1, 2, 3),
    )


def test_logging_values_are_read(settings_file: Path) -> None:
    manager = write(
        settings_file,
        "console_log_level = debug\nlog_level = ERROR\nlog_file_enabled = yes\n",
    )

    assert manager.load_logging_config() == LoggingConfig(
        console_level="DEBUG", file_level="ERROR", file_enabled=True
    )


@pytest.mark.parametrize(
    "body",
    [
        "encoding = rot13\n",
        "scheme = rainbow\n",
        "colour = sometimes\n",
        "segment_width = 0\n",
        "segment_width = two\n",
        "palette = 7\n",
        "palette = 1, 256\n",
        "palette = red, blue\n",
        "palette = 4, 4\n",
    ],
)
def test_invalid_render_values(settings_file: Path, body: str) -> None:
    manager = write(settings_file, body)

    with pytest.raises(ConfigurationError):
        manager.load_settings()


@pytest.mark.parametrize(
    "body",
    ["console_log_level = LOUD\n", "log_file_enabled = maybe\n"],
)
def test_invalid_logging_values(settings_file: Path, body: str) -> None:
    manager = write(settings_file, body)

    with pytest.raises(ConfigurationError):
        manager.load_logging_config()


def test_malformed_file(settings_file: Path) -> None:
    settings_file.write_text("no section header\n", encoding="utf-8")

    with pytest.raises(ConfigurationError, match="Invalid configuration"):
        ConfigManager(settings_file).load_settings()


def test_parse_palette() -> None:
    assert parse_palette("203, 43,220") == (203, 43, 220)
    assert parse_palette("1,2,") == (1, 2)
    assert parse_palette("1, 2, 1, 3") == (1, 2, 1, 3)


@pytest.mark.parametrize("value", ["4, 4", "1, 2, 2, 3", "1, 2, 1"])
def test_parse_palette_rejects_repeated_neighbours(value: str) -> None:
    with pytest.raises(ConfigurationError, match="neighbouring"):
        parse_palette(value)


def test_parse_segment_width() -> None:
    assert parse_segment_width("") is None
    assert parse_segment_width(" 3 ") == 3


def test_default_palette_is_written_as_ini() -> None:
    defaults = ConfigManager(Path("unused")).get_default_config()

    assert parse_palette(defaults["palette"]) == DEFAULT_PALETTE


def test_paths_honour_environment(tmp_path: Path) -> None:
    # COLOURSUM_CONFIG_DIR is set by the isolated_environment fixture
    assert Paths.settings_file() == tmp_path / "config" / "settings.conf"
    assert ConfigManager().settings_file == Paths.settings_file()


def test_paths_default_to_home(monkeypatch) -> None:
    monkeypatch.delenv("COLOURSUM_CONFIG_DIR")

    assert Paths.config_dir() == Path.home() / ".config" / "coloursum"


def test_loading_is_logged_through_package_logger(
    settings_file: Path, caplog
) -> None:
    caplog.set_level(logging.DEBUG, logger="coloursum")
    write(settings_file, "colour = never\n").load_settings()

    assert any(
        record.name == "coloursum.config.settings"
        and "Loaded settings from" in record.getMessage()
        for record in caplog.records
    )
