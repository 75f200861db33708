"""INI settings manager.

The settings file only supplies defaults for the command line; coloursum
never writes it. Example ``~/.config/coloursum/settings.conf``::

    [DEFAULT]
    encoding = base64
    scheme = palette
    colour = auto
    segment_width =
    palette = 203, 43, 220, 69
    console_log_level = WARNING
    log_level = INFO
    log_file_enabled = false
"""

import configparser
from dataclasses import dataclass
from pathlib import Path

from coloursum.config.paths import Paths
from coloursum.constants import (
    DEFAULT_COLOUR,
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_ENCODING,
    DEFAULT_LOG_LEVEL,
    DEFAULT_PALETTE,
    DEFAULT_SCHEME,
    KEY_COLOUR,
    KEY_CONSOLE_LOG_LEVEL,
    KEY_ENCODING,
    KEY_LOG_FILE_ENABLED,
    KEY_LOG_LEVEL,
    KEY_PALETTE,
    KEY_SCHEME,
    KEY_SEGMENT_WIDTH,
    MAX_XTERM_COLOUR,
    MIN_PALETTE_SIZE,
    SECTION_DEFAULT,
)
from coloursum.core.options import (
    ColourChoice,
    ColourScheme,
    DigestEncoding,
    Settings,
)
from coloursum.exceptions import ConfigurationError
from coloursum.logger import get_logger

logger = get_logger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True, slots=True)
class LoggingConfig:
    """Logging levels and file toggle from the settings file."""

    console_level: str = DEFAULT_CONSOLE_LOG_LEVEL
    file_level: str = DEFAULT_LOG_LEVEL
    file_enabled: bool = False


def parse_palette(value: str) -> tuple[int, ...]:
    """Parse a comma-separated list of xterm-256 colour numbers.

    Raises:
        ConfigurationError: On non-numbers, out-of-range colours, fewer
            than two colours, or a colour next to itself. The palette wraps,
            so the last and first colours count as neighbours.

    """
    try:
        palette = tuple(int(part) for part in value.split(",") if part.strip())
    except ValueError as e:
        raise ConfigurationError(
            "palette must be comma-separated numbers", target=value
        ) from e

    if len(palette) < MIN_PALETTE_SIZE:
        msg = f"palette needs at least {MIN_PALETTE_SIZE} colours"
        raise ConfigurationError(msg, target=value)
    if any(not 0 <= colour <= MAX_XTERM_COLOUR for colour in palette):
        msg = f"palette colours must be between 0 and {MAX_XTERM_COLOUR}"
        raise ConfigurationError(msg, target=value)
    if any(
        colour == palette[(index + 1) % len(palette)]
        for index, colour in enumerate(palette)
    ):
        raise ConfigurationError(
            "neighbouring palette colours must differ", target=value
        )
    return palette


def parse_segment_width(value: str) -> int | None:
    """Parse segment_width; an empty value means the encoding's default.

    Raises:
        ConfigurationError: If the value is not a positive integer.

    """
    if not value.strip():
        return None
    try:
        width = int(value)
    except ValueError as e:
        raise ConfigurationError(
            "segment_width must be a whole number", target=value
        ) from e
    if width < 1:
        raise ConfigurationError("segment_width must be positive", target=value)
    return width


def _parse_choice(enum_type, key: str, value: str):
    try:
        return enum_type(value.strip().lower())
    except ValueError as e:
        choices = ", ".join(member.value for member in enum_type)
        msg = f"{key} must be one of: {choices}"
        raise ConfigurationError(msg, target=value) from e


def _parse_level(key: str, value: str) -> str:
    level = value.strip().upper()
    if level not in _LOG_LEVELS:
        msg = f"{key} must be one of: {', '.join(_LOG_LEVELS)}"
        raise ConfigurationError(msg, target=value)
    return level


class ConfigManager:
    """Reads the global settings file."""

    def __init__(self, settings_file: Path | None = None) -> None:
        """Initialize the manager.

        Args:
            settings_file: Path to settings.conf
                (defaults to Paths.settings_file())

        """
        self.settings_file = settings_file or Paths.settings_file()

    def get_default_config(self) -> dict[str, str]:
        """Get default configuration values as INI strings."""
        return {
            KEY_ENCODING: DEFAULT_ENCODING,
            KEY_SCHEME: DEFAULT_SCHEME,
            KEY_COLOUR: DEFAULT_COLOUR,
            KEY_SEGMENT_WIDTH: "",
            KEY_PALETTE: ", ".join(str(colour) for colour in DEFAULT_PALETTE),
            KEY_CONSOLE_LOG_LEVEL: DEFAULT_CONSOLE_LOG_LEVEL,
            KEY_LOG_LEVEL: DEFAULT_LOG_LEVEL,
            KEY_LOG_FILE_ENABLED: "false",
        }

    def _read(self) -> configparser.SectionProxy:
        """Read the settings file layered over the defaults.

        Raises:
            ConfigurationError: If the file exists but is not valid INI.

        """
        config = configparser.ConfigParser(
            inline_comment_prefixes=("#", ";"),
            interpolation=None,
        )
        config.read_dict({SECTION_DEFAULT: self.get_default_config()})

        if self.settings_file.exists():
            try:
                config.read(self.settings_file, encoding="utf-8")
            except (configparser.Error, UnicodeDecodeError) as e:
                raise ConfigurationError(
                    str(e), target=str(self.settings_file)
                ) from e
            logger.debug("Loaded settings from %s", self.settings_file)

        return config[SECTION_DEFAULT]

    def load_settings(self) -> Settings:
        """Load rendering settings.

        Returns:
            Settings built from the file, or defaults if it is absent.

        Raises:
            ConfigurationError: If any value is invalid.

        """
        section = self._read()
        return Settings(
            encoding=_parse_choice(
                DigestEncoding, KEY_ENCODING, section[KEY_ENCODING]
            ),
            scheme=_parse_choice(ColourScheme, KEY_SCHEME, section[KEY_SCHEME]),
            colour=_parse_choice(ColourChoice, KEY_COLOUR, section[KEY_COLOUR]),
            segment_width=parse_segment_width(section[KEY_SEGMENT_WIDTH]),
            palette=parse_palette(section[KEY_PALETTE]),
        )

    def load_logging_config(self) -> LoggingConfig:
        """Load logging levels and the file logging toggle.

        Raises:
            ConfigurationError: If a level or boolean is invalid.

        """
        section = self._read()
        try:
            file_enabled = section.getboolean(KEY_LOG_FILE_ENABLED)
        except ValueError as e:
            raise ConfigurationError(
                f"{KEY_LOG_FILE_ENABLED} must be a boolean",
                target=section[KEY_LOG_FILE_ENABLED],
            ) from e

        return LoggingConfig(
            console_level=_parse_level(
                KEY_CONSOLE_LOG_LEVEL, section[KEY_CONSOLE_LOG_LEVEL]
            ),
            file_level=_parse_level(KEY_LOG_LEVEL, section[KEY_LOG_LEVEL]),
            file_enabled=bool(file_enabled),
        )
