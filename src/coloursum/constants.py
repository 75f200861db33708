"""Centralized constants module for coloursum.

Single source of truth for shared constants. Constants are grouped by
concern and use typing.Final annotations to ensure immutability.

Usage:
    from coloursum.constants import DEFAULT_PALETTE
"""

from typing import Final

# =============================================================================
# Rendering Constants
# =============================================================================

# xterm-256 colours, alternating warm and cool hues so that neighbouring
# segments contrast. All are >= 16 so every colour renders as 38;5;N.
DEFAULT_PALETTE: Final[tuple[int, ...]] = (203, 43, 220, 69, 171, 114, 209, 75)

# Minimum palette size; a single colour cannot separate segments
MIN_PALETTE_SIZE: Final[int] = 2

# Highest xterm-256 colour number
MAX_XTERM_COLOUR: Final[int] = 255

# Colour used by the "digits" scheme for decimal digits (xterm blue)
DIGIT_COLOUR: Final[int] = 4

# Characters per segment for each encoding. Each width covers a whole
# number of source bytes: hex 1, base64 3, base32 5, base85 4.
SEGMENT_WIDTHS: Final[dict[str, int]] = {
    "hex": 2,
    "base32": 8,
    "base64": 4,
    "base85": 5,
    "ecoji": 4,
}

HEX_DIGITS: Final[str] = "0123456789abcdefABCDEF"

# =============================================================================
# Shell Integration Constants
# =============================================================================

# Checksum commands wrapped by --shell-integration when installed
KNOWN_CHECKSUM_COMMANDS: Final[tuple[str, ...]] = (
    "md5",
    "md5sum",
    "sha1",
    "sha1sum",
    "sha224sum",
    "sha256",
    "sha256sum",
    "sha384sum",
    "sha512",
    "sha512sum",
    "shasum",
    "b2sum",
    "b3sum",
    "cksum",
)

SUPPORTED_SHELLS: Final[tuple[str, ...]] = ("bash", "zsh", "sh", "fish")
DEFAULT_SHELL: Final[str] = "bash"

# Name of the executable the generated wrappers pipe into
PROGRAM_NAME: Final[str] = "coloursum"

# =============================================================================
# Configuration Constants
# =============================================================================

CONFIG_FILE_NAME: Final[str] = "settings.conf"
CONFIG_DIR_NAME: Final[str] = ".config"
DEFAULT_CONFIG_SUBDIR: Final[str] = "coloursum"

# Environment overrides (used by the test suite for isolation)
ENV_CONFIG_DIR: Final[str] = "COLOURSUM_CONFIG_DIR"
ENV_LOG_DIR: Final[str] = "COLOURSUM_LOG_DIR"

SECTION_DEFAULT: Final[str] = "DEFAULT"

KEY_ENCODING: Final[str] = "encoding"
KEY_SCHEME: Final[str] = "scheme"
KEY_COLOUR: Final[str] = "colour"
KEY_SEGMENT_WIDTH: Final[str] = "segment_width"
KEY_PALETTE: Final[str] = "palette"
KEY_LOG_LEVEL: Final[str] = "log_level"
KEY_CONSOLE_LOG_LEVEL: Final[str] = "console_log_level"
KEY_LOG_FILE_ENABLED: Final[str] = "log_file_enabled"

DEFAULT_ENCODING: Final[str] = "hex"
DEFAULT_SCHEME: Final[str] = "palette"
DEFAULT_COLOUR: Final[str] = "auto"

# =============================================================================
# Logging Constants
# =============================================================================

DEFAULT_LOG_LEVEL: Final[str] = "INFO"
DEFAULT_CONSOLE_LOG_LEVEL: Final[str] = "WARNING"
LOG_FILE_NAME: Final[str] = "coloursum.log"

LOG_ROTATION_THRESHOLD_BYTES: Final[int] = 1024 * 1024
LOG_BACKUP_COUNT: Final[int] = 3

LOG_CONSOLE_FORMAT: Final[str] = "%(levelname)s - %(name)s - %(message)s"
LOG_CONSOLE_DATE_FORMAT: Final[str] = "%H:%M:%S"
LOG_FILE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - "
    "[%(funcName)s:%(lineno)d] - %(message)s"
)
LOG_FILE_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

LOG_COLORS: Final[dict[str, str]] = {
    "DEBUG": "\033[36m",  # Cyan
    "INFO": "\033[32m",  # Green
    "WARNING": "\033[33m",  # Yellow
    "ERROR": "\033[31m",  # Red
    "CRITICAL": "\033[35m",  # Magenta
    "RESET": "\033[0m",
}

# =============================================================================
# Exit Codes
# =============================================================================

EXIT_OK: Final[int] = 0
EXIT_IO_ERROR: Final[int] = 1
EXIT_USAGE_ERROR: Final[int] = 2
EXIT_INTERRUPTED: Final[int] = 130
