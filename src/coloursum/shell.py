"""Shell integration snippets.

Generates functions that shadow checksum commands and pipe their output
through coloursum, e.g. for bash::

    md5sum() {
        command md5sum "$@" | coloursum --encoding base64
    }

Typical use: ``eval "$(coloursum --shell-integration)"`` in ~/.bashrc, or
``coloursum --shell-integration fish | source`` in config.fish.
"""

from __future__ import annotations

import os
import re
import shlex
import shutil
from collections.abc import Callable, Iterable
from pathlib import Path

from coloursum.constants import (
    DEFAULT_SHELL,
    KNOWN_CHECKSUM_COMMANDS,
    PROGRAM_NAME,
    SUPPORTED_SHELLS,
)
from coloursum.core.options import Settings
from coloursum.exceptions import ShellIntegrationError
from coloursum.logger import get_logger

logger = get_logger(__name__)

_COMMAND_NAME_PATTERN = re.compile(r"[A-Za-z0-9_.+-]+")

_POSIX_TEMPLATE = """\
{name}() {{
    command {name} "$@" | {pipeline}
}}
"""

_FISH_TEMPLATE = """\
function {name} --wraps {name}
    command {name} $argv | {pipeline}
end
"""


def detect_shell(environ: dict[str, str] | None = None) -> str:
    """Guess the user's shell from $SHELL.

    Returns:
        A member of SUPPORTED_SHELLS, DEFAULT_SHELL if unknown.

    """
    env = os.environ if environ is None else environ
    name = Path(env.get("SHELL", "")).name
    return name if name in SUPPORTED_SHELLS else DEFAULT_SHELL


def available_commands(
    which: Callable[[str], str | None] = shutil.which,
) -> list[str]:
    """Return the known checksum commands that are installed."""
    found = [name for name in KNOWN_CHECKSUM_COMMANDS if which(name)]
    logger.debug("Found checksum commands: %s", ", ".join(found) or "none")
    return found


def _validate_command(name: str) -> str:
    if not _COMMAND_NAME_PATTERN.fullmatch(name):
        raise ShellIntegrationError(
            "command names may only contain letters, digits and _.+-",
            target=name,
        )
    return name


def generate_shell_integration(
    commands: Iterable[str],
    settings: Settings,
    shell: str = DEFAULT_SHELL,
) -> str:
    """Build wrapper functions for the given commands.

    Args:
        commands: Checksum command names to wrap.
        settings: Settings whose non-default values become flags on the
            coloursum invocation.
        shell: Target shell, one of SUPPORTED_SHELLS.

    Returns:
        Shell source text, one function per command.

    Raises:
        ShellIntegrationError: For an unsupported shell or a command name
            that is unsafe to splice into shell source.

    """
    if shell not in SUPPORTED_SHELLS:
        msg = f"unsupported shell, choose from {', '.join(SUPPORTED_SHELLS)}"
        raise ShellIntegrationError(msg, target=shell)

    template = _FISH_TEMPLATE if shell == "fish" else _POSIX_TEMPLATE
    pipeline = shlex.join([PROGRAM_NAME, *settings.to_cli_args()])

    return "".join(
        template.format(name=_validate_command(name), pipeline=pipeline)
        for name in commands
    )
