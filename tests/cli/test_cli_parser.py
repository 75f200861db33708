"""Tests for the argument parser."""

import pytest

from coloursum.cli.parser import CLIParser
from coloursum.core.options import (
    ColourChoice,
    ColourScheme,
    DigestEncoding,
    Settings,
)


@pytest.fixture
def cli_parser() -> CLIParser:
    return CLIParser(Settings())


def test_defaults(cli_parser: CLIParser) -> None:
    args = cli_parser.parse_args([])

    assert args.encoding is DigestEncoding.HEX
    assert args.scheme is ColourScheme.PALETTE
    assert args.colour is ColourChoice.AUTO
    assert args.segment_width is None
    assert args.shell_integration is None
    assert args.commands == []
    assert not args.verbose
    assert not args.version


def test_render_options(cli_parser: CLIParser) -> None:
    args = cli_parser.parse_args(
        ["-e", "base85", "--scheme", "digits", "--color", "never", "-w", "3"]
    )

    assert args.encoding is DigestEncoding.BASE85
    assert args.scheme is ColourScheme.DIGITS
    assert args.colour is ColourChoice.NEVER
    assert args.segment_width == 3


def test_settings_supply_defaults() -> None:
    settings = Settings(
        encoding=DigestEncoding.BASE64,
        colour=ColourChoice.ALWAYS,
        segment_width=8,
    )
    args = CLIParser(settings).parse_args([])

    assert args.encoding is DigestEncoding.BASE64
    assert args.colour is ColourChoice.ALWAYS
    assert args.segment_width == 8


def test_flags_override_settings() -> None:
    settings = Settings(encoding=DigestEncoding.BASE64)
    args = CLIParser(settings).parse_args(["--encoding", "hex"])

    assert args.encoding is DigestEncoding.HEX


def test_shell_integration_without_shell(cli_parser: CLIParser) -> None:
    args = cli_parser.parse_args(["--shell-integration"])

    assert args.shell_integration == ""


def test_shell_integration_with_commands(cli_parser: CLIParser) -> None:
    args = cli_parser.parse_args(
        ["--shell-integration", "fish", "--command", "md5", "--command", "b2sum"]
    )

    assert args.shell_integration == "fish"
    assert args.commands == ["md5", "b2sum"]


@pytest.mark.parametrize(
    "argv",
    [
        ["--encoding", "rot13"],
        ["--scheme", "rainbow"],
        ["--colour", "sometimes"],
        ["--segment-width", "0"],
        ["--segment-width", "x"],
        ["--shell-integration", "powershell"],
    ],
)
def test_invalid_arguments_exit_with_usage_error(
    cli_parser: CLIParser, argv: list[str]
) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli_parser.parse_args(argv)

    assert exc_info.value.code == 2


def test_ecoji_encoding(cli_parser: CLIParser) -> None:
    args = cli_parser.parse_args(["-e", "ecoji"])

    assert args.encoding is DigestEncoding.ECOJI
