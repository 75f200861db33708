"""Command-line interface for coloursum."""

from coloursum.cli.parser import CLIParser
from coloursum.cli.runner import CLIRunner

__all__ = ["CLIParser", "CLIRunner"]
