"""Exception classes for coloursum operations."""


class ColoursumError(Exception):
    """Base exception for coloursum operations."""

    error_prefix: str = "Operation failed"

    def __init__(self, message: str, target: str | None = None) -> None:
        """Initialize error with message and optional target.

        Args:
            message: Error message describing the failure.
            target: Optional value the failure relates to.

        """
        super().__init__(message)
        self.message = message
        self.target = target

    def __str__(self) -> str:
        """Return formatted error message."""
        if self.target:
            return f"{self.error_prefix} for '{self.target}': {self.message}"
        return f"{self.error_prefix}: {self.message}"


class DecodeError(ColoursumError):
    """Raised when a digest cannot be decoded as hexadecimal."""

    error_prefix = "Decoding failed"


class ConfigurationError(ColoursumError):
    """Raised when settings or logging configuration is invalid."""

    error_prefix = "Invalid configuration"


class ShellIntegrationError(ColoursumError):
    """Raised when shell wrapper generation is given invalid input."""

    error_prefix = "Shell integration failed"
