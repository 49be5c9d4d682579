"""
Exception hierarchy for the hypa converter.
"""


class HypaError(Exception):
    """Base class for every error raised by this package."""


class MalformedStateError(HypaError):
    """
    Raised when a label line arrives but the last block is not a link.

    Attributes:
        line_index: Zero-based index of the offending input line.
    """

    def __init__(self, line_index: int, message: str | None = None):
        self.line_index = line_index
        super().__init__(
            message or f"Label at line {line_index} has no preceding link block"
        )


class ConfigError(HypaError):
    """Raised when a configuration file is missing or invalid."""
