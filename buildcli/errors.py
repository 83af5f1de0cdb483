"""Errors raised while interpreting the command line."""

from enum import Enum


class UsagePresentation(Enum):
    """How the caller should present an invalid usage error."""

    PRINT = "print"
    """Show the full usage banner before the message"""

    IMPLY = "imply"
    """Show only a short hint pointing at --help"""


class InvalidUsage(Exception):
    """Raised when the command line cannot be interpreted."""

    def __init__(self, message: str, presentation: UsagePresentation):
        super().__init__(message)
        self.message = message
        self.presentation = presentation

    def __repr__(self) -> str:
        return f"InvalidUsage({self.message!r}, {self.presentation.name})"
