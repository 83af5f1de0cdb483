"""Modes and options resolved from a build invocation."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

from .configuration import Configuration


class CleanMode(Enum):
    """What a clean removes."""

    BUILD = "build"
    """Build intermediaries and products"""

    DIST = "dist"
    """Everything BUILD removes plus downloaded packages"""

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_string(cls, mode_str: str) -> Optional["CleanMode"]:
        """Look up a clean mode by its exact name.

        Args:
            mode_str: Mode name as typed on the command line

        Returns:
            CleanMode, or None if the name is not a clean mode
        """
        try:
            return cls(mode_str)
        except ValueError:
            return None


@dataclass(frozen=True)
class Build:
    """Build the package with a configuration."""

    configuration: Configuration = Configuration.DEBUG

    def __str__(self) -> str:
        return f"--configuration {self.configuration}"


@dataclass(frozen=True)
class Clean:
    """Delete build intermediaries and products."""

    clean_mode: CleanMode = CleanMode.BUILD

    def __str__(self) -> str:
        return f"--clean={self.clean_mode}"


@dataclass(frozen=True)
class Usage:
    """Show the usage banner."""

    def __str__(self) -> str:
        return "--help"


@dataclass(frozen=True)
class Version:
    """Show the tool version."""

    def __str__(self) -> str:
        return "--version"


Mode = Union[Build, Clean, Usage, Version]


def same_kind(first: Mode, second: Mode) -> bool:
    """Check whether two modes are the same variant, ignoring payload."""
    return type(first) is type(second)


@dataclass
class Options:
    """Auxiliary options accumulated while parsing."""

    chdir: Optional[str] = None
    """Working directory to change into before any other operation"""

    verbosity: int = 0
    """Number of times the verbose switch was given"""

    xcc: list[str] = field(default_factory=list)
    """Flags passed verbatim to every compiler invocation"""

    xlinker: list[str] = field(default_factory=list)
    """Flags passed verbatim to every linker invocation"""

    fetch_only: bool = False
    """Only fetch dependencies, do not build"""
