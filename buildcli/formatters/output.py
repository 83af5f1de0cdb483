"""Output formatter - the single entry point for terminal output.

The OutputFormatter owns a Rich console with no_color support. Errors and
diagnostics go to stderr, the rest to stdout. Diagnostic lines are
only shown when the configured verbosity is high enough.

Usage:
    output = OutputFormatter(no_color=False, verbosity=1)
    output.print(f"{output.symbols.Package} Done")
    output.print_debug("normalized: -v -v")
"""

from typing import Union

from rich.console import Console
from rich.text import Text

from .symbols import SymbolsFormatter


class OutputFormatter:
    """Handles formatted output using Rich console with emoji support detection."""

    def __init__(self, no_color: bool = False, verbosity: int = 0):
        """Initialize output formatter.

        Args:
            no_color: If True, disable all colors and styling
            verbosity: Diagnostic level; print_debug lines at or below it are shown
        """
        self._verbosity = verbosity
        self._console = Console(
            no_color=no_color,
            force_terminal=None,
            highlight=False,
        )
        self._error_console = Console(
            no_color=no_color,
            force_terminal=None,
            highlight=False,
            stderr=True,
        )
        self._symbols = SymbolsFormatter(no_color=no_color)

    @property
    def symbols(self) -> SymbolsFormatter:
        """Get the symbols formatter for emoji/ASCII symbol access."""
        return self._symbols

    @property
    def verbosity(self) -> int:
        return self._verbosity

    @verbosity.setter
    def verbosity(self, value: int) -> None:
        self._verbosity = value

    def print(self, message: Union[str, Text]) -> None:
        """Print message using Rich console.

        Args:
            message: Message to print (string or Rich Text)
        """
        self._console.print(message, highlight=False, soft_wrap=True)

    def print_line(self, line: str) -> None:
        """Print a line exactly as given, with no markup interpretation.

        Suitable as a line sink for the usage banner.
        """
        self._console.print(Text(line), highlight=False, soft_wrap=True)

    def print_error(self, message: str) -> None:
        """Print an error message to stderr.

        Args:
            message: Error message to print
        """
        line = Text()
        line.append("error: ", style="bold red")
        line.append(message)
        self._error_console.print(line, highlight=False, soft_wrap=True)

    def print_hint(self, message: str) -> None:
        """Print a dimmed hint to stderr."""
        self._error_console.print(
            Text(message, style="dim"), highlight=False, soft_wrap=True
        )

    def print_debug(self, message: str, level: int = 1) -> None:
        """Print a diagnostic line when verbosity is at least level.

        Args:
            message: Diagnostic message
            level: Minimum verbosity required to show the message
        """
        if self._verbosity < level:
            return
        line = Text()
        line.append(f"{self._symbols.Info} ", style="blue")
        line.append(message, style="dim")
        self._error_console.print(line, highlight=False, soft_wrap=True)
