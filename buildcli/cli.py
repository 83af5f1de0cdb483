"""Command-line interface for buildcli."""

import os
import platform
import sys
from typing import Callable, Optional

from rich.markup import escape

from . import __version__
from .errors import InvalidUsage, UsagePresentation
from .formatters import OutputFormatter
from .modes import Build, Clean, Mode, Options, Usage, Version
from .preprocessor import normalize_arguments
from .resolver import parse_command_line
from .tokenizer import Token
from .usage import PROGRAM_NAME, usage

BuildEngine = Callable[[Mode, Options], int]
"""Receives a resolved Build or Clean invocation and returns an exit code"""

EXIT_SUCCESS = 0
EXIT_INVALID_USAGE = 1


class CLI:
    """Command-line interface for buildcli."""

    def __init__(
        self,
        engine: Optional[BuildEngine] = None,
        no_color: Optional[bool] = None,
    ):
        """
        Args:
            engine: Build engine to run Build and Clean modes with. Without
                one, the resolved invocation plan is printed instead.
            no_color: Force colors off or on; None applies environment defaults
        """
        self.engine = engine
        self.no_color = no_color

    def run(self, argv: Optional[list[str]] = None) -> int:
        """Run the CLI.

        Args:
            argv: Command-line arguments (defaults to sys.argv[1:])

        Returns:
            Exit code
        """
        args = list(sys.argv[1:] if argv is None else argv)
        output = OutputFormatter(no_color=self._apply_environment_defaults())

        tokens: list[Token] = []
        try:
            mode, options = parse_command_line(args, observer=tokens.append)
        except InvalidUsage as e:
            self._report_invalid_usage(e, output)
            return EXIT_INVALID_USAGE

        output.verbosity = options.verbosity
        output.print_debug(f"Arguments: {' '.join(normalize_arguments(args))}")
        for token in tokens:
            output.print_debug(f"Token: {token}", level=2)

        if isinstance(mode, Usage):
            usage(output.print_line)
            return EXIT_SUCCESS

        if isinstance(mode, Version):
            output.print_line(f"{PROGRAM_NAME} {__version__}")
            return EXIT_SUCCESS

        if self.engine is not None:
            return self.engine(mode, options)

        self._show_plan(mode, options, output)
        return EXIT_SUCCESS

    def _apply_environment_defaults(self) -> bool:
        """Decide whether colors are disabled when not forced by the caller."""
        if self.no_color is not None:
            return self.no_color

        if os.environ.get("NO_COLOR"):
            return True
        if os.environ.get("TERM") == "dumb":
            return True

        # GitHub Actions logs on Windows do not render ANSI codes
        github_actions = os.environ.get("GITHUB_ACTIONS") == "true"
        return github_actions and platform.system() == "Windows"

    def _report_invalid_usage(self, error: InvalidUsage, output: OutputFormatter) -> None:
        if error.presentation is UsagePresentation.PRINT:
            usage(output.print_line)
            output.print_line("")
            output.print_error(error.message)
        else:
            output.print_error(error.message)
            output.print_hint(f"enter `{PROGRAM_NAME} --help' for usage information")

    def _show_plan(self, mode: Mode, options: Options, output: OutputFormatter) -> None:
        """Print the resolved invocation without running it."""
        symbols = output.symbols

        if isinstance(mode, Build):
            action = "fetch dependencies" if options.fetch_only else "build"
            output.print(
                f"{symbols.Package} [dim]Mode:[/dim] [bold]{action}[/bold] "
                f"([cyan]{mode.configuration}[/cyan])"
            )
        elif isinstance(mode, Clean):
            output.print(
                f"{symbols.Broom} [dim]Mode:[/dim] [bold]clean[/bold] "
                f"([cyan]{mode.clean_mode}[/cyan])"
            )

        if options.chdir is not None:
            output.print(f"{symbols.Folder} [dim]Working directory:[/dim] {escape(options.chdir)}")

        if options.xcc:
            output.print(f"{symbols.Gear} [dim]Compiler flags:[/dim]")
            for flag in options.xcc:
                output.print_line(f"  {flag}")

        if options.xlinker:
            output.print(f"{symbols.Link} [dim]Linker flags:[/dim]")
            for flag in options.xlinker:
                output.print_line(f"  {flag}")

        output.print(f"\n{symbols.Info} [dim]No build engine attached - not executing[/dim]")


def main() -> int:
    """Main entry point."""
    cli = CLI()
    return cli.run()


if __name__ == "__main__":
    sys.exit(main())
