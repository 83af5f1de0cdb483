"""Usage banner for the build tool."""

from typing import Callable

PROGRAM_NAME = "buildcli"

_USAGE_LINES = (
    "OVERVIEW: Build sources into binary products",
    "",
    f"USAGE: {PROGRAM_NAME} [options]",
    "",
    "MODES:",
    "  --configuration <value>  Build with configuration (debug|release) [-c]",
    "  --clean[=<mode>]         Delete all build intermediaries and products [-k]",
    "                           <mode> is one of:",
    "                           build - Build intermediaries and products",
    "                           dist  - All of 'build' plus downloaded packages",
    "                           If no mode is given, 'build' is the default.",
    "  --help                   Display this usage information",
    "  --version                Display the tool version",
    "",
    "OPTIONS:",
    "  --chdir <value>    Change working directory before any other operation [-C]",
    "  -v[v]              Increase verbosity of informational output [--verbose]",
    "  -Xcc <flag>        Pass flag through to all compiler instantiations",
    "  -Xlinker <flag>    Pass flag through to all linker instantiations",
    "  --get              Only pull down dependencies without building binaries",
)


def usage(print_line: Callable[[str], None] = print) -> None:
    """Write the usage banner one line at a time.

    Args:
        print_line: Sink receiving each line, without trailing newline
    """
    for line in _USAGE_LINES:
        print_line(line)
