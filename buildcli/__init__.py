"""buildcli - command-line front end of a build tool."""

__version__ = "0.1.0"

from .configuration import Configuration
from .errors import InvalidUsage, UsagePresentation
from .modes import Build, Clean, CleanMode, Mode, Options, Usage, Version
from .resolver import parse_command_line

__all__ = [
    "Build",
    "Clean",
    "CleanMode",
    "Configuration",
    "InvalidUsage",
    "Mode",
    "Options",
    "Usage",
    "UsagePresentation",
    "Version",
    "parse_command_line",
]
