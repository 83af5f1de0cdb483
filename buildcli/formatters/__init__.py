"""Formatters package for buildcli terminal output.

Usage:
    output = OutputFormatter(no_color=False)
    output.print(f"{output.symbols.Info} Nothing to do")
"""

from .output import OutputFormatter
from .symbols import SymbolsFormatter

__all__ = [
    "OutputFormatter",
    "SymbolsFormatter",
]
