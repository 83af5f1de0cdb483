"""Symbol definitions with emoji/ASCII fallbacks.

Usage:
    symbols = SymbolsFormatter()
    print(symbols.Info)  # Returns "ℹ️" or "i"
"""

import platform
import sys
from dataclasses import dataclass
from functools import cached_property


@dataclass(frozen=True)
class Symbol:
    """A symbol with emoji and ASCII fallback."""

    emoji: str
    ascii: str


class Symbols:
    """Symbol definitions as class attributes."""

    Info = Symbol("ℹ️", "i")

    # Plan entries
    Gear = Symbol("⚙️", ">")
    Folder = Symbol("📂", ">")
    Package = Symbol("📦", ">")
    Broom = Symbol("🧹", ">")
    Link = Symbol("🔗", ">")


class SymbolsFormatter:
    """Provides symbols with automatic emoji/ASCII fallback based on terminal support.

    Emoji is disabled when no_color=True or when the terminal doesn't support it.
    """

    def __init__(self, no_color: bool = False):
        self._no_color = no_color

    @cached_property
    def supports_emoji(self) -> bool:
        """Detect if terminal supports emoji display."""
        if self._no_color:
            return False

        if platform.system() == "Windows":
            return False

        if not hasattr(sys.stdout, "encoding") or sys.stdout.encoding is None:
            return False

        encoding = sys.stdout.encoding.lower()
        return any(enc in encoding for enc in ("utf-8", "utf8", "utf-16", "utf16"))

    def get(self, symbol: Symbol) -> str:
        """Resolve a symbol to emoji or ASCII based on support."""
        return symbol.emoji if self.supports_emoji else symbol.ascii

    @property
    def Info(self) -> str:
        return self.get(Symbols.Info)

    @property
    def Gear(self) -> str:
        return self.get(Symbols.Gear)

    @property
    def Folder(self) -> str:
        return self.get(Symbols.Folder)

    @property
    def Package(self) -> str:
        return self.get(Symbols.Package)

    @property
    def Broom(self) -> str:
        return self.get(Symbols.Broom)

    @property
    def Link(self) -> str:
        return self.get(Symbols.Link)
