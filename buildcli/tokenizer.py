"""Classification of normalized arguments into tokens.

The tokenizer is a cursor over the normalized argument list. Arguments are
classified on demand: a mode selector, a switch, or a bare name. The
resolver drives the cursor and may look one token ahead before deciding
whether to consume it.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Union

from .errors import InvalidUsage, UsagePresentation
from .preprocessor import SHORT_PREFIX


class ModeSelector(Enum):
    """Arguments that select the mode of the invocation."""

    BUILD = "--configuration"
    CLEAN = "--clean"
    USAGE = "--help"
    VERSION = "--version"

    @classmethod
    def from_argument(cls, arg: str) -> Optional["ModeSelector"]:
        """Look up a mode selector by its long spelling or short alias."""
        if arg in _MODE_ALIASES:
            return _MODE_ALIASES[arg]
        try:
            return cls(arg)
        except ValueError:
            return None


class Switch(Enum):
    """Arguments that adjust options without selecting a mode."""

    CHDIR = "--chdir"
    VERBOSE = "--verbose"
    XCC = "-Xcc"
    XLINKER = "-Xlinker"
    GET = "--get"

    @classmethod
    def from_argument(cls, arg: str) -> Optional["Switch"]:
        """Look up a switch by its long spelling or short alias."""
        if arg in _SWITCH_ALIASES:
            return _SWITCH_ALIASES[arg]
        try:
            return cls(arg)
        except ValueError:
            return None


_MODE_ALIASES = {
    "-c": ModeSelector.BUILD,
    "-k": ModeSelector.CLEAN,
}

_SWITCH_ALIASES = {
    "-C": Switch.CHDIR,
    "-v": Switch.VERBOSE,
}


@dataclass(frozen=True)
class ModeToken:
    """A recognized mode selector."""

    selector: ModeSelector

    def __str__(self) -> str:
        return f"mode {self.selector.value}"


@dataclass(frozen=True)
class SwitchToken:
    """A recognized switch."""

    switch: Switch

    def __str__(self) -> str:
        return f"switch {self.switch.value}"


@dataclass(frozen=True)
class NameToken:
    """A bare argument that is neither a mode selector nor a switch."""

    name: str

    def __str__(self) -> str:
        return f"name {self.name}"


Token = Union[ModeToken, SwitchToken, NameToken]

EXPECTED_ARGUMENT = "expected argument"


def classify(arg: str) -> Token:
    """Classify a single normalized argument.

    Args:
        arg: Argument to classify (exact, case-sensitive match)

    Returns:
        The token the argument stands for

    Raises:
        InvalidUsage: If the argument is dash-prefixed but not recognized
    """
    selector = ModeSelector.from_argument(arg)
    if selector is not None:
        return ModeToken(selector)

    switch = Switch.from_argument(arg)
    if switch is not None:
        return SwitchToken(switch)

    if arg.startswith(SHORT_PREFIX):
        raise InvalidUsage(f"unknown argument: {arg}", UsagePresentation.IMPLY)

    return NameToken(arg)


class Tokenizer:
    """Cursor over normalized arguments with one-token lookahead."""

    def __init__(self, arguments: Sequence[str]):
        self._arguments = list(arguments)
        self._position = 0

    @property
    def has_more(self) -> bool:
        """Check whether any arguments remain."""
        return self._position < len(self._arguments)

    def pop(self) -> Token:
        """Consume and classify the next argument."""
        return classify(self.raw_pop())

    def peek(self) -> Optional[Token]:
        """Classify the next argument without consuming it.

        Returns:
            The next token, or None when no arguments remain
        """
        if not self.has_more:
            return None
        return classify(self._arguments[self._position])

    def consume_peeked(self) -> None:
        """Consume the argument returned by the last peek."""
        if not self.has_more:
            raise InvalidUsage(EXPECTED_ARGUMENT, UsagePresentation.IMPLY)
        self._position += 1

    def raw_pop(self) -> str:
        """Consume the next argument verbatim, without classifying it."""
        if not self.has_more:
            raise InvalidUsage(EXPECTED_ARGUMENT, UsagePresentation.IMPLY)
        arg = self._arguments[self._position]
        self._position += 1
        return arg
