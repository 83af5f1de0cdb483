"""Normalization of raw command-line arguments before tokenizing."""

from typing import Iterable, List

PASS_THROUGH_SWITCHES = ("-Xcc", "-Xlinker")
SHORT_PREFIX = "-"
LONG_PREFIX = "--"
ASSIGNMENT_SEPARATOR = "="


def _split_short_flags(arg: str) -> List[str]:
    """Split bundled short flags, e.g. -vv into -v -v."""
    return [SHORT_PREFIX + char for char in arg[len(SHORT_PREFIX) :]]


def _split_assignment(arg: str) -> List[str]:
    """Split --flag=value into --flag value at the first separator."""
    name, _, value = arg.partition(ASSIGNMENT_SEPARATOR)
    if name == "" or value == "":
        return [arg]
    return [name, value]


def normalize_arguments(args: Iterable[str]) -> List[str]:
    """
    Rewrite raw arguments into the token list the tokenizer works with.

    Bundled short flags and `name=value` forms are split into separate
    tokens. The argument following a pass-through switch (-Xcc, -Xlinker)
    is emitted verbatim, whatever it looks like.

    Args:
        args: Raw arguments, without the program name.

    Returns:
        Normalized arguments in the original order.
    """
    normalized: List[str] = []
    protect_next = False

    for arg in args:
        if protect_next:
            protect_next = False
            normalized.append(arg)
        elif arg in PASS_THROUGH_SWITCHES:
            protect_next = True
            normalized.append(arg)
        elif (
            arg.startswith(SHORT_PREFIX)
            and not arg.startswith(LONG_PREFIX)
            and len(arg) > 2
        ):
            normalized.extend(_split_short_flags(arg))
        elif ASSIGNMENT_SEPARATOR in arg:
            normalized.extend(_split_assignment(arg))
        else:
            normalized.append(arg)

    return normalized
