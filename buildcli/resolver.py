"""Resolution of a build invocation into a mode and options."""

from typing import Callable, Iterable, Optional

from .configuration import Configuration
from .errors import InvalidUsage, UsagePresentation
from .modes import Build, Clean, CleanMode, Mode, Options, Usage, Version, same_kind
from .preprocessor import normalize_arguments
from .tokenizer import (
    ModeSelector,
    ModeToken,
    NameToken,
    Switch,
    SwitchToken,
    Token,
    Tokenizer,
)

TokenObserver = Callable[[Token], None]


def _resolve_build(tokenizer: Tokenizer) -> Build:
    """Resolve --configuration and its optional debug/release qualifier."""
    token = tokenizer.peek()
    if not isinstance(token, NameToken):
        return Build(Configuration.DEBUG)

    try:
        configuration = Configuration(token.name)
    except ValueError:
        raise InvalidUsage(
            f"Unknown build configuration: {token.name}", UsagePresentation.IMPLY
        ) from None

    tokenizer.consume_peeked()
    return Build(configuration)


def _resolve_clean(tokenizer: Tokenizer) -> Clean:
    """Resolve --clean and its optional build/dist qualifier."""
    token = tokenizer.peek()
    if not isinstance(token, NameToken):
        return Clean(CleanMode.BUILD)

    clean_mode = CleanMode.from_string(token.name)
    if clean_mode is None:
        raise InvalidUsage(
            f"Unknown clean mode: {token.name}", UsagePresentation.IMPLY
        )

    tokenizer.consume_peeked()
    return Clean(clean_mode)


def _resolve_candidate(selector: ModeSelector, tokenizer: Tokenizer) -> Mode:
    if selector is ModeSelector.BUILD:
        return _resolve_build(tokenizer)
    if selector is ModeSelector.CLEAN:
        return _resolve_clean(tokenizer)
    if selector is ModeSelector.USAGE:
        return Usage()
    return Version()


def _reconcile(current: Optional[Mode], candidate: Mode) -> Mode:
    """Merge a newly selected mode with the one resolved so far."""
    if current is None:
        return candidate
    if same_kind(current, candidate):
        return current

    if isinstance(current, Usage):
        raise InvalidUsage(
            f"Both --help and {candidate} specified", UsagePresentation.PRINT
        )
    if isinstance(candidate, Usage):
        raise InvalidUsage(
            f"Both --help and {current} specified", UsagePresentation.PRINT
        )

    raise InvalidUsage(
        f"Multiple modes specified: {current}, {candidate}", UsagePresentation.IMPLY
    )


def _apply_switch(switch: Switch, tokenizer: Tokenizer, options: Options) -> None:
    if switch is Switch.CHDIR:
        token = tokenizer.peek()
        if not isinstance(token, NameToken):
            raise InvalidUsage(
                "Option `--chdir' requires subsequent directory argument",
                UsagePresentation.IMPLY,
            )
        tokenizer.consume_peeked()
        options.chdir = token.name
    elif switch is Switch.VERBOSE:
        options.verbosity += 1
    elif switch is Switch.XCC:
        options.xcc.append(tokenizer.raw_pop())
    elif switch is Switch.XLINKER:
        options.xlinker.append(tokenizer.raw_pop())
    elif switch is Switch.GET:
        options.fetch_only = True


def resolve(
    tokenizer: Tokenizer, observer: Optional[TokenObserver] = None
) -> tuple[Mode, Options]:
    """
    Drive a tokenizer to completion and resolve the invocation.

    Args:
        tokenizer: Cursor over normalized arguments.
        observer: Optional callback receiving every token popped by the main loop.

    Returns:
        The resolved mode (Build with debug configuration when none was
        selected) and the accumulated options.

    Raises:
        InvalidUsage: On the first malformed or conflicting argument.
    """
    options = Options()
    mode: Optional[Mode] = None

    while tokenizer.has_more:
        token = tokenizer.pop()
        if observer is not None:
            observer(token)

        if isinstance(token, ModeToken):
            candidate = _resolve_candidate(token.selector, tokenizer)
            mode = _reconcile(mode, candidate)
        elif isinstance(token, SwitchToken):
            _apply_switch(token.switch, tokenizer, options)
        else:
            raise InvalidUsage(
                f"Unknown argument: {token.name}", UsagePresentation.IMPLY
            )

    if mode is None:
        mode = Build(Configuration.DEBUG)
    return mode, options


def parse_command_line(
    args: Iterable[str], observer: Optional[TokenObserver] = None
) -> tuple[Mode, Options]:
    """Parse raw build tool arguments into a mode and options.

    Args:
        args: Raw arguments, without the program name
        observer: Optional callback receiving every classified token

    Returns:
        Tuple of resolved mode and options

    Raises:
        InvalidUsage: If the arguments are malformed or conflicting
    """
    return resolve(Tokenizer(normalize_arguments(args)), observer)
