"""Rich console utilities and singleton."""

import logging

from rich.console import Console, RenderableType

log = logging.getLogger(__name__)


class StreamConsole(Console):
    """Console that falls silent on a closed pipe instead of exiting."""

    def on_broken_pipe(self) -> None:
        self.quiet = True
        log.debug("output pipe closed; further output is dropped")


# Global console instance
console = StreamConsole()


def get_console() -> Console:
    """Get the global console instance."""
    return console


def terminal_width(target: Console) -> int | None:
    """Column count of the terminal, or None when output is not a terminal."""
    if not target.is_terminal:
        return None
    return target.width


def safe_print(target: Console, *objects: RenderableType, **kwargs) -> None:
    """Print to the console, ignoring write failures."""
    kwargs.setdefault("highlight", False)
    kwargs.setdefault("emoji", False)
    try:
        target.print(*objects, **kwargs)
    except OSError as e:
        log.debug("console write failed: %s", e)
