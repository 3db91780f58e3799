"""Logger setup and wiring."""

from __future__ import annotations

import logging

from rich.console import Console

from rill.io.handlers import ConsoleHandler


def setup_logging(console: Console | None = None, debug: bool = False) -> logging.Logger:
    """Configure the rill logger to report on a stderr console."""
    log = logging.getLogger("rill")
    log.setLevel(logging.DEBUG if debug else logging.WARNING)

    # Replace any handler from an earlier call
    for handler in [h for h in log.handlers if isinstance(h, ConsoleHandler)]:
        log.removeHandler(handler)
    log.addHandler(ConsoleHandler(console))

    return log
