"""Logging handlers for routing diagnostics."""

import logging

from rich.console import Console

from rill.io.formatters import RichFormatter


class ConsoleHandler(logging.Handler):
    """Prints log records to a Rich console (stderr by default)."""

    def __init__(self, console: Console | None = None) -> None:
        super().__init__()
        self.console = console if console is not None else Console(stderr=True)
        self.setFormatter(RichFormatter())

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self.console.print(self.format(record), highlight=False, emoji=False, soft_wrap=True)
        except OSError:
            self.handleError(record)
