"""Diagnostic logging routed to a Rich console."""

from rill.io.formatters import RichFormatter
from rill.io.handlers import ConsoleHandler
from rill.io.setup import setup_logging

__all__ = [
    "RichFormatter",
    "ConsoleHandler",
    "setup_logging",
]
