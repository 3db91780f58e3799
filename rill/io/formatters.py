"""Logging formatters for terminal output."""

import logging

from rich.markup import escape


class RichFormatter(logging.Formatter):
    """Formats log messages with Rich markup based on level."""

    def format(self, record: logging.LogRecord) -> str:
        content = escape(record.getMessage())
        if record.exc_info:
            content = f"{content}\n{escape(self.formatException(record.exc_info))}"

        match record.levelno:
            case logging.DEBUG:
                return f"[dim]{record.name}: {content}[/]"
            case logging.WARNING:
                return f"[yellow]warning:[/] {content}"
            case logging.ERROR | logging.CRITICAL:
                return f"[bold red]error:[/] {content}"
            case _:
                return content
