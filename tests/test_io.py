"""Tests for logging setup and formatting."""

import logging


from rill.io.formatters import RichFormatter
from rill.io.handlers import ConsoleHandler
from rill.io.setup import setup_logging


def _record(level: int, msg: str) -> logging.LogRecord:
    return logging.LogRecord(name="rill.test", level=level, pathname="", lineno=0, msg=msg, args=(), exc_info=None)


def test_formatter_warning():
    assert RichFormatter().format(_record(logging.WARNING, "careful")) == "[yellow]warning:[/] careful"


def test_formatter_error_escapes_markup():
    result = RichFormatter().format(_record(logging.ERROR, "bad [tag]"))
    assert result == "[bold red]error:[/] bad \\[tag]"


def test_formatter_info_plain():
    assert RichFormatter().format(_record(logging.INFO, "hello")) == "hello"


def test_setup_logging_routes_to_console(console_factory):
    console = console_factory()
    log = setup_logging(console)

    assert log.name == "rill"
    assert log.level == logging.WARNING
    logging.getLogger("rill.ui.output").warning("disk %s", "full")
    assert console.file.getvalue() == "warning: disk full\n"


def test_setup_logging_replaces_handler(console_factory):
    setup_logging(console_factory())
    log = setup_logging(console_factory(), debug=True)
    assert log.level == logging.DEBUG
    assert sum(isinstance(h, ConsoleHandler) for h in log.handlers) == 1
