"""UI components: console utilities, value printer and session output."""

from rill.ui.callbacks import RenderCallbackHandler
from rill.ui.console import StreamConsole, console, get_console, safe_print
from rill.ui.output import SessionOutput
from rill.ui.printer import INDENT, ValuePrinter
from rill.ui.tools import ToolCallRenderer

__all__ = [
    "StreamConsole",
    "console",
    "get_console",
    "safe_print",
    "INDENT",
    "ValuePrinter",
    "ToolCallRenderer",
    "SessionOutput",
    "RenderCallbackHandler",
]
