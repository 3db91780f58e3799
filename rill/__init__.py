"""
Rill - renders a streamed agent conversation to the terminal.

Assistant text is buffered until a paragraph is complete and then rendered as
markdown; tool calls and results are laid out as indented key/value lines that
fit the terminal width.
"""

from rill.core.buffer import MarkdownBuffer
from rill.core.modes import DisplayMode
from rill.core.spacing import BlockKind
from rill.ui.output import SessionOutput

__version__ = "0.1.0"
__all__ = ["MarkdownBuffer", "DisplayMode", "BlockKind", "SessionOutput"]
