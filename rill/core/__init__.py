"""Core algorithms: stream buffering, truncation, spacing and path shortening."""

from rill.core.buffer import MarkdownBuffer
from rill.core.modes import DisplayMode
from rill.core.paths import shorten_path
from rill.core.spacing import BlockKind, advance, needs_separator
from rill.core.truncate import safe_truncate
from rill.core.values import Value, ValueKind, is_scalar, scalar_text, value_kind

__all__ = [
    "MarkdownBuffer",
    "DisplayMode",
    "shorten_path",
    "BlockKind",
    "advance",
    "needs_separator",
    "safe_truncate",
    "Value",
    "ValueKind",
    "is_scalar",
    "scalar_text",
    "value_kind",
]
