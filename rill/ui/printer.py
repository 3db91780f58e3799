"""Structured value printer: tool arguments as indented key/value lines."""

from __future__ import annotations

from rich.console import Console
from rich.text import Text

from rill.core.modes import DisplayMode
from rill.core.truncate import safe_truncate
from rill.core.values import Value, ValueKind, is_scalar, json_text, scalar_text, value_kind
from rill.ui.console import safe_print, terminal_width

INDENT = "  "


class ValuePrinter:
    """Prints JSON-shaped data under the terminal width budget."""

    def __init__(self, console: Console):
        self.console = console

    def _print(self, line: Text) -> None:
        safe_print(self.console, line, soft_wrap=True)

    def _key_prefix(self, indent: str, key: str) -> Text:
        return Text.assemble(indent, (key, "dim"), ": ")

    def format_value(self, value: Value, mode: DisplayMode, reserve: int) -> Text:
        """Style a scalar, truncating strings to the remaining width.

        The width is the terminal width minus ``reserve`` columns already used
        on the line. If the width is unknown or the mode is FULL, strings are
        kept whole.
        """
        match value_kind(value):
            case ValueKind.STRING:
                width = terminal_width(self.console)
                if width is not None and mode.truncates:
                    value = safe_truncate(value, max(width - reserve, 0))
                return Text(value, style="green")
            case ValueKind.NUMBER | ValueKind.BOOLEAN:
                return Text(scalar_text(value), style="yellow")
            case ValueKind.NULL:
                return Text("null", style="dim")
            case kind:
                raise AssertionError(f"format_value got a {kind.name}")

    def print_value_with_prefix(self, prefix: Text, value: Value, mode: DisplayMode) -> None:
        """Print prefix and value on one line, reserving the prefix width."""
        self._print(prefix + self.format_value(value, mode, prefix.cell_len))

    def print_params(self, params: dict[str, Value] | None, depth: int, mode: DisplayMode) -> None:
        """Print each key of params at the given depth, recursing into children."""
        if not params:
            return
        indent = INDENT * depth

        for key, val in params.items():
            match value_kind(val):
                case ValueKind.OBJECT:
                    self._print(Text.assemble(indent, (key, "dim"), ":"))
                    self.print_params(val, depth + 1, mode)
                case ValueKind.ARRAY if all(is_scalar(item) for item in val):
                    joined = ", ".join(scalar_text(item) for item in val)
                    self.print_value_with_prefix(self._key_prefix(indent, key), joined, mode)
                case ValueKind.ARRAY:
                    self._print(Text.assemble(indent, (key, "dim"), ":"))
                    for item in val:
                        if value_kind(item) is ValueKind.OBJECT:
                            self._print(Text(f"{indent}{INDENT}- "))
                            self.print_params(item, depth + 2, mode)
                        else:
                            self._print(Text(f"{indent}{INDENT}- {json_text(item)}"))
                case _:
                    self.print_value_with_prefix(self._key_prefix(indent, key), val, mode)
