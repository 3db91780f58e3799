"""Per-tool layouts for tool call requests."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from rich.console import Console
from rich.text import Text

from rill.core.modes import DisplayMode
from rill.core.paths import shorten_path
from rill.core.truncate import safe_truncate
from rill.models import ToolCall
from rill.ui.console import safe_print
from rill.ui.printer import ValuePrinter

MAX_INSTRUCTIONS_LEN = 100


def short_subagent_id(subagent_id: str) -> str:
    """Last ``_``-separated segment of a subagent id."""
    return subagent_id.rsplit("_", 1)[-1]


def format_subagent_tool_call(subagent_id: str, tool_name: str) -> str:
    return f"[subagent:{short_subagent_id(subagent_id)}] {tool_name}"


def _tool_graph(arguments: dict[str, Any] | None) -> list[Any] | None:
    graph = (arguments or {}).get("tool_graph")
    if isinstance(graph, list) and graph:
        return graph
    return None


class ToolCallRenderer:
    """Renders a tool call header and its arguments, laid out per tool."""

    def __init__(self, console: Console, printer: ValuePrinter | None = None):
        self.console = console
        self.printer = printer or ValuePrinter(console)
        self._handlers: dict[str, Callable[[ToolCall, DisplayMode, bool], None]] = {
            "developer__text_editor": self._render_text_editor,
            "developer__shell": self._render_default,
            "execute": self._render_execute_code,
            "execute_code": self._render_execute_code,
            "delegate": self._render_delegate,
            "subagent": self._render_delegate,
            "todo__write": self._render_todo,
        }

    def _print(self, line: Text) -> None:
        safe_print(self.console, line, soft_wrap=True)

    def _dim_line(self, label: str, value: str) -> None:
        self._print(Text.assemble("    ", (label, "dim"), " ", (value, "dim")))

    def render(self, call: ToolCall, mode: DisplayMode, debug: bool) -> None:
        """Render a tool call with the layout registered for its name."""
        handler = self._handlers.get(call.name, self._render_default)
        handler(call, mode, debug)

    def print_header(self, name: str) -> None:
        self._print(Text.assemble("  ", ("▸", "dim"), " ", (name, "dim")))

    def _render_default(self, call: ToolCall, mode: DisplayMode, _debug: bool) -> None:
        self.print_header(call.name)
        self.printer.print_params(call.arguments, 1, mode)

    def _render_text_editor(self, call: ToolCall, mode: DisplayMode, debug: bool) -> None:
        self.print_header(call.name)
        if not call.arguments:
            return
        path = call.arguments.get("path")
        if isinstance(path, str):
            self._dim_line("path", shorten_path(path, debug))
        rest = {k: v for k, v in call.arguments.items() if k != "path"}
        self.printer.print_params(rest, 1, mode)

    def _render_delegate(self, call: ToolCall, mode: DisplayMode, debug: bool) -> None:
        self.print_header(call.name)
        args = call.arguments
        if not args:
            return
        if isinstance(source := args.get("source"), str):
            self._dim_line("source", source)
        if isinstance(instructions := args.get("instructions"), str):
            if not debug:
                instructions = safe_truncate(instructions, MAX_INSTRUCTIONS_LEN)
            self._dim_line("instructions", instructions)
        if isinstance(parameters := args.get("parameters"), dict):
            self._print(Text.assemble("    ", ("parameters", "dim"), ":"))
            self.printer.print_params(parameters, 2, mode)

        skip = {"source", "instructions", "parameters"}
        self.printer.print_params({k: v for k, v in args.items() if k not in skip}, 1, mode)

    def _render_todo(self, call: ToolCall, _mode: DisplayMode, _debug: bool) -> None:
        self.print_header(call.name)
        content = (call.arguments or {}).get("content")
        if isinstance(content, str):
            self._dim_line("content", content)

    def _render_execute_code(self, call: ToolCall, mode: DisplayMode, debug: bool) -> None:
        graph = _tool_graph(call.arguments)
        if graph is None:
            self._render_default(call, mode, debug)
            return
        self.print_graph("execute", graph)
        code = (call.arguments or {}).get("code")
        if debug and isinstance(code, str) and code:
            self._print(Text(code, style="green"))

    def render_subagent_call(
        self, subagent_id: str, tool_name: str, arguments: dict[str, Any] | None, mode: DisplayMode
    ) -> None:
        """Render a tool call made by a subagent."""
        if tool_name == "code_execution__execute_code" and (graph := _tool_graph(arguments)):
            self.print_graph(f"[subagent:{short_subagent_id(subagent_id)}] execute_code", graph)
            return
        self.print_header(format_subagent_tool_call(subagent_id, tool_name))
        self.printer.print_params(arguments, 1, mode)

    def print_graph(self, label: str, graph: list[Any]) -> None:
        """Print a numbered tool graph, e.g. ``2. shell run tests (uses 1)``."""
        count = len(graph)
        plural = "" if count == 1 else "s"
        self._print(Text.assemble("  ", ("▸", "dim"), " ", (f"{label} {count}", "dim"), f" tool call{plural}"))

        nodes = [node for node in graph if isinstance(node, dict)]
        for i, node in enumerate(nodes, start=1):
            tool = node.get("tool") if isinstance(node.get("tool"), str) else "unknown"
            desc = node.get("description") if isinstance(node.get("description"), str) else ""
            depends_on = node.get("depends_on")
            if not isinstance(depends_on, list):
                depends_on = []
            deps = [str(d + 1) for d in depends_on if isinstance(d, int) and not isinstance(d, bool) and d >= 0]
            uses = f" (uses {', '.join(deps)})" if deps else ""
            self._print(Text(f"    {i}. {tool} {desc}{uses}", style="dim"))
