"""Session output: renders conversation messages to the terminal."""

from __future__ import annotations

import logging
import os
from typing import Any

from rich.console import Console
from rich.markdown import Markdown
from rich.pretty import Pretty
from rich.prompt import Confirm
from rich.text import Text

from rill.config import Settings
from rill.core.buffer import MarkdownBuffer
from rill.core.modes import DisplayMode
from rill.core.spacing import BlockKind, advance
from rill.models import (
    ActionRequired,
    ImageContent,
    Message,
    Permission,
    PromptInfo,
    RedactedThinkingContent,
    SystemNotification,
    TextContent,
    ThinkingContent,
    ToolRequest,
    ToolResponse,
)
from rill.ui.console import console as default_console
from rill.ui.console import safe_print
from rill.ui.printer import ValuePrinter
from rill.ui.tools import ToolCallRenderer

log = logging.getLogger(__name__)

CONTEXT_BAR_WIDTH = 20


def format_tokens(n: int) -> str:
    """Format a token count as 1.2M, 35k or 512."""
    if n >= 1_000_000:
        return f"{n / 1_000_000:.1f}M"
    if n >= 1_000:
        return f"{n / 1_000:.0f}k"
    return str(n)


class SessionOutput:
    """Renders one session's output stream.

    Owns the streaming markdown buffer and the spacing state, so one instance
    must be driven from a single consumer.
    """

    def __init__(
        self,
        console: Console | None = None,
        settings: Settings | None = None,
        quiet: bool = False,
    ):
        self.console = console if console is not None else default_console
        self.settings = settings if settings is not None else Settings.load()
        self.quiet = quiet
        self.last_rendered = BlockKind.EMPTY
        self.thinking_message: str | None = None
        self._buffer = MarkdownBuffer()
        self.printer = ValuePrinter(self.console)
        self.tools = ToolCallRenderer(self.console, self.printer)

    @property
    def show_full_tool_output(self) -> bool:
        return self.settings.show_full_tool_output

    def toggle_full_tool_output(self) -> bool:
        """Flip full tool output on/off and persist the choice."""
        return self.settings.toggle_full_tool_output()

    def display_mode(self, debug: bool) -> DisplayMode:
        return DisplayMode.resolve(self.settings.show_full_tool_output, debug)

    def _spacing(self, nxt: BlockKind) -> None:
        separator, self.last_rendered = advance(self.last_rendered, nxt)
        if separator:
            safe_print(self.console)

    def _begin(self, kind: BlockKind) -> None:
        """Start a block: flush held-back text first so ordering is kept."""
        self._render_text_block(self._buffer.flush())
        self._spacing(kind)

    def _print(self, *objects: Any, **kwargs) -> None:
        kwargs.setdefault("soft_wrap", True)
        safe_print(self.console, *objects, **kwargs)

    def print_markdown(self, text: str) -> None:
        """Render markdown, or plain text when output is not a terminal."""
        if self.quiet:
            return
        if not self.console.is_terminal:
            self._print(text, markup=False)
            return
        self._print(Markdown(text), soft_wrap=False)

    def _render_text_block(self, text: str) -> None:
        text = text.rstrip("\n")
        if not text.strip():
            return
        self._spacing(BlockKind.TEXT)
        self.print_markdown(text)

    def stream_text(self, chunk: str | bytes) -> None:
        """Feed streamed assistant text; complete paragraphs render immediately."""
        if self.quiet:
            return
        ready = self._buffer.push(chunk)
        if ready is not None:
            self._render_text_block(ready)

    def finish(self) -> None:
        """End of stream: render whatever text is still buffered."""
        rest = self._buffer.flush()
        if self.quiet:
            return
        self._render_text_block(rest)

    def render_text(self, text: str, color: str | None = None, dim: bool = False) -> None:
        if self.quiet:
            return
        self._begin(BlockKind.TEXT)
        self.render_text_raw(text, color, dim)

    def render_text_raw(self, text: str, color: str | None = None, dim: bool = False) -> None:
        """Write text without a trailing newline, green unless a color is given."""
        if self.quiet:
            return
        if not self.console.is_terminal:
            self._print(text, markup=False)
            return
        style = color or "green"
        if dim:
            style = f"dim {style}"
        self._print(Text(text, style=style), end="")

    def render_message(self, message: Message, debug: bool = False) -> None:
        """Render each content item of a message in order."""
        if self.quiet:
            return
        for content in message.content:
            match content:
                case TextContent(text=text):
                    self.stream_text(text)
                case ToolRequest():
                    self._begin(BlockKind.TOOL_CALL)
                    self.render_tool_request(content, debug)
                case ToolResponse():
                    self._begin(BlockKind.TOOL_RESPONSE)
                    self.render_tool_response(content, debug)
                case ImageContent(data=data, mime_type=mime_type):
                    self._begin(BlockKind.TEXT)
                    self._print(f"Image: [data: {data}, type: {mime_type}]", markup=False)
                case ThinkingContent(thinking=thinking):
                    if self.settings.show_thinking and self.console.is_terminal:
                        self._begin(BlockKind.SYSTEM)
                        self._print(Text("Thinking:", style="dim italic"))
                        self.print_markdown(thinking)
                case RedactedThinkingContent():
                    self._begin(BlockKind.SYSTEM)
                    self._print(Text("Thinking:", style="dim italic"))
                    self.print_markdown("Thinking was redacted")
                case SystemNotification(notification_type="thinking", msg=msg):
                    self.thinking_message = msg
                    log.debug("thinking: %s", msg)
                case SystemNotification(msg=msg):
                    self.thinking_message = None
                    self._begin(BlockKind.SYSTEM)
                    self._print(Text(msg, style="yellow"))
                case ActionRequired():
                    # Confirmations are prompted for elsewhere
                    pass
                case _:
                    self._begin(BlockKind.ERROR)
                    self._print("WARNING: Message content type could not be rendered", markup=False)

    def render_tool_request(self, request: ToolRequest, debug: bool = False) -> None:
        if request.tool_call is None:
            self.print_markdown(request.error or "invalid tool call")
            return
        self.tools.render(request.tool_call, self.display_mode(debug), debug)

    def render_tool_response(self, response: ToolResponse, debug: bool = False) -> None:
        """Show the user-facing parts of a tool result.

        Items addressed to other audiences are hidden, as are items below the
        configured minimum priority. Items with no priority only show in debug.
        """
        if response.error is not None:
            self.print_markdown(response.error)
            return
        for item in response.content:
            if not item.visible_to_user():
                continue
            if item.priority is None:
                if not debug:
                    continue
            elif item.priority < self.settings.min_priority:
                continue

            if debug:
                self._print(Pretty(item))
            elif item.text is not None:
                self.print_markdown(item.text)

    def render_subagent_tool_call(
        self,
        subagent_id: str,
        tool_name: str,
        arguments: dict[str, Any] | None = None,
        debug: bool = False,
    ) -> None:
        if self.quiet:
            return
        self._begin(BlockKind.TOOL_CALL)
        self.tools.render_subagent_call(subagent_id, tool_name, arguments, self.display_mode(debug))

    def prompt_tool_confirmation(self, security_prompt: str | None = None) -> Permission:
        """Ask whether the tool call rendered above may run. Defaults to no."""
        if security_prompt:
            self._print(f"\n{security_prompt}", markup=False)
            prompt = "Do you allow this tool call?"
        else:
            prompt = "rill would like to call the above tool, do you allow?"
        if Confirm.ask(prompt, default=False, console=self.console):
            return Permission.ALLOW_ONCE
        return Permission.CANCEL

    def render_error(self, message: str) -> None:
        """Errors are shown even in quiet mode."""
        self._begin(BlockKind.ERROR)
        self._print(Text.assemble("  ", ("error:", "bold red"), " ", message))

    def render_header(self, text: str) -> None:
        if self.quiet:
            return
        self._begin(BlockKind.HEADER)
        self._print(Text(text, style="bold"))

    def render_system(self, text: str) -> None:
        """Mode and status messages, in yellow."""
        if self.quiet:
            return
        self._begin(BlockKind.SYSTEM)
        self._print(Text(text, style="yellow"))

    def display_session_info(
        self,
        resume: bool,
        provider: str,
        model: str,
        session_id: str | None = None,
        worker_model: str | None = None,
        cwd: str | None = None,
    ) -> None:
        """Print the session status line and the session id / working directory line."""
        if self.quiet:
            return
        if resume:
            status = "resuming"
        elif session_id is None:
            status = "ephemeral"
        else:
            status = "new session"
        if worker_model:
            model = f"{model} → {worker_model}"
        if cwd is None:
            try:
                cwd = os.getcwd()
            except OSError:
                cwd = "unknown"

        self._begin(BlockKind.SYSTEM)
        self._print(
            Text.assemble("  ", ("●", "green"), " ", (status, "dim"), " · ", (provider, "dim"), " ", (model, "cyan"))
        )
        if session_id is not None:
            self._print(Text.assemble("    ", (session_id, "dim"), " · ", (cwd, "dim")))
        else:
            self._print(Text.assemble("      ", (cwd, "dim")))

    def display_greeting(self) -> None:
        if self.quiet:
            return
        self._begin(BlockKind.SYSTEM)
        self._print(Text.assemble(("rill", "bold"), " ", ("ready, type a message to get started", "dim")))

    def render_enter_plan_mode(self) -> None:
        if self.quiet:
            return
        self._begin(BlockKind.SYSTEM)
        self._print(
            Text.assemble(
                ("Entering plan mode.", "bold green"),
                " ",
                (
                    "You can provide instructions to create a plan and then act on it. "
                    "To exit early, type /endplan",
                    "dim green",
                ),
            )
        )

    def render_act_on_plan(self) -> None:
        if self.quiet:
            return
        self._begin(BlockKind.SYSTEM)
        self._print(Text("Exiting plan mode and acting on the above plan", style="bold green"))

    def render_exit_plan_mode(self) -> None:
        if self.quiet:
            return
        self._begin(BlockKind.SYSTEM)
        self._print(Text("Exiting plan mode.", style="bold green"))

    def render_prompts(self, prompts: dict[str, list[str]]) -> None:
        """List available prompts grouped by extension."""
        if self.quiet:
            return
        self._begin(BlockKind.PROMPT)
        for extension, names in prompts.items():
            self._print(Text.assemble(" ", (extension, "green")))
            for name in names:
                self._print(Text.assemble("  - ", (name, "cyan")))

    def render_prompt_info(self, info: PromptInfo) -> None:
        if self.quiet:
            return
        self._begin(BlockKind.PROMPT)
        if info.extension:
            self._print(Text.assemble(" ", ("Extension", "green"), f": {info.extension}"))
        self._print(Text.assemble(" Prompt: ", (info.name, "bold cyan")))
        if info.description:
            self._print(f"\n {info.description}", markup=False)
        if info.arguments:
            self._print("\n Arguments:", markup=False)
            for arg in info.arguments:
                required = Text("(required)", style="red") if arg.required else Text("(optional)", style="dim")
                self._print(
                    Text.assemble("  ", (arg.name, "yellow"), " ", required, " ", arg.description or "")
                )

    def render_extension_success(self, name: str) -> None:
        if self.quiet:
            return
        self._begin(BlockKind.SYSTEM)
        self._print(Text.assemble("  ", ("added", "green"), " extension `", (name, "cyan"), "`"))

    def render_extension_error(self, name: str, error: str) -> None:
        self._begin(BlockKind.ERROR)
        self._print(Text.assemble("  ", ("failed", "red"), " to add extension ", (name, "red")))
        self._print(Text(error, style="dim"))

    def render_builtin_success(self, names: str) -> None:
        if self.quiet:
            return
        self._begin(BlockKind.SYSTEM)
        plural = "s" if "," in names else ""
        self._print(Text.assemble("  ", ("added", "green"), f" builtin{plural}: ", (names, "cyan")))

    def render_builtin_error(self, names: str, error: str) -> None:
        self._begin(BlockKind.ERROR)
        plural = "s" if "," in names else ""
        self._print(Text.assemble("  ", ("failed", "red"), f" to add builtin{plural}: ", (names, "red")))
        self._print(Text(error, style="dim"))

    def display_context_usage(self, total_tokens: int, context_limit: int) -> None:
        """Print a context-window usage bar like ``━━━━╌╌╌ 20% 40k/200k``."""
        if self.quiet:
            return
        if context_limit == 0:
            self._print(Text("  context usage unavailable (context limit is 0)", style="dim"))
            return

        percentage = min(round(total_tokens / context_limit * 100), 100)
        filled = round(percentage / 100 * CONTEXT_BAR_WIDTH)
        bar = "━" * filled + "╌" * (CONTEXT_BAR_WIDTH - filled)
        if percentage < 50:
            bar_style = "dim green"
        elif percentage < 85:
            bar_style = "yellow"
        else:
            bar_style = "red"
        self._print(
            Text.assemble(
                "  ",
                (bar, bar_style),
                " ",
                (f"{percentage}%", "dim"),
                " ",
                (f"{format_tokens(total_tokens)}/{format_tokens(context_limit)}", "dim"),
            )
        )
