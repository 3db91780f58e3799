"""LangChain callback that renders a model run through SessionOutput."""

from __future__ import annotations

import json
from typing import Any

from langchain_core.callbacks import BaseCallbackHandler

from rill.models import Message, ResultContent, ToolCall, ToolRequest, ToolResponse
from rill.ui.output import SessionOutput

# LangChain tool output carries no priority annotation; show it by default.
TOOL_RESULT_PRIORITY = 1.0


def _tool_arguments(input_str: str, inputs: dict[str, Any] | None) -> dict[str, Any]:
    """Best-effort structured arguments for a tool start event."""
    if inputs:
        return dict(inputs)
    try:
        parsed = json.loads(input_str)
    except (TypeError, ValueError):
        return {"input": input_str}
    return parsed if isinstance(parsed, dict) else {"input": parsed}


class RenderCallbackHandler(BaseCallbackHandler):
    """Streams tokens, tool calls and tool results to the terminal."""

    def __init__(self, output: SessionOutput, debug: bool = False):
        super().__init__()
        self.output = output
        self.debug = debug

    def on_llm_new_token(self, token: str, **kwargs) -> None:
        """Buffer tokens; complete paragraphs render as they arrive."""
        self.output.stream_text(token)

    def on_llm_end(self, response, **kwargs) -> None:
        self.output.finish()

    def on_llm_error(self, error: BaseException, **kwargs) -> None:
        self.output.finish()
        self.output.render_error(str(error))

    def on_tool_start(
        self,
        serialized: dict[str, Any],
        input_str: str,
        *,
        inputs: dict[str, Any] | None = None,
        **kwargs,
    ) -> None:
        name = (serialized or {}).get("name") or "tool"
        request = ToolRequest(tool_call=ToolCall(name=name, arguments=_tool_arguments(input_str, inputs)))
        self.output.render_message(Message(content=[request]), self.debug)

    def on_tool_end(self, output: Any, **kwargs) -> None:
        content = getattr(output, "content", output)
        text = content if isinstance(content, str) else str(content)
        response = ToolResponse(content=[ResultContent(text=text, priority=TOOL_RESULT_PRIORITY)])
        self.output.render_message(Message(content=[response]), self.debug)

    def on_tool_error(self, error: BaseException, **kwargs) -> None:
        self.output.render_error(str(error))
