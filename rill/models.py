"""Conversation messages as they arrive from the agent, using Pydantic models."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TextContent(BaseModel):
    type: Literal["text"] = "text"
    text: str


class ToolCall(BaseModel):
    """A tool invocation: name plus JSON arguments."""

    name: str
    arguments: dict[str, Any] | None = None


class ToolRequest(BaseModel):
    type: Literal["tool_request"] = "tool_request"
    id: str = ""
    tool_call: ToolCall | None = None
    error: str | None = None


class ResultContent(BaseModel):
    """One item of a tool result, with MCP-style audience and priority annotations."""

    model_config = ConfigDict(extra="allow")

    text: str | None = None
    audience: list[str] | None = None
    priority: float | None = None

    def visible_to_user(self) -> bool:
        return self.audience is None or "user" in self.audience


class ToolResponse(BaseModel):
    type: Literal["tool_response"] = "tool_response"
    id: str = ""
    content: list[ResultContent] = Field(default_factory=list)
    error: str | None = None


class ThinkingContent(BaseModel):
    type: Literal["thinking"] = "thinking"
    thinking: str


class RedactedThinkingContent(BaseModel):
    type: Literal["redacted_thinking"] = "redacted_thinking"


class ImageContent(BaseModel):
    type: Literal["image"] = "image"
    data: str
    mime_type: str


class SystemNotification(BaseModel):
    """Status notice. ``thinking`` updates the indicator, ``inline`` is printed."""

    type: Literal["system_notification"] = "system_notification"
    notification_type: Literal["thinking", "inline"] = "inline"
    msg: str


class ActionRequired(BaseModel):
    """Confirmation/elicitation requests; handled by the prompt layer, not rendered."""

    type: Literal["action_required"] = "action_required"
    data: dict[str, Any] = Field(default_factory=dict)


class UnknownContent(BaseModel):
    """Content of a type this renderer does not know."""

    type: Literal["unknown"] = "unknown"
    raw: dict[str, Any] = Field(default_factory=dict)


Content = Annotated[
    TextContent
    | ToolRequest
    | ToolResponse
    | ThinkingContent
    | RedactedThinkingContent
    | ImageContent
    | SystemNotification
    | ActionRequired
    | UnknownContent,
    Field(discriminator="type"),
]

KNOWN_TYPES = {
    "text",
    "tool_request",
    "tool_response",
    "thinking",
    "redacted_thinking",
    "image",
    "system_notification",
    "action_required",
}


class Message(BaseModel):
    """A conversation message: a role and an ordered list of content items."""

    role: Literal["user", "assistant"] = "assistant"
    content: list[Content] = Field(default_factory=list)

    @field_validator("content", mode="before")
    @classmethod
    def _wrap_unknown(cls, items: Any) -> Any:
        if not isinstance(items, list):
            return items
        wrapped = []
        for item in items:
            if isinstance(item, dict) and item.get("type") not in KNOWN_TYPES:
                item = {"type": "unknown", "raw": item}
            wrapped.append(item)
        return wrapped

    @classmethod
    def text(cls, text: str) -> Message:
        """Build an assistant message holding a single text item."""
        return cls(content=[TextContent(text=text)])


class PromptArgument(BaseModel):
    name: str
    description: str | None = None
    required: bool | None = None


class PromptInfo(BaseModel):
    """An extension-provided prompt, as listed by the prompt commands."""

    name: str
    description: str | None = None
    arguments: list[PromptArgument] | None = None
    extension: str | None = None


class Permission(Enum):
    """Answer to a tool confirmation prompt."""

    ALLOW_ONCE = "allow_once"
    CANCEL = "cancel"
