"""
Message contract shared by every graph.

Messages live in graph state as plain dicts (role/content plus optional
tool calls). These models define what a well-formed message looks like
and provide the text-extraction helpers used by the routing policies.
"""

import logging
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field, field_validator, model_validator


logger = logging.getLogger(__name__)


class Role(str, Enum):
    """Conversation roles."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"
    TOOL = "tool"


class ToolCallRequest(BaseModel):
    """A tool invocation requested by an assistant message."""

    id: str = Field(description="Identifier echoed back by the tool result")
    name: str = Field(description="Name of the tool to execute")
    arguments: str = Field(
        default="{}", description="JSON-encoded tool arguments"
    )


class ToolResult(BaseModel):
    """Result of a single tool call, appended as a tool-role message."""

    tool_call_id: str
    content: str = Field(description="JSON-encoded tool output")
    name: Optional[str] = None

    def to_message(self) -> Dict[str, Any]:
        message = {
            "role": Role.TOOL.value,
            "tool_call_id": self.tool_call_id,
            "content": self.content,
        }
        if self.name:
            message["name"] = self.name
        return message


class Message(BaseModel):
    """
    A single conversation message.

    Content is either plain text or a list of content fragments
    (e.g. ``{"type": "text", "text": "..."}``). Only tool messages may
    arrive without content; it is normalised to an empty string.
    """

    role: Role
    content: Union[str, List[Any]] = ""
    tool_calls: List[ToolCallRequest] = Field(default_factory=list)
    tool_call_id: Optional[str] = None
    name: Optional[str] = None
    agent: Optional[str] = Field(
        default=None, description="Agent that produced the message"
    )

    @model_validator(mode="before")
    @classmethod
    def _check_content(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("content") is None:
            if data.get("role") != Role.TOOL.value and "content" in data:
                raise ValueError("content must not be null for non-tool messages")
            data = {**data, "content": ""}
        return data

    @field_validator("tool_calls", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    def to_state(self) -> Dict[str, Any]:
        """Dump to the plain dict form stored in graph state."""
        data = self.model_dump(mode="json", exclude_none=True)
        if not data.get("tool_calls"):
            data.pop("tool_calls", None)
        return data


def _fragment_text(fragment: Any) -> str:
    if isinstance(fragment, str):
        return fragment
    if isinstance(fragment, dict):
        text = fragment.get("text")
        return text if isinstance(text, str) else ""
    text = getattr(fragment, "text", None)
    return text if isinstance(text, str) else ""


def text_of(message: Any) -> str:
    """
    Extract the text of a message as a single string.

    Plain string content is returned as is. Fragment lists are joined
    with single spaces, skipping fragments that carry no text. Missing
    or unparsable content yields an empty string; this never raises.
    """
    try:
        if message is None:
            return ""
        if isinstance(message, dict):
            content = message.get("content")
        else:
            content = getattr(message, "content", None)

        if isinstance(content, str):
            return content
        if isinstance(content, list):
            parts = (_fragment_text(fragment) for fragment in content)
            return " ".join(part for part in parts if part)
    except Exception as e:
        logger.debug(f"Could not extract message text: {e}")
    return ""


def pending_tool_calls(message: Any) -> List[ToolCallRequest]:
    """Return the tool calls carried by a message, or an empty list."""
    try:
        if isinstance(message, dict):
            raw = message.get("tool_calls") or []
        else:
            raw = getattr(message, "tool_calls", None) or []
        return [
            call if isinstance(call, ToolCallRequest) else ToolCallRequest.model_validate(call)
            for call in raw
        ]
    except Exception as e:
        logger.warning(f"Ignoring malformed tool calls: {e}")
        return []
