"""Message contracts shared by the coordinator and booking agents."""

from booking_agents.shared.contracts.messages import (
    Message,
    Role,
    ToolCallRequest,
    ToolResult,
    pending_tool_calls,
    text_of,
)

__all__ = [
    "Message",
    "Role",
    "ToolCallRequest",
    "ToolResult",
    "pending_tool_calls",
    "text_of",
]
