"""
Model invocation client.

Wraps a single OpenAI chat completion with a bound tool set and a
cancellation token. Messages go in and come out in the plain-dict form
stored in graph state; conversion to and from the OpenAI wire format
happens here and nowhere else.

No retries: a failed call ends the agent's turn.
"""

import json
import os
from typing import Any, Dict, List, Optional, Protocol, Sequence

import openai
from openai import AsyncOpenAI
from dotenv import load_dotenv

from booking_agents.shared.contracts.messages import (
    Message,
    Role,
    ToolCallRequest,
    pending_tool_calls,
)
from booking_agents.shared.errors import AbortedError, InvocationError
from booking_agents.shared.llm.cancellation import CancellationToken

load_dotenv()

# Module-level cache for the OpenAI client
_client: Optional[AsyncOpenAI] = None


class ModelClient(Protocol):
    """Anything that can turn a message list into one assistant message."""

    async def invoke(
        self,
        messages: Sequence[Dict[str, Any]],
        tools: Sequence[Dict[str, Any]],
        *,
        model: str,
        token: Optional[CancellationToken] = None,
    ) -> Dict[str, Any]:
        ...


def get_cached_client() -> AsyncOpenAI:
    """
    Returns a cached instance of the async OpenAI client.

    Uses the OPENAI_API_KEY environment variable for authentication.
    The client is created on first use and reused afterwards.
    """
    global _client
    if _client is None:
        api_key = os.environ.get("OPENAI_API_KEY")
        if not api_key:
            raise ValueError(
                "OPENAI_API_KEY environment variable is not set. "
                "Please set it to your OpenAI API key."
            )
        _client = AsyncOpenAI(api_key=api_key)
    return _client


def to_openai_message(message: Dict[str, Any]) -> Dict[str, Any]:
    """Convert a state message dict to the chat completions format."""
    role = message.get("role")
    content = message.get("content")

    if role == Role.TOOL.value:
        return {
            "role": role,
            "tool_call_id": message.get("tool_call_id", ""),
            "content": content if isinstance(content, str) else json.dumps(content),
        }

    wire: Dict[str, Any] = {"role": role, "content": "" if content is None else content}
    if role == Role.ASSISTANT.value:
        calls = pending_tool_calls(message)
        if calls:
            wire["tool_calls"] = [
                {
                    "id": call.id,
                    "type": "function",
                    "function": {"name": call.name, "arguments": call.arguments},
                }
                for call in calls
            ]
    return wire


def from_openai_message(response_message: Any) -> Dict[str, Any]:
    """Convert a chat completions response message to a state message dict."""
    calls = [
        ToolCallRequest(
            id=call.id,
            name=call.function.name,
            arguments=call.function.arguments or "{}",
        )
        for call in (getattr(response_message, "tool_calls", None) or [])
        if getattr(call, "function", None) is not None
    ]
    message = Message(
        role=Role.ASSISTANT,
        content=response_message.content or "",
        tool_calls=calls,
    )
    return message.to_state()


class OpenAIModelClient:
    """
    Default ``ModelClient`` backed by the OpenAI chat completions API.

    Args:
        client: Optional AsyncOpenAI instance. If not provided, uses the cached client.
    """

    def __init__(self, client: Optional[AsyncOpenAI] = None):
        self._client = client

    async def invoke(
        self,
        messages: Sequence[Dict[str, Any]],
        tools: Sequence[Dict[str, Any]],
        *,
        model: str,
        token: Optional[CancellationToken] = None,
    ) -> Dict[str, Any]:
        """
        Call the model once.

        Args:
            messages: Full message list, system prompt first
            tools: OpenAI function tool specs to bind (may be empty)
            model: Model identifier
            token: Cancellation token; its remaining time bounds the request

        Returns:
            The assistant message as a state dict

        Raises:
            AbortedError: If the request timed out
            InvocationError: On any other backend failure
        """
        client = self._client or get_cached_client()

        request: Dict[str, Any] = {
            "model": model,
            "messages": [to_openai_message(m) for m in messages],
        }
        if tools:
            request["tools"] = list(tools)
        if token is not None:
            request["timeout"] = token.remaining()

        try:
            response = await client.chat.completions.create(**request)
        except openai.APITimeoutError as e:
            raise AbortedError(f"Model request timed out: {e}") from e
        except openai.OpenAIError as e:
            raise InvocationError(f"Model request failed: {e}") from e

        if not response.choices:
            raise InvocationError("Model returned no choices")
        return from_openai_message(response.choices[0].message)
