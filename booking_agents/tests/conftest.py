"""
Shared fixtures for the booking agent tests.

Model calls are replaced by scripted clients so the graphs run without
network access or an API key.
"""

import asyncio
import json
from typing import Any, Dict, List, Optional

import pytest


def user(text: str) -> Dict[str, Any]:
    return {"role": "user", "content": text}


def assistant(text: str = "", tool_calls: Optional[List[Dict[str, Any]]] = None) -> Dict[str, Any]:
    message: Dict[str, Any] = {"role": "assistant", "content": text}
    if tool_calls:
        message["tool_calls"] = tool_calls
    return message


def tool_call(name: str, arguments: Optional[Dict[str, Any]] = None, call_id: str = "call_1"):
    return {"id": call_id, "name": name, "arguments": json.dumps(arguments or {})}


class ScriptedClient:
    """
    Model client that replays a fixed list of responses.

    Exceptions in the script are raised instead of returned. Every call
    is recorded in ``calls``.
    """

    def __init__(self, responses):
        self.responses = list(responses)
        self.calls: List[Dict[str, Any]] = []

    async def invoke(self, messages, tools, *, model, token=None):
        self.calls.append(
            {"messages": list(messages), "tools": list(tools), "model": model, "token": token}
        )
        if not self.responses:
            raise AssertionError("Unexpected model call")
        response = self.responses.pop(0)
        if isinstance(response, BaseException):
            raise response
        return response


class RepeatingClient(ScriptedClient):
    """Model client that returns the same response forever."""

    def __init__(self, response):
        super().__init__([])
        self.response = response

    async def invoke(self, messages, tools, *, model, token=None):
        self.calls.append({"messages": list(messages), "tools": list(tools), "model": model})
        return self.response


class HangingClient(ScriptedClient):
    """Model client whose calls never resolve and ignore the token."""

    def __init__(self):
        super().__init__([])

    async def invoke(self, messages, tools, *, model, token=None):
        self.calls.append({"messages": list(messages), "tools": list(tools), "model": model})
        await asyncio.Event().wait()


def run(coro):
    """Drive an async graph entry point from a sync test."""
    return asyncio.run(coro)


@pytest.fixture
def hotel_request():
    return {"messages": [user("I need a hotel in Las Vegas for May 27-29.")]}


@pytest.fixture
def taxi_request():
    return {"messages": [user("Can you get me a taxi from the airport to The Venetian?")]}
