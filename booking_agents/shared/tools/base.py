"""
Tool base class and registry.

Tools take a JSON argument string and return a JSON result string. They
never raise: any failure, including bad arguments, comes back as an
``{"error": ...}`` payload so the model can see what went wrong.
"""

import json
import logging
from typing import Any, Dict, Iterable, Iterator, List, Optional

from booking_agents.shared.errors import ToolExecutionError


logger = logging.getLogger(__name__)


def error_payload(message: str) -> str:
    return json.dumps({"error": message})


class BookingTool:
    """
    Base class for tools bound to an agent.

    Subclasses set ``name``, ``description`` and ``parameters`` (a JSON
    schema for the arguments object) and implement ``_run``.
    """

    name: str = "unnamed_tool"
    description: str = ""
    parameters: Dict[str, Any] = {"type": "object", "properties": {}}

    def spec(self) -> Dict[str, Any]:
        """OpenAI function-tool spec for binding to the model."""
        return {
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.description,
                "parameters": self.parameters,
            },
        }

    def _run(self, args: Dict[str, Any]) -> Any:
        raise NotImplementedError

    def execute(self, arguments_json: Optional[str]) -> str:
        """
        Run the tool.

        Args:
            arguments_json: JSON-encoded arguments object (empty means no arguments)

        Returns:
            JSON-encoded result, or an error payload
        """
        try:
            args = json.loads(arguments_json) if arguments_json and arguments_json.strip() else {}
            if not isinstance(args, dict):
                raise ToolExecutionError("Tool arguments must be a JSON object")
            return json.dumps(self._run(args))
        except json.JSONDecodeError as e:
            logger.warning(f"[tool={self.name}] Invalid arguments JSON: {e}")
            return error_payload(f"Invalid arguments: {e}")
        except Exception as e:
            logger.warning(f"[tool={self.name}] Tool failed: {e}")
            return error_payload(str(e) or type(e).__name__)


class ToolRegistry:
    """Name-indexed set of tools bound to one agent."""

    def __init__(self, tools: Iterable[BookingTool] = ()):
        self._tools: Dict[str, BookingTool] = {}
        for tool in tools:
            self.register(tool)

    def register(self, tool: BookingTool) -> None:
        if tool.name in self._tools:
            raise ValueError(f"Tool '{tool.name}' is already registered")
        self._tools[tool.name] = tool

    def get(self, name: str) -> Optional[BookingTool]:
        return self._tools.get(name)

    def names(self) -> List[str]:
        return list(self._tools)

    def specs(self) -> List[Dict[str, Any]]:
        return [tool.spec() for tool in self._tools.values()]

    def execute(self, name: str, arguments_json: Optional[str]) -> str:
        tool = self._tools.get(name)
        if tool is None:
            return error_payload(f"Unknown tool: {name}")
        return tool.execute(arguments_json)

    def __iter__(self) -> Iterator[BookingTool]:
        return iter(self._tools.values())

    def __len__(self) -> int:
        return len(self._tools)
