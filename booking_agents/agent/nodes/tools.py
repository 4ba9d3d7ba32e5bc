"""
Tool dispatch node for the agent sub-graphs.

Executes the tool calls attached to the latest message and appends one
tool-role message per call, in request order.
"""

import logging
from typing import Any, Callable, Dict

from booking_agents.agent.schemas import AgentState
from booking_agents.shared.contracts.messages import ToolResult, pending_tool_calls
from booking_agents.shared.tools.base import ToolRegistry


logger = logging.getLogger(__name__)


def make_tool_node(
    registry: ToolRegistry, graph_name: str = "agent"
) -> Callable[[AgentState], Dict[str, Any]]:
    """
    Create the tool dispatch node for one agent.

    Args:
        registry: Tools the agent may call
        graph_name: Name used in log prefixes

    Returns:
        Node function ``state -> state update``
    """

    def tools_node(state: AgentState) -> Dict[str, Any]:
        session_id = state.get("session_id", "unknown")
        _log = f"[session={session_id}] [graph={graph_name}] [node=tools] "

        messages = state.get("messages") or []
        calls = pending_tool_calls(messages[-1]) if messages else []
        logger.info(f"{_log}Entering node | pending_tool_calls={len(calls)}")

        results = []
        for call in calls:
            content = registry.execute(call.name, call.arguments)
            logger.info(f"{_log}Executed tool | name={call.name}, id={call.id}")
            logger.debug(f"{_log}Tool result: {content}")
            results.append(
                ToolResult(tool_call_id=call.id, name=call.name, content=content).to_message()
            )

        return {"messages": results}

    return tools_node
