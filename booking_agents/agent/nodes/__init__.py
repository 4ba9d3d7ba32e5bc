"""Graph nodes for the agent sub-graphs."""

from booking_agents.agent.nodes.call_model import fallback_message, make_model_caller
from booking_agents.agent.nodes.routing import route_model_output
from booking_agents.agent.nodes.tools import make_tool_node

__all__ = [
    "fallback_message",
    "make_model_caller",
    "make_tool_node",
    "route_model_output",
]
