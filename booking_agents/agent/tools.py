"""
Tool sets per agent.

Exhaustive over ``AgentIdentity``; the coordinator only routes and has
no tools.
"""

from typing import Callable, Dict

from booking_agents.hotel.tools import create_hotel_tools
from booking_agents.shared.schemas.base import AgentIdentity
from booking_agents.shared.tools.base import ToolRegistry
from booking_agents.taxi.tools import create_taxi_tools


AGENT_TOOLS: Dict[AgentIdentity, Callable[[], ToolRegistry]] = {
    AgentIdentity.COORDINATOR: ToolRegistry,
    AgentIdentity.HOTEL: create_hotel_tools,
    AgentIdentity.TAXI: create_taxi_tools,
}


def tools_for(identity: AgentIdentity) -> ToolRegistry:
    """Build the tool registry bound to ``identity``."""
    return AGENT_TOOLS[AgentIdentity(identity)]()
