"""Graph construction and configuration for the agent sub-graphs."""

from booking_agents.agent.graph.build import create_agent_graph
from booking_agents.agent.graph.config import AgentGraphConfig

__all__ = ["create_agent_graph", "AgentGraphConfig"]
