"""
Agent sub-graphs.

Every agent (coordinator, hotel, taxi) runs the same call/tool loop:
call the model, run any requested tools, and repeat until the agent
signals that its turn is complete.
"""

from booking_agents.agent.schemas import AgentState
from booking_agents.agent.graph.build import create_agent_graph

__all__ = ["AgentState", "create_agent_graph"]
