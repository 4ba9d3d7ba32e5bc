"""
Booking agents package.

This package contains:
- shared/: Common infrastructure (LLM client, cancellation, logging, message contracts, tools)
- agent/: The call/tool loop sub-graph shared by every agent
- hotel/: Hotel dataset and tools
- taxi/: Taxi dataset and tools
- graph/: Top-level orchestrator (coordinator -> hotel | taxi)
"""

from booking_agents.agent.graph.build import create_agent_graph
from booking_agents.graph.build import create_orchestrator_graph

__all__ = ["create_agent_graph", "create_orchestrator_graph"]
