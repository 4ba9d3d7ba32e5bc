"""
Top-level orchestrator graph.

Composes the agent sub-graphs:
    coordinator -> (hotel | taxi | done)

The coordinator only classifies the request; the booking agent it
routes to handles the rest of the turn and ends the interaction.
"""

from booking_agents.graph.build import create_orchestrator_graph
from booking_agents.graph.entrypoints import (
    run_coordinator,
    run_hotel,
    run_orchestrator,
    run_taxi,
)

__all__ = [
    "create_orchestrator_graph",
    "run_coordinator",
    "run_hotel",
    "run_orchestrator",
    "run_taxi",
]
