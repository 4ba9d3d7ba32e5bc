"""
Orchestrator state schema.

Defines the top-level state that flows through the orchestrator graph.
"""

from typing import Optional

from booking_agents.shared.schemas.base import ConversationState


class OrchestratorState(ConversationState, total=False):
    """
    State schema for the orchestrator graph.

    The message list is owned by the orchestrator for one user
    interaction and passed to whichever agent sub-graph runs; sub-graphs
    only ever append to it.
    """

    # Booking agent selected by the coordinator, if any
    routed_to: Optional[str]

    # Session tracking
    session_id: Optional[str]
