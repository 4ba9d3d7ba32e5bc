"""
State schema for an agent sub-graph.
"""

from typing import Optional

from booking_agents.shared.schemas.base import ConversationState


class AgentState(ConversationState, total=False):
    """
    State schema for one agent's call/tool loop.

    ``messages`` (append-only) is inherited from ConversationState and is
    the only field shared with the orchestrator; the other fields are
    local to one agent turn.
    """

    # Model calls made during this turn (checked against max_iterations)
    iterations: int

    # Session tracking
    session_id: Optional[str]
