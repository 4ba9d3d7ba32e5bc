"""
Routing logic for the orchestrator graph.

Reads the coordinator's last message and picks the booking agent to run.
"""

import logging
from typing import Literal

from langgraph.graph import END

from booking_agents.graph.state import OrchestratorState
from booking_agents.shared.contracts.messages import text_of
from booking_agents.shared.schemas.validation import has_message_list


logger = logging.getLogger(__name__)


# Checked in order; first match wins
ROUTING_PHRASES = (
    ("routing to hotel", "hotel"),
    ("routing to taxi", "taxi"),
)


def route_from_coordinator(
    state: OrchestratorState,
) -> Literal["hotel", "taxi", "__end__"]:
    """
    Determine which booking agent handles the request.

    Routing logic:
    1. "routing to hotel" in the coordinator's last message -> hotel
    2. "routing to taxi" -> taxi
    3. Otherwise (clarification question, failure) -> END

    Args:
        state: Current orchestrator state

    Returns:
        Name of the next node, or END
    """
    try:
        if not has_message_list(state):
            logger.error("[graph=orchestrator] [router=route_from_coordinator] Invalid state -> END")
            return END

        session_id = state.get("session_id", "unknown")
        _log = f"[session={session_id}] [graph=orchestrator] [router=route_from_coordinator] "

        messages = state["messages"]
        if not messages:
            logger.info(f"{_log}Routing to END | no messages")
            return END

        content = text_of(messages[-1]).lower()
        for phrase, destination in ROUTING_PHRASES:
            if phrase in content:
                logger.info(f"{_log}Routing to '{destination}' | matched='{phrase}'")
                return destination

        logger.info(f"{_log}Routing to END | no routing phrase in coordinator reply")
    except Exception as e:
        logger.exception(f"[graph=orchestrator] [router=route_from_coordinator] Routing failed: {e}")
    return END
