"""
Conversation state schema.

The message list is the only state shared across graphs. It is
append-only: nodes return new messages and the ``operator.add`` reducer
appends them, so earlier messages are never mutated or reordered.
"""

from enum import Enum
from typing import TypedDict, List, Annotated
import operator


class ConversationState(TypedDict):
    """
    Minimal state accepted by every graph entry point.

    Fields:
        messages: Append-only list of role-tagged message dicts
    """

    messages: Annotated[List[dict], operator.add]


class AgentIdentity(str, Enum):
    """
    The fixed set of agents wired into the orchestrator.

    Adding an agent means adding a member here, a tool set and a
    sub-graph, and a routing branch in the orchestrator router.
    """

    COORDINATOR = "coordinator"
    HOTEL = "hotel"
    TAXI = "taxi"
