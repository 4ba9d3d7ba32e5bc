"""
Routing logic for the agent sub-graphs.

Decides, after every model call, whether to run the pending tool calls
or end the agent's turn.
"""

import logging
from typing import Literal

from langgraph.graph import END

from booking_agents.agent.schemas import AgentState
from booking_agents.shared.completion import is_task_complete
from booking_agents.shared.contracts.messages import pending_tool_calls
from booking_agents.shared.schemas.validation import has_message_list


logger = logging.getLogger(__name__)


def route_model_output(state: AgentState) -> Literal["tools", "__end__"]:
    """
    Route after the model-call node.

    Routing logic:
    1. Malformed state or no messages -> end
    2. Last message signals completion -> end (wins over tool calls)
    3. Last message carries tool calls -> tools
    4. Otherwise -> end

    Args:
        state: Current agent state

    Returns:
        "tools" or END
    """
    try:
        if not has_message_list(state):
            logger.error("[router=route_model_output] Invalid state, routing to END")
            return END

        session_id = state.get("session_id", "unknown")
        _log = f"[session={session_id}] [router=route_model_output] "

        messages = state["messages"]
        if not messages:
            logger.info(f"{_log}Routing to END | no messages")
            return END

        last_message = messages[-1]
        if is_task_complete(last_message):
            logger.info(f"{_log}Routing to END | task complete")
            return END

        calls = pending_tool_calls(last_message)
        if calls:
            logger.info(f"{_log}Routing to 'tools' | tool_calls={len(calls)}")
            return "tools"

        logger.info(f"{_log}Routing to END | no tool calls, no completion phrase")
    except Exception as e:
        logger.exception(f"[router=route_model_output] Routing failed: {e}")
    return END
