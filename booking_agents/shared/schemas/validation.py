"""
Conversation state validation.
"""

from typing import Any, List, Mapping

from pydantic import ValidationError

from booking_agents.shared.contracts.messages import Message
from booking_agents.shared.errors import StateValidationError


def has_message_list(state: Any) -> bool:
    """Cheap structural check used by the routing policies."""
    return isinstance(state, Mapping) and isinstance(state.get("messages"), list)


def validate_state(state: Any) -> List[dict]:
    """
    Check that ``state`` carries a well-formed message list.

    Args:
        state: Graph state to check

    Returns:
        The state's message list

    Raises:
        StateValidationError: If the state or any message is malformed
    """
    if not has_message_list(state):
        raise StateValidationError("Invalid state object: expected a 'messages' list.")

    messages = state["messages"]
    for position, message in enumerate(messages):
        try:
            Message.model_validate(message)
        except ValidationError as e:
            raise StateValidationError(
                f"Invalid message at position {position}: "
                f"{e.error_count()} validation error(s)."
            ) from e
    return messages
