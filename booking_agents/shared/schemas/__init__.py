"""Common state schemas and validation."""

from booking_agents.shared.schemas.base import AgentIdentity, ConversationState
from booking_agents.shared.schemas.validation import has_message_list, validate_state

__all__ = ["AgentIdentity", "ConversationState", "has_message_list", "validate_state"]
