"""
Error taxonomy for the booking agents.

Every error raised inside an agent turn is caught at the agent node
boundary and turned into a terminating assistant message, so none of
these reach the graph runtime or the caller. The entry points turn
``StateValidationError`` for input that is not a state at all into the
same apology.
"""


class BookingAgentError(RuntimeError):
    """Base class for failures inside an agent turn."""


class StateValidationError(BookingAgentError):
    """Raised when the conversation state is not a well-formed message list."""


class AgentDisabledError(BookingAgentError):
    """Raised when the run configuration disables the requested agent."""


class AbortedError(BookingAgentError):
    """Raised when a model call is cancelled by its cancellation token."""


class InvocationError(BookingAgentError):
    """Raised when the model backend fails."""


class IterationLimitError(BookingAgentError):
    """Raised when an agent turn exceeds its model-call budget."""


class ToolExecutionError(BookingAgentError):
    """
    Failure inside a tool implementation.

    Tools never let this escape: it is encoded as an ``{"error": ...}``
    payload in the tool-role message instead.
    """


def error_message(error: BaseException) -> str:
    """Human-readable description of an error, with a generic fallback."""
    text = str(error).strip()
    return text or "Please try again."
