"""
Completion detection for agent turns.

An agent signals that it has finished its turn by including one of a
small, fixed set of phrases in its reply. Routing policies only depend
on ``is_task_complete`` so the phrase contract can be swapped out in one
place.
"""

from typing import Any

from booking_agents.shared.contracts.messages import text_of


COMPLETION_PHRASES = (
    "task complete",
    "booking confirmed",
    "completed",
    "finished",
)


def is_task_complete(message: Any) -> bool:
    """True if the message text contains a completion phrase, ignoring case."""
    content = text_of(message).lower()
    return any(phrase in content for phrase in COMPLETION_PHRASES)
