"""
System prompt builders for the agents.
"""

from datetime import datetime, timezone
from typing import TYPE_CHECKING, Optional

from booking_agents.agent.prompts.templates import (
    AGENT_PROMPT_PREAMBLE,
    COORDINATOR_PROMPT,
)
from booking_agents.shared.schemas.base import AgentIdentity

if TYPE_CHECKING:
    from booking_agents.agent.configuration import Configuration


def build_agent_prompt(
    identity: AgentIdentity,
    template: str,
    now: Optional[datetime] = None,
) -> str:
    """
    Build the system prompt for a booking agent.

    Uses plain substitution for ``{system_time}`` so any other braces in
    a caller-supplied template are left untouched.

    Args:
        identity: Booking agent the prompt is for
        template: System prompt template
        now: Timestamp to embed (defaults to the current UTC time)

    Returns:
        Preamble followed by the filled-in template
    """
    now = now or datetime.now(timezone.utc)
    preamble = AGENT_PROMPT_PREAMBLE.format(agent=AgentIdentity(identity).value)
    return f"{preamble} {template.replace('{system_time}', now.isoformat())}"


def build_system_prompt(
    identity: AgentIdentity,
    configuration: "Configuration",
    now: Optional[datetime] = None,
) -> str:
    """
    Build the system prompt for any agent.

    The coordinator always gets the fixed routing-only prompt.
    """
    if identity == AgentIdentity.COORDINATOR:
        return COORDINATOR_PROMPT
    return build_agent_prompt(identity, configuration.system_prompt_template, now)
