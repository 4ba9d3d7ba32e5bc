"""Prompt templates and builders for the agents."""

from booking_agents.agent.prompts.templates import (
    AGENT_PROMPT_PREAMBLE,
    COORDINATOR_PROMPT,
    SYSTEM_PROMPT_TEMPLATE,
)
from booking_agents.agent.prompts.builders import (
    build_agent_prompt,
    build_system_prompt,
)

__all__ = [
    "AGENT_PROMPT_PREAMBLE",
    "COORDINATOR_PROMPT",
    "SYSTEM_PROMPT_TEMPLATE",
    "build_agent_prompt",
    "build_system_prompt",
]
