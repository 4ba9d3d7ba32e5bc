"""
Run configuration for the agents.

Resolves the per-invocation configuration from the LangGraph run config
(``config["configurable"]``), filling in built-in defaults for anything
the caller leaves out. Resolution is a pure function of the run config
and happens on every agent call; nothing is cached.
"""

from typing import Any, Dict, Mapping, Optional

from langchain_core.runnables import RunnableConfig
from pydantic import BaseModel, Field

from booking_agents.agent.prompts.templates import SYSTEM_PROMPT_TEMPLATE
from booking_agents.shared.schemas.base import AgentIdentity


DEFAULT_MODEL = "gpt-4.1-mini"

# Older run configs key the coordinator as "itinerary"
_CONFIG_KEYS = {
    AgentIdentity.COORDINATOR: ("coordinator", "itinerary"),
    AgentIdentity.HOTEL: ("hotel",),
    AgentIdentity.TAXI: ("taxi",),
}


class AgentConfig(BaseModel):
    """Per-agent settings."""

    enabled: bool = Field(default=True, description="Whether the agent may run")
    model: Optional[str] = Field(
        default=None, description="Model override; falls back to the default model"
    )


class Configuration(BaseModel):
    """Fully resolved configuration for one graph invocation."""

    system_prompt_template: str = Field(default=SYSTEM_PROMPT_TEMPLATE)
    model: str = Field(default=DEFAULT_MODEL)
    agents: Dict[AgentIdentity, AgentConfig] = Field(
        default_factory=lambda: {identity: AgentConfig() for identity in AgentIdentity}
    )

    def agent_config(self, identity: AgentIdentity) -> AgentConfig:
        """
        Settings for one agent with the model filled in.

        Args:
            identity: Agent to look up

        Returns:
            AgentConfig whose ``model`` is never None
        """
        agent = self.agents.get(identity) or AgentConfig()
        return AgentConfig(enabled=agent.enabled, model=agent.model or self.model)


def _agent_override(overrides: Mapping[Any, Any], identity: AgentIdentity) -> Dict[str, Any]:
    for key in _CONFIG_KEYS[identity]:
        value = overrides.get(key)
        if value is None:
            continue
        if isinstance(value, AgentConfig):
            return value.model_dump(exclude_unset=True)
        if isinstance(value, Mapping):
            return dict(value)
        raise TypeError(f"Invalid configuration for agent '{key}': {value!r}")
    return {}


def ensure_configuration(config: Optional[RunnableConfig] = None) -> Configuration:
    """
    Resolve the run configuration, populating defaults.

    Recognised ``configurable`` keys:
        system_prompt_template: Template for the booking agents
        model: Default model identifier
        agents: Mapping of agent name to partial ``AgentConfig`` overrides

    Args:
        config: LangGraph run config (may be None)

    Returns:
        Configuration with every agent present
    """
    configurable = (config or {}).get("configurable") or {}
    overrides = configurable.get("agents") or {}

    agents = {
        identity: AgentConfig.model_validate(_agent_override(overrides, identity))
        for identity in AgentIdentity
    }

    return Configuration(
        system_prompt_template=configurable.get("system_prompt_template")
        or SYSTEM_PROMPT_TEMPLATE,
        model=configurable.get("model") or DEFAULT_MODEL,
        agents=agents,
    )
