"""
Model-call node for the agent sub-graphs.

One node per agent identity. The node builds the system prompt, calls
the model under a per-call timeout, and appends the response. It never
raises: any failure becomes an apology message that contains
"task complete", so the turn always terminates.
"""

import logging
import time
from typing import Any, Callable, Coroutine, Dict, Optional

from langchain_core.runnables import RunnableConfig

from booking_agents.agent.configuration import ensure_configuration
from booking_agents.agent.graph.config import AgentGraphConfig, DEFAULT_CONFIG
from booking_agents.agent.prompts.builders import build_system_prompt
from booking_agents.agent.schemas import AgentState
from booking_agents.agent.tools import tools_for
from booking_agents.shared.contracts.messages import Message, Role
from booking_agents.shared.errors import (
    AgentDisabledError,
    IterationLimitError,
    error_message,
)
from booking_agents.shared.llm.cancellation import CancellationToken, run_with_token
from booking_agents.shared.llm.client import ModelClient, OpenAIModelClient
from booking_agents.shared.schemas.base import AgentIdentity
from booking_agents.shared.schemas.validation import validate_state
from booking_agents.shared.tools.base import ToolRegistry


logger = logging.getLogger(__name__)


def fallback_message(identity: AgentIdentity, error: BaseException) -> Dict[str, Any]:
    """Apology appended in place of a model response when the turn fails."""
    return {
        "role": Role.ASSISTANT.value,
        "agent": identity.value,
        "content": (
            "I apologize, but I encountered an error while processing your "
            f"request. {error_message(error)} Task complete."
        ),
    }


def make_model_caller(
    identity: AgentIdentity,
    client: Optional[ModelClient] = None,
    graph_config: Optional[AgentGraphConfig] = None,
    tools: Optional[ToolRegistry] = None,
) -> Callable[[AgentState, RunnableConfig], Coroutine[Any, Any, Dict[str, Any]]]:
    """
    Create the model-call node for one agent.

    Args:
        identity: Agent the node runs as
        client: Model client. Defaults to an OpenAI client created per call.
        graph_config: Graph configuration (timeout, iteration cap)
        tools: Tool registry to bind. Defaults to the agent's own tool set.

    Returns:
        Async node function ``(state, config) -> state update``
    """
    identity = AgentIdentity(identity)
    graph_config = graph_config or DEFAULT_CONFIG
    registry = tools if tools is not None else tools_for(identity)
    tool_specs = registry.specs()

    async def call_model(state: AgentState, config: RunnableConfig) -> Dict[str, Any]:
        session_id = state.get("session_id") if isinstance(state, dict) else None
        iterations = (state.get("iterations") or 0) if isinstance(state, dict) else 0
        _log = f"[session={session_id or 'unknown'}] [graph={identity.value}] [node=call_model] "

        try:
            messages = validate_state(state)
            logger.info(
                f"{_log}Entering node | messages={len(messages)}, "
                f"iteration={iterations + 1}/{graph_config.max_iterations}"
            )

            configuration = ensure_configuration(config)
            agent_config = configuration.agent_config(identity)
            if not agent_config.enabled:
                raise AgentDisabledError(f"{identity.value} agent is disabled.")

            if iterations >= graph_config.max_iterations:
                raise IterationLimitError(
                    f"{identity.value} agent stopped after "
                    f"{graph_config.max_iterations} model calls."
                )

            system_prompt = build_system_prompt(identity, configuration)
            model_client = client or OpenAIModelClient()

            logger.info(
                f"{_log}Calling LLM | model={agent_config.model}, "
                f"tools={registry.names()}, timeout={graph_config.llm_timeout:g}s"
            )

            token = CancellationToken(graph_config.llm_timeout)
            start_time = time.perf_counter()
            async with token.armed():
                response = await run_with_token(
                    model_client.invoke(
                        [{"role": Role.SYSTEM.value, "content": system_prompt}, *messages],
                        tool_specs,
                        model=agent_config.model,
                        token=token,
                    ),
                    token,
                )
            duration_ms = (time.perf_counter() - start_time) * 1000

            reply = Message.model_validate(response).to_state()
            reply["agent"] = identity.value

            logger.info(
                f"{_log}LLM responded | duration={duration_ms:.0f}ms, "
                f"tool_calls={len(reply.get('tool_calls', []))}"
            )
            return {"messages": [reply], "iterations": iterations + 1}

        except Exception as e:
            logger.exception(f"{_log}Error in {identity.value} agent: {e}")
            return {
                "messages": [fallback_message(identity, e)],
                "iterations": iterations + 1,
            }

    call_model.__name__ = f"call_{identity.value}_model"
    return call_model
