"""
Graph invocation entry points.

Each entry point takes a conversation state (``{"messages": [...]}``)
and an optional LangGraph run config, and returns the updated state.
Callers can inject a model client and graph configuration; by default
the OpenAI client and the default configurations are used.

Entry points never raise for a bad turn: input that is not a
conversation state comes back as a state ending in the agent's apology.
The step limit always leaves room for the iteration cap to end the turn.
"""

import logging
import uuid
from typing import Any, Dict, Mapping, Optional

from langchain_core.runnables import RunnableConfig

from booking_agents.agent.graph.build import create_agent_graph
from booking_agents.agent.graph.config import AgentGraphConfig, DEFAULT_CONFIG as DEFAULT_AGENT_CONFIG
from booking_agents.agent.nodes.call_model import fallback_message
from booking_agents.graph.build import create_orchestrator_graph
from booking_agents.graph.config import OrchestratorGraphConfig, DEFAULT_CONFIG as DEFAULT_ORCHESTRATOR_CONFIG
from booking_agents.shared.errors import StateValidationError
from booking_agents.shared.llm.client import ModelClient
from booking_agents.shared.logging.config import log_state_transition
from booking_agents.shared.schemas.base import AgentIdentity


logger = logging.getLogger(__name__)


def _run_config(
    config: Optional[RunnableConfig],
    recursion_limit: int,
    thread_id: Optional[str] = None,
) -> Dict[str, Any]:
    run_config: Dict[str, Any] = dict(config or {})
    run_config["recursion_limit"] = max(run_config.get("recursion_limit") or 0, recursion_limit)
    if thread_id is not None:
        configurable = dict(run_config.get("configurable") or {})
        configurable.setdefault("thread_id", thread_id)
        run_config["configurable"] = configurable
    return run_config


def _session_id(state: Any) -> str:
    session_id = state.get("session_id") if isinstance(state, Mapping) else None
    return session_id or str(uuid.uuid4())


def _initial_state(state: Mapping[str, Any]) -> Dict[str, Any]:
    # Individual messages are validated inside the agent nodes
    if not isinstance(state, Mapping):
        raise StateValidationError("Invalid state object: expected a mapping.")
    messages = state.get("messages", [])
    if not isinstance(messages, (list, tuple)):
        raise StateValidationError("Invalid state object: expected a 'messages' list.")
    return {"messages": list(messages), "session_id": _session_id(state)}


def _rejected_state(identity: AgentIdentity, state: Any, error: Exception) -> Dict[str, Any]:
    """State returned when the input could not be run at all."""
    return {"messages": [fallback_message(identity, error)], "session_id": _session_id(state)}


async def run_agent(
    identity: AgentIdentity,
    state: Mapping[str, Any],
    config: Optional[RunnableConfig] = None,
    *,
    client: Optional[ModelClient] = None,
    graph_config: Optional[AgentGraphConfig] = None,
) -> Dict[str, Any]:
    """
    Run a single agent sub-graph to the end of its turn.

    Args:
        identity: Agent to run
        state: Conversation state with a ``messages`` list
        config: LangGraph run config (``configurable`` holds agent settings)
        client: Optional model client
        graph_config: Optional sub-graph configuration

    Returns:
        Final state: ``messages``, ``iterations`` and ``session_id``
    """
    identity = AgentIdentity(identity)
    graph_config = graph_config or DEFAULT_AGENT_CONFIG

    try:
        initial_state = {**_initial_state(state), "iterations": 0}
    except StateValidationError as e:
        logger.warning(f"[graph={identity.value}] Rejected input state: {e}")
        return {**_rejected_state(identity, state, e), "iterations": 0}

    graph = create_agent_graph(identity, config=graph_config, client=client)
    thread_id = initial_state["session_id"] if graph_config.enable_checkpointing else None

    log_state_transition(f"{identity.value}_start", initial_state, logger=logger)
    result = await graph.ainvoke(
        initial_state, _run_config(config, graph_config.step_limit(), thread_id)
    )
    log_state_transition(f"{identity.value}_complete", result, logger=logger)
    return result


async def run_coordinator(
    state: Mapping[str, Any],
    config: Optional[RunnableConfig] = None,
    *,
    client: Optional[ModelClient] = None,
    graph_config: Optional[AgentGraphConfig] = None,
) -> Dict[str, Any]:
    """Run the coordinator sub-graph on its own."""
    return await run_agent(
        AgentIdentity.COORDINATOR, state, config, client=client, graph_config=graph_config
    )


async def run_hotel(
    state: Mapping[str, Any],
    config: Optional[RunnableConfig] = None,
    *,
    client: Optional[ModelClient] = None,
    graph_config: Optional[AgentGraphConfig] = None,
) -> Dict[str, Any]:
    """Run the hotel sub-graph on its own."""
    return await run_agent(
        AgentIdentity.HOTEL, state, config, client=client, graph_config=graph_config
    )


async def run_taxi(
    state: Mapping[str, Any],
    config: Optional[RunnableConfig] = None,
    *,
    client: Optional[ModelClient] = None,
    graph_config: Optional[AgentGraphConfig] = None,
) -> Dict[str, Any]:
    """Run the taxi sub-graph on its own."""
    return await run_agent(
        AgentIdentity.TAXI, state, config, client=client, graph_config=graph_config
    )


async def run_orchestrator(
    state: Mapping[str, Any],
    config: Optional[RunnableConfig] = None,
    *,
    client: Optional[ModelClient] = None,
    graph_config: Optional[OrchestratorGraphConfig] = None,
) -> Dict[str, Any]:
    """
    Run the full orchestrator: coordinator, then at most one booking agent.

    Args:
        state: Conversation state with a ``messages`` list
        config: LangGraph run config
        client: Optional model client shared by every agent
        graph_config: Optional orchestrator configuration

    Returns:
        Final state: ``messages``, ``routed_to`` and ``session_id``
    """
    graph_config = graph_config or DEFAULT_ORCHESTRATOR_CONFIG

    try:
        initial_state = {**_initial_state(state), "routed_to": None}
    except StateValidationError as e:
        logger.warning(f"[graph=orchestrator] Rejected input state: {e}")
        return {
            **_rejected_state(AgentIdentity.COORDINATOR, state, e),
            "routed_to": None,
        }

    graph = create_orchestrator_graph(config=graph_config, client=client)

    uses_checkpointer = (
        graph_config.enable_checkpointing
        or graph_config.interrupt_before
        or graph_config.interrupt_after
    )
    thread_id = initial_state["session_id"] if uses_checkpointer else None

    # Sub-graphs inherit the run's recursion limit
    recursion_limit = max(graph_config.recursion_limit, graph_config.agent.step_limit())

    log_state_transition("orchestrator_start", initial_state, logger=logger)
    result = await graph.ainvoke(
        initial_state, _run_config(config, recursion_limit, thread_id)
    )
    log_state_transition(
        "orchestrator_complete",
        result,
        extra={"routed_to": result.get("routed_to")},
        logger=logger,
    )
    return result
