"""
Orchestrator graph construction.

Builds the top-level graph: the coordinator runs first, then at most one
booking agent. Each agent node wraps a compiled agent sub-graph, hands it
the current conversation, and returns only the messages the sub-graph
appended, so the orchestrator's message list stays append-only.
"""

import logging
from typing import Any, Dict, Optional

from langchain_core.runnables import RunnableConfig
from langgraph.graph import StateGraph, END
from langgraph.checkpoint.memory import MemorySaver

from booking_agents.agent.graph.build import create_agent_graph
from booking_agents.agent.nodes.call_model import fallback_message
from booking_agents.graph.config import OrchestratorGraphConfig, DEFAULT_CONFIG
from booking_agents.graph.router import route_from_coordinator
from booking_agents.graph.state import OrchestratorState
from booking_agents.shared.llm.client import ModelClient
from booking_agents.shared.schemas.base import AgentIdentity


logger = logging.getLogger(__name__)


def _make_agent_node(identity: AgentIdentity, agent_graph, step_limit: int):
    """
    Wrap a compiled agent sub-graph as an orchestrator node.

    Args:
        identity: Agent the sub-graph runs as
        agent_graph: Compiled agent sub-graph
        step_limit: Minimum recursion limit the sub-graph runs with

    Returns:
        Async node function returning the appended messages
    """

    async def agent_node(state: OrchestratorState, config: RunnableConfig) -> Dict[str, Any]:
        session_id = state.get("session_id")
        _log = f"[session={session_id or 'unknown'}] [graph=orchestrator] [node={identity.value}] "

        messages = list(state.get("messages") or [])
        logger.info(f"{_log}Entering node | messages={len(messages)}")

        update: Dict[str, Any] = {}
        if identity != AgentIdentity.COORDINATOR:
            update["routed_to"] = identity.value

        try:
            logger.info(f"{_log}Delegating to {identity.value} sub-graph")
            result = await agent_graph.ainvoke(
                {"messages": messages, "iterations": 0, "session_id": session_id},
                {**config, "recursion_limit": max(config.get("recursion_limit") or 0, step_limit)},
            )
            appended = result.get("messages", [])[len(messages):]
            logger.info(f"{_log}Sub-graph returned | appended={len(appended)}")
            update["messages"] = appended
        except Exception as e:
            logger.exception(f"{_log}{identity.value} sub-graph failed: {e}")
            update["messages"] = [fallback_message(identity, e)]

        return update

    agent_node.__name__ = f"{identity.value}_node"
    return agent_node


def create_orchestrator_graph(
    config: Optional[OrchestratorGraphConfig] = None,
    client: Optional[ModelClient] = None,
):
    """
    Create and compile the orchestrator graph.

    The graph structure is:
        Entry -> coordinator -> route_from_coordinator()
                                   ├→ "hotel" -> hotel -> END
                                   ├→ "taxi"  -> taxi  -> END
                                   └→ END

    Args:
        config: Optional configuration. Uses DEFAULT_CONFIG if not provided.
        client: Optional model client shared by every agent.

    Returns:
        Compiled LangGraph application ready for execution.
    """
    if config is None:
        config = DEFAULT_CONFIG

    graph = StateGraph(OrchestratorState)

    # Add one node per agent, each wrapping its own sub-graph
    for identity in AgentIdentity:
        agent_graph = create_agent_graph(identity, config=config.agent, client=client)
        graph.add_node(
            identity.value,
            _make_agent_node(identity, agent_graph, config.agent.step_limit()),
        )

    graph.set_entry_point(AgentIdentity.COORDINATOR.value)

    graph.add_conditional_edges(
        AgentIdentity.COORDINATOR.value,
        route_from_coordinator,
        {
            AgentIdentity.HOTEL.value: AgentIdentity.HOTEL.value,
            AgentIdentity.TAXI.value: AgentIdentity.TAXI.value,
            END: END,
        },
    )

    # Booking agents finish the interaction; they never route back
    graph.add_edge(AgentIdentity.HOTEL.value, END)
    graph.add_edge(AgentIdentity.TAXI.value, END)

    compile_kwargs = {}

    if config.enable_checkpointing or config.interrupt_before or config.interrupt_after:
        compile_kwargs["checkpointer"] = MemorySaver()

    if config.interrupt_before:
        compile_kwargs["interrupt_before"] = config.interrupt_before

    if config.interrupt_after:
        compile_kwargs["interrupt_after"] = config.interrupt_after

    return graph.compile(**compile_kwargs)
