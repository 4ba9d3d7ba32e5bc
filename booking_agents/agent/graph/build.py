"""
Graph construction for the agent sub-graphs.

Builds and compiles the call/tool loop shared by the coordinator, hotel
and taxi agents.
"""

from typing import Optional

from langgraph.graph import StateGraph, END
from langgraph.checkpoint.memory import MemorySaver

from booking_agents.agent.graph.config import AgentGraphConfig, DEFAULT_CONFIG
from booking_agents.agent.nodes.call_model import make_model_caller
from booking_agents.agent.nodes.routing import route_model_output
from booking_agents.agent.nodes.tools import make_tool_node
from booking_agents.agent.schemas import AgentState
from booking_agents.agent.tools import tools_for
from booking_agents.shared.llm.client import ModelClient
from booking_agents.shared.schemas.base import AgentIdentity
from booking_agents.shared.tools.base import ToolRegistry


def create_agent_graph(
    identity: AgentIdentity,
    config: Optional[AgentGraphConfig] = None,
    client: Optional[ModelClient] = None,
    tools: Optional[ToolRegistry] = None,
):
    """
    Create and compile the LangGraph workflow for one agent.

    The graph structure is:
        Entry → call_model → route_model_output()
                                ├→ If tool calls pending → tools → call_model
                                └→ Else → END

    Args:
        identity: Agent the graph runs as
        config: Optional configuration. Uses DEFAULT_CONFIG if not provided.
        client: Optional model client. Defaults to the OpenAI client.
        tools: Optional tool registry. Defaults to the agent's own tool set.

    Returns:
        Compiled LangGraph application ready for execution.
    """
    if config is None:
        config = DEFAULT_CONFIG

    identity = AgentIdentity(identity)
    registry = tools if tools is not None else tools_for(identity)

    graph = StateGraph(AgentState)

    # Add nodes
    graph.add_node(
        "call_model",
        make_model_caller(identity, client=client, graph_config=config, tools=registry),
    )
    graph.add_node("tools", make_tool_node(registry, graph_name=identity.value))

    # Set entry point
    graph.set_entry_point("call_model")

    # Loop through tools until the agent finishes its turn
    graph.add_conditional_edges(
        "call_model",
        route_model_output,
        {
            "tools": "tools",
            END: END,
        },
    )
    graph.add_edge("tools", "call_model")

    compile_kwargs = {}
    if config.enable_checkpointing:
        compile_kwargs["checkpointer"] = MemorySaver()

    return graph.compile(**compile_kwargs)
