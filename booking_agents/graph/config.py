"""
Graph configuration for the orchestrator.
"""

from dataclasses import dataclass, field
from typing import List

from booking_agents.agent.graph.config import AgentGraphConfig


@dataclass
class OrchestratorGraphConfig:
    """
    Configuration for the orchestrator graph.

    Attributes:
        recursion_limit: Maximum number of graph steps (applies to sub-graphs too)
        interrupt_before: Node names to pause before (empty: never pause)
        interrupt_after: Node names to pause after (empty: never pause)
        enable_checkpointing: Whether to enable in-memory state checkpointing
        agent: Configuration shared by the coordinator, hotel and taxi sub-graphs
    """

    recursion_limit: int = 25

    # Human-in-the-loop hooks, disabled by default
    interrupt_before: List[str] = field(default_factory=list)
    interrupt_after: List[str] = field(default_factory=list)

    # Persistence (required when any interrupt hook is set)
    enable_checkpointing: bool = False

    agent: AgentGraphConfig = field(default_factory=AgentGraphConfig)


# Default configuration instance
DEFAULT_CONFIG = OrchestratorGraphConfig()
