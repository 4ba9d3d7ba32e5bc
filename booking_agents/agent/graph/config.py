"""
Graph configuration for the agent sub-graphs.

Centralizes the tunables for the call/tool loop, so behavior can be
adjusted without touching the graph wiring.
"""

from dataclasses import dataclass


@dataclass
class AgentGraphConfig:
    """
    Configuration for an agent sub-graph.

    Attributes:
        recursion_limit: Minimum number of graph steps per invocation
        llm_timeout: Per model call timeout in seconds
        max_iterations: Maximum model calls in one agent turn
        enable_checkpointing: Whether to compile with an in-memory checkpointer
    """

    recursion_limit: int = 25
    llm_timeout: float = 60.0  # seconds
    max_iterations: int = 8
    enable_checkpointing: bool = False

    def step_limit(self) -> int:
        """
        Recursion limit to run the sub-graph with.

        A capped turn takes ``max_iterations`` model/tool round trips plus
        the final model call that reports the cap, so the limit is raised
        to cover that whenever ``recursion_limit`` alone would not.
        """
        return max(self.recursion_limit, 2 * self.max_iterations + 2)


# Default configuration instance
DEFAULT_CONFIG = AgentGraphConfig()
