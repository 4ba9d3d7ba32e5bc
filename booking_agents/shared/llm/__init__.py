"""LLM client utilities."""

from booking_agents.shared.llm.cancellation import CancellationToken, run_with_token
from booking_agents.shared.llm.client import (
    ModelClient,
    OpenAIModelClient,
    get_cached_client,
)

__all__ = [
    "CancellationToken",
    "ModelClient",
    "OpenAIModelClient",
    "get_cached_client",
    "run_with_token",
]
