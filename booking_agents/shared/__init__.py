"""
Shared infrastructure for all agents.

Modules:
- llm: OpenAI client and per-call cancellation
- logging: Structured JSON logging
- contracts: Message model and text extraction
- schemas: Conversation state and agent identities
- tools: Tool base class and registry
"""

from booking_agents.shared.completion import is_task_complete
from booking_agents.shared.llm.client import get_cached_client, OpenAIModelClient
from booking_agents.shared.logging.config import setup_logging, log_state_transition

__all__ = [
    "is_task_complete",
    "get_cached_client",
    "OpenAIModelClient",
    "setup_logging",
    "log_state_transition",
]
