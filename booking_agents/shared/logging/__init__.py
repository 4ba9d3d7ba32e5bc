"""Logging configuration and utilities."""

from booking_agents.shared.logging.config import (
    StructuredFormatter,
    log_state_transition,
    setup_logging,
    summarize_state,
)

__all__ = [
    "StructuredFormatter",
    "log_state_transition",
    "setup_logging",
    "summarize_state",
]
