"""
Logging setup for the booking agents.

Two output styles share one entry point: a pipe-separated text format
for local runs, and one JSON object per line for log shippers. Graph
entry points record state transitions through ``log_state_transition``;
the JSON formatter lifts their event fields to the top level.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, Optional, Union

from booking_agents.shared.completion import is_task_complete


TEXT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)-40s | %(message)s"
TEXT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Third-party loggers that drown out graph logs at INFO
NOISY_LOGGERS = ("httpcore", "httpx", "openai")

# Record attributes copied into JSON output when present
_EVENT_FIELDS = ("event", "session_id", "state_summary", "context")


class StructuredFormatter(logging.Formatter):
    """
    Render each record as a single JSON object.

    Always present: ``timestamp`` (UTC, ISO-8601), ``level``, ``logger``,
    ``message``. Transition fields (``event``, ``session_id``,
    ``state_summary``, ``context``) and ``exception`` are added when the
    record carries them.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for field in _EVENT_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                entry[field] = value

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)


def setup_logging(
    level: Union[int, str] = logging.INFO,
    json_format: bool = False,
    log_file: Optional[str] = None,
    quiet: Iterable[str] = NOISY_LOGGERS,
) -> logging.Logger:
    """
    Configure the root logger for the service.

    Replaces any handlers already on the root logger, so calling it
    again switches format or level cleanly.

    Args:
        level: Log level, as a number or a name such as "DEBUG"
        json_format: Emit JSON lines instead of the text format
        log_file: Also write to this file when given
        quiet: Logger names raised to WARNING

    Returns:
        The root logger
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    if json_format:
        formatter: logging.Formatter = StructuredFormatter()
    else:
        formatter = logging.Formatter(TEXT_FORMAT, datefmt=TEXT_DATE_FORMAT)

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
    root.setLevel(level)

    for name in quiet:
        logging.getLogger(name).setLevel(logging.WARNING)

    return root


def summarize_state(state: Dict[str, Any]) -> Dict[str, Any]:
    """Small, log-friendly summary of a conversation state."""
    messages = state.get("messages") or []
    last = messages[-1] if messages else None
    return {
        "message_count": len(messages),
        "last_role": last.get("role") if isinstance(last, dict) else None,
        "last_agent": last.get("agent") if isinstance(last, dict) else None,
        "task_complete": is_task_complete(last),
    }


def log_state_transition(
    event: str,
    state: Dict[str, Any],
    extra: Optional[Dict[str, Any]] = None,
    logger: Optional[logging.Logger] = None,
) -> None:
    """
    Log a graph state transition.

    Args:
        event: Event name, e.g. "orchestrator_start" or "hotel_complete"
        state: State at the transition (only a summary is logged)
        extra: Additional context, logged under ``context``
        logger: Logger to use; defaults to the package logger
    """
    logger = logger or logging.getLogger("booking_agents")
    summary = summarize_state(state)
    session_id = state.get("session_id")

    logger.info(
        f"[session={session_id or 'unknown'}] State transition: {event} | "
        f"messages={summary['message_count']}, last_agent={summary['last_agent']}",
        extra={
            "event": event,
            "session_id": session_id,
            "state_summary": summary,
            "context": extra,
        },
    )
