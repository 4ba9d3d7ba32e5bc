"""
FastAPI endpoints for the orchestrator and the individual agents.
"""

import logging
import uuid
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from booking_agents.graph.entrypoints import run_agent, run_orchestrator
from booking_agents.shared.schemas.base import AgentIdentity


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["orchestrator"])


# ============================================================================
# Request/Response Models
# ============================================================================


class ConversationRunRequest(BaseModel):
    """Request to run a graph over a conversation."""

    messages: List[Dict[str, Any]] = Field(
        description="Conversation so far, oldest first"
    )
    configurable: Optional[Dict[str, Any]] = Field(
        default=None,
        description="Run configuration (model, system_prompt_template, agents)",
    )
    session_id: Optional[str] = Field(
        default=None, description="Session identifier; generated when omitted"
    )


class ConversationRunResponse(BaseModel):
    """Result of a graph run."""

    session_id: str = Field(description="Session identifier")
    routed_to: Optional[str] = Field(
        default=None, description="Booking agent that handled the request, if any"
    )
    messages: List[Dict[str, Any]] = Field(
        default_factory=list, description="Full conversation after the run"
    )


def _run_config(request: ConversationRunRequest) -> Dict[str, Any]:
    return {"configurable": request.configurable} if request.configurable else {}


# ============================================================================
# Endpoints
# ============================================================================


@router.post("/orchestrator/run", response_model=ConversationRunResponse)
async def run_orchestrator_endpoint(request: ConversationRunRequest):
    """
    Run the coordinator and, if it routes, one booking agent.
    """
    session_id = request.session_id or str(uuid.uuid4())
    _log = f"[session={session_id}] [graph=orchestrator] [api=run] "

    logger.info(f"{_log}Run starting | messages={len(request.messages)}")

    try:
        final_state = await run_orchestrator(
            {"messages": request.messages, "session_id": session_id},
            _run_config(request),
        )
    except Exception as e:
        logger.exception(f"{_log}Run failed: {e}")
        raise HTTPException(status_code=500, detail=f"Orchestrator run failed: {str(e)}")

    logger.info(
        f"{_log}Run finished | routed_to={final_state.get('routed_to')}, "
        f"messages={len(final_state.get('messages', []))}"
    )

    return ConversationRunResponse(
        session_id=session_id,
        routed_to=final_state.get("routed_to"),
        messages=final_state.get("messages", []),
    )


@router.post("/agents/{agent}/run", response_model=ConversationRunResponse)
async def run_agent_endpoint(agent: str, request: ConversationRunRequest):
    """
    Run a single agent sub-graph (coordinator, hotel or taxi).
    """
    try:
        identity = AgentIdentity(agent)
    except ValueError:
        raise HTTPException(status_code=404, detail=f"Unknown agent: {agent}")

    session_id = request.session_id or str(uuid.uuid4())
    _log = f"[session={session_id}] [graph={identity.value}] [api=run] "

    logger.info(f"{_log}Run starting | messages={len(request.messages)}")

    try:
        final_state = await run_agent(
            identity,
            {"messages": request.messages, "session_id": session_id},
            _run_config(request),
        )
    except Exception as e:
        logger.exception(f"{_log}Run failed: {e}")
        raise HTTPException(status_code=500, detail=f"Agent run failed: {str(e)}")

    return ConversationRunResponse(
        session_id=session_id,
        routed_to=identity.value if identity != AgentIdentity.COORDINATOR else None,
        messages=final_state.get("messages", []),
    )
