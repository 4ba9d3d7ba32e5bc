"""
FastAPI application entry point.

Serves the orchestrator and the single-agent endpoints. Logging is set
up here for the whole process; ``LOG_LEVEL`` and ``LOG_FORMAT=json``
adjust it.
"""

import os

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from booking_agents.graph.orchestrator_api import router as orchestrator_router
from booking_agents.shared.logging.config import setup_logging
from booking_agents.shared.schemas.base import AgentIdentity


load_dotenv()

setup_logging(
    level=os.environ.get("LOG_LEVEL", "INFO"),
    json_format=os.environ.get("LOG_FORMAT", "").lower() == "json",
)

VERSION = "0.1.0"

app = FastAPI(
    title="Booking Agents",
    description="Coordinator, hotel and taxi booking agents built with LangGraph",
    version=VERSION,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=os.environ.get("CORS_ORIGINS", "*").split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(orchestrator_router)


@app.get("/")
async def root():
    """Service info: version and where each agent can be reached."""
    agents = {
        identity.value: f"/api/agents/{identity.value}/run" for identity in AgentIdentity
    }
    return {
        "name": "Booking Agents",
        "version": VERSION,
        "orchestrator": "/api/orchestrator/run",
        "agents": agents,
    }


@app.get("/health")
async def health():
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        app,
        host=os.environ.get("HOST", "0.0.0.0"),
        port=int(os.environ.get("PORT", "8000")),
    )
