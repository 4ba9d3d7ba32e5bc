"""
Tests for the FastAPI endpoints.

Graph entry points are monkeypatched, so no model is called.
"""

import pytest
from fastapi.testclient import TestClient

from booking_agents.graph import orchestrator_api
from booking_agents.main import app


@pytest.fixture
def client():
    return TestClient(app)


class TestApplication:
    """Tests for the top-level endpoints."""

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}

    def test_root_lists_agents(self, client):
        agents = client.get("/").json()["agents"]
        assert set(agents) == {"coordinator", "hotel", "taxi"}
        assert agents["taxi"] == "/api/agents/taxi/run"


class TestOrchestratorEndpoint:
    """Tests for POST /api/orchestrator/run."""

    def test_run(self, client, monkeypatch):
        seen = {}

        async def fake_run_orchestrator(state, config=None, **kwargs):
            seen["state"], seen["config"] = state, config
            return {
                "messages": state["messages"] + [{"role": "assistant", "content": "Task complete."}],
                "routed_to": "hotel",
                "session_id": state["session_id"],
            }

        monkeypatch.setattr(orchestrator_api, "run_orchestrator", fake_run_orchestrator)

        response = client.post(
            "/api/orchestrator/run",
            json={
                "messages": [{"role": "user", "content": "Hotel please"}],
                "session_id": "s-1",
                "configurable": {"model": "gpt-4o"},
            },
        )

        assert response.status_code == 200
        body = response.json()
        assert body["session_id"] == "s-1"
        assert body["routed_to"] == "hotel"
        assert len(body["messages"]) == 2
        assert seen["config"] == {"configurable": {"model": "gpt-4o"}}

    def test_missing_messages(self, client):
        response = client.post("/api/orchestrator/run", json={})
        assert response.status_code == 422

    def test_messages_must_be_a_list(self, client):
        response = client.post("/api/orchestrator/run", json={"messages": "hello"})
        assert response.status_code == 422

    def test_unexpected_failure(self, client, monkeypatch):
        async def fake_run_orchestrator(state, config=None, **kwargs):
            raise RuntimeError("graph exploded")

        monkeypatch.setattr(orchestrator_api, "run_orchestrator", fake_run_orchestrator)

        response = client.post("/api/orchestrator/run", json={"messages": []})

        assert response.status_code == 500
        assert "graph exploded" in response.json()["detail"]


class TestAgentEndpoint:
    """Tests for POST /api/agents/{agent}/run."""

    def test_unknown_agent(self, client):
        response = client.post("/api/agents/flights/run", json={"messages": []})
        assert response.status_code == 404

    def test_run_taxi(self, client, monkeypatch):
        seen = {}

        async def fake_run_agent(identity, state, config=None, **kwargs):
            seen["identity"] = identity
            return {"messages": state["messages"], "session_id": state["session_id"]}

        monkeypatch.setattr(orchestrator_api, "run_agent", fake_run_agent)

        response = client.post(
            "/api/agents/taxi/run", json={"messages": [{"role": "user", "content": "Taxi"}]}
        )

        assert response.status_code == 200
        assert response.json()["routed_to"] == "taxi"
        assert seen["identity"].value == "taxi"
