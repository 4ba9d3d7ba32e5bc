"""
Tests for the agent sub-graphs (coordinator, hotel, taxi).

Each test drives a compiled sub-graph through its entry point with a
scripted model client.
"""

import json

import pytest
from langgraph.graph import END

from booking_agents.agent.graph.build import create_agent_graph
from booking_agents.agent.graph.config import AgentGraphConfig
from booking_agents.agent.nodes.routing import route_model_output
from booking_agents.agent.prompts.templates import COORDINATOR_PROMPT
from booking_agents.graph.entrypoints import run_coordinator, run_hotel, run_taxi
from booking_agents.shared.completion import is_task_complete
from booking_agents.shared.errors import InvocationError

from conftest import (
    HangingClient,
    RepeatingClient,
    ScriptedClient,
    assistant,
    run,
    tool_call,
    user,
)


# ============================================================================
# Routing inside an agent
# ============================================================================


class TestRouteModelOutput:
    """Tests for the call/tool loop routing decision."""

    def test_tool_calls_route_to_tools(self):
        state = {"messages": [user("hi"), assistant("", [tool_call("search_hotels")])]}
        assert route_model_output(state) == "tools"

    def test_completion_wins_over_tool_calls(self):
        message = assistant("Booking finished.", [tool_call("search_hotels")])
        assert route_model_output({"messages": [message]}) == END

    def test_plain_reply_ends(self):
        assert route_model_output({"messages": [assistant("Which dates?")]}) == END

    def test_empty_messages_end(self):
        assert route_model_output({"messages": []}) == END

    @pytest.mark.parametrize("state", [None, {}, {"messages": "hello"}, []])
    def test_malformed_state_ends(self, state):
        assert route_model_output(state) == END

    def test_malformed_tool_calls_end(self):
        message = {"role": "assistant", "content": "", "tool_calls": [{"id": "c1"}]}
        assert route_model_output({"messages": [message]}) == END


# ============================================================================
# Successful turns
# ============================================================================


class TestAgentTurn:
    """Tests for a normal agent turn."""

    def test_tool_loop_until_finished(self, hotel_request):
        client = ScriptedClient(
            [
                assistant("", [tool_call("search_hotels", {"max_price": 260})]),
                assistant("Seaside Resort is available. Booking finished."),
            ]
        )

        result = run(run_hotel(hotel_request, client=client))
        messages = result["messages"]

        assert [m["role"] for m in messages] == ["user", "assistant", "tool", "assistant"]
        assert messages[1]["agent"] == "hotel"
        assert messages[2]["tool_call_id"] == "call_1"
        assert [h["id"] for h in json.loads(messages[2]["content"])] == ["h2"]
        assert is_task_complete(messages[-1])
        assert result["iterations"] == 2

        # Second call sees the tool result
        second_call = client.calls[1]["messages"]
        assert second_call[-1]["role"] == "tool"

    def test_multiple_tool_calls_answered_in_order(self, taxi_request):
        client = ScriptedClient(
            [
                assistant(
                    "",
                    [
                        tool_call("search_taxi_services", {"type": "Premium"}, call_id="a"),
                        tool_call(
                            "calculate_taxi_fare",
                            {"serviceId": "t1", "hours": 2, "distance": 10},
                            call_id="b",
                        ),
                    ],
                ),
                assistant("The standard taxi costs $90. Task complete."),
            ]
        )

        messages = run(run_taxi(taxi_request, client=client))["messages"]

        assert [m.get("tool_call_id") for m in messages[2:4]] == ["a", "b"]
        assert json.loads(messages[3]["content"])["totalFare"] == 90

    def test_unknown_tool_reported_to_model(self, hotel_request):
        client = ScriptedClient(
            [
                assistant("", [tool_call("book_flight")]),
                assistant("I can't book flights. Task complete."),
            ]
        )

        messages = run(run_hotel(hotel_request, client=client))["messages"]

        assert json.loads(messages[2]["content"]) == {"error": "Unknown tool: book_flight"}

    def test_completion_with_tool_calls_skips_tools(self, hotel_request):
        client = ScriptedClient(
            [assistant("All done, task complete.", [tool_call("search_hotels")])]
        )

        messages = run(run_hotel(hotel_request, client=client))["messages"]

        assert [m["role"] for m in messages] == ["user", "assistant"]
        assert len(client.calls) == 1

    def test_clarifying_reply_ends_turn(self, hotel_request):
        client = ScriptedClient([assistant("Which neighborhood do you prefer?")])

        messages = run(run_hotel(hotel_request, client=client))["messages"]

        assert len(messages) == 2
        assert not is_task_complete(messages[-1])

    def test_history_is_append_only(self, hotel_request):
        history = hotel_request["messages"] + [
            assistant("Which dates?"),
            user("May 27 to 29."),
        ]
        client = ScriptedClient([assistant("Booked. Task complete.")])

        messages = run(run_hotel({"messages": history}, client=client))["messages"]

        assert messages[: len(history)] == history
        assert len(messages) == len(history) + 1

    def test_prompt_and_tools_sent_to_model(self, hotel_request):
        client = ScriptedClient([assistant("Task complete.")])

        run(run_hotel(hotel_request, client=client))
        call = client.calls[0]

        assert call["messages"][0]["role"] == "system"
        assert call["messages"][0]["content"].startswith("You are the hotel agent.")
        assert call["messages"][1:] == hotel_request["messages"]
        assert [t["function"]["name"] for t in call["tools"]] == [
            "search_hotels",
            "check_hotel_availability",
        ]
        assert call["model"] == "gpt-4.1-mini"
        assert call["token"] is not None

    def test_coordinator_has_no_tools(self, hotel_request):
        client = ScriptedClient([assistant("Routing to hotel agent.")])

        run(run_coordinator(hotel_request, client=client))
        call = client.calls[0]

        assert call["tools"] == []
        assert call["messages"][0]["content"] == COORDINATOR_PROMPT

    def test_model_override(self, hotel_request):
        client = ScriptedClient([assistant("Task complete.")])
        config = {"configurable": {"agents": {"hotel": {"model": "gpt-4o"}}}}

        run(run_hotel(hotel_request, config, client=client))

        assert client.calls[0]["model"] == "gpt-4o"


# ============================================================================
# Failure handling
# ============================================================================


class TestAgentFailures:
    """Every failure ends the turn with exactly one apology."""

    def _assert_single_apology(self, request, result, agent):
        messages = result["messages"]
        assert len(messages) == len(request["messages"]) + 1
        apology = messages[-1]
        assert apology["role"] == "assistant"
        assert apology["agent"] == agent
        assert apology["content"].startswith("I apologize, but I encountered an error")
        assert is_task_complete(apology)
        return apology["content"]

    def test_disabled_agent_never_calls_model(self, hotel_request):
        client = ScriptedClient([])
        config = {"configurable": {"agents": {"hotel": {"enabled": False}}}}

        result = run(run_hotel(hotel_request, config, client=client))

        content = self._assert_single_apology(hotel_request, result, "hotel")
        assert "hotel agent is disabled." in content
        assert client.calls == []

    def test_timeout(self, taxi_request):
        client = HangingClient()

        result = run(
            run_taxi(taxi_request, client=client, graph_config=AgentGraphConfig(llm_timeout=0.05))
        )

        content = self._assert_single_apology(taxi_request, result, "taxi")
        assert "Request timed out after 0.05 seconds." in content
        assert len(client.calls) == 1

    def test_invocation_error(self, hotel_request):
        client = ScriptedClient([InvocationError("Model request failed: connection reset")])

        result = run(run_hotel(hotel_request, client=client))

        content = self._assert_single_apology(hotel_request, result, "hotel")
        assert "connection reset" in content

    def test_error_without_description(self, hotel_request):
        client = ScriptedClient([RuntimeError()])

        result = run(run_hotel(hotel_request, client=client))

        assert "Please try again." in self._assert_single_apology(hotel_request, result, "hotel")

    @pytest.mark.parametrize(
        "bad_message",
        [
            {"role": "robot", "content": "hi"},
            {"role": "user", "content": None},
            {"content": "no role"},
            "just a string",
        ],
    )
    def test_malformed_message(self, bad_message):
        request = {"messages": [bad_message]}
        client = ScriptedClient([])

        result = run(run_coordinator(request, client=client))

        self._assert_single_apology(request, result, "coordinator")
        assert client.calls == []

    def test_malformed_model_response(self, hotel_request):
        client = ScriptedClient([{"role": "assistant", "content": None}])

        result = run(run_hotel(hotel_request, client=client))

        self._assert_single_apology(hotel_request, result, "hotel")

    def test_iteration_cap(self, hotel_request):
        client = RepeatingClient(assistant("", [tool_call("search_hotels")]))

        result = run(
            run_hotel(hotel_request, client=client, graph_config=AgentGraphConfig(max_iterations=2))
        )

        assert len(client.calls) == 2
        assert "stopped after 2 model calls" in result["messages"][-1]["content"]
        assert is_task_complete(result["messages"][-1])

    def test_iteration_cap_above_recursion_limit(self, hotel_request):
        """A cap needing more graph steps than recursion_limit still ends with the apology."""
        client = RepeatingClient(assistant("", [tool_call("search_hotels")]))
        graph_config = AgentGraphConfig(recursion_limit=25, max_iterations=20)

        result = run(run_hotel(hotel_request, client=client, graph_config=graph_config))

        assert len(client.calls) == 20
        assert "stopped after 20 model calls" in result["messages"][-1]["content"]
        assert is_task_complete(result["messages"][-1])

    def test_step_limit_covers_iteration_cap(self):
        assert AgentGraphConfig().step_limit() == 25
        assert AgentGraphConfig(max_iterations=20).step_limit() == 42

    @pytest.mark.parametrize(
        "state",
        [["not", "a", "mapping"], {"messages": "hello"}, {"messages": None}, None],
    )
    def test_invalid_state_becomes_apology(self, state):
        client = ScriptedClient([])

        result = run(run_hotel(state, client=client))

        assert len(result["messages"]) == 1
        apology = result["messages"][0]
        assert apology["agent"] == "hotel"
        assert "expected a" in apology["content"]
        assert is_task_complete(apology)
        assert client.calls == []


class TestAgentGraphStructure:
    """Tests for the compiled sub-graph."""

    def test_nodes(self):
        graph = create_agent_graph("taxi", client=ScriptedClient([]))
        assert {"call_model", "tools"} <= set(graph.get_graph().nodes)
