"""
Tests for completion detection and message text extraction.
"""

import pytest

from booking_agents.shared.completion import COMPLETION_PHRASES, is_task_complete
from booking_agents.shared.contracts.messages import (
    Message,
    ToolCallRequest,
    pending_tool_calls,
    text_of,
)


# ============================================================================
# TestTextOf
# ============================================================================


class TestTextOf:
    """Tests for extracting a single string from message content."""

    def test_plain_string(self):
        assert text_of({"role": "assistant", "content": "Hello there"}) == "Hello there"

    def test_empty_string(self):
        assert text_of({"role": "assistant", "content": ""}) == ""

    def test_fragments_joined_with_spaces(self):
        message = {
            "role": "assistant",
            "content": [
                {"type": "text", "text": "Routing to"},
                {"type": "text", "text": "Hotel Agent..."},
            ],
        }
        assert text_of(message) == "Routing to Hotel Agent..."

    def test_non_text_fragments_skipped(self):
        message = {
            "role": "user",
            "content": [
                {"type": "image_url", "image_url": {"url": "https://example.com/a.png"}},
                {"type": "text", "text": "What is this hotel?"},
                42,
            ],
        }
        assert text_of(message) == "What is this hotel?"

    def test_bare_string_fragments(self):
        assert text_of({"role": "user", "content": ["a", "b"]}) == "a b"

    def test_missing_or_null_content(self):
        assert text_of({"role": "tool"}) == ""
        assert text_of({"role": "tool", "content": None}) == ""
        assert text_of(None) == ""

    def test_unparsable_content(self):
        assert text_of({"role": "assistant", "content": {"unexpected": "shape"}}) == ""
        assert text_of(object()) == ""

    def test_accepts_message_model(self):
        assert text_of(Message(role="assistant", content="finished")) == "finished"


# ============================================================================
# TestIsTaskComplete
# ============================================================================


class TestIsTaskComplete:
    """Tests for the completion detector."""

    @pytest.mark.parametrize("phrase", COMPLETION_PHRASES)
    def test_each_phrase_detected(self, phrase):
        assert is_task_complete({"role": "assistant", "content": f"All done, {phrase}."})

    @pytest.mark.parametrize(
        "content",
        [
            "TASK COMPLETE",
            "Booking Confirmed!",
            "...Finished...",
            "Your reservation is (completed).",
        ],
    )
    def test_case_and_punctuation_insensitive(self, content):
        assert is_task_complete({"role": "assistant", "content": content})

    def test_no_phrase(self):
        message = {"role": "assistant", "content": "Which dates are you travelling?"}
        assert not is_task_complete(message)

    def test_phrase_in_fragment_list(self):
        message = {
            "role": "assistant",
            "content": [{"type": "text", "text": "Routing to Taxi Agent..."}, {"type": "text", "text": "task complete"}],
        }
        assert is_task_complete(message)

    def test_empty_and_unparsable_are_not_complete(self):
        assert not is_task_complete({"role": "assistant", "content": ""})
        assert not is_task_complete({"role": "assistant", "content": 12})
        assert not is_task_complete(None)

    def test_repeatable(self):
        message = {"role": "assistant", "content": "Booking confirmed"}
        assert [is_task_complete(message) for _ in range(3)] == [True, True, True]


# ============================================================================
# TestMessageContract
# ============================================================================


class TestMessageContract:
    """Tests for message validation and tool call parsing."""

    def test_null_content_rejected_for_assistant(self):
        with pytest.raises(ValueError):
            Message.model_validate({"role": "assistant", "content": None})

    def test_null_content_allowed_for_tool(self):
        message = Message.model_validate({"role": "tool", "tool_call_id": "c1", "content": None})
        assert message.content == ""

    def test_unknown_role_rejected(self):
        with pytest.raises(ValueError):
            Message.model_validate({"role": "robot", "content": "beep"})

    def test_to_state_drops_empty_fields(self):
        state = Message(role="assistant", content="hi").to_state()
        assert state == {"role": "assistant", "content": "hi"}

    def test_pending_tool_calls(self):
        message = {
            "role": "assistant",
            "content": "",
            "tool_calls": [{"id": "c1", "name": "search_hotels", "arguments": "{}"}],
        }
        calls = pending_tool_calls(message)
        assert calls == [ToolCallRequest(id="c1", name="search_hotels", arguments="{}")]

    def test_pending_tool_calls_absent_or_malformed(self):
        assert pending_tool_calls({"role": "assistant", "content": "hi"}) == []
        assert pending_tool_calls({"role": "assistant", "tool_calls": [{"bogus": 1}]}) == []
