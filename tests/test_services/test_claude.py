from unittest.mock import AsyncMock, MagicMock, patch

import anthropic
import httpx
import pytest

from booking_assistant.exceptions.custom import ModelUnavailableError
from booking_assistant.services.claude import ClaudeService


def _text_block(text: str):
    block = MagicMock()
    block.type = "text"
    block.text = text
    return block


def _tool_block(tool_id: str, name: str, tool_input: dict):
    block = MagicMock()
    block.type = "tool_use"
    block.id = tool_id
    block.name = name
    block.input = tool_input
    return block


def _make_response(*blocks):
    """Build a mock Anthropic response."""
    resp = MagicMock()
    resp.content = list(blocks)
    return resp


@pytest.fixture
def service():
    return ClaudeService(api_key="test-key", model="test-model", max_tokens=256)


async def test_converse_text_only(service):
    mock_resp = _make_response(_text_block("Hello! "), _text_block("How can I help?"))
    with patch.object(service._client.messages, "create", new_callable=AsyncMock, return_value=mock_resp) as create:
        reply = await service.converse("You are a hotel assistant.", [{"role": "user", "content": "hi"}], tools=[])

    assert reply.text == "Hello! How can I help?"
    assert reply.tool_uses == []
    kwargs = create.call_args.kwargs
    assert kwargs["model"] == "test-model"
    assert kwargs["max_tokens"] == 256
    assert kwargs["system"] == "You are a hotel assistant."
    assert kwargs["messages"] == [{"role": "user", "content": "hi"}]


async def test_converse_tool_use(service):
    args = {"checkIn": "2025-06-01", "checkOut": "2025-06-04", "roomType": "executive"}
    mock_resp = _make_response(
        _text_block("Let me check."),
        _tool_block("tu_1", "calculate_room_price", args),
    )
    with patch.object(service._client.messages, "create", new_callable=AsyncMock, return_value=mock_resp):
        reply = await service.converse("", [], tools=[])

    assert [t.name for t in reply.tool_uses] == ["calculate_room_price"]
    assert reply.tool_uses[0].id == "tu_1"
    assert reply.tool_uses[0].input == args
    assert reply.content == [
        {"type": "text", "text": "Let me check."},
        {"type": "tool_use", "id": "tu_1", "name": "calculate_room_price", "input": args},
    ]


async def test_converse_api_error_raises_model_unavailable(service):
    error = anthropic.APIConnectionError(request=httpx.Request("POST", "https://api.anthropic.com/v1/messages"))
    with patch.object(service._client.messages, "create", new_callable=AsyncMock, side_effect=error):
        with pytest.raises(ModelUnavailableError) as exc_info:
            await service.converse("", [], tools=[])

    assert "Connection error" in exc_info.value.message
