import logging

import anthropic
from anthropic import AsyncAnthropic

from booking_assistant.exceptions.custom import ModelUnavailableError
from booking_assistant.schemas.chat import ModelReply, ToolUse

logger = logging.getLogger(__name__)

MODEL = "claude-sonnet-4-20250514"


class ClaudeService:
    def __init__(
        self,
        api_key: str,
        model: str = MODEL,
        max_tokens: int = 1024,
        timeout: float = 60.0,
    ):
        self._client = AsyncAnthropic(api_key=api_key, timeout=timeout)
        self._model = model
        self._max_tokens = max_tokens

    async def converse(self, system_prompt: str, messages: list[dict], tools: list[dict]) -> ModelReply:
        """Send the system prompt, conversation and tool definitions; no retries."""
        try:
            response = await self._client.messages.create(
                model=self._model,
                max_tokens=self._max_tokens,
                system=system_prompt,
                messages=messages,
                tools=tools,
            )
        except anthropic.APIError as exc:
            logger.exception("Claude API call failed")
            raise ModelUnavailableError(f"Claude API error: {exc}") from exc

        return self._parse_response(response)

    @staticmethod
    def _parse_response(response) -> ModelReply:
        texts: list[str] = []
        tool_uses: list[ToolUse] = []
        content: list[dict] = []

        for block in response.content:
            if block.type == "text":
                texts.append(block.text)
                content.append({"type": "text", "text": block.text})
            elif block.type == "tool_use":
                tool_uses.append(ToolUse(id=block.id, name=block.name, input=block.input or {}))
                content.append(
                    {"type": "tool_use", "id": block.id, "name": block.name, "input": block.input or {}}
                )

        return ModelReply(text="".join(texts).strip(), tool_uses=tool_uses, content=content)
