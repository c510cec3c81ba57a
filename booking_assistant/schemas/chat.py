from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel

from booking_assistant.schemas.hotel import Provenance


class Role(StrEnum):
    user = "user"
    assistant = "assistant"


class ConversationTurn(BaseModel):
    # role stays a plain string on the wire: callers may echo back
    # "system" or "tool" entries, which are dropped before reaching the model
    role: str
    content: str = ""


class ChatRequest(BaseModel):
    message: str | None = None
    conversationHistory: list[ConversationTurn] = []


class ToolUse(BaseModel):
    id: str
    name: str
    input: dict = {}


class ModelReply(BaseModel):
    text: str = ""
    tool_uses: list[ToolUse] = []
    # assistant content blocks, echoed back verbatim alongside tool results
    content: list[dict] = []


class ExchangeResult(BaseModel):
    reply: str
    history: list[ConversationTurn]
    provenance: Provenance
    show_date_picker: bool = False


class ChatResponse(BaseModel):
    reply: str
    conversationHistory: list[ConversationTurn]
    dataSource: Provenance
    showDatePicker: bool = False


class RefreshResponse(BaseModel):
    message: str
    dataSource: Provenance


class HealthResponse(BaseModel):
    status: str
    message: str
