import json
import logging

from booking_assistant.exceptions.custom import UnsupportedToolError
from booking_assistant.mappers.date_picker import DATE_PICKER_REPLY, needs_date_picker
from booking_assistant.mappers.hotel_context import build_acknowledgement, build_hotel_context
from booking_assistant.schemas.chat import ConversationTurn, ExchangeResult, Role, ToolUse
from booking_assistant.schemas.inventory import ToolArguments, ToolName
from booking_assistant.services.claude import ClaudeService
from booking_assistant.services.inventory import InventoryEngine

logger = logging.getLogger(__name__)

EMPTY_REPLY = "Sorry, I could not generate a response."

# Role -> Anthropic Messages API role
_MODEL_ROLES = {
    Role.user: "user",
    Role.assistant: "assistant",
}

_DATE_PROPERTIES = {
    "checkIn": {"type": "string", "description": "Check-in date in YYYY-MM-DD format"},
    "checkOut": {"type": "string", "description": "Check-out date in YYYY-MM-DD format"},
    "roomType": {
        "type": "string",
        "description": (
            "Room type, e.g. executive-view, executive-non-view, family-view, "
            "family-non-view, junior-view or junior-non-view"
        ),
    },
}

TOOL_DEFINITIONS = [
    {
        "name": ToolName.check_room_availability.value,
        "description": "Check if hotel rooms are available between check-in and check-out dates",
        "input_schema": {
            "type": "object",
            "properties": _DATE_PROPERTIES,
            "required": ["checkIn", "checkOut", "roomType"],
        },
    },
    {
        "name": ToolName.calculate_room_price.value,
        "description": "Calculate total price for room booking based on dates and room type",
        "input_schema": {
            "type": "object",
            "properties": _DATE_PROPERTIES,
            "required": ["checkIn", "checkOut", "roomType"],
        },
    },
]


def _model_history(history: list[ConversationTurn]) -> list[dict]:
    """Keep only user/assistant turns, in order, in the model's vocabulary."""
    messages = []
    for turn in history:
        try:
            role = Role(turn.role)
        except ValueError:
            continue
        messages.append({"role": _MODEL_ROLES[role], "content": turn.content})
    return messages


class ChatbotService:
    def __init__(self, claude: ClaudeService, inventory: InventoryEngine):
        self._claude = claude
        self._inventory = inventory

    async def exchange(
        self, message: str, history: list[ConversationTurn] | None = None
    ) -> ExchangeResult:
        history = list(history or [])
        snapshot, provenance = await self._inventory.hotel_facts()

        if needs_date_picker(message):
            logger.info("Booking intent without dates; asking for the date picker")
            return ExchangeResult(
                reply=DATE_PICKER_REPLY,
                history=self._extend(history, message, DATE_PICKER_REPLY),
                provenance=provenance,
                show_date_picker=True,
            )

        system = build_hotel_context(snapshot, provenance)
        messages = [
            {"role": "assistant", "content": build_acknowledgement(snapshot, provenance)},
            *_model_history(history),
            {"role": "user", "content": message},
        ]

        reply = await self._claude.converse(system, messages, TOOL_DEFINITIONS)
        if reply.tool_uses:
            results = [await self._dispatch(tool_use) for tool_use in reply.tool_uses]
            messages += [
                {"role": "assistant", "content": reply.content},
                {"role": "user", "content": results},
            ]
            # one follow-up round only; further tool requests are not executed
            reply = await self._claude.converse(system, messages, TOOL_DEFINITIONS)

        text = reply.text or EMPTY_REPLY
        return ExchangeResult(
            reply=text,
            history=self._extend(history, message, text),
            provenance=provenance,
            show_date_picker=False,
        )

    @staticmethod
    def _extend(history: list[ConversationTurn], message: str, reply: str) -> list[ConversationTurn]:
        return [
            *history,
            ConversationTurn(role=Role.user.value, content=message),
            ConversationTurn(role=Role.assistant.value, content=reply),
        ]

    async def _dispatch(self, tool_use: ToolUse) -> dict:
        try:
            name = ToolName(tool_use.name)
        except ValueError:
            raise UnsupportedToolError(tool_use.name) from None

        logger.info("Running tool %s with %s", name, tool_use.input)
        try:
            args = ToolArguments.model_validate(tool_use.input)
            if name == ToolName.check_room_availability:
                result = await self._inventory.check_availability(
                    args.checkIn, args.checkOut, args.roomType
                )
            elif name == ToolName.calculate_room_price:
                result = await self._inventory.calculate_price(
                    args.checkIn, args.checkOut, args.roomType
                )
            else:
                raise UnsupportedToolError(name)
        except ValueError as exc:
            logger.warning("Tool %s rejected arguments: %s", name, exc)
            return {
                "type": "tool_result",
                "tool_use_id": tool_use.id,
                "content": json.dumps({"error": str(exc)}),
                "is_error": True,
            }

        return {
            "type": "tool_result",
            "tool_use_id": tool_use.id,
            "content": result.model_dump_json(),
        }
