import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from booking_assistant.dependencies import ChatbotDep, InventoryDep
from booking_assistant.exceptions.custom import EmptyMessageError, MissingFallbackDataError
from booking_assistant.schemas.chat import ChatRequest, ChatResponse, HealthResponse, RefreshResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/chat", response_model=ChatResponse)
async def chat(request: ChatRequest, service: ChatbotDep) -> ChatResponse:
    if not request.message or not request.message.strip():
        raise EmptyMessageError()

    result = await service.exchange(request.message, request.conversationHistory)
    return ChatResponse(
        reply=result.reply,
        conversationHistory=result.history,
        dataSource=result.provenance,
        showDatePicker=result.show_date_picker,
    )


@router.get("/chat")
async def chat_usage() -> dict:
    return {
        "message": "Chat endpoint is working. Use POST method to send messages.",
        "example": {"method": "POST", "url": "/chat", "body": {"message": "Hello"}},
    }


@router.post("/refresh-hotel-data", response_model=RefreshResponse)
async def refresh_hotel_data(inventory: InventoryDep) -> RefreshResponse:
    try:
        source = await inventory.refresh()
    except MissingFallbackDataError as exc:
        logger.error("Refresh failed: %s", exc.message)
        return JSONResponse(
            status_code=500,
            content={
                "error": "Failed to refresh hotel data",
                "kind": exc.kind,
                "details": exc.message,
            },
        )
    except Exception as exc:
        logger.exception("Refresh failed")
        return JSONResponse(
            status_code=500,
            content={
                "error": "Failed to refresh hotel data",
                "kind": "internal_error",
                "details": str(exc),
            },
        )
    return RefreshResponse(message="Hotel data refreshed successfully", dataSource=source)


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(status="OK", message="Hotel booking assistant is running")
