import asyncio
import contextlib
import logging
import sys
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from booking_assistant.config import Settings
from booking_assistant.exceptions.custom import (
    EmptyMessageError,
    MissingFallbackDataError,
    ModelUnavailableError,
    UnsupportedToolError,
)
from booking_assistant.exceptions.handlers import (
    empty_message_error_handler,
    missing_fallback_data_error_handler,
    model_unavailable_error_handler,
    unhandled_error_handler,
    unsupported_tool_error_handler,
)
from booking_assistant.jobs import refresh_periodically
from booking_assistant.routers.chat import router as chat_router
from booking_assistant.services.chatbot import ChatbotService
from booking_assistant.services.claude import ClaudeService
from booking_assistant.services.data_store import DataStore
from booking_assistant.services.inventory import InventoryEngine


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = Settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stdout,
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)

    async with httpx.AsyncClient(timeout=settings.inventory_timeout_seconds) as client:
        data_store = DataStore(
            client,
            settings.hotel_api_url,
            cache_file=settings.cache_file,
            fallback_file=settings.fallback_file,
            api_token=settings.api_token,
            ttl_seconds=settings.cache_ttl_hours * 3600,
            timeout=settings.inventory_timeout_seconds,
        )
        inventory = InventoryEngine(
            data_store, default_available_rooms=settings.default_available_rooms
        )
        claude = ClaudeService(
            settings.anthropic_api_key,
            model=settings.model_name,
            max_tokens=settings.model_max_tokens,
            timeout=settings.model_timeout_seconds,
        )

        app.state.inventory_engine = inventory
        app.state.chatbot_service = ChatbotService(claude, inventory)

        refresher: asyncio.Task | None = None
        if settings.refresh_interval_hours > 0:
            refresher = asyncio.create_task(
                refresh_periodically(inventory, settings.refresh_interval_hours * 3600)
            )

        try:
            yield
        finally:
            if refresher is not None:
                refresher.cancel()
                with contextlib.suppress(asyncio.CancelledError):
                    await refresher


app = FastAPI(title="Hotel Booking Assistant", lifespan=lifespan)

app.add_exception_handler(EmptyMessageError, empty_message_error_handler)
app.add_exception_handler(ModelUnavailableError, model_unavailable_error_handler)
app.add_exception_handler(UnsupportedToolError, unsupported_tool_error_handler)
app.add_exception_handler(MissingFallbackDataError, missing_fallback_data_error_handler)
app.add_exception_handler(Exception, unhandled_error_handler)

app.include_router(chat_router)
