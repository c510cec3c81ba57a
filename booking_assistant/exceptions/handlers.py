import logging

from fastapi import Request
from fastapi.responses import JSONResponse

from .custom import (
    EmptyMessageError,
    MissingFallbackDataError,
    ModelUnavailableError,
    UnsupportedToolError,
)

logger = logging.getLogger(__name__)


def _error_body(error: str, exc: Exception) -> dict:
    return {"error": error, "kind": exc.kind, "details": exc.message}


async def empty_message_error_handler(_request: Request, exc: EmptyMessageError) -> JSONResponse:
    logger.warning("Rejected chat request: %s", exc.message)
    return JSONResponse(
        status_code=400,
        content={"error": exc.message, "kind": exc.kind},
    )


async def model_unavailable_error_handler(_request: Request, exc: ModelUnavailableError) -> JSONResponse:
    logger.error("Model error: %s", exc.message)
    return JSONResponse(
        status_code=500,
        content=_error_body("Failed to process chat message", exc),
    )


async def unsupported_tool_error_handler(_request: Request, exc: UnsupportedToolError) -> JSONResponse:
    logger.error("Unsupported tool: %s", exc.tool_name)
    return JSONResponse(
        status_code=500,
        content=_error_body("Failed to process chat message", exc),
    )


async def missing_fallback_data_error_handler(
    _request: Request, exc: MissingFallbackDataError
) -> JSONResponse:
    logger.error("No hotel data available: %s", exc.message)
    return JSONResponse(
        status_code=500,
        content=_error_body("Hotel data unavailable", exc),
    )


async def unhandled_error_handler(_request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error while processing request")
    return JSONResponse(
        status_code=500,
        content={
            "error": "Failed to process chat message",
            "kind": "internal_error",
            "details": str(exc),
        },
    )
