from typing import Annotated

from fastapi import Depends, Request

from booking_assistant.services.chatbot import ChatbotService
from booking_assistant.services.inventory import InventoryEngine


def get_chatbot_service(request: Request) -> ChatbotService:
    return request.app.state.chatbot_service


def get_inventory_engine(request: Request) -> InventoryEngine:
    return request.app.state.inventory_engine


ChatbotDep = Annotated[ChatbotService, Depends(get_chatbot_service)]
InventoryDep = Annotated[InventoryEngine, Depends(get_inventory_engine)]
