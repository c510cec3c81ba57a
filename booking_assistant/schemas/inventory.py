from enum import StrEnum

from pydantic import BaseModel


class AvailabilityResult(BaseModel):
    available: bool
    roomType: str
    roomName: str
    pricePerNight: float
    totalPriceWithTaxes: float
    availableRoomsOnCheckIn: int = 0


class PriceCalculation(BaseModel):
    nights: int
    basePrice: float
    gst: float
    serviceCharge: float
    totalPrice: int
    checkIn: str
    checkOut: str
    roomName: str


class ToolName(StrEnum):
    check_room_availability = "check_room_availability"
    calculate_room_price = "calculate_room_price"


class ToolArguments(BaseModel):
    checkIn: str
    checkOut: str
    roomType: str = ""
