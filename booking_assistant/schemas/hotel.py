from __future__ import annotations

import datetime
from enum import StrEnum

from pydantic import BaseModel, field_validator

# UI room-type selector -> canonical room_type_id
ROOM_TYPE_IDS = {
    "executive-view": "EXEC_VIEW_001",
    "executive-non-view": "EXEC_NON_002",
    "family-view": "FAM_VIEW_003",
    "family-non-view": "FAM_NON_004",
    "junior-view": "JUNIOR_VIEW_005",
    "junior-non-view": "JUNIOR_NON_006",
}
CANONICAL_ROOM_IDS = frozenset(ROOM_TYPE_IDS.values())


class Provenance(StrEnum):
    live = "live"
    cached = "cached"
    fallback = "fallback"


class AvailabilityEntry(BaseModel):
    date: datetime.date
    available_rooms: int
    status: str | None = None


class Taxes(BaseModel):
    gst_percentage: float = 0.0
    service_charge_percentage: float = 0.0


class Pricing(BaseModel):
    currency: str = "INR"
    base_price_per_night: float
    taxes: Taxes = Taxes()
    total_price_estimate: float | None = None


class Occupancy(BaseModel):
    adults: int = 2
    children: int = 0


class RoomRecord(BaseModel):
    room_type_id: str
    room_name: str
    description: str = ""
    bed_type: str | None = None
    max_occupancy: Occupancy = Occupancy()
    room_size_sqft: int | None = None
    amenities: list[str] = []
    pricing: Pricing
    availability: list[AvailabilityEntry] = []

    @field_validator("room_type_id")
    @classmethod
    def _canonical_id(cls, value: str) -> str:
        if value not in CANONICAL_ROOM_IDS:
            raise ValueError(f"unknown room_type_id {value!r}")
        return value

    @field_validator("availability")
    @classmethod
    def _unique_dates(cls, value: list[AvailabilityEntry]) -> list[AvailabilityEntry]:
        dates = [entry.date for entry in value]
        if len(dates) != len(set(dates)):
            raise ValueError("availability dates must be unique per room")
        return value


class Address(BaseModel):
    line1: str = ""
    city: str = ""


class Location(BaseModel):
    address: Address = Address()


class Contact(BaseModel):
    phone: str = ""


class CheckinCheckout(BaseModel):
    check_in_time: str = ""
    check_out_time: str = ""


class HotelSnapshot(BaseModel):
    """Hotel facts and room inventory as served by the inventory source.

    Instances are treated as read-only once loaded; a refresh replaces the
    whole snapshot rather than mutating it.
    """

    model_config = {"frozen": True}

    hotel_name: str
    location: Location = Location()
    contact: Contact = Contact()
    checkin_checkout: CheckinCheckout = CheckinCheckout()
    rooms: list[RoomRecord] = []

    @classmethod
    def from_payload(cls, payload: dict) -> HotelSnapshot:
        """Accept the hotel object directly or wrapped as ``{"hotel": {...}}``."""
        if isinstance(payload, dict) and isinstance(payload.get("hotel"), dict):
            payload = payload["hotel"]
        return cls.model_validate(payload)

    @property
    def name(self) -> str:
        return self.hotel_name

    @property
    def address(self) -> str:
        parts = [p for p in (self.location.address.line1, self.location.address.city) if p]
        return ", ".join(parts)

    @property
    def phone(self) -> str:
        return self.contact.phone

    @property
    def check_in_time(self) -> str:
        return self.checkin_checkout.check_in_time

    @property
    def check_out_time(self) -> str:
        return self.checkin_checkout.check_out_time


class InventoryResult(BaseModel):
    snapshot: HotelSnapshot
    provenance: Provenance
    payload: dict
