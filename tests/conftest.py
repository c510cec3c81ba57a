import copy

import httpx
import pytest
from httpx import ASGITransport

from booking_assistant.schemas.hotel import HotelSnapshot

HOTEL_API_URL = "https://inventory.test/hotel-data"

_ROOM_IDS = [
    ("EXEC_VIEW_001", "Executive Room Lake View", 5000),
    ("EXEC_NON_002", "Executive Room City Side", 4200),
    ("FAM_VIEW_003", "Family Suite Lake View", 8500),
    ("FAM_NON_004", "Family Suite", 7500),
    ("JUNIOR_VIEW_005", "Junior Suite Lake View", 3800),
    ("JUNIOR_NON_006", "Junior Suite", 3200),
]

HOTEL_PAYLOAD = {
    "hotel_name": "Test Palace",
    "location": {"address": {"line1": "1 Test Street", "city": "Jaipur"}},
    "contact": {"phone": "+91 141 000 0000"},
    "checkin_checkout": {"check_in_time": "14:00", "check_out_time": "11:00"},
    "rooms": [
        {
            "room_type_id": room_id,
            "room_name": name,
            "description": f"{name} description",
            "pricing": {
                "currency": "INR",
                "base_price_per_night": price,
                "taxes": {"gst_percentage": 12, "service_charge_percentage": 5},
            },
            "availability": [],
        }
        for room_id, name, price in _ROOM_IDS
    ],
}
HOTEL_PAYLOAD["rooms"][0]["availability"] = [
    {"date": "2025-06-01", "available_rooms": 3, "status": "available"},
    {"date": "2025-06-02", "available_rooms": 1, "status": "available"},
    {"date": "2025-06-10", "available_rooms": 0, "status": "sold_out"},
]


@pytest.fixture
def hotel_payload() -> dict:
    return copy.deepcopy(HOTEL_PAYLOAD)


@pytest.fixture
def snapshot(hotel_payload) -> HotelSnapshot:
    return HotelSnapshot.from_payload(hotel_payload)


@pytest.fixture
def mock_env(monkeypatch, tmp_path):
    monkeypatch.setenv("ANTHROPIC_API_KEY", "test-key")
    monkeypatch.setenv("HOTEL_API_URL", HOTEL_API_URL)
    monkeypatch.setenv("API_TOKEN", "test-token")
    monkeypatch.setenv("CACHE_FILE", str(tmp_path / "hotel-data-cache.json"))
    monkeypatch.setenv("REFRESH_INTERVAL_HOURS", "0")


@pytest.fixture
async def client(mock_env):
    from booking_assistant.main import app, lifespan

    async with lifespan(app):
        async with httpx.AsyncClient(
            transport=ASGITransport(app=app),
            base_url="http://test",
        ) as c:
            yield c
