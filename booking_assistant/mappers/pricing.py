import math
from datetime import date, datetime, timezone
from decimal import ROUND_HALF_UP, Decimal

from booking_assistant.schemas.hotel import RoomRecord

SECONDS_PER_DAY = 24 * 60 * 60


def parse_iso_date(value: str) -> datetime:
    """Parse ``YYYY-MM-DD`` (or a full ISO timestamp) into a naive datetime.

    Offset-aware timestamps are converted to UTC and stripped of their
    tzinfo so they compare with plain dates. Raises ValueError on anything else.
    """
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"Invalid date: {value!r}")
    parsed = datetime.fromisoformat(value.strip())
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def round_half_up(value: float) -> int:
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def count_nights(check_in: datetime, check_out: datetime) -> int:
    return math.ceil((check_out - check_in).total_seconds() / SECONDS_PER_DAY)


def price_breakdown(room: RoomRecord, nights: int) -> dict:
    base_price = room.pricing.base_price_per_night * nights
    gst = base_price * room.pricing.taxes.gst_percentage / 100
    service_charge = base_price * room.pricing.taxes.service_charge_percentage / 100
    return {
        "nights": nights,
        "basePrice": base_price,
        "gst": gst,
        "serviceCharge": service_charge,
        "totalPrice": round_half_up(base_price + gst + service_charge),
    }


def nightly_price_with_taxes(room: RoomRecord) -> float:
    if room.pricing.total_price_estimate is not None:
        return room.pricing.total_price_estimate
    return price_breakdown(room, 1)["totalPrice"]


def is_range_available(room: RoomRecord, check_in: date, check_out: date) -> bool:
    # dates without an entry count as available
    for entry in room.availability:
        if check_in <= entry.date < check_out and entry.available_rooms == 0:
            return False
    return True


def rooms_left_on(room: RoomRecord, day: date, default: int) -> int:
    for entry in room.availability:
        if entry.date == day:
            return entry.available_rooms
    return default
