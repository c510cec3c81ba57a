from booking_assistant.schemas.hotel import HotelSnapshot, Provenance

STALE_DATA_WARNING = (
    "IMPORTANT: You are currently using static/cached data. Inform the user that "
    "room availability and pricing information might not be up-to-date. Suggest "
    "they call the hotel directly to confirm current availability."
)


def _format_price(room) -> str:
    price = room.pricing.base_price_per_night
    amount = int(price) if float(price).is_integer() else price
    return f"{room.pricing.currency} {amount}/night base price"


def build_hotel_context(snapshot: HotelSnapshot, provenance: Provenance) -> str:
    """Instruction text embedding the hotel facts the model answers from."""
    lines = [
        f"You are a helpful booking assistant for {snapshot.name}.",
        "",
        "Hotel Details:",
        f"- Name: {snapshot.name}",
        f"- Address: {snapshot.address}",
        f"- Phone: {snapshot.phone}",
        f"- Check-in: {snapshot.check_in_time}, Check-out: {snapshot.check_out_time}",
        "",
        "Available Rooms:",
    ]
    for room in snapshot.rooms:
        lines.append(f"- {room.room_name}: {room.description} ({_format_price(room)})")

    lines += [
        "",
        "Help users check room availability and calculate total prices including "
        "GST and service charges. Always ask for check-in date, check-out date, and "
        "room type before checking availability or calculating prices. "
        "Use YYYY-MM-DD format for dates.",
    ]
    if provenance != Provenance.live:
        lines += ["", STALE_DATA_WARNING]
    return "\n".join(lines)


def build_acknowledgement(snapshot: HotelSnapshot, provenance: Provenance) -> str:
    if provenance != Provenance.live:
        return (
            f"Understood. I will help guests book rooms at {snapshot.name}. Note: I'm "
            "currently using cached data, so I'll inform guests that availability and "
            "pricing might not be current and suggest they contact the hotel directly "
            f"at {snapshot.phone} to confirm."
        )
    return (
        f"Understood. I will help guests book rooms at {snapshot.name}, check "
        "availability, and provide accurate pricing with all taxes included."
    )
