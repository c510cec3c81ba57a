from booking_assistant.schemas.hotel import ROOM_TYPE_IDS, HotelSnapshot, RoomRecord

# (category, qualifier, room_type_id); first match wins, order matters:
# "executive non-view" contains "view" and therefore lands on EXEC_VIEW_001.
_KEYWORD_RULES = [
    ("executive", "view", "EXEC_VIEW_001"),
    ("executive", "non", "EXEC_NON_002"),
    ("family", "view", "FAM_VIEW_003"),
    ("family", "non", "FAM_NON_004"),
    ("junior", "view", "JUNIOR_VIEW_005"),
    ("junior", "non", "JUNIOR_NON_006"),
]

_CATEGORY_DEFAULTS = [
    ("executive", "EXEC_VIEW_001"),
    ("family", "FAM_NON_004"),
    ("junior", "JUNIOR_NON_006"),
]


def resolve_room_type_id(selector: str | None) -> str | None:
    """Map a free-form room-type selector onto a canonical room_type_id.

    Resolution order:
      1. exact UI identifier ("executive-view", "family-non-view", ...)
      2. category keyword + view qualifier
      3. category keyword alone -> per-category default
    Returns None when nothing matches; the caller then uses the first room.
    """
    if not selector:
        return None
    if selector in ROOM_TYPE_IDS:
        return ROOM_TYPE_IDS[selector]

    text = selector.lower()
    for category, qualifier, room_type_id in _KEYWORD_RULES:
        if category in text and qualifier in text:
            return room_type_id
    for category, room_type_id in _CATEGORY_DEFAULTS:
        if category in text:
            return room_type_id
    return None


def find_room(snapshot: HotelSnapshot, selector: str | None) -> RoomRecord | None:
    if not snapshot.rooms:
        return None

    room_type_id = resolve_room_type_id(selector)
    if room_type_id is not None:
        for room in snapshot.rooms:
            if room.room_type_id == room_type_id:
                return room
    return snapshot.rooms[0]
