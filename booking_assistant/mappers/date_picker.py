import re

_ISO_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}")

BOOKING_INTENT_KEYWORDS = (
    "available",
    "availability",
    "book",
    "reserve",
    "reservation",
    "room price",
    "room rate",
    "rates for",
    "price for",
    "how much",
    "vacancy",
    "vacancies",
)

DATE_PICKER_REPLY = (
    "I'd be happy to help you with that! "
    "Please select your check-in and check-out dates using the date picker below."
)


def count_iso_dates(message: str) -> int:
    return len(_ISO_DATE_RE.findall(message))


def needs_date_picker(message: str) -> bool:
    """True when the message shows booking intent but carries no date range."""
    if count_iso_dates(message) >= 2:
        return False
    text = message.lower()
    return any(keyword in text for keyword in BOOKING_INTENT_KEYWORDS)
