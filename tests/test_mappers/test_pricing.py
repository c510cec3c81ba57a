from datetime import date, datetime

import pytest

from booking_assistant.mappers.pricing import (
    count_nights,
    is_range_available,
    nightly_price_with_taxes,
    parse_iso_date,
    price_breakdown,
    rooms_left_on,
    round_half_up,
)


def _room(snapshot, room_id="EXEC_VIEW_001"):
    return next(r for r in snapshot.rooms if r.room_type_id == room_id)


def test_parse_iso_date():
    assert parse_iso_date("2025-06-01") == datetime(2025, 6, 1)
    assert parse_iso_date(" 2025-06-01T12:00:00 ") == datetime(2025, 6, 1, 12)


@pytest.mark.parametrize("value", ["", "tomorrow", "06/01/2025", None])
def test_parse_iso_date_rejects_garbage(value):
    with pytest.raises(ValueError):
        parse_iso_date(value)


def test_parse_iso_date_converts_offsets_to_naive_utc():
    assert parse_iso_date("2025-06-04T00:00:00Z") == datetime(2025, 6, 4)
    assert parse_iso_date("2025-06-04T05:30:00+05:30") == datetime(2025, 6, 4)


def test_mixed_plain_and_offset_dates_count_nights():
    check_in = parse_iso_date("2025-06-01")
    check_out = parse_iso_date("2025-06-04T00:00:00Z")
    assert count_nights(check_in, check_out) == 3


def test_round_half_up():
    assert round_half_up(17549.5) == 17550
    assert round_half_up(2.5) == 3
    assert round_half_up(2.49) == 2


def test_count_nights_whole_days():
    assert count_nights(datetime(2025, 6, 1), datetime(2025, 6, 4)) == 3


def test_count_nights_rounds_partial_days_up():
    assert count_nights(datetime(2025, 6, 1, 14), datetime(2025, 6, 2, 11)) == 1
    assert count_nights(datetime(2025, 6, 1), datetime(2025, 6, 2, 1)) == 2


def test_price_breakdown_example(snapshot):
    result = price_breakdown(_room(snapshot), 3)
    assert result == {
        "nights": 3,
        "basePrice": 15000,
        "gst": 1800,
        "serviceCharge": 750,
        "totalPrice": 17550,
    }


def test_price_breakdown_total_is_rounded_sum(snapshot):
    room = _room(snapshot, "JUNIOR_NON_006").model_copy(deep=True)
    room.pricing.base_price_per_night = 1234.5
    result = price_breakdown(room, 2)
    assert result["totalPrice"] == round_half_up(
        result["basePrice"] + result["gst"] + result["serviceCharge"]
    )


def test_nightly_price_uses_estimate_when_present(snapshot):
    room = _room(snapshot).model_copy(deep=True)
    room.pricing.total_price_estimate = 6000
    assert nightly_price_with_taxes(room) == 6000


def test_nightly_price_computed_without_estimate(snapshot):
    assert nightly_price_with_taxes(_room(snapshot)) == 5850


def test_range_available_when_no_sold_out_day(snapshot):
    assert is_range_available(_room(snapshot), date(2025, 6, 1), date(2025, 6, 5))


def test_range_unavailable_when_any_day_sold_out(snapshot):
    assert not is_range_available(_room(snapshot), date(2025, 6, 9), date(2025, 6, 12))


def test_check_out_day_is_excluded(snapshot):
    assert is_range_available(_room(snapshot), date(2025, 6, 8), date(2025, 6, 10))


def test_rooms_left_on_exact_date(snapshot):
    assert rooms_left_on(_room(snapshot), date(2025, 6, 2), default=5) == 1


def test_rooms_left_defaults_when_missing(snapshot):
    assert rooms_left_on(_room(snapshot), date(2025, 7, 1), default=5) == 5
    assert rooms_left_on(_room(snapshot), date(2025, 7, 1), default=9) == 9
