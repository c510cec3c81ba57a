import asyncio
import logging

from booking_assistant.mappers.pricing import (
    count_nights,
    is_range_available,
    nightly_price_with_taxes,
    parse_iso_date,
    price_breakdown,
    rooms_left_on,
)
from booking_assistant.mappers.room_resolver import find_room
from booking_assistant.schemas.hotel import HotelSnapshot, InventoryResult, Provenance, RoomRecord
from booking_assistant.schemas.inventory import AvailabilityResult, PriceCalculation
from booking_assistant.services.data_store import DataStore

logger = logging.getLogger(__name__)

DEFAULT_AVAILABLE_ROOMS = 5
UNKNOWN_ROOM_NAME = "Unknown"


class InventoryEngine:
    def __init__(
        self,
        data_store: DataStore,
        default_available_rooms: int = DEFAULT_AVAILABLE_ROOMS,
    ):
        self._data_store = data_store
        self._default_available_rooms = default_available_rooms
        self._snapshot: HotelSnapshot | None = None
        self._provenance: Provenance | None = None
        self._lock = asyncio.Lock()

    @property
    def is_initialized(self) -> bool:
        return self._snapshot is not None

    async def initialize(self) -> None:
        """Load the snapshot on first use; later calls are no-ops."""
        if self._snapshot is not None:
            return
        async with self._lock:
            if self._snapshot is None:
                self._apply(await self._data_store.fetch_inventory())

    def invalidate(self) -> None:
        self._snapshot = None
        self._provenance = None

    async def refresh(self) -> Provenance:
        """Force a live fetch and swap in whatever it yields."""
        async with self._lock:
            self._apply(await self._data_store.force_refresh())
        return self._provenance

    def _apply(self, result: InventoryResult) -> None:
        self._snapshot = result.snapshot
        self._provenance = result.provenance
        logger.info(
            "Loaded hotel data for %s (%d rooms, source=%s)",
            result.snapshot.hotel_name,
            len(result.snapshot.rooms),
            result.provenance,
        )

    async def hotel_facts(self) -> tuple[HotelSnapshot, Provenance]:
        await self.initialize()
        return self._snapshot, self._provenance

    async def resolve_room(self, room_type: str | None) -> RoomRecord | None:
        await self.initialize()
        return find_room(self._snapshot, room_type)

    async def check_availability(
        self, check_in: str, check_out: str, room_type: str
    ) -> AvailabilityResult:
        room = await self.resolve_room(room_type)
        if room is None:
            return AvailabilityResult(
                available=False,
                roomType=room_type,
                roomName=UNKNOWN_ROOM_NAME,
                pricePerNight=0,
                totalPriceWithTaxes=0,
                availableRoomsOnCheckIn=0,
            )

        start = parse_iso_date(check_in).date()
        end = parse_iso_date(check_out).date()
        if end <= start:
            raise ValueError("Check-out date must be after check-in date")

        return AvailabilityResult(
            available=is_range_available(room, start, end),
            roomType=room_type,
            roomName=room.room_name,
            pricePerNight=room.pricing.base_price_per_night,
            totalPriceWithTaxes=nightly_price_with_taxes(room),
            availableRoomsOnCheckIn=rooms_left_on(room, start, self._default_available_rooms),
        )

    async def calculate_price(
        self, check_in: str, check_out: str, room_type: str
    ) -> PriceCalculation:
        room = await self.resolve_room(room_type)
        if room is None:
            return PriceCalculation(
                nights=0,
                basePrice=0,
                gst=0,
                serviceCharge=0,
                totalPrice=0,
                checkIn=check_in,
                checkOut=check_out,
                roomName=UNKNOWN_ROOM_NAME,
            )

        start = parse_iso_date(check_in)
        end = parse_iso_date(check_out)
        if end <= start:
            raise ValueError("Check-out date must be after check-in date")

        return PriceCalculation(
            **price_breakdown(room, count_nights(start, end)),
            checkIn=check_in,
            checkOut=check_out,
            roomName=room.room_name,
        )
