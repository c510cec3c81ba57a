import asyncio
import logging

from booking_assistant.services.inventory import InventoryEngine

logger = logging.getLogger(__name__)


async def refresh_periodically(inventory: InventoryEngine, interval_seconds: float) -> None:
    """Refresh hotel data every ``interval_seconds`` until cancelled."""
    while True:
        await asyncio.sleep(interval_seconds)
        logger.info("Running scheduled hotel data refresh")
        try:
            source = await inventory.refresh()
            logger.info("Scheduled refresh completed (source=%s)", source)
        except Exception:
            logger.exception("Scheduled refresh failed")
