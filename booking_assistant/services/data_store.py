import asyncio
import json
import logging
import os
import tempfile
import time
from collections.abc import Callable
from pathlib import Path

import httpx
from pydantic import ValidationError

from booking_assistant.exceptions.custom import MissingFallbackDataError, UpstreamUnavailableError
from booking_assistant.schemas.hotel import HotelSnapshot, InventoryResult, Provenance

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 24 * 60 * 60
DEFAULT_TIMEOUT_SECONDS = 10.0


class DataStore:
    """Hotel inventory with a live -> cache -> static fallback chain.

    ``fetch_inventory`` order:
      1. cache record younger than the TTL (inclusive)  -> cached
      2. live fetch, persisted on success               -> live
      3. cache record of any age                        -> cached
      4. bundled static payload                         -> fallback

    ``force_refresh`` only tries step 2 then step 4, so a refresh never hands
    back old cache.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        api_url: str,
        cache_file: Path,
        fallback_file: Path,
        api_token: str = "",
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        clock: Callable[[], float] = time.time,
    ):
        self._client = client
        self._api_url = api_url
        self._cache_file = Path(cache_file)
        self._fallback_file = Path(fallback_file)
        self._headers = {
            "Authorization": f"Bearer {api_token}",
            "Content-Type": "application/json",
        }
        self._ttl_ms = int(ttl_seconds * 1000)
        self._timeout = timeout
        self._clock = clock
        self._lock = asyncio.Lock()

    def _now_ms(self) -> int:
        return int(self._clock() * 1000)

    async def fetch_inventory(self) -> InventoryResult:
        async with self._lock:
            cached = self._read_cache(ignore_ttl=False)
            if cached:
                logger.info("Using cached hotel data")
                return cached

            try:
                return await self._fetch_and_store()
            except UpstreamUnavailableError as exc:
                logger.warning("Hotel data fetch failed: %s", exc.message)

            stale = self._read_cache(ignore_ttl=True)
            if stale:
                logger.warning("Using expired cache as fallback")
                return stale

            logger.warning("Using static fallback data")
            return self._load_fallback()

    async def force_refresh(self) -> InventoryResult:
        async with self._lock:
            logger.info("Force refreshing hotel data")
            try:
                return await self._fetch_and_store()
            except UpstreamUnavailableError as exc:
                logger.warning("Refresh failed: %s; using static fallback", exc.message)
                return self._load_fallback()

    async def _fetch_and_store(self) -> InventoryResult:
        payload, snapshot = await self._fetch_live()
        try:
            self._write_cache(payload)
        except OSError:
            logger.exception("Could not write cache file %s", self._cache_file)
        logger.info("Fresh hotel data fetched from %s", self._api_url)
        return InventoryResult(snapshot=snapshot, provenance=Provenance.live, payload=payload)

    async def _fetch_live(self) -> tuple[dict, HotelSnapshot]:
        try:
            resp = await self._client.get(
                self._api_url, headers=self._headers, timeout=self._timeout
            )
        except httpx.HTTPError as exc:
            raise UpstreamUnavailableError(f"{type(exc).__name__}: {exc}") from exc

        if resp.status_code >= 400:
            raise UpstreamUnavailableError(resp.text, status_code=resp.status_code)

        try:
            payload = resp.json()
            snapshot = HotelSnapshot.from_payload(payload)
        except (ValueError, ValidationError) as exc:
            raise UpstreamUnavailableError(f"Invalid hotel data: {exc}") from exc
        return payload, snapshot

    def _read_cache(self, ignore_ttl: bool) -> InventoryResult | None:
        try:
            record = json.loads(self._cache_file.read_text(encoding="utf-8"))
            timestamp = int(record["timestamp"])
            payload = record["data"]
        except FileNotFoundError:
            return None
        except (OSError, ValueError, KeyError, TypeError):
            logger.warning("Ignoring unreadable cache file %s", self._cache_file)
            return None

        if not ignore_ttl and self._now_ms() - timestamp > self._ttl_ms:
            logger.info("Cache expired")
            return None

        try:
            snapshot = HotelSnapshot.from_payload(payload)
        except ValidationError:
            logger.warning("Ignoring cache file %s with invalid hotel data", self._cache_file)
            return None
        return InventoryResult(snapshot=snapshot, provenance=Provenance.cached, payload=payload)

    def _write_cache(self, payload: dict) -> None:
        record = {"timestamp": self._now_ms(), "data": payload}
        self._cache_file.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=self._cache_file.parent, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(record, fh, indent=2)
            os.replace(tmp_path, self._cache_file)
        except BaseException:
            Path(tmp_path).unlink(missing_ok=True)
            raise
        logger.info("Hotel data cached to %s", self._cache_file)

    def _load_fallback(self) -> InventoryResult:
        try:
            payload = json.loads(self._fallback_file.read_text(encoding="utf-8"))
            snapshot = HotelSnapshot.from_payload(payload)
        except (OSError, ValueError) as exc:
            raise MissingFallbackDataError(
                f"Static fallback data not found at {self._fallback_file}: {exc}"
            ) from exc
        return InventoryResult(snapshot=snapshot, provenance=Provenance.fallback, payload=payload)
