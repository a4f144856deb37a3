"""Dutch address geocoding through the PDOK Locatieserver."""

from __future__ import annotations

import logging
import re
from functools import lru_cache

import httpx

from ...config import settings
from ...models.domain import Coordinate
from .cache import GeocodeCache

logger = logging.getLogger(__name__)

_HOUSE_NUMBER_PATTERN = re.compile(r"\d+[a-zA-Z]?")
_POINT_PATTERN = re.compile(r"POINT\(([^ ]+) ([^)]+)\)")


def normalize_postal_code(postal_code: str) -> str:
    """``"1234 ab"`` -> ``"1234AB"``."""
    return re.sub(r"\s", "", postal_code).upper()


def extract_house_number(address: str) -> str | None:
    """Pull the house number (with optional letter suffix) out of a street address."""
    match = _HOUSE_NUMBER_PATTERN.search(address)
    return match.group(0) if match else None


def parse_centroid(point: str) -> Coordinate | None:
    """Parse PDOK's ``"POINT(lng lat)"`` centroid notation."""
    match = _POINT_PATTERN.search(point)
    if not match:
        return None
    try:
        return Coordinate(latitude=float(match.group(2)), longitude=float(match.group(1)))
    except ValueError:
        return None


class PDOKGeocoder:
    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        cache: GeocodeCache[Coordinate] | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        self.base_url = (base_url or settings.geocoder_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.geocoder_timeout_seconds
        self.cache = cache or GeocodeCache(
            ttl_seconds=settings.geocode_cache_ttl_seconds,
            max_entries=settings.geocode_cache_max_entries,
        )
        self._client = client

    def _get_client(self) -> httpx.Client:
        if self._client is not None:
            return self._client
        return httpx.Client(timeout=httpx.Timeout(self.timeout, connect=5.0))

    def geocode(self, postal_code: str, house_number: str) -> Coordinate | None:
        clean_postal = normalize_postal_code(postal_code)
        cache_key = f"{clean_postal}-{house_number}"

        hit, cached = self.cache.lookup(cache_key)
        if hit:
            return cached

        result = self._lookup(clean_postal, house_number)
        self.cache.store(cache_key, result)
        return result

    def _lookup(self, clean_postal: str, house_number: str) -> Coordinate | None:
        params = {"q": f"{clean_postal} {house_number}", "rows": 1}
        client = self._get_client()
        try:
            response = client.get(f"{self.base_url}/free", params=params)
            if response.status_code != 200:
                logger.warning("PDOK lookup for %s %s returned HTTP %s", clean_postal, house_number, response.status_code)
                return None
            data = response.json()
        except httpx.HTTPError as exc:
            logger.error("Geocoding error for %s %s: %s", clean_postal, house_number, exc)
            return None
        except ValueError as exc:
            logger.error("PDOK response is not valid JSON: %s", exc)
            return None
        finally:
            if client is not self._client:
                client.close()

        docs = (data.get("response") or {}).get("docs") if isinstance(data, dict) else None
        if not docs or not isinstance(docs[0], dict):
            return None
        centroid = docs[0].get("centroide_ll")
        if not isinstance(centroid, str):
            return None
        return parse_centroid(centroid)

    def geocode_customer_address(self, postal_code: str, address: str) -> Coordinate | None:
        house_number = extract_house_number(address)
        if not house_number:
            return None
        return self.geocode(postal_code, house_number)


@lru_cache()
def get_geocoder() -> PDOKGeocoder:
    """Shared geocoder so the lookup cache survives across requests."""
    return PDOKGeocoder()
