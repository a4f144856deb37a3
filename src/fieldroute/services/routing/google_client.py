"""Google Distance Matrix provider."""

from __future__ import annotations

import logging
from typing import Sequence

import httpx

from ...config import settings
from ...models.domain import Location
from .base import MatrixProvider
from .errors import ProviderUnavailable
from .models import Reachable, TravelCell, TravelMatrix, Unreachable

logger = logging.getLogger(__name__)


class GoogleDistanceMatrixProvider(MatrixProvider):
    """Builds the full matrix with one Distance Matrix request (origins == destinations)."""

    name = "google"
    # The Distance Matrix API allows 100 elements (origins x destinations) per request.
    max_locations = 10

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        mode: str | None = None,
        timeout: float | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        self.api_key = api_key or settings.google_maps_api_key
        self.base_url = base_url or settings.google_distance_matrix_url
        self.mode = mode or settings.google_travel_mode
        self.timeout = timeout if timeout is not None else settings.provider_timeout_seconds
        self._client = client

    def is_configured(self) -> bool:
        return bool(self.api_key)

    def _get_client(self) -> httpx.Client:
        if self._client is not None:
            return self._client
        return httpx.Client(timeout=httpx.Timeout(self.timeout, connect=10.0))

    def _fetch_matrix(self, locations: Sequence[Location]) -> TravelMatrix:
        if not self.api_key:
            raise ProviderUnavailable(self.name, "Google Maps API key not configured")

        coords = "|".join(f"{location.lat},{location.lng}" for location in locations)
        params = {
            "origins": coords,
            "destinations": coords,
            "mode": self.mode,
            "key": self.api_key,
        }

        client = self._get_client()
        try:
            response = client.get(self.base_url, params=params)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as exc:
            logger.error("Distance Matrix request returned HTTP %s", exc.response.status_code)
            raise ProviderUnavailable(self.name, f"HTTP {exc.response.status_code}") from exc
        except httpx.HTTPError as exc:
            logger.error("Distance Matrix request failed: %s", exc)
            raise ProviderUnavailable(self.name, str(exc)) from exc
        except ValueError as exc:
            logger.error("Distance Matrix response is not valid JSON: %s", exc)
            raise ProviderUnavailable(self.name, "invalid JSON payload") from exc
        finally:
            if client is not self._client:
                client.close()

        status = data.get("status") if isinstance(data, dict) else None
        if status != "OK":
            logger.error(
                "Distance Matrix API error: %s (%s)",
                status,
                data.get("error_message", "no message") if isinstance(data, dict) else "no payload",
            )
            raise ProviderUnavailable(self.name, f"Distance Matrix API error: {status}")

        return _matrix_from_rows(data.get("rows"), len(locations), self.name)


def _matrix_from_rows(rows: object, count: int, provider: str) -> TravelMatrix:
    if not isinstance(rows, list) or len(rows) != count:
        raise ProviderUnavailable(provider, f"expected {count} rows in Distance Matrix response")

    cells: list[list[TravelCell]] = []
    unreachable = 0
    for i, row in enumerate(rows):
        elements = row.get("elements") if isinstance(row, dict) else None
        if not isinstance(elements, list) or len(elements) != count:
            raise ProviderUnavailable(provider, f"row {i} does not contain {count} elements")
        row_cells: list[TravelCell] = []
        for element in elements:
            cell = _cell_from_element(element)
            if isinstance(cell, Unreachable):
                unreachable += 1
            row_cells.append(cell)
        cells.append(row_cells)

    if unreachable:
        logger.warning("%s of %s location pairs reported unreachable", unreachable, count * count)
    return TravelMatrix.from_rows(cells)


def _cell_from_element(element: object) -> TravelCell:
    if not isinstance(element, dict) or element.get("status") != "OK":
        return Unreachable()
    try:
        return Reachable(
            duration_seconds=int(element["duration"]["value"]),
            distance_meters=int(element["distance"]["value"]),
        )
    except (KeyError, TypeError, ValueError):
        return Unreachable()
