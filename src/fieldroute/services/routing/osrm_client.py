"""OSRM table provider."""

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


class OSRMTableProvider(MatrixProvider):
    name = "osrm"

    def __init__(
        self,
        base_url: str | None = None,
        profile: str | None = None,
        timeout: float | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        self.base_url = (base_url or settings.osrm_base_url or "").rstrip("/")
        self.profile = profile or settings.osrm_profile
        self.timeout = timeout if timeout is not None else settings.provider_timeout_seconds
        self._client = client

    def is_configured(self) -> bool:
        return bool(self.base_url)

    def _get_client(self) -> httpx.Client:
        if self._client is not None:
            return self._client
        return httpx.Client(
            timeout=httpx.Timeout(self.timeout, connect=10.0),
            limits=httpx.Limits(max_connections=1, max_keepalive_connections=0),
        )

    def _fetch_matrix(self, locations: Sequence[Location]) -> TravelMatrix:
        if not self.base_url:
            raise ProviderUnavailable(self.name, "OSRM base URL is not configured")

        # OSRM expects "lon,lat;lon,lat;..."
        coordinate_str = ";".join(f"{location.lng},{location.lat}" for location in locations)
        url = f"{self.base_url}/table/v1/{self.profile}/{coordinate_str}"
        params = {"annotations": "duration,distance"}

        client = self._get_client()
        try:
            response = client.get(url, params=params)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as exc:
            # 414 means the URL outgrew the server limit; still a whole-call failure.
            logger.error("OSRM table request returned HTTP %s", exc.response.status_code)
            raise ProviderUnavailable(self.name, f"HTTP {exc.response.status_code}") from exc
        except httpx.HTTPError as exc:
            logger.error("Failed to reach OSRM service at %s: %s", self.base_url, exc)
            raise ProviderUnavailable(self.name, str(exc)) from exc
        except ValueError as exc:
            logger.error("OSRM response is not valid JSON: %s", exc)
            raise ProviderUnavailable(self.name, "invalid JSON payload") from exc
        finally:
            if client is not self._client:
                client.close()

        if not isinstance(data, dict) or data.get("code") != "Ok":
            code = data.get("code") if isinstance(data, dict) else None
            logger.error("OSRM table error: %s", code)
            raise ProviderUnavailable(self.name, f"OSRM error code: {code}")

        durations = data.get("durations")
        distances = data.get("distances")
        if durations is None or distances is None:
            raise ProviderUnavailable(self.name, "OSRM response missing durations/distances")

        return _matrix_from_tables(durations, distances, len(locations), self.name)


def _matrix_from_tables(durations: list, distances: list, count: int, provider: str) -> TravelMatrix:
    if not isinstance(durations, list) or not isinstance(distances, list):
        raise ProviderUnavailable(provider, "OSRM durations/distances are not tables")
    if len(durations) != count or len(distances) != count:
        raise ProviderUnavailable(provider, f"expected {count} rows in OSRM table")

    cells: list[list[TravelCell]] = []
    try:
        for i in range(count):
            if len(durations[i]) != count or len(distances[i]) != count:
                raise ProviderUnavailable(provider, f"OSRM table row {i} does not contain {count} values")
            row: list[TravelCell] = []
            for j in range(count):
                duration = durations[i][j]
                distance = distances[i][j]
                if duration is None or distance is None:
                    row.append(Unreachable())
                else:
                    row.append(
                        Reachable(
                            duration_seconds=int(round(duration)),
                            distance_meters=int(round(distance)),
                        )
                    )
            cells.append(row)
    except (TypeError, ValueError) as exc:
        logger.error("Malformed OSRM table: %s", exc)
        raise ProviderUnavailable(provider, "malformed OSRM table") from exc

    unreachable = sum(1 for row in cells for cell in row if isinstance(cell, Unreachable))
    if unreachable:
        logger.warning("%s of %s location pairs reported unreachable by OSRM", unreachable, count * count)
    return TravelMatrix.from_rows(cells)
