"""Offline straight-line matrix provider."""

from __future__ import annotations

import logging
from typing import Sequence

from ...config import settings
from ...models.domain import Location
from ..geospatial import haversine_km
from .base import MatrixProvider
from .models import ZERO_CELL, Reachable, TravelCell, TravelMatrix

logger = logging.getLogger(__name__)


class HaversineMatrixProvider(MatrixProvider):
    """Great-circle distances with durations from a fixed average speed.

    Every pair is reachable. Useful for local development and for
    environments without a routing backend.
    """

    name = "haversine"

    def __init__(self, average_speed_kmh: float | None = None) -> None:
        self.average_speed_kmh = average_speed_kmh or settings.haversine_average_speed_kmh

    def _fetch_matrix(self, locations: Sequence[Location]) -> TravelMatrix:
        logger.info("Computing haversine matrix for %s locations", len(locations))
        rows: list[list[TravelCell]] = []
        for i, origin in enumerate(locations):
            row: list[TravelCell] = []
            for j, destination in enumerate(locations):
                if i == j:
                    row.append(ZERO_CELL)
                    continue
                distance_km = haversine_km(origin.lat, origin.lng, destination.lat, destination.lng)
                duration_seconds = distance_km / self.average_speed_kmh * 3600.0
                row.append(
                    Reachable(
                        duration_seconds=int(round(duration_seconds)),
                        distance_meters=int(round(distance_km * 1000.0)),
                    )
                )
            rows.append(row)
        return TravelMatrix.from_rows(rows)
