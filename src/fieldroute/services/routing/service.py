"""Route sequencing orchestration service."""

from __future__ import annotations

import logging
import time
from typing import Sequence

from ...config import settings
from ...models.domain import Location
from .base import MatrixProvider
from .dispatcher import get_provider
from .errors import MatrixShapeError, TooManyLocations
from .itinerary import empty_itinerary, summarize_itinerary
from .models import Itinerary
from .solver import nearest_neighbor_tour

logger = logging.getLogger(__name__)


def optimize_route(
    locations: Sequence[Location],
    provider: MatrixProvider | None = None,
    max_locations: int | None = None,
) -> Itinerary:
    """Fetch the travel matrix once, order the stops and summarize the legs.

    Fewer than two locations short-circuit to an itinerary that echoes the
    input ids with zero totals; the provider is not consulted. Raises
    ``TooManyLocations`` when the request exceeds ``max_locations`` or the
    provider's own per-call cap, and lets ``ProviderUnavailable`` propagate
    untouched.
    """
    if len(locations) < 2:
        return empty_itinerary(locations)

    provider = provider or get_provider()
    limit = max_locations if max_locations is not None else settings.max_locations_per_request
    provider_limit = getattr(provider, "max_locations", None)
    if provider_limit is not None:
        limit = min(limit, provider_limit)
    if len(locations) > limit:
        raise TooManyLocations(len(locations), limit)

    start_time = time.perf_counter()
    matrix = provider.get_matrix(locations)
    if matrix.size != len(locations):
        raise MatrixShapeError(
            f"{provider.name} returned a {matrix.size}x{matrix.size} matrix for {len(locations)} locations."
        )

    tour = nearest_neighbor_tour(matrix)
    itinerary = summarize_itinerary(tour, matrix, locations)

    elapsed = time.perf_counter() - start_time
    logger.info(
        "Optimized route over %s stops via %s in %.2fs: %s min, %s km%s",
        len(locations),
        provider.name,
        elapsed,
        itinerary.total_duration_minutes,
        itinerary.total_distance_km,
        " (degraded)" if itinerary.degraded else "",
    )
    return itinerary
