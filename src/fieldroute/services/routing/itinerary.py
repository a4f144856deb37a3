"""Turn a tour into legs and totals."""

from __future__ import annotations

import logging
import math
from typing import Sequence

from ...models.domain import Location
from .errors import MatrixShapeError
from .models import Itinerary, Leg, TravelMatrix

logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (JavaScript ``Math.round``)."""
    return int(math.floor(value + 0.5))


def seconds_to_minutes(duration_seconds: int) -> int:
    return round_half_up(duration_seconds / 60)


def meters_to_km(distance_meters: int) -> float:
    # Two-step rounding: whole hundreds of meters first, then tenths of a km.
    return round_half_up(distance_meters / 100) / 10


def empty_itinerary(locations: Sequence[Location] = ()) -> Itinerary:
    return Itinerary(
        order=[location.id for location in locations],
        legs=[],
        total_duration_minutes=0,
        total_distance_km=0,
    )


def summarize_itinerary(
    tour: Sequence[int],
    matrix: TravelMatrix,
    locations: Sequence[Location],
) -> Itinerary:
    """Build the leg-by-leg view of ``tour``.

    Totals are sums of the already-rounded legs. The ``*_exact`` totals are
    rounded once from the raw seconds and meters.
    """
    if len(tour) != len(locations) or matrix.size != len(locations):
        raise MatrixShapeError(
            f"Tour of {len(tour)} stops and {matrix.size}x{matrix.size} matrix "
            f"do not match {len(locations)} locations."
        )
    if len(tour) <= 1:
        return empty_itinerary(locations)

    legs: list[Leg] = []
    total_minutes = 0
    total_tenths = 0
    raw_seconds = 0
    raw_meters = 0
    degraded = False

    for from_idx, to_idx in zip(tour, tour[1:]):
        duration = matrix.duration_cost(from_idx, to_idx)
        distance = matrix.distance_cost(from_idx, to_idx)
        reachable = matrix.is_reachable(from_idx, to_idx)
        if not reachable:
            degraded = True

        leg = Leg(
            from_id=locations[from_idx].id,
            to_id=locations[to_idx].id,
            duration_minutes=seconds_to_minutes(duration),
            distance_km=meters_to_km(distance),
            reachable=reachable,
        )
        legs.append(leg)
        total_minutes += leg.duration_minutes
        total_tenths += round_half_up(distance / 100)
        raw_seconds += duration
        raw_meters += distance

    if degraded:
        unreachable_legs = sum(1 for leg in legs if not leg.reachable)
        logger.warning("Itinerary contains %s unreachable leg(s)", unreachable_legs)

    return Itinerary(
        order=[locations[idx].id for idx in tour],
        legs=legs,
        total_duration_minutes=total_minutes,
        total_distance_km=total_tenths / 10,
        total_duration_minutes_exact=seconds_to_minutes(raw_seconds),
        total_distance_km_exact=meters_to_km(raw_meters),
        degraded=degraded,
    )
