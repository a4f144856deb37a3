"""Serializers for route itineraries."""

from __future__ import annotations

import csv
import io
from dataclasses import asdict

from ..routing.models import Itinerary


def itinerary_to_json(itinerary: Itinerary) -> dict:
    return {
        "order": list(itinerary.order),
        "total_duration_minutes": itinerary.total_duration_minutes,
        "total_distance_km": itinerary.total_distance_km,
        "total_duration_minutes_exact": itinerary.total_duration_minutes_exact,
        "total_distance_km_exact": itinerary.total_distance_km_exact,
        "degraded": itinerary.degraded,
        "legs": [asdict(leg) for leg in itinerary.legs],
    }


def itinerary_to_csv(itinerary: Itinerary) -> str:
    """One row per stop; the first stop has no incoming leg."""
    buffer = io.StringIO()
    fieldnames = [
        "sequence",
        "location_id",
        "from_id",
        "duration_minutes",
        "distance_km",
        "cumulative_duration_minutes",
    ]
    writer = csv.DictWriter(buffer, fieldnames=fieldnames)
    writer.writeheader()
    if not itinerary.order:
        return buffer.getvalue()

    writer.writerow(
        {
            "sequence": 1,
            "location_id": itinerary.order[0],
            "from_id": "",
            "duration_minutes": 0,
            "distance_km": 0,
            "cumulative_duration_minutes": 0,
        }
    )
    cumulative = 0
    for sequence, leg in enumerate(itinerary.legs, start=2):
        cumulative += leg.duration_minutes
        writer.writerow(
            {
                "sequence": sequence,
                "location_id": leg.to_id,
                "from_id": leg.from_id,
                "duration_minutes": leg.duration_minutes,
                "distance_km": leg.distance_km,
                "cumulative_duration_minutes": cumulative,
            }
        )
    return buffer.getvalue()
