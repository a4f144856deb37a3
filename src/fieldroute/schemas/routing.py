"""Route optimization request/response schemas."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..models.domain import Location
from ..services.routing.models import Itinerary


class LocationModel(BaseModel):
    id: str = Field(..., min_length=1, description="Caller-side identifier, e.g. an installation id.")
    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)

    def to_domain(self) -> Location:
        return Location(id=self.id, lat=self.lat, lng=self.lng)


class RouteOptimizeRequest(BaseModel):
    locations: Optional[List[LocationModel]] = Field(
        default=None,
        description="Stops to visit. The first entry is the fixed starting point.",
    )

    @field_validator("locations")
    @classmethod
    def _unique_ids(cls, value: Optional[List[LocationModel]]) -> Optional[List[LocationModel]]:
        if value is None:
            return value
        seen: set[str] = set()
        duplicates: list[str] = []
        for location in value:
            if location.id in seen and location.id not in duplicates:
                duplicates.append(location.id)
            seen.add(location.id)
        if duplicates:
            raise ValueError(f"Location ids must be unique; duplicated: {', '.join(duplicates)}")
        return value

    def to_domain(self) -> list[Location]:
        return [location.to_domain() for location in self.locations or []]


class RouteLegModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    from_id: str = Field(..., alias="from")
    to_id: str = Field(..., alias="to")
    duration_minutes: int = Field(..., alias="durationMinutes")
    distance_km: float = Field(..., alias="distanceKm")


class OptimizedRouteResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    order: List[str]
    total_duration_minutes: int = Field(..., alias="totalDurationMinutes")
    total_distance_km: float = Field(..., alias="totalDistanceKm")
    legs: List[RouteLegModel]
    total_duration_minutes_exact: int = Field(
        0,
        alias="totalDurationMinutesExact",
        description="Total rounded once from raw seconds instead of summed per leg.",
    )
    total_distance_km_exact: float = Field(0.0, alias="totalDistanceKmExact")
    degraded: bool = Field(False, description="True when a leg crosses a pair without a known route.")

    @classmethod
    def from_itinerary(cls, itinerary: Itinerary) -> "OptimizedRouteResponse":
        return cls(
            order=list(itinerary.order),
            total_duration_minutes=itinerary.total_duration_minutes,
            total_distance_km=itinerary.total_distance_km,
            legs=[
                RouteLegModel(
                    from_id=leg.from_id,
                    to_id=leg.to_id,
                    duration_minutes=leg.duration_minutes,
                    distance_km=leg.distance_km,
                )
                for leg in itinerary.legs
            ],
            total_duration_minutes_exact=itinerary.total_duration_minutes_exact,
            total_distance_km_exact=itinerary.total_distance_km_exact,
            degraded=itinerary.degraded,
        )
