"""Domain models for stops and geographic points."""

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class Location:
    """A stop to visit: opaque identifier plus WGS84 coordinate."""

    id: str
    lat: float
    lng: float


@dataclass(slots=True, frozen=True)
class Coordinate:
    """A geocoded point."""

    latitude: float
    longitude: float
