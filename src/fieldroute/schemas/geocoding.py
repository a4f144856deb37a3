"""Geocoding response schemas."""

from __future__ import annotations

from pydantic import BaseModel


class GeocodeResponse(BaseModel):
    postal_code: str
    house_number: str
    lat: float
    lng: float
