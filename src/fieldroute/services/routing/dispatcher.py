"""Factory for matrix providers based on configuration."""

from __future__ import annotations

from ...config import settings
from .base import MatrixProvider
from .google_client import GoogleDistanceMatrixProvider
from .haversine import HaversineMatrixProvider
from .osrm_client import OSRMTableProvider


def get_provider(name: str | None = None) -> MatrixProvider:
    match name or settings.matrix_provider:
        case "google":
            return GoogleDistanceMatrixProvider()
        case "osrm":
            return OSRMTableProvider()
        case "haversine":
            return HaversineMatrixProvider()
        case unknown:
            raise ValueError(f"Unknown matrix provider '{unknown}'.")
