"""Route group exports."""

from . import geocoding, health, route

__all__ = ["route", "health", "geocoding"]
