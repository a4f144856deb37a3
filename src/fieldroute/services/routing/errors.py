"""Routing error taxonomy."""

from __future__ import annotations


class RoutingError(Exception):
    """Base class for route sequencing failures."""


class ProviderUnavailable(RoutingError):
    """The batched travel-matrix request failed as a whole."""

    def __init__(self, provider: str, reason: str) -> None:
        super().__init__(f"{provider} matrix request failed: {reason}")
        self.provider = provider
        self.reason = reason


class MatrixShapeError(RoutingError):
    """A travel matrix does not match the locations it was built for."""


class TooManyLocations(RoutingError):
    """The request holds more stops than one batched matrix call allows."""

    def __init__(self, count: int, limit: int) -> None:
        super().__init__(f"Too many locations: {count} (maximum {limit} per request).")
        self.count = count
        self.limit = limit
