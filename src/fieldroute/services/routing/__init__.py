"""Route sequencing: travel matrices, tour construction and itineraries."""

from .errors import MatrixShapeError, ProviderUnavailable, RoutingError, TooManyLocations
from .itinerary import summarize_itinerary
from .service import optimize_route
from .solver import nearest_neighbor_tour

__all__ = [
    "optimize_route",
    "nearest_neighbor_tour",
    "summarize_itinerary",
    "RoutingError",
    "ProviderUnavailable",
    "MatrixShapeError",
    "TooManyLocations",
]
