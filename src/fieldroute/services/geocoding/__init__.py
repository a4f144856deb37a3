"""Address geocoding services."""

from .cache import GeocodeCache
from .pdok_client import PDOKGeocoder, extract_house_number, get_geocoder, normalize_postal_code

__all__ = [
    "GeocodeCache",
    "PDOKGeocoder",
    "extract_house_number",
    "get_geocoder",
    "normalize_postal_code",
]
