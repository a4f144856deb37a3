"""Application configuration and settings management."""

from typing import Annotated, Any, Literal, Optional

import json
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="FIELDROUTE_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    app_name: str = "p1Meter Route Sequencing API"
    api_prefix: str = "/api"
    log_level: str = Field(default="INFO", description="Root log level (DEBUG, INFO, WARNING, ...).")

    matrix_provider: Literal["google", "osrm", "haversine"] = Field(
        default="google",
        description="Backend used to build the travel duration/distance matrix.",
    )
    google_maps_api_key: Optional[str] = Field(
        default=None,
        description="API key for the Google Distance Matrix API.",
    )
    google_distance_matrix_url: str = Field(
        default="https://maps.googleapis.com/maps/api/distancematrix/json",
    )
    google_travel_mode: Literal["driving", "walking", "bicycling"] = Field(default="driving")
    osrm_base_url: Optional[str] = Field(
        default=None,
        description="Base URL for the OSRM routing service (e.g., http://localhost:5000).",
    )
    osrm_profile: Literal["driving", "driving-hgv"] = Field(
        default="driving",
        description="OSRM profile to use when computing travel times.",
    )
    provider_timeout_seconds: float = Field(default=30.0, gt=0.0)
    haversine_average_speed_kmh: float = Field(default=40.0, gt=0.0)
    max_locations_per_request: int = Field(
        default=25,
        ge=2,
        description=(
            "Upper bound on stops per optimization (one batched matrix call). "
            "Providers with a smaller per-call cap (Google: 10) lower it further."
        ),
    )

    geocoder_base_url: str = Field(
        default="https://api.pdok.nl/bzk/locatieserver/search/v3_1",
        description="PDOK Locatieserver base URL for Dutch address lookups.",
    )
    geocoder_timeout_seconds: float = Field(default=10.0, gt=0.0)
    geocode_cache_ttl_seconds: float = Field(default=24 * 3600.0, gt=0.0)
    geocode_cache_max_entries: int = Field(default=5000, ge=1)

    frontend_allowed_origins: Annotated[tuple[str, ...], NoDecode] = Field(
        default=(
            "http://localhost:3000",
            "http://127.0.0.1:3000",
        ),
        description="Permitted web origins for browser clients (CORS).",
    )

    @field_validator("frontend_allowed_origins", mode="before")
    @classmethod
    def _parse_str_tuple_from_env(cls, value: Any) -> tuple[str, ...]:
        """Parse string tuple from environment variable (comma-separated or JSON array)."""
        if isinstance(value, tuple):
            return value
        if isinstance(value, list):
            return tuple(str(item) for item in value)
        if isinstance(value, str):
            # Try JSON first
            try:
                parsed = json.loads(value)
                if isinstance(parsed, list):
                    return tuple(str(item) for item in parsed)
            except (json.JSONDecodeError, TypeError):
                pass
            if "," in value:
                return tuple(item.strip() for item in value.split(",") if item.strip())
            if value.strip():
                return (value.strip(),)
        return tuple()

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: Any) -> str:
        return str(value or "INFO").strip().upper()


settings = Settings()
