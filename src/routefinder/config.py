"""Application configuration and settings management."""

from typing import Any, Literal, Optional

import json
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="ROUTEFINDER_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "Route Finder API"
    api_prefix: str = "/api"
    google_maps_api_key: Optional[str] = Field(
        default=None,
        description="Google Maps API key used for Distance Matrix requests.",
    )
    google_maps_base_url: str = Field(
        default="https://maps.googleapis.com/maps/api",
        description="Base URL of the Google Maps web services.",
    )
    travel_mode: Literal["driving", "walking", "bicycling", "transit"] = Field(
        default="driving",
        description="Travel mode requested from the Distance Matrix service.",
    )
    request_timeout_seconds: float = Field(default=30.0, gt=0.0)
    min_locations: int = Field(default=2, ge=2)
    # Exhaustive search visits n! orderings; 10 stops is already 3,628,800.
    max_locations: int = Field(default=10, ge=2, le=10)
    log_level: str = Field(default="INFO")
    frontend_allowed_origins: tuple[str, ...] = Field(
        default=(),
        description="Permitted web origins for browser clients (CORS).",
    )

    @field_validator("google_maps_api_key", mode="before")
    @classmethod
    def _blank_key_is_none(cls, value: Any) -> Optional[str]:
        if value is None:
            return None
        text = str(value).strip()
        return text or None

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalise_level(cls, value: Any) -> str:
        return str(value).strip().upper() or "INFO"

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


settings = Settings()
