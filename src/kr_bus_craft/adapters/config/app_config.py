"""12-factor configuration adapter using environment variables and TOML config."""

import tomllib
from pathlib import Path
from typing import Any

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from kr_bus_craft.domain.models import LAT_TO_METERS, LNG_TO_METERS, SEOUL_STATION, Origin


def _check_theme(v: str) -> str:
    if v.lower() not in ("light", "dark", "auto"):
        raise ValueError("theme must be either 'light', 'dark', or 'auto'")
    return v.lower()


def _check_positive(v: float) -> float:
    if v <= 0:
        raise ValueError("value must be greater than 0")
    return v


def _check_latitude(v: float) -> float:
    if not -90 <= v <= 90:
        raise ValueError("origin_latitude must be between -90 and 90")
    return v


def _check_longitude(v: float) -> float:
    if not -180 <= v <= 180:
        raise ValueError("origin_longitude must be between -180 and 180")
    return v


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # Server configuration
    host: str = Field(default="0.0.0.0", description="Host to bind the server to")
    port: int = Field(default=8000, description="Port to bind the server to")

    # Gemini API configuration
    gemini_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("gemini_api_key", "api_key"),
        description="Google Gemini API key (GEMINI_API_KEY, or API_KEY)",
    )
    gemini_model: str = Field(
        default="gemini-3-flash-preview",
        description="Gemini model used to look up bus stops",
    )
    gemini_base_url: str = Field(
        default="https://generativelanguage.googleapis.com/v1beta",
        description="Base URL of the Gemini REST API",
    )
    resolver_timeout_seconds: float = Field(
        default=30.0, description="Timeout for a single stop lookup in seconds"
    )
    resolver_min_delay_seconds: float = Field(
        default=0.5,
        description="Minimum delay between Gemini requests in seconds",
    )

    # Projection configuration
    origin_name: str = Field(default=SEOUL_STATION.name, description="Name of the grid origin")
    origin_latitude: float = Field(
        default=SEOUL_STATION.latitude, description="Latitude mapped to grid X=0/Z=0"
    )
    origin_longitude: float = Field(
        default=SEOUL_STATION.longitude, description="Longitude mapped to grid X=0/Z=0"
    )
    origin_altitude: int = Field(
        default=SEOUL_STATION.altitude, description="Grid Y used for every stop"
    )
    lat_to_meters: float = Field(default=LAT_TO_METERS, description="Blocks per degree latitude")
    lng_to_meters: float = Field(default=LNG_TO_METERS, description="Blocks per degree longitude")

    # Display configuration
    title: str = Field(default="KR-BUS-CRAFT", description="Page title displayed in browser tab")
    theme: str = Field(
        default="dark",
        description="UI theme: 'light', 'dark', or 'auto' (follows system preference)",
    )
    banner_color: str = Field(
        default="#16A34A",
        description="Banner/header background color (hex color code)",
    )

    # Rate limiting configuration
    rate_limit_per_minute: int = Field(
        default=60,
        description="Maximum number of requests allowed per IP address per minute",
    )

    # Optional TOML file overriding [origin], [projection] and [display]
    config_file: str | None = Field(
        default=None,
        description="Path to TOML configuration file",
    )

    @field_validator("theme")
    @classmethod
    def validate_theme(cls, v: str) -> str:
        """Validate theme is either 'light', 'dark', or 'auto'."""
        return _check_theme(v)

    @field_validator("resolver_timeout_seconds", "lat_to_meters", "lng_to_meters")
    @classmethod
    def validate_positive(cls, v: float) -> float:
        """Validate timeouts and scales are strictly positive."""
        return _check_positive(v)

    @field_validator("resolver_min_delay_seconds")
    @classmethod
    def validate_non_negative(cls, v: float) -> float:
        """Validate the request delay is not negative."""
        if v < 0:
            raise ValueError("resolver_min_delay_seconds must not be negative")
        return v

    @field_validator("origin_latitude")
    @classmethod
    def validate_origin_latitude(cls, v: float) -> float:
        """Validate origin latitude is a valid latitude."""
        return _check_latitude(v)

    @field_validator("origin_longitude")
    @classmethod
    def validate_origin_longitude(cls, v: float) -> float:
        """Validate origin longitude is a valid longitude."""
        return _check_longitude(v)

    def load_config_file(self) -> dict[str, Any]:
        """Load the TOML file and apply its settings over env/defaults.

        Returns an empty dict when no config_file is set.
        """
        if not self.config_file:
            return {}

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)

        origin = toml_data.get("origin", {})
        if "name" in origin:
            self.origin_name = str(origin["name"])
        if "latitude" in origin:
            self.origin_latitude = _check_latitude(float(origin["latitude"]))
        if "longitude" in origin:
            self.origin_longitude = _check_longitude(float(origin["longitude"]))
        if "altitude" in origin:
            self.origin_altitude = int(origin["altitude"])

        projection = toml_data.get("projection", {})
        if "lat_to_meters" in projection:
            self.lat_to_meters = _check_positive(float(projection["lat_to_meters"]))
        if "lng_to_meters" in projection:
            self.lng_to_meters = _check_positive(float(projection["lng_to_meters"]))

        display = toml_data.get("display", {})
        if "title" in display:
            self.title = display["title"]
        if "theme" in display:
            self.theme = _check_theme(display["theme"])
        if "banner_color" in display:
            self.banner_color = display["banner_color"]

        return toml_data

    def get_origin(self) -> Origin:
        """Build the grid origin from the current settings."""
        return Origin(
            name=self.origin_name,
            latitude=self.origin_latitude,
            longitude=self.origin_longitude,
            altitude=self.origin_altitude,
        )
