from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- Place resolution ---
    PLACE_RESOLVER: str = Field(
        default="google",
        description="Place lookup provider: 'google' or 'openrouteservice'.",
    )
    PLACE_SEARCH_REGION: str = Field(
        default="ae",
        description="ISO 3166-1 alpha-2 country code that place lookups are restricted to.",
    )

    # --- Google Places API ---
    GOOGLE_PLACES_API_KEY: str = Field(
        default="",
        description="API key for Google Places API (New).",
    )

    # --- OpenRouteService API ---
    OPEN_ROUTE_SERVICE_API_KEY: str = Field(
        default="",
        description="API key for OpenRouteService geocoding.",
    )

    # --- Catalog ---
    CATALOG_PATH: str = Field(
        default="",
        description="Path to a venue catalog JSON file. Empty uses the bundled Dubai catalog.",
    )
    CAFE_TIMEZONE: str = Field(
        default="Asia/Dubai",
        description="IANA time zone used to pick the default time-of-day bucket.",
    )

    # --- Map view ---
    MAP_DEFAULT_CENTER_LATITUDE: float = Field(
        default=25.2048,
        description="Latitude the map is centered on when nothing else is in focus.",
    )
    MAP_DEFAULT_CENTER_LONGITUDE: float = Field(
        default=55.2708,
        description="Longitude the map is centered on when nothing else is in focus.",
    )
    MAP_DEFAULT_ZOOM: int = Field(
        default=13,
        description="Zoom level for the default map center.",
    )

    # --- Discovery sessions ---
    MAX_SESSIONS: int = Field(
        default=1000,
        description="Maximum number of in-memory discovery sessions kept before eviction.",
    )

    # --- Logging / observability ---
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Minimum loguru level written to stderr.",
    )
    OTEL_SERVICE_NAME: str = Field(
        default="cafe-finder-mcp",
        description="Service name reported on OpenTelemetry spans.",
    )
    AGENT_OBSERVABILITY_ENABLED: bool = Field(
        default=True,
        description="Emit OpenTelemetry spans for tool and prompt invocations.",
    )


settings = Settings()
