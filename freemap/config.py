"""Application configuration."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from freemap.domain.value import RankingMode


class StorageSettings(BaseModel):
    """Vote-state storage configuration."""

    # Directory holding one file per storage key
    vote_state_dir: Path = Path(".freemap")

    # Fixed key the place-vote map is stored under
    vote_state_key: str = "freemap.placeVotes"


class MapSettings(BaseModel):
    """Map view configuration."""

    # Fallback view used when the user's location is unknown (Seoul city hall)
    fallback_latitude: float = 37.5665
    fallback_longitude: float = 126.978
    default_zoom: int = Field(default=13, ge=0, le=22)


class GeolocationSettings(BaseModel):
    """Geolocation lookup configuration."""

    # IP geolocation endpoint returning JSON with latitude/longitude fields
    lookup_url: str = "https://ipapi.co/json/"
    timeout_seconds: float = 5.0

    # When both are set the lookup is skipped and this coordinate is used
    fixed_latitude: float | None = None
    fixed_longitude: float | None = None


class SeedSettings(BaseModel):
    """Demo data seeding configuration."""

    enabled: bool = True
    places_per_topic: int = Field(default=100, ge=0)

    # None gives a different layout on every start
    random_seed: int | None = None

    # Bounding box for generated coordinates (central Seoul)
    south: float = 37.55
    west: float = 126.95
    span: float = 0.08


class RankingSettings(BaseModel):
    """Place ranking configuration."""

    default_mode: RankingMode = RankingMode.RECOMMEND


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Logfire API token (optional - if not set, logs only go to console)
    # Can be set via OBSERVABILITY__LOGFIRE_TOKEN env var
    logfire_token: str | None = None

    # Whether to send telemetry to Logfire cloud
    # If None, will auto-determine: sends if token is present, otherwise console-only
    send_to_logfire: bool | None = None


class Settings(BaseSettings):
    """Application settings.

    Every section can be overridden from the environment using the nested
    delimiter, e.g.:

        STORAGE__VOTE_STATE_DIR=/var/lib/freemap
        SEED__ENABLED=false
        GEOLOCATION__FIXED_LATITUDE=37.5
        GEOLOCATION__FIXED_LONGITUDE=127.0
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",  # Allows STORAGE__VOTE_STATE_DIR syntax
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    # Nested settings
    storage: StorageSettings = StorageSettings()
    map: MapSettings = MapSettings()
    geolocation: GeolocationSettings = GeolocationSettings()
    seed: SeedSettings = SeedSettings()
    ranking: RankingSettings = RankingSettings()
    observability: ObservabilitySettings = ObservabilitySettings()
