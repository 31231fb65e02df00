"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from freemap.config import (
    GeolocationSettings,
    MapSettings,
    RankingSettings,
    SeedSettings,
    Settings,
    StorageSettings,
)
from freemap.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    scope = Scope.APP

    @provide
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide
    def provide_storage_settings(self, settings: Settings) -> StorageSettings:
        """Provide vote-state storage settings."""
        return settings.storage

    @provide
    def provide_map_settings(self, settings: Settings) -> MapSettings:
        """Provide map view settings."""
        return settings.map

    @provide
    def provide_geolocation_settings(self, settings: Settings) -> GeolocationSettings:
        """Provide geolocation settings."""
        return settings.geolocation

    @provide
    def provide_seed_settings(self, settings: Settings) -> SeedSettings:
        """Provide seed settings."""
        return settings.seed

    @provide
    def provide_ranking_settings(self, settings: Settings) -> RankingSettings:
        """Provide ranking settings."""
        return settings.ranking
