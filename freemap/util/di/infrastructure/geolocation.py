"""Geolocation infrastructure providers."""

from collections.abc import Iterator

from dishka import Scope, provide

from freemap.adapter.geolocation import (
    GeolocationClient,
    HttpGeolocationClient,
    StaticGeolocationClient,
)
from freemap.config import GeolocationSettings
from freemap.domain.value import Coordinate
from freemap.util.di.base import ProviderBase
from freemap.util.error import ConfigurationError


class GeolocationProvider(ProviderBase):
    """Geolocation component base."""

    __mock_component__ = "geolocation"


class ProdGeolocationProvider(GeolocationProvider):
    """Production geolocation provider.

    Uses the fixed coordinate from settings when configured, otherwise
    looks the user up by IP.
    """

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_geolocation_client(
        self, settings: GeolocationSettings
    ) -> Iterator[GeolocationClient]:
        """Provide geolocation client, closing its HTTP client on shutdown."""
        fixed = (settings.fixed_latitude, settings.fixed_longitude)
        if fixed != (None, None):
            if None in fixed:
                raise ConfigurationError(
                    "Both fixed_latitude and fixed_longitude must be set"
                )
            yield StaticGeolocationClient(
                Coordinate(
                    latitude=settings.fixed_latitude,
                    longitude=settings.fixed_longitude,
                )
            )
            return

        client = HttpGeolocationClient(
            lookup_url=settings.lookup_url,
            timeout_seconds=settings.timeout_seconds,
        )
        yield client
        client.close()
