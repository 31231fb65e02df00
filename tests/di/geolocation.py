"""Mock geolocation providers for testing."""

from dishka import Scope, provide

from freemap.adapter.geolocation import GeolocationClient, StaticGeolocationClient
from freemap.util.di.infrastructure.geolocation import GeolocationProvider


class MockGeolocationProvider(GeolocationProvider):
    """Mock geolocation provider.

    Starts with no location (as if the user denied access); tests set
    `coordinate` on the client to simulate a successful lookup.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_geolocation_client(self) -> GeolocationClient:
        """Provide static geolocation client."""
        return StaticGeolocationClient()
