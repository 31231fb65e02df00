"""User location session."""

import threading
from typing import Optional

import logfire

from freemap.adapter.geolocation import GeolocationClient
from freemap.config import MapSettings
from freemap.domain.value import Coordinate, MapView


class LocationSession:
    """Caches the user's location for the lifetime of the app.

    The geolocation client is asked once, on first use; later reads return
    the cached answer until the user explicitly asks to refresh it. A failed
    lookup is cached as "unknown" and the map falls back to a fixed view.
    """

    def __init__(
        self, geolocation_client: GeolocationClient, map_settings: MapSettings
    ) -> None:
        """Initialize location session.

        Args:
            geolocation_client: Client used to look up the user's location
            map_settings: Fallback view configuration
        """
        self.geolocation_client = geolocation_client
        self.map_settings = map_settings
        self._coordinate: Optional[Coordinate] = None
        self._resolved = False
        self._lock = threading.Lock()

    def current(self) -> Optional[Coordinate]:
        """The user's coordinate, looking it up on first call."""
        with self._lock:
            if not self._resolved:
                self._resolve()
            return self._coordinate

    def refresh(self) -> Optional[Coordinate]:
        """Ask the geolocation client again (explicit user request)."""
        with self._lock:
            self._resolve()
            return self._coordinate

    def view(self) -> MapView:
        """Map view centred on the user, or the fallback city-centre view."""
        coordinate = self.current()
        if coordinate is None:
            return MapView(
                center=Coordinate(
                    latitude=self.map_settings.fallback_latitude,
                    longitude=self.map_settings.fallback_longitude,
                ),
                zoom=self.map_settings.default_zoom,
                located=False,
            )
        return MapView(
            center=coordinate, zoom=self.map_settings.default_zoom, located=True
        )

    def _resolve(self) -> None:
        # Caller holds the lock
        with logfire.span("location_session.resolve"):
            self._coordinate = self.geolocation_client.locate()
            self._resolved = True
            if self._coordinate is None:
                logfire.warn("User location unavailable, using fallback view")
            else:
                logfire.info(
                    "User location resolved",
                    latitude=self._coordinate.latitude,
                    longitude=self._coordinate.longitude,
                )
