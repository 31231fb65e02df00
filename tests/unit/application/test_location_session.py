"""Unit tests for LocationSession."""

from freemap.adapter.geolocation import GeolocationClient
from freemap.application.location import LocationSession
from freemap.config import MapSettings
from freemap.domain.value import Coordinate
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

GANGNAM = Coordinate(latitude=37.4979, longitude=127.0276)


class TestLocationSession:
    """Tests for cached location lookups."""

    def test_location_is_looked_up_once(self, unit_env):
        """Repeated reads reuse the first answer."""
        # Arrange
        client = unit_env.get(GeolocationClient)
        client.coordinate = GANGNAM
        session = unit_env.get(LocationSession)

        # Act
        first = session.current()
        second = session.current()

        # Assert
        assert first == second == GANGNAM
        assert client.calls == 1

    def test_failed_lookup_is_cached_until_refresh(self, unit_env):
        """A failure is not retried until the user asks again."""
        client = unit_env.get(GeolocationClient)
        session = unit_env.get(LocationSession)

        assert session.current() is None
        client.coordinate = GANGNAM
        assert session.current() is None

        assert session.refresh() == GANGNAM
        assert session.current() == GANGNAM
        assert client.calls == 2

    def test_fallback_view_without_location(self, unit_env):
        """Unknown location centres the map on the configured city centre."""
        session = unit_env.get(LocationSession)
        map_settings = unit_env.get(MapSettings)

        view = session.view()

        assert view.located is False
        assert view.center == Coordinate(
            latitude=map_settings.fallback_latitude,
            longitude=map_settings.fallback_longitude,
        )
        assert view.center == Coordinate(latitude=37.5665, longitude=126.978)
        assert view.zoom == 13

    def test_view_centres_on_user(self, unit_env):
        client = unit_env.get(GeolocationClient)
        client.coordinate = GANGNAM
        session = unit_env.get(LocationSession)

        view = session.view()

        assert view.located is True
        assert view.center == GANGNAM
