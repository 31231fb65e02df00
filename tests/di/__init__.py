"""Mock providers for testing."""

from .container import build_test_container
from .geolocation import MockGeolocationProvider
from .persistence import MockPersistenceProvider

__all__ = [
    "MockGeolocationProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
