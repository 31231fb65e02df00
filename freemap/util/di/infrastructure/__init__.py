"""Infrastructure DI providers."""

from .geolocation import GeolocationProvider, ProdGeolocationProvider
from .persistence import PersistenceProvider, ProdPersistenceProvider

__all__ = [
    "GeolocationProvider",
    "PersistenceProvider",
    "ProdGeolocationProvider",
    "ProdPersistenceProvider",
]
