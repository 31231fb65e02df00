"""Geolocation adapters.

A geolocation client answers one question per call: where is the user?
It resolves exactly once with either a coordinate or None (failure); callers
cache the answer and only ask again on explicit user request.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

import httpx
from pydantic import BaseModel, ValidationError

from freemap.adapter.error import GeolocationError
from freemap.domain.value import Coordinate

logger = logging.getLogger(__name__)


class GeolocationClient(ABC):
    """Base class for geolocation clients."""

    @abstractmethod
    def locate(self) -> Optional[Coordinate]:
        """Look up the user's current coordinate.

        Returns:
            The coordinate, or None if it could not be determined
        """
        pass


class IpLocationPayload(BaseModel):
    """Fields read from an IP geolocation response."""

    latitude: float
    longitude: float


class HttpGeolocationClient(GeolocationClient):
    """Locates the user by public IP through an HTTP lookup service."""

    def __init__(
        self,
        lookup_url: str,
        timeout_seconds: float = 5.0,
        client: httpx.Client | None = None,
    ) -> None:
        """Initialize HTTP geolocation client.

        Args:
            lookup_url: Endpoint returning JSON with latitude and longitude
            timeout_seconds: Request timeout
            client: Optional preconfigured httpx client (used in tests)
        """
        self.lookup_url = lookup_url
        self.client = client or httpx.Client(timeout=timeout_seconds)

    def _fetch(self) -> Coordinate:
        try:
            response = self.client.get(self.lookup_url)
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise GeolocationError(f"Lookup request failed: {e}") from e

        try:
            payload = IpLocationPayload.model_validate_json(response.content)
            return Coordinate(latitude=payload.latitude, longitude=payload.longitude)
        except ValidationError as e:
            raise GeolocationError(f"Unusable lookup response: {e}") from e

    def locate(self) -> Optional[Coordinate]:
        """Look up the user's coordinate; any failure yields None."""
        try:
            coordinate = self._fetch()
        except GeolocationError as e:
            logger.warning(f"Geolocation failed: {e}")
            return None

        logger.debug(f"Geolocation resolved to {coordinate}")
        return coordinate

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self.client.close()


class StaticGeolocationClient(GeolocationClient):
    """Geolocation client with a fixed answer.

    Used for offline runs (fixed coordinate from settings) and in tests,
    where None simulates a denied or failed lookup.
    """

    def __init__(self, coordinate: Optional[Coordinate] = None) -> None:
        self.coordinate = coordinate
        self.calls = 0

    def locate(self) -> Optional[Coordinate]:
        """Return the fixed coordinate."""
        self.calls += 1
        return self.coordinate
