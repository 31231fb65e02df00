"""Adapter layer errors."""


class AdapterError(Exception):
    """Base adapter error."""

    pass


class GeolocationError(AdapterError):
    """Geolocation lookup failed or returned an unusable answer."""

    pass
