"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class LocationRequiredError(DomainError):
    """Raised when distance ranking is requested without a reference coordinate.

    Callers are expected to show an advisory asking for the user's location
    rather than present the places in a meaningless order.
    """

    def __init__(self) -> None:
        super().__init__("Distance ranking requires a reference location")
