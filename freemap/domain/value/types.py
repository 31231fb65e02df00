"""Domain value objects for freemap.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from pydantic import Field

from freemap.domain.value.common import ValueObject


class VoteKind(str, Enum):
    """Kind of vote a user can cast on a place.

    Kinds are mutually exclusive: a user holds at most one per place.
    """

    LIKE = "like"
    DISLIKE = "dislike"
    FLAG = "flag"


class RankingMode(str, Enum):
    """Ordering applied to the places of a topic."""

    RECOMMEND = "recommend"  # Most liked first
    DISTANCE = "distance"  # Nearest first, needs a reference coordinate


class Coordinate(ValueObject):
    """Geographic coordinate in decimal degrees.

    Both components must be finite; NaN and infinities are rejected.
    """

    latitude: float = Field(allow_inf_nan=False)
    longitude: float = Field(allow_inf_nan=False)


class MapView(ValueObject):
    """Centre and zoom level of the map shown to the user."""

    center: Coordinate
    zoom: int
    # True when centred on the user's own location, False on the fallback view
    located: bool
